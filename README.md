# patternshowcase

A collection of small programs, one for each of the classic object-oriented
design patterns. Each pattern has its own module with its classes and a
function that walks through an example and prints what happens at each step.

| Module            | Pattern                 | Demonstration function              |
|-------------------|-------------------------|-------------------------------------|
| `strategy`        | Strategy                | `strategy_pattern()`                |
| `observer`        | Observer                | `observer_pattern()`                |
| `factory`         | Factory                 | `factory_pattern(option=None)`      |
| `abstractfactory` | Abstract Factory        | `abstract_factory_pattern()`        |
| `singleton`       | Singleton               | `singleton_pattern()`               |
| `builder`         | Builder                 | `builder_pattern()`                 |
| `prototype`       | Prototype               | `prototype_pattern()`               |
| `decorator`       | Decorator               | `decorator_pattern()`               |
| `adapter`         | Adapter                 | `adapter_pattern()`                 |
| `bridge`          | Bridge                  | `bridge_pattern()`                  |
| `templatemethod`  | Template Method         | `template_method_pattern()`         |
| `iterator`        | Iterator                | `iterator_pattern()`                |
| `facade`          | Facade                  | `facade_pattern()`                  |
| `flyweight`       | Flyweight               | `flyweight_pattern()`               |
| `state`           | State                   | `state_pattern()`                   |
| `chain`           | Chain of Responsibility | `chain_of_responsibility_pattern()` |
| `composite`       | Composite               | `composite_pattern()`               |
| `proxy`           | Proxy                   | `proxy_pattern()`                   |

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no other dependencies.

## Running the demonstrations

```
patternshowcase
```

runs the standard set one after another, each framed by a banner with the
pattern's name: strategy, observer, factory, abstractfactory, singleton,
builder, prototype, decorator, adapter, bridge, templatemethod, iterator,
facade, flyweight, state and chain. The composite and proxy demonstrations
run only when named.

Name patterns to run just those, in the order given:

```
patternshowcase composite proxy
```

An unknown name is an error. A few things to know:

- The factory demonstration asks on standard input for a ship type
  (`U`, `R` or `B`); `--ship U` (or `R`, `B`) answers for it. Any other answer
  builds no ship.
- The singleton demonstration starts two threads; the first call to
  `Singleton.get_instance()` waits `Singleton.first_call_delay` seconds
  (5 by default) before creating the instance.
- The flyweight demonstration makes 100,000 rectangles each way and prints how
  many milliseconds both took.

## Using the classes

Every module can also be used on its own.

Strategy — behaviour chosen by composition and swapped at run time:

```python
from patternshowcase.strategy import Bird, Dog, ItFlys

Bird().try_to_fly()       # 'Flying High'
dog = Dog()
dog.try_to_fly()          # "I can't fly"
dog.flying_type = ItFlys()
dog.try_to_fly()          # 'Flying High'
```

Decorator — toppings wrapped around a pizza (each topping prints as it is
added):

```python
from patternshowcase.decorator import Mozzarella, PlainPizza, TomatoSauce

pizza = TomatoSauce(Mozzarella(PlainPizza()))
pizza.description()       # 'Thin Dough, Mozzarella, Tomato Sauce'
round(pizza.cost(), 2)    # 4.85
```

Factory — a ship picked from a one-letter option:

```python
from patternshowcase.factory import EnemyShipFactory, ShipType, ship_type_for_option

ship = EnemyShipFactory().make_enemy_ship(ship_type_for_option("U"))
ship.name                 # 'UFO Enemy Ship'
EnemyShipFactory().make_enemy_ship(ShipType.DEFAULT)   # None
```

Chain of Responsibility — a request handed along until one link handles it:

```python
from patternshowcase.chain import Numbers, build_chain

build_chain().calculate(Numbers(4, 2, "div"))   # prints "4 / 2 = 2", returns 2
```

A link with nothing after it that cannot handle a request raises
`RuntimeError`; the last link, `DivideNumbers`, prints a notice and returns
`None` for a calculation it does not know, and raises `ZeroDivisionError`
when dividing by zero.

State — an ATM that behaves according to its current state:

```python
from patternshowcase.state import ATMMachine

atm = ATMMachine()
atm.insert_card()
atm.insert_pin(1234)
atm.request_cash(500)
str(atm.atm_state)        # 'No Card'
atm.cash_in_machine       # 1500
```

## What the package does not do

These are teaching examples that print to the console. Nothing is drawn on
screen: `MyRect.draw()` and `MyRect2.draw()` only return coordinates. The
bank in `facade` and the ATM in `state` keep their money in memory for the
life of the object and store nothing.

## Running the tests

```
pip install .[test]
pytest
```