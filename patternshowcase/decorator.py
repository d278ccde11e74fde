"""Decorator pattern: pizza toppings wrapped around a plain pizza."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "=======================Decorator Pattern===================="


class Pizza(ABC):
    """Something with a description and a price."""

    @abstractmethod
    def description(self) -> str:
        """List the ingredients."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price."""


class PlainPizza(Pizza):
    """The base pizza: just dough."""

    def description(self) -> str:
        return "Thin Dough"

    def cost(self) -> float:
        return 4.0


class ToppingDecorator(Pizza):
    """Wraps a pizza and passes everything through to it."""

    def __init__(self, pizza: Pizza) -> None:
        self.pizza = pizza

    def description(self) -> str:
        return self.pizza.description()

    def cost(self) -> float:
        return self.pizza.cost()


class Mozzarella(ToppingDecorator):
    """Adds mozzarella."""

    def __init__(self, pizza: Pizza) -> None:
        super().__init__(pizza)
        print("Adding Dough")
        print("Adding Mozzarella")

    def description(self) -> str:
        return self.pizza.description() + ", Mozzarella"

    def cost(self) -> float:
        return self.pizza.cost() + 0.5


class TomatoSauce(ToppingDecorator):
    """Adds tomato sauce."""

    def __init__(self, pizza: Pizza) -> None:
        super().__init__(pizza)
        print("Adding Sauce")

    def description(self) -> str:
        return self.pizza.description() + ", Tomato Sauce"

    def cost(self) -> float:
        return self.pizza.cost() + 0.35


def decorator_pattern() -> Pizza:
    """Build a pizza with mozzarella and tomato sauce and show its price."""
    print(_RULE)
    print(_BANNER)
    basic_pizza = TomatoSauce(Mozzarella(PlainPizza()))
    print(f"Ingridients: {basic_pizza.description()}")
    print(f"Price: {basic_pizza.cost():g}")
    print(_BANNER)
    print(_RULE)
    return basic_pizza