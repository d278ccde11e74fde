"""Strategy pattern: animals whose flying behaviour is a swappable object."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "======================Strategy Pattern======================"


class Flys(ABC):
    """A way of flying (or of not flying)."""

    @abstractmethod
    def fly(self) -> str:
        """Describe the attempt to fly."""


class ItFlys(Flys):
    """Behaviour of an animal that can fly."""

    def fly(self) -> str:
        return "Flying High"


class CantFly(Flys):
    """Behaviour of an animal that cannot fly."""

    def fly(self) -> str:
        return "I can't fly"


class Animal:
    """An animal composed with a flying behaviour that can change at run time."""

    def __init__(
        self,
        flying_type: Flys,
        *,
        name: str = "",
        height: float = 0.0,
        weight: int = 0,
        fav_food: str = "",
        speed: float = 0.0,
        sound: str = "",
    ) -> None:
        self.flying_type = flying_type
        self.name = name
        self.height = height
        self.weight = weight
        self.fav_food = fav_food
        self.speed = speed
        self.sound = sound

    def try_to_fly(self) -> str:
        """Delegate flying to the current behaviour."""
        return self.flying_type.fly()


class Dog(Animal):
    """A dog; it cannot fly unless given a new behaviour."""

    def __init__(self, **attributes) -> None:
        super().__init__(CantFly(), **attributes)

    def dig_hole(self) -> str:
        """Dig a hole, print what happened and return the message."""
        message = "Dug a hole"
        print(message)
        return message


class Bird(Animal):
    """A bird; it flies."""

    def __init__(self, **attributes) -> None:
        super().__init__(ItFlys(), **attributes)


def strategy_pattern() -> None:
    """Show an animal changing its flying behaviour at run time."""
    print(_RULE)
    print(_BANNER)
    sparky: Animal = Dog()
    tweety: Animal = Bird()

    print(f"Dog: {sparky.try_to_fly()}")
    print(f"Bird: {sparky.try_to_fly()}")

    sparky.flying_type = ItFlys()

    print(f"Dog: {sparky.try_to_fly()}")
    del tweety
    print(_BANNER)
    print(_RULE)