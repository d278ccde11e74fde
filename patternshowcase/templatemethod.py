"""Template method pattern: sandwiches made by one fixed recipe with variable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

_RULE = "=" * 60
_BANNER = "===================Template Method Pattern=================="


def _announce(label: str, items: Iterable[str]) -> None:
    print(f"Adding the {label}: " + "".join(f"{item} " for item in items))


class Hoagie(ABC):
    """A sandwich; make_sandwich runs the steps, subclasses fill them in."""

    def make_sandwich(self) -> None:
        """Cut, fill with what the customer wants, and wrap."""
        self.cut_bun()
        if self.customer_wants_meat():
            self.add_meat()
        if self.customer_wants_cheese():
            self.add_cheese()
        if self.customer_wants_vegetables():
            self.add_vegetables()
        if self.customer_wants_condiments():
            self.add_condiments()
        self.wrap_the_hoagie()

    def cut_bun(self) -> None:
        print("Cut the Bun")

    def wrap_the_hoagie(self) -> None:
        print("Wrap the Hoagie")

    @abstractmethod
    def add_meat(self) -> None:
        """Add the meat."""

    @abstractmethod
    def add_cheese(self) -> None:
        """Add the cheese."""

    @abstractmethod
    def add_vegetables(self) -> None:
        """Add the vegetables."""

    @abstractmethod
    def add_condiments(self) -> None:
        """Add the condiments."""

    def customer_wants_meat(self) -> bool:
        return True

    def customer_wants_cheese(self) -> bool:
        return True

    def customer_wants_vegetables(self) -> bool:
        return True

    def customer_wants_condiments(self) -> bool:
        return True


class ItalianHoagie(Hoagie):
    """A hoagie with everything."""

    meat_used = ("Salami", "Pepperoni", "Capicola Ham")
    cheese_used = ("Provolone",)
    veggies_used = ("Lettuce", "Tomatoes", "Onions", "Sweet Peppers")
    condiments_used = ("Oil", "Vinegar")

    def add_meat(self) -> None:
        _announce("Meat", self.meat_used)

    def add_cheese(self) -> None:
        _announce("Cheese", self.cheese_used)

    def add_vegetables(self) -> None:
        _announce("Veggies", self.veggies_used)

    def add_condiments(self) -> None:
        _announce("Condiments", self.condiments_used)


class VeggieHoagie(Hoagie):
    """A hoagie without meat or cheese."""

    veggies_used = ("Lettuce", "Tomatoes", "Onions", "Sweet Peppers")
    condiments_used = ("Oil", "Vinegar")

    def add_meat(self) -> None:
        """No meat on a veggie hoagie."""

    def add_cheese(self) -> None:
        """No cheese on a veggie hoagie."""

    def add_vegetables(self) -> None:
        _announce("Veggies", self.veggies_used)

    def add_condiments(self) -> None:
        _announce("Condiments", self.condiments_used)

    def customer_wants_meat(self) -> bool:
        return False

    def customer_wants_cheese(self) -> bool:
        return False


def template_method_pattern() -> None:
    """Make an Italian hoagie and a veggie hoagie."""
    print(_RULE)
    print(_BANNER)
    ItalianHoagie().make_sandwich()
    print()
    VeggieHoagie().make_sandwich()
    print(_BANNER)
    print(_RULE)