"""Prototype pattern: new animals made by copying an existing one."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "=======================Prototype Pattern===================="


class CloneableAnimal(ABC):
    """An animal that can copy itself."""

    @abstractmethod
    def make_copy(self) -> CloneableAnimal:
        """Return a new animal copied from this one."""


class Sheep(CloneableAnimal):
    """A sheep; making one announces itself, copying it does not."""

    def __init__(self) -> None:
        print("Sheep is made")

    def make_copy(self) -> Sheep:
        return copy.copy(self)


class CloneFactory:
    """Hands out copies of sample animals."""

    def get_clone(self, animal_sample: CloneableAnimal) -> CloneableAnimal:
        return animal_sample.make_copy()


def prototype_pattern() -> CloneableAnimal:
    """Clone a sheep and show that the clone is a separate object."""
    print(_RULE)
    print(_BANNER)
    animal_maker = CloneFactory()
    sally = Sheep()
    cloned_sheep = animal_maker.get_clone(sally)
    print(f"Sally pointer: {id(sally):#x}")
    print(f"Clone pointer: {id(cloned_sheep):#x}")
    print(_BANNER)
    print(_RULE)
    return cloned_sheep