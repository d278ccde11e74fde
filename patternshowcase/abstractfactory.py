"""Abstract factory pattern: ship buildings that assemble ships from part factories."""

from __future__ import annotations

from abc import ABC, abstractmethod

from patternshowcase.factory import EnemyShip, ShipType

_RULE = "=" * 60
_BANNER = "===================Abstract Factory Pattern================="


class ESWeapon(ABC):
    """A weapon part of an enemy ship."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the weapon's attack power."""


class ESEngine(ABC):
    """An engine part of an enemy ship."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the engine's top speed."""


class ESUFOGun(ESWeapon):
    def __str__(self) -> str:
        return "20 damage"


class ESUFOEngine(ESEngine):
    def __str__(self) -> str:
        return "1000 mph"


class ESUFOBossGun(ESWeapon):
    def __str__(self) -> str:
        return "40 damage"


class ESUFOBossEngine(ESEngine):
    def __str__(self) -> str:
        return "2000 mph"


class EnemyShipPartsFactory(ABC):
    """Makes the matching family of parts for one kind of ship."""

    @abstractmethod
    def add_es_gun(self) -> ESWeapon:
        """Make a weapon."""

    @abstractmethod
    def add_es_engine(self) -> ESEngine:
        """Make an engine."""


class UFOEnemyShipFactory(EnemyShipPartsFactory):
    def add_es_gun(self) -> ESWeapon:
        return ESUFOGun()

    def add_es_engine(self) -> ESEngine:
        return ESUFOEngine()


class UFOBossEnemyShipFactory(EnemyShipPartsFactory):
    def add_es_gun(self) -> ESWeapon:
        return ESUFOBossGun()

    def add_es_engine(self) -> ESEngine:
        return ESUFOBossEngine()


class BaseEnemyShip(EnemyShip):
    """An enemy ship whose parts come from a parts factory."""

    def __init__(self, ship_factory: EnemyShipPartsFactory, name: str = "") -> None:
        super().__init__(name)
        self.ship_factory = ship_factory
        self.weapon: ESWeapon | None = None
        self.engine: ESEngine | None = None

    def make_ship(self) -> None:
        """Fit the ship with a weapon and an engine from its parts factory."""
        print(f"Making enemy ship {self.name}", end="")
        self.weapon = self.ship_factory.add_es_gun()
        self.engine = self.ship_factory.add_es_engine()

    def __str__(self) -> str:
        if self.weapon is None or self.engine is None:
            raise RuntimeError(f"{self.name} has not been made yet")
        return (
            f"The {self.name} has a top speed of {self.engine}"
            f" and an attach power of {self.weapon}"
        )


class UFOEnemyShip(BaseEnemyShip):
    """A grunt UFO."""


class UFOBossEnemyShip(BaseEnemyShip):
    """A boss UFO."""


class EnemyShipBuilding(ABC):
    """Orders ships: makes one, assembles it and puts it through its paces."""

    @abstractmethod
    def make_enemy_ship(self, ship_type: ShipType) -> BaseEnemyShip | None:
        """Return an unassembled ship, or None if this building cannot make the type."""

    def order_the_ship(self, ship_type: ShipType) -> BaseEnemyShip:
        """Make, assemble and exercise a ship of the given type."""
        enemy_ship = self.make_enemy_ship(ship_type)
        if enemy_ship is None:
            raise ValueError(f"cannot build a ship of type {ship_type.name}")
        enemy_ship.make_ship()
        enemy_ship.display_enemy_ship()
        enemy_ship.follow_hero_ship()
        enemy_ship.enemy_ship_shoots()
        return enemy_ship


class UFOEnemyShipBuilding(EnemyShipBuilding):
    """Builds grunt and boss UFOs."""

    def make_enemy_ship(self, ship_type: ShipType) -> BaseEnemyShip | None:
        if ship_type is ShipType.UFO:
            return UFOEnemyShip(UFOEnemyShipFactory(), "UFO Grunt Ship")
        if ship_type is ShipType.BIGUFO:
            return UFOBossEnemyShip(UFOBossEnemyShipFactory(), "UFO Boss Ship")
        return None


def abstract_factory_pattern() -> None:
    """Order a grunt and a boss UFO and describe them."""
    print(_RULE)
    print(_BANNER)
    make_ufos = UFOEnemyShipBuilding()

    the_grunt = make_ufos.order_the_ship(ShipType.UFO)
    print(the_grunt)

    the_boss = make_ufos.order_the_ship(ShipType.BIGUFO)
    print(the_boss)
    print(_BANNER)
    print(_RULE)