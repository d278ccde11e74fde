"""Factory pattern: enemy ships chosen at run time."""

from __future__ import annotations

from enum import Enum

_RULE = "=" * 60
_BANNER = "======================Factory Pattern======================="
_PROMPT = "What type of ship? (U, R or B)"


class ShipType(Enum):
    DEFAULT = 0
    ROCKET = 1
    UFO = 2
    BIGUFO = 3


class EnemyShip:
    """An enemy ship with a name and the damage it deals."""

    def __init__(self, name: str = "", damage: float = 0.0) -> None:
        self.name = name
        self.damage = damage

    def _announce(self, message: str) -> str:
        print(message)
        return message

    def follow_hero_ship(self) -> str:
        """Announce that the ship follows the hero; return the message."""
        return self._announce(f"{self.name} is following the hero")

    def display_enemy_ship(self) -> str:
        """Announce that the ship is on screen; return the message."""
        return self._announce(f"{self.name} is on the screen")

    def enemy_ship_shoots(self) -> str:
        """Announce the ship's attack; return the message."""
        return self._announce(
            f"{self.name} attacks and does {self.damage:g} damage to hero"
        )


class UFOEnemyShip(EnemyShip):
    def __init__(self) -> None:
        super().__init__("UFO Enemy Ship", 20.0)


class RocketEnemyShip(EnemyShip):
    def __init__(self) -> None:
        super().__init__("Rocket Enemy Ship", 10.0)


class BigUFOEnemyShip(EnemyShip):
    def __init__(self) -> None:
        super().__init__("Big UFO Enemy Ship", 40.0)


_SHIP_CLASSES = {
    ShipType.BIGUFO: BigUFOEnemyShip,
    ShipType.ROCKET: RocketEnemyShip,
    ShipType.UFO: UFOEnemyShip,
}

_OPTIONS = {
    "U": ShipType.UFO,
    "R": ShipType.ROCKET,
    "B": ShipType.BIGUFO,
}


class EnemyShipFactory:
    """Builds the ship that belongs to a ship type."""

    def make_enemy_ship(self, ship_type: ShipType) -> EnemyShip | None:
        """Return a new ship, or None for a type with no ship."""
        ship_class = _SHIP_CLASSES.get(ship_type)
        return ship_class() if ship_class is not None else None


def ship_type_for_option(option: str) -> ShipType:
    """Map a menu letter (U, R or B) to a ship type; anything else is DEFAULT."""
    return _OPTIONS.get(option, ShipType.DEFAULT)


def do_stuff_enemy(enemy_ship: EnemyShip) -> None:
    enemy_ship.display_enemy_ship()
    enemy_ship.follow_hero_ship()
    enemy_ship.enemy_ship_shoots()


def _read_option() -> str:
    prompt = _PROMPT
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return ""
        prompt = ""
        tokens = line.split()
        if tokens:
            return tokens[0]


def factory_pattern(option: str | None = None) -> EnemyShip | None:
    """Build and exercise the ship for an option, asking on stdin if none is given."""
    print(_RULE)
    print(_BANNER)
    if option is None:
        option = _read_option()
    enemy = EnemyShipFactory().make_enemy_ship(ship_type_for_option(option))
    if enemy is not None:
        do_stuff_enemy(enemy)
    print(_BANNER)
    print(_RULE)
    return enemy