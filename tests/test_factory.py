import pytest

from patternshowcase.factory import (
    BigUFOEnemyShip,
    EnemyShip,
    EnemyShipFactory,
    RocketEnemyShip,
    ShipType,
    UFOEnemyShip,
    do_stuff_enemy,
    factory_pattern,
    ship_type_for_option,
)


@pytest.mark.parametrize(
    "ship_type, cls, name, damage",
    [
        (ShipType.UFO, UFOEnemyShip, "UFO Enemy Ship", 20.0),
        (ShipType.ROCKET, RocketEnemyShip, "Rocket Enemy Ship", 10.0),
        (ShipType.BIGUFO, BigUFOEnemyShip, "Big UFO Enemy Ship", 40.0),
    ],
)
def test_factory_builds_matching_ship(ship_type, cls, name, damage):
    ship = EnemyShipFactory().make_enemy_ship(ship_type)
    assert type(ship) is cls
    assert ship.name == name
    assert ship.damage == damage


def test_factory_returns_none_for_default():
    assert EnemyShipFactory().make_enemy_ship(ShipType.DEFAULT) is None


@pytest.mark.parametrize(
    "option, expected",
    [
        ("U", ShipType.UFO),
        ("R", ShipType.ROCKET),
        ("B", ShipType.BIGUFO),
        ("u", ShipType.DEFAULT),
        ("", ShipType.DEFAULT),
        ("X", ShipType.DEFAULT),
    ],
)
def test_ship_type_for_option(option, expected):
    assert ship_type_for_option(option) is expected


def test_do_stuff_enemy_output(capsys):
    do_stuff_enemy(EnemyShip("Probe", 3.0))
    assert capsys.readouterr().out.splitlines() == [
        "Probe is on the screen",
        "Probe is following the hero",
        "Probe attacks and does 3 damage to hero",
    ]


def test_factory_pattern_with_option(capsys):
    ship = factory_pattern("U")
    assert isinstance(ship, UFOEnemyShip)
    assert "UFO Enemy Ship is on the screen" in capsys.readouterr().out


def test_factory_pattern_reads_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "  R  ")
    ship = factory_pattern()
    assert isinstance(ship, RocketEnemyShip)
    assert "Rocket Enemy Ship attacks" in capsys.readouterr().out


def test_factory_pattern_eof_gives_no_ship(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert factory_pattern() is None
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "=" * 60,
        "======================Factory Pattern=======================",
        "======================Factory Pattern=======================",
        "=" * 60,
    ]