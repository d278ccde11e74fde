"""Adapter pattern: a robot made to act like a tank."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RULE = "=" * 60
_BANNER = "========================Adapter Pattern====================="


class EnemyAttacker(ABC):
    """The interface every attacker offers."""

    @abstractmethod
    def fire_weapon(self) -> None:
        """Attack."""

    @abstractmethod
    def drive_forward(self) -> None:
        """Move forward."""

    @abstractmethod
    def assign_driver(self, driver_name: str) -> None:
        """Put someone at the controls."""


class EnemyTank(EnemyAttacker):
    """An attacker that fits the interface natively."""

    def fire_weapon(self) -> None:
        attack_damage = 4
        print(f"Enemy Tank Does {attack_damage} Damage")

    def drive_forward(self) -> None:
        movement = 1
        print(f"Enemy Tank moves {movement}")

    def assign_driver(self, driver_name: str) -> None:
        print(f"{driver_name} is driving the tank")


class EnemyRobot:
    """A robot with its own, incompatible interface."""

    def smash_with_hands(self) -> None:
        attack_damage = 8
        print(f"Enemy Robot Causes {attack_damage} Damage with its hands")

    def walk_forward(self) -> None:
        movement = 3
        print(f"Enemy Robot Walks Forward {movement} Spaces")

    def react_to_human(self, driver_name: str) -> None:
        print(f"Enemy Robot Tramps on {driver_name}")


class EnemyRobotAdapter(EnemyAttacker):
    """Lets a robot be used wherever an attacker is expected."""

    def __init__(self, robot: EnemyRobot) -> None:
        self.robot = robot

    def fire_weapon(self) -> None:
        self.robot.smash_with_hands()

    def drive_forward(self) -> None:
        self.robot.walk_forward()

    def assign_driver(self, driver_name: str) -> None:
        self.robot.react_to_human(driver_name)


def adapter_pattern() -> None:
    """Drive a robot, a tank and a robot through the tank interface."""
    print(_RULE)
    print(_BANNER)
    rx7_tank = EnemyTank()
    fred_the_robot = EnemyRobot()
    robot_adapter = EnemyRobotAdapter(fred_the_robot)

    print("The Robot")
    fred_the_robot.react_to_human("Paul")
    fred_the_robot.walk_forward()
    fred_the_robot.smash_with_hands()

    print("The Enemy Tank")
    rx7_tank.assign_driver("Frank")
    rx7_tank.drive_forward()
    rx7_tank.fire_weapon()

    print("The Robot with Adapter")
    robot_adapter.assign_driver("Mark")
    robot_adapter.drive_forward()
    robot_adapter.fire_weapon()
    print(_BANNER)
    print(_RULE)