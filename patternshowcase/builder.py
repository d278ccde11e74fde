"""Builder pattern: an engineer assembles a robot through a builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_RULE = "=" * 60
_BANNER = "========================Builder Pattern====================="


@dataclass
class Robot:
    """A robot made of four parts."""

    head: str = ""
    torso: str = ""
    arms: str = ""
    legs: str = ""


class RobotBuilder(ABC):
    """Knows how to build each part of one kind of robot."""

    @abstractmethod
    def build_robot_head(self) -> None:
        """Fit the head."""

    @abstractmethod
    def build_robot_torso(self) -> None:
        """Fit the torso."""

    @abstractmethod
    def build_robot_arms(self) -> None:
        """Fit the arms."""

    @abstractmethod
    def build_robot_legs(self) -> None:
        """Fit the legs."""

    @property
    @abstractmethod
    def robot(self) -> Robot:
        """The robot under construction."""


class OldRobotBuilder(RobotBuilder):
    """Builds old-style robots out of tin."""

    def __init__(self) -> None:
        self._robot = Robot()

    def build_robot_head(self) -> None:
        self._robot.head = "Tin Head"

    def build_robot_torso(self) -> None:
        self._robot.torso = "Tin Torso"

    def build_robot_arms(self) -> None:
        self._robot.arms = "Tin Arms"

    def build_robot_legs(self) -> None:
        self._robot.legs = "Tin Legs"

    @property
    def robot(self) -> Robot:
        return self._robot


class RobotEngineer:
    """Directs a builder through the steps of making a robot."""

    def __init__(self, robot_builder: RobotBuilder) -> None:
        self.robot_builder = robot_builder

    @property
    def robot(self) -> Robot:
        return self.robot_builder.robot

    def make_robot(self) -> None:
        """Build head, torso, arms and legs, in that order."""
        self.robot_builder.build_robot_head()
        self.robot_builder.build_robot_torso()
        self.robot_builder.build_robot_arms()
        self.robot_builder.build_robot_legs()


def builder_pattern() -> Robot:
    """Have an engineer build an old-style robot and describe it."""
    print(_RULE)
    print(_BANNER)
    robot_engineer = RobotEngineer(OldRobotBuilder())
    robot_engineer.make_robot()
    first_robot = robot_engineer.robot
    print("Robot Build")
    print(f"Robot Head Type: {first_robot.head}")
    print(f"Robot Torso Type: {first_robot.torso}")
    print(f"Robot Arms Type: {first_robot.arms}")
    print(f"Robot Legs Type: {first_robot.legs}")
    print()
    print(_BANNER)
    print(_RULE)
    return first_robot