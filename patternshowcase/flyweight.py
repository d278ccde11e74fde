"""Flyweight pattern: rectangles sharing one object per colour."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from enum import Enum

_RULE = "=" * 60
_BANNER = "=======================Flyweight Pattern===================="


class Color(Enum):
    ORANGE = 0
    RED = 1
    YELLOW = 2
    BLUE = 3
    PINK = 4
    CYAN = 5
    MAGENTA = 6
    BLACK = 7
    GRAY = 8


@dataclass
class MyRect:
    """A rectangle that carries its colour and its coordinates."""

    color: Color
    upper_x: int
    upper_y: int
    lower_x: int
    lower_y: int

    def draw(self) -> tuple[int, int, int, int]:
        """Return the corners to draw: upper x, upper y, lower x, lower y."""
        return self.upper_x, self.upper_y, self.lower_x, self.lower_y


class MyRect2:
    """A rectangle that only carries its colour; coordinates come with each draw."""

    def __init__(self, color: Color) -> None:
        self.color = color

    def draw(self, upper_x: int, upper_y: int, lower_x: int, lower_y: int) -> MyRect:
        """Combine the shared colour with the given corners into a drawable rectangle."""
        return MyRect(self.color, upper_x, upper_y, lower_x, lower_y)


class RectFactory:
    """Hands out one shared rectangle per colour."""

    def __init__(self) -> None:
        self._rects_by_color: dict[Color, MyRect2] = {}

    def get_rect(self, color: Color) -> MyRect2:
        """Return the rectangle for a colour, making it on first request."""
        if not isinstance(color, Color):
            raise TypeError(f"expected a Color, got {color!r}")
        rect = self._rects_by_color.get(color)
        if rect is None:
            rect = self._rects_by_color[color] = MyRect2(color)
        return rect

    def __len__(self) -> int:
        return len(self._rects_by_color)


class FlyweightTest:
    """Times making many rectangles with and without sharing."""

    def __init__(
        self,
        iterations: int = 100_000,
        window_width: int = 1750,
        window_height: int = 1000,
    ) -> None:
        self.iterations = iterations
        self.window_width = window_width
        self.window_height = window_height
        self.colors = list(Color)
        self.rect_factory = RectFactory()

    def _rand_x(self) -> int:
        return int(random.random() * self.window_width)

    def _rand_y(self) -> int:
        return int(random.random() * self.window_height)

    def _rand_color(self) -> Color:
        return random.choice(self.colors)

    def draw(self) -> tuple[int, int]:
        """Run both timings, print them and return them in milliseconds."""
        begin = time.monotonic()
        for _ in range(self.iterations):
            MyRect(
                self._rand_color(),
                self._rand_x(),
                self._rand_y(),
                self._rand_x(),
                self._rand_y(),
            )
        before_ms = int((time.monotonic() - begin) * 1000)
        print(f"Before that took {before_ms} ms")

        begin = time.monotonic()
        for _ in range(self.iterations):
            self.rect_factory.get_rect(self._rand_color())
        after_ms = int((time.monotonic() - begin) * 1000)
        print(f"After that took {after_ms} ms")
        return before_ms, after_ms


def flyweight_pattern() -> None:
    """Compare making rectangles one by one with sharing them by colour."""
    print(_RULE)
    print(_BANNER)
    FlyweightTest().draw()
    print(_BANNER)
    print(_RULE)