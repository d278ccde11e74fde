"""Singleton pattern: one shared bag of Scrabble letters for every player."""

from __future__ import annotations

import random
import threading
import time

_RULE = "=" * 60
_BANNER = "=======================Singleton Pattern===================="

_LETTER_COUNTS = {
    "a": 9, "b": 2, "c": 2, "d": 4, "e": 12, "f": 2, "g": 3, "h": 2, "i": 9,
    "j": 1, "k": 1, "l": 4, "m": 2, "n": 6, "o": 8, "p": 2, "q": 1, "r": 6,
    "s": 4, "t": 6, "u": 4, "v": 2, "w": 2, "x": 1, "y": 2, "z": 1,
}

_CONSTRUCTION_TOKEN = object()


class Singleton:
    """The one holder of the letter bag; obtain it with get_instance()."""

    first_call_delay = 5.0
    """Seconds the very first caller waits before creating the instance."""

    _instance: Singleton | None = None
    _first_thread = True
    _lock = threading.Lock()
    letters: list[str] = [
        letter for letter, count in _LETTER_COUNTS.items() for _ in range(count)
    ]

    def __init__(self, _token: object = None) -> None:
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("use Singleton.get_instance() instead")

    @classmethod
    def get_instance(cls) -> Singleton:
        """Return the single instance, creating it (and shuffling the bag) once."""
        if cls._instance is None:
            if cls._first_thread:
                cls._first_thread = False
                time.sleep(cls.first_call_delay)
            with cls._lock:
                if cls._instance is None:
                    print(f"Instance created by {threading.get_ident()}")
                    cls._instance = cls(_CONSTRUCTION_TOKEN)
                    random.shuffle(cls.letters)
        return cls._instance

    @property
    def letters_list(self) -> list[str]:
        """The shared bag of remaining letters."""
        return Singleton.letters

    def get_tiles(self, how_many_tiles: int) -> list[str]:
        """Take tiles from the front of the bag: how_many_tiles + 1 of them."""
        count = how_many_tiles + 1
        bag = Singleton.letters
        if count > len(bag):
            raise IndexError(f"only {len(bag)} tiles left, {count} requested")
        tiles = bag[:count]
        del bag[:count]
        return tiles


_print_lock = threading.Lock()


def _run() -> None:
    instance = Singleton.get_instance()
    with _print_lock:
        print(f"Thread ID: {threading.get_ident()}")
        print(f"Instance ID: {id(instance):#x}")
        print("List: " + "".join(instance.letters_list))
        player_tiles = instance.get_tiles(7)
        print("Player's list : " + "".join(player_tiles))
        print("List: " + "".join(instance.letters_list))
        print()


def singleton_pattern() -> None:
    """Two threads share the one letter bag and each draws tiles."""
    print(_RULE)
    print(_BANNER)
    threads = [threading.Thread(target=_run) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(_BANNER)
    print(_RULE)