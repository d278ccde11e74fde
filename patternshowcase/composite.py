"""Composite pattern: songs and song groups treated the same way."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

_RULE = "=" * 60
_BANNER = "=======================Composite Pattern===================="


class SongComponent(ABC):
    """A song or a group of components; both can display themselves."""

    def add(self, new_song_component: SongComponent) -> None:
        """Add a child; only groups hold children."""
        raise TypeError(f"{type(self).__name__} cannot hold other components")

    def remove(self, song_component: SongComponent) -> None:
        """Remove a child; only groups hold children."""
        raise TypeError(f"{type(self).__name__} cannot hold other components")

    def get_component(self, index: int) -> SongComponent | None:
        """Return the child at index, or None where there is none."""
        return None

    @abstractmethod
    def display_song_info(self) -> None:
        """Print this component."""


class Song(SongComponent):
    """A single song."""

    def __init__(self, song_name: str, band_name: str, release_year: int) -> None:
        self.song_name = song_name
        self.band_name = band_name
        self.release_year = release_year

    def display_song_info(self) -> None:
        print(f"{self.song_name} was recorded by {self.band_name} in {self.release_year}")


class SongGroup(SongComponent):
    """A named group of songs and further groups."""

    def __init__(self, group_name: str, group_description: str) -> None:
        self.group_name = group_name
        self.group_description = group_description
        self._components: list[SongComponent] = []

    def add(self, new_song_component: SongComponent) -> None:
        self._components.append(new_song_component)

    def remove(self, song_component: SongComponent) -> None:
        """Remove every occurrence of this very object."""
        self._components = [c for c in self._components if c is not song_component]

    def get_component(self, index: int) -> SongComponent | None:
        if 0 <= index < len(self._components):
            return self._components[index]
        return None

    def display_song_info(self) -> None:
        print(f"{self.group_name} {self.group_description}")
        for component in self._components:
            component.display_song_info()

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[SongComponent]:
        return iter(self._components)


class CompositeDiskJokey:
    """Displays a whole song tree."""

    def __init__(self, song_list: SongComponent) -> None:
        self.song_list = song_list

    def get_song_list(self) -> None:
        self.song_list.display_song_info()


def composite_pattern() -> SongComponent:
    """Build a tree of genres and songs, display it and return it."""
    print(_RULE)
    print(_BANNER)

    industrial_music = SongGroup(
        "Industrial",
        "is a style of experimental music that draws on transgressive and provocative themes",
    )
    industrial_music.add(Song("Head Like a Hole", "NIN", 1990))
    industrial_music.add(Song("Headhunter", "Front 242", 1988))

    heavy_metal_music = SongGroup(
        "Heavy Metal",
        "is a genre of rock that developed in the late 1960s, largely in the UK and in the US",
    )
    heavy_metal_music.add(Song("War Pigs", "Black Sabath", 1970))
    heavy_metal_music.add(Song("Ace of Spades", "Motorhead", 1980))

    dubstep_music = SongGroup(
        "Dubstep",
        "is a genre of electronic dance music that originated in South London, England",
    )
    dubstep_music.add(Song("Centipede", "Knife Party", 2012))
    dubstep_music.add(Song("Tetris", "Doctor P", 2011))

    industrial_music.add(dubstep_music)

    every_song = SongGroup("Song List", "Every Song Available")
    every_song.add(industrial_music)
    every_song.add(heavy_metal_music)

    CompositeDiskJokey(every_song).get_song_list()

    print(_BANNER)
    print(_RULE)
    return every_song