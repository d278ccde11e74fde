"""Iterator pattern: three song collections, each stored its own way, walked alike."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

_RULE = "=" * 60
_BANNER = "=======================Iterator Pattern====================="


@dataclass(frozen=True)
class SongInfo:
    """A song, its band and the year it came out."""

    song_name: str
    band_name: str
    year_released: int


def _print_song(song: SongInfo) -> None:
    print(song.song_name)
    print(song.band_name)
    print(song.year_released)


class SongIterator(ABC):
    """A collection of songs with one shared cursor that only moves forward."""

    def __init__(self) -> None:
        self._index = 0

    @abstractmethod
    def get_next(self) -> SongInfo | None:
        """Return the next song and advance, or None once every song was given."""

    def __iter__(self) -> Iterator[SongInfo]:
        return iter(self.get_next, None)


class SongsOfThe70s(SongIterator):
    """Songs kept in a list."""

    def __init__(self) -> None:
        super().__init__()
        self.best_songs: list[SongInfo] = []
        self.add_song("Imagine", "John Lennon", 1971)
        self.add_song("American Pie", "Don McLean", 1971)
        self.add_song("I Will Survive", "Gloria Gaynor", 1979)

    def get_next(self) -> SongInfo | None:
        if self._index < len(self.best_songs):
            song = self.best_songs[self._index]
            self._index += 1
            return song
        return None

    def add_song(self, song_name: str, band_name: str, year_released: int) -> None:
        self.best_songs.append(SongInfo(song_name, band_name, year_released))


class SongsOfThe80s(SongIterator):
    """Songs kept in a fixed array of three slots."""

    capacity = 3

    def __init__(self) -> None:
        super().__init__()
        self._slots: list[SongInfo | None] = [None] * self.capacity
        self._size = 0
        self.add_song("Room", "B52s", 1989)
        self.add_song("Cruel Summer", "Banarama", 1984)
        self.add_song("Head Over Heels", "Tears for Fears", 1985)

    @property
    def best_songs(self) -> tuple[SongInfo, ...]:
        """The filled slots, in order."""
        return tuple(song for song in self._slots[: self._size] if song is not None)

    def get_next(self) -> SongInfo | None:
        if self._index < self._size:
            song = self._slots[self._index]
            self._index += 1
            return song
        return None

    def add_song(self, song_name: str, band_name: str, year_released: int) -> None:
        """Fill the next slot; raise IndexError when all slots are taken."""
        if self._size >= self.capacity:
            raise IndexError(f"no room for more than {self.capacity} songs")
        self._slots[self._size] = SongInfo(song_name, band_name, year_released)
        self._size += 1


class SongsOfThe90s(SongIterator):
    """Songs kept as a set: adding a song that is already there changes nothing."""

    def __init__(self) -> None:
        super().__init__()
        self._songs: dict[SongInfo, None] = {}
        self.add_song("Losing My Religion", "REM", 1991)
        self.add_song("Creep", "Radiohead", 1993)
        self.add_song("Walk on the Ocean", "Toad The Wet Sprocket", 1991)

    @property
    def best_songs(self) -> frozenset[SongInfo]:
        return frozenset(self._songs)

    def get_next(self) -> SongInfo | None:
        if self._index < len(self._songs):
            song = list(self._songs)[self._index]
            self._index += 1
            return song
        return None

    def add_song(self, song_name: str, band_name: str, year_released: int) -> None:
        self._songs.setdefault(SongInfo(song_name, band_name, year_released), None)


class DiskJokey:
    """Shows the songs of three decades, by each collection's own storage or by iteration."""

    def __init__(
        self,
        songs70s: SongsOfThe70s,
        songs80s: SongsOfThe80s,
        songs90s: SongsOfThe90s,
    ) -> None:
        self.songs70s = songs70s
        self.songs80s = songs80s
        self.songs90s = songs90s

    def show_the_songs(self) -> None:
        """Print every decade by walking its underlying storage directly."""
        for label, songs in (
            ("70s", self.songs70s.best_songs),
            ("80s", self.songs80s.best_songs),
            ("90s", self.songs90s.best_songs),
        ):
            print(f"Songs of the {label}:")
            for song in songs:
                _print_song(song)
            print()

    def show_the_songs2(self) -> None:
        """Print every decade through the common iterator interface."""
        print("NEW WAY WITH ITERATION")
        print("Songs of the 70s:")
        self.print_the_songs(self.songs70s)
        print("Songs of the 80s:")
        self.print_the_songs(self.songs80s)
        print("Songs of the 90s:")
        self.print_the_songs(self.songs90s)

    def print_the_songs(self, iterator: SongIterator) -> None:
        """Print the songs the iterator has left."""
        for song in iterator:
            _print_song(song)


def iterator_pattern() -> None:
    """Show the songs of three decades both ways."""
    print(_RULE)
    print(_BANNER)
    mad_mike = DiskJokey(SongsOfThe70s(), SongsOfThe80s(), SongsOfThe90s())
    mad_mike.show_the_songs()
    mad_mike.show_the_songs2()
    print(_BANNER)
    print(_RULE)