import pytest

from patternshowcase.iterator import (
    DiskJokey,
    SongInfo,
    SongsOfThe70s,
    SongsOfThe80s,
    SongsOfThe90s,
    iterator_pattern,
)


def test_song_info_equality_and_hash():
    a = SongInfo("Creep", "Radiohead", 1993)
    b = SongInfo("Creep", "Radiohead", 1993)
    assert a == b
    assert hash(a) == hash(b)
    assert a != SongInfo("Creep", "Radiohead", 1994)


def test_70s_get_next_walks_in_order_then_none():
    songs = SongsOfThe70s()
    first = songs.get_next()
    assert first == SongInfo("Imagine", "John Lennon", 1971)
    rest = [songs.get_next(), songs.get_next()]
    assert [s.song_name for s in rest] == ["American Pie", "I Will Survive"]
    assert songs.get_next() is None
    assert songs.get_next() is None


def test_70s_add_song_is_reached_by_iteration():
    songs = SongsOfThe70s()
    songs.add_song("Layla", "Derek and the Dominos", 1970)
    names = [s.song_name for s in songs]
    assert names[-1] == "Layla"
    assert len(names) == 4


def test_80s_holds_three_songs():
    songs = SongsOfThe80s()
    assert [s.band_name for s in songs.best_songs] == ["B52s", "Banarama", "Tears for Fears"]
    assert list(songs) == list(songs.best_songs)


def test_80s_rejects_a_fourth_song():
    songs = SongsOfThe80s()
    with pytest.raises(IndexError):
        songs.add_song("Take On Me", "a-ha", 1985)
    assert len(songs.best_songs) == 3


def test_90s_ignores_duplicates():
    songs = SongsOfThe90s()
    songs.add_song("Creep", "Radiohead", 1993)
    assert len(songs.best_songs) == 3
    assert SongInfo("Creep", "Radiohead", 1993) in songs.best_songs


def test_90s_iteration_yields_every_song_once():
    songs = SongsOfThe90s()
    walked = list(songs)
    assert set(walked) == songs.best_songs
    assert len(walked) == len(set(walked))
    assert songs.get_next() is None


def test_print_the_songs_output(capsys):
    jockey = DiskJokey(SongsOfThe70s(), SongsOfThe80s(), SongsOfThe90s())
    jockey.print_the_songs(jockey.songs70s)
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["Imagine", "John Lennon", "1971"]
    assert len(lines) == 9


def test_show_the_songs_lists_every_decade(capsys):
    jockey = DiskJokey(SongsOfThe70s(), SongsOfThe80s(), SongsOfThe90s())
    jockey.show_the_songs()
    out = capsys.readouterr().out
    for header in ("Songs of the 70s:", "Songs of the 80s:", "Songs of the 90s:"):
        assert header in out
    assert "Head Over Heels\nTears for Fears\n1985\n" in out
    # Showing directly does not move the iterators.
    assert jockey.songs70s.get_next() == SongInfo("Imagine", "John Lennon", 1971)


def test_show_the_songs2_consumes_the_iterators(capsys):
    jockey = DiskJokey(SongsOfThe70s(), SongsOfThe80s(), SongsOfThe90s())
    jockey.show_the_songs2()
    first = capsys.readouterr().out
    assert first.startswith("NEW WAY WITH ITERATION\n")
    assert "Losing My Religion" in first
    jockey.show_the_songs2()
    second = capsys.readouterr().out
    assert second.splitlines() == [
        "NEW WAY WITH ITERATION",
        "Songs of the 70s:",
        "Songs of the 80s:",
        "Songs of the 90s:",
    ]


def test_iterator_pattern_prints_both_ways(capsys):
    iterator_pattern()
    out = capsys.readouterr().out
    assert out.count("Walk on the Ocean") == 2
    assert "Iterator Pattern" in out