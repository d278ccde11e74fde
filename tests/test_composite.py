import pytest

from patternshowcase.composite import (
    CompositeDiskJokey,
    Song,
    SongGroup,
    composite_pattern,
)


def test_song_display(capsys):
    Song("War Pigs", "Black Sabath", 1970).display_song_info()
    assert capsys.readouterr().out == "War Pigs was recorded by Black Sabath in 1970\n"


def test_song_has_no_children():
    song = Song("Tetris", "Doctor P", 2011)
    assert song.get_component(0) is None
    with pytest.raises(TypeError):
        song.add(Song("Centipede", "Knife Party", 2012))
    with pytest.raises(TypeError):
        song.remove(song)


def test_group_get_component_in_and_out_of_range():
    group = SongGroup("Dubstep", "desc")
    first = Song("Centipede", "Knife Party", 2012)
    second = Song("Tetris", "Doctor P", 2011)
    group.add(first)
    group.add(second)
    assert group.get_component(0) is first
    assert group.get_component(1) is second
    assert group.get_component(2) is None
    assert group.get_component(-1) is None
    assert len(group) == 2


def test_group_remove_is_by_identity():
    group = SongGroup("Heavy Metal", "desc")
    kept = Song("Ace of Spades", "Motorhead", 1980)
    group.add(kept)
    group.remove(Song("Ace of Spades", "Motorhead", 1980))
    assert list(group) == [kept]
    group.remove(kept)
    assert len(group) == 0


def test_nested_display_order(capsys):
    outer = SongGroup("Outer", "all")
    inner = SongGroup("Inner", "some")
    inner.add(Song("Tetris", "Doctor P", 2011))
    outer.add(Song("War Pigs", "Black Sabath", 1970))
    outer.add(inner)
    CompositeDiskJokey(outer).get_song_list()
    assert capsys.readouterr().out.splitlines() == [
        "Outer all",
        "War Pigs was recorded by Black Sabath in 1970",
        "Inner some",
        "Tetris was recorded by Doctor P in 2011",
    ]


def test_composite_pattern_tree(capsys):
    tree = composite_pattern()
    out = capsys.readouterr().out
    assert "Song List Every Song Available" in out
    assert out.index("Dubstep") < out.index("Heavy Metal")
    assert len(tree) == 2
    industrial = tree.get_component(0)
    assert industrial.group_name == "Industrial"
    assert industrial.get_component(2).group_name == "Dubstep"