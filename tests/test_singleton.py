import threading
from collections import Counter

import pytest

from patternshowcase.singleton import Singleton, singleton_pattern


def test_same_instance_every_call():
    first = Singleton.get_instance()
    second = Singleton.get_instance()
    before = len(second.letters_list)
    tiles = first.get_tiles(1)
    assert len(tiles) == 2
    assert len(second.letters_list) == before - 2


def test_same_instance_across_threads():
    seen = []
    threads = [
        threading.Thread(target=lambda: seen.append(Singleton.get_instance()))
        for _ in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(seen) == 4
    assert {id(instance) for instance in seen} == {id(Singleton.get_instance())}


def test_direct_construction_is_refused():
    with pytest.raises(TypeError):
        Singleton()


def test_get_tiles_takes_one_more_from_front():
    instance = Singleton.get_instance()
    before = list(instance.letters_list)
    tiles = instance.get_tiles(7)
    assert len(tiles) == 8
    assert tiles == before[:8]
    assert instance.letters_list == before[8:]


def test_bag_only_holds_scrabble_letters():
    bag = Counter(Singleton.get_instance().letters_list)
    assert bag["a"] <= 9
    assert bag["e"] <= 12
    assert bag["z"] <= 1
    assert set(bag) <= set("abcdefghijklmnopqrstuvwxyz")


def test_too_many_tiles_raises_and_keeps_bag():
    instance = Singleton.get_instance()
    before = list(instance.letters_list)
    with pytest.raises(IndexError):
        instance.get_tiles(len(before))
    assert instance.letters_list == before


def test_pattern_draws_for_two_players(capsys):
    instance = Singleton.get_instance()
    remaining = len(instance.letters_list)
    singleton_pattern()
    out = capsys.readouterr().out
    assert out.count("Player's list : ") == 2
    assert len(instance.letters_list) == remaining - 16