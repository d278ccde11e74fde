import pytest

from patternshowcase.prototype import (
    CloneableAnimal,
    CloneFactory,
    Sheep,
    prototype_pattern,
)


def test_clone_is_a_distinct_sheep(capsys):
    sally = Sheep()
    clone = CloneFactory().get_clone(sally)
    assert isinstance(clone, Sheep)
    assert clone is not sally
    assert capsys.readouterr().out == "Sheep is made\n"


def test_make_copy_does_not_construct_again(capsys):
    sally = Sheep()
    capsys.readouterr()
    copies = [sally.make_copy() for _ in range(3)]
    assert capsys.readouterr().out == ""
    assert len({id(c) for c in copies} | {id(sally)}) == 4


def test_clone_keeps_attributes():
    sally = Sheep()
    sally.wool = "thick"
    clone = CloneFactory().get_clone(sally)
    assert clone.wool == "thick"


def test_abstract_animal_cannot_be_made():
    with pytest.raises(TypeError):
        CloneableAnimal()


def test_pattern_prints_two_different_pointers(capsys):
    clone = prototype_pattern()
    lines = capsys.readouterr().out.splitlines()
    sally_line = next(line for line in lines if line.startswith("Sally pointer: "))
    clone_line = next(line for line in lines if line.startswith("Clone pointer: "))
    assert clone_line == f"Clone pointer: {id(clone):#x}"
    assert sally_line.split(": ")[1] != clone_line.split(": ")[1]