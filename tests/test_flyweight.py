import pytest

from patternshowcase.flyweight import (
    Color,
    FlyweightTest,
    MyRect,
    MyRect2,
    RectFactory,
    flyweight_pattern,
)


def test_same_color_returns_shared_rect():
    factory = RectFactory()
    first = factory.get_rect(Color.RED)
    assert factory.get_rect(Color.RED) is first
    assert len(factory) == 1


def test_different_colors_give_different_rects():
    factory = RectFactory()
    red = factory.get_rect(Color.RED)
    blue = factory.get_rect(Color.BLUE)
    assert red is not blue
    assert (red.color, blue.color) == (Color.RED, Color.BLUE)
    assert len(factory) == 2


def test_every_color_makes_one_rect_each():
    factory = RectFactory()
    rects = [factory.get_rect(color) for color in Color for _ in range(3)]
    assert len(factory) == len(Color)
    assert len({id(r) for r in rects}) == len(Color)


def test_get_rect_rejects_non_color():
    with pytest.raises(TypeError):
        RectFactory().get_rect("red")


def test_my_rect_keeps_coordinates():
    rect = MyRect(Color.GRAY, 1, 2, 3, 4)
    assert (rect.upper_x, rect.upper_y, rect.lower_x, rect.lower_y) == (1, 2, 3, 4)
    assert rect.color is Color.GRAY


def test_my_rect2_keeps_color():
    assert MyRect2(Color.PINK).color is Color.PINK


def test_flyweight_test_draw_shares_rects(capsys):
    tester = FlyweightTest(iterations=500)
    before_ms, after_ms = tester.draw()
    assert before_ms >= 0 and after_ms >= 0
    assert 1 <= len(tester.rect_factory) <= len(Color)
    out = capsys.readouterr().out
    assert f"Before that took {before_ms} ms" in out
    assert f"After that took {after_ms} ms" in out


def test_random_coordinates_stay_in_window():
    tester = FlyweightTest(iterations=0, window_width=10, window_height=5)
    xs = [tester._rand_x() for _ in range(200)]
    ys = [tester._rand_y() for _ in range(200)]
    assert all(0 <= x < 10 for x in xs)
    assert all(0 <= y < 5 for y in ys)


def test_flyweight_pattern_prints_both_timings(capsys):
    flyweight_pattern()
    out = capsys.readouterr().out
    assert "Before that took" in out
    assert "After that took" in out