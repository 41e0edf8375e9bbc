import pytest

from cellsnake.linalg import Vec2
from cellsnake.window import Window


def test_dimensions():
    w = Window(Vec2(25, 0), Vec2(79, 23))
    assert w.width == 54
    assert w.height == 23


def test_to_screen_offsets_by_upper_left():
    w = Window(Vec2(25, 2), Vec2(79, 23))
    assert w.to_screen(Vec2(0, 0)) == Vec2(25, 2)
    assert w.to_screen(Vec2(3, 4)) == Vec2(28, 6)


def test_center_point_is_local():
    w = Window(Vec2(25, 0), Vec2(79, 23))
    assert w.center_point() == Vec2(27, 11)
    assert w.to_screen(w.center_point()) == Vec2(52, 11)


def test_window_is_immutable():
    w = Window(Vec2(0, 0), Vec2(4, 4))
    with pytest.raises(AttributeError):
        w.ul = Vec2(1, 1)


def test_vec2_is_a_mapping_key():
    counts = {Vec2(1, 2): 1}
    counts[Vec2(1, 2)] += 1
    assert counts == {Vec2(1, 2): 2}
    assert Vec2(1, 2) + Vec2(3, -1) == Vec2(4, 1)
    assert Vec2(1, 2).to_tuple() == (1, 2)


def test_vec2_rejects_writes():
    p = Vec2(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    with pytest.raises(AttributeError):
        p.z = 0
    assert p == Vec2(1, 2)
