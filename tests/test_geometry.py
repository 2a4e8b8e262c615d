import math
import random

import pytest

from spacerocks.geometry import (
    Vec2,
    circles_collide,
    label_with_int,
    label_with_text,
    label_with_vector,
    random_float,
    wrap_position,
)


@pytest.mark.parametrize("angle", [0.0, 0.3, 1.0, math.pi, -2.5])
def test_rotate_preserves_length(angle):
    v = Vec2(3.0, -4.0)
    assert v.rotate(angle).length() == pytest.approx(v.length())


def test_rotate_round_trip():
    v = Vec2(1.5, 2.5)
    back = v.rotate(0.7).rotate(-0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_rotate_quarter_turn():
    r = Vec2(1.0, 0.0).rotate(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_scale_and_add():
    v = Vec2(2.0, -3.0).scale(2.0)
    assert v == Vec2(4.0, -6.0)
    assert v + Vec2(1.0, 1.0) == Vec2(5.0, -5.0)


def test_circles_touching_collide():
    assert circles_collide(Vec2(0, 0), 1, Vec2(2, 0), 1)


def test_circles_apart_do_not_collide():
    assert not circles_collide(Vec2(0, 0), 1, Vec2(2.01, 0), 1)


def test_wrap_right_to_left():
    assert wrap_position(Vec2(130, 50), 30, 100, 80) == Vec2(-30, 50)


def test_wrap_left_to_right():
    assert wrap_position(Vec2(-30, 50), 30, 100, 80) == Vec2(130, 50)


def test_wrap_top_and_bottom():
    assert wrap_position(Vec2(50, -30), 30, 100, 80) == Vec2(50, 110)
    assert wrap_position(Vec2(50, 110), 30, 100, 80) == Vec2(50, -30)


def test_wrap_inside_unchanged():
    p = Vec2(50, 40)
    assert wrap_position(p, 30, 100, 80) == p


def test_random_float_bounds_and_determinism():
    a = random.Random(7)
    b = random.Random(7)
    values = [random_float(a, -2.0, 5.0) for _ in range(200)]
    assert values == [random_float(b, -2.0, 5.0) for _ in range(200)]
    assert all(-2.0 <= v <= 5.0 for v in values)


def test_labels():
    assert label_with_int("Score: ", 10) == "Score: 10"
    assert label_with_text("Controller: ", "pad") == "Controller: pad"
    assert label_with_vector("Pos: ", Vec2(3.7, -2.9)) == "Pos: (3, -2)"