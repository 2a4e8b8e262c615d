import math
import random

import pytest

from spacerocks.constants import ASTEROID_MIN_RADIUS, ASTEROID_ROTATE_RADS_MAX, ASTEROID_ROTATE_RADS_MIN, WHITE
from spacerocks.field import (
    ASTEROID_MAX_RADIUS,
    ASTEROID_SPAWN_RATE,
    MAX_ASTEROIDS,
    AsteroidField,
    create_asteroid,
    edge_position,
)
from spacerocks.geometry import Vec2

WIDTH = 1280
HEIGHT = 800


def make_field(seed=7):
    return AsteroidField(random.Random(seed))


def test_create_asteroid_holds_parts():
    a = create_asteroid(Vec2(1, 2), Vec2(3, 4), 40, 9, WHITE)
    assert a.id == 9
    assert a.shape.position == Vec2(1, 2)
    assert a.shape.velocity == Vec2(3, 4)
    assert a.shape.radius == 40
    assert a.shape.color == WHITE


def test_edge_margin_is_three_kinds_of_radius():
    assert edge_position(0, 0.0, WIDTH, HEIGHT) == Vec2(-60, 0)
    assert edge_position(3, 0.0, WIDTH, HEIGHT) == Vec2(0, HEIGHT + 60)


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, Vec2(-ASTEROID_MAX_RADIUS, 0.5 * HEIGHT)),
        (1, Vec2(WIDTH + ASTEROID_MAX_RADIUS, 0.5 * HEIGHT)),
        (2, Vec2(0.5 * WIDTH, -ASTEROID_MAX_RADIUS)),
        (3, Vec2(0.5 * WIDTH, HEIGHT + ASTEROID_MAX_RADIUS)),
    ],
)
def test_edge_position(index, expected):
    assert edge_position(index, 0.5, WIDTH, HEIGHT) == expected


def test_edge_position_rejects_bad_index():
    with pytest.raises(ValueError):
        edge_position(4, 0.5, WIDTH, HEIGHT)


def test_spawn_assigns_sequential_ids():
    field = make_field()
    first = field.spawn(20, Vec2(0, 0), Vec2(1, 0))
    second = field.spawn(40, Vec2(5, 5), Vec2(0, 1))
    assert (first.id, second.id) == (0, 1)
    assert field.next_id == 2
    assert [a.id for a in field.asteroids] == [0, 1]


def test_split_smallest_only_removes():
    field = make_field()
    field.spawn(ASTEROID_MIN_RADIUS, Vec2(10, 10), Vec2(1, 0))
    field.split(0)
    assert len(field.asteroids) == 0
    assert field.next_id == 1


def test_split_large_makes_two_smaller():
    field = make_field()
    field.spawn(60, Vec2(100, 100), Vec2(50, 0))
    field.split(0)
    assert [a.id for a in field.asteroids] == [1, 2]
    for child in field.asteroids:
        assert child.shape.radius == 60 - ASTEROID_MIN_RADIUS
        assert child.shape.position == Vec2(100, 100)
        assert child.shape.velocity.length() == pytest.approx(50 * 1.2)
    a, b = field.asteroids
    angle_a = math.atan2(a.shape.velocity.y, a.shape.velocity.x)
    angle_b = math.atan2(b.shape.velocity.y, b.shape.velocity.x)
    assert angle_a == pytest.approx(-angle_b)
    assert ASTEROID_ROTATE_RADS_MIN <= abs(angle_a) <= ASTEROID_ROTATE_RADS_MAX


def test_split_keeps_other_asteroids():
    field = make_field()
    field.spawn(20, Vec2(0, 0), Vec2(1, 0))
    field.spawn(40, Vec2(0, 0), Vec2(1, 0))
    field.spawn(20, Vec2(0, 0), Vec2(1, 0))
    field.split(1)
    assert [a.id for a in field.asteroids] == [0, 2, 3, 4]


def test_update_below_rate_does_not_spawn():
    field = make_field()
    assert field.update(ASTEROID_SPAWN_RATE / 2, WIDTH, HEIGHT) is None
    assert len(field.asteroids) == 0
    assert field.spawn_timer == pytest.approx(ASTEROID_SPAWN_RATE / 2)


def test_update_spawns_after_rate():
    field = make_field()
    spawned = field.update(ASTEROID_SPAWN_RATE + 0.1, WIDTH, HEIGHT)
    assert len(field.asteroids) == 1
    assert field.spawn_timer == 0.0
    assert spawned.shape.radius in (20, 40, 60)
    assert 40 <= spawned.shape.velocity.length() + 1e-9
    assert spawned.shape.velocity.length() <= 100 + 1e-9
    pos = spawned.shape.position
    on_edge = (
        pos.x in (-ASTEROID_MAX_RADIUS, WIDTH + ASTEROID_MAX_RADIUS)
        or pos.y in (-ASTEROID_MAX_RADIUS, HEIGHT + ASTEROID_MAX_RADIUS)
    )
    assert on_edge


@pytest.mark.parametrize("seed", range(10))
def test_spawned_asteroid_heads_inward(seed):
    field = make_field(seed)
    a = field.update(1.0, WIDTH, HEIGHT)
    centre = Vec2(WIDTH / 2, HEIGHT / 2)
    to_centre = centre - a.shape.position
    moved = a.shape.position + a.shape.velocity
    assert (centre - moved).length() < to_centre.length()


def test_update_respects_cap():
    field = make_field()
    for _ in range(MAX_ASTEROIDS):
        field.spawn(20, Vec2(0, 0), Vec2(0, 0))
    assert field.update(1.0, WIDTH, HEIGHT) is None
    assert len(field.asteroids) == MAX_ASTEROIDS
    assert field.spawn_timer == 0.0