"""Asteroid creation, splitting and the spawning field."""

from __future__ import annotations

import random
from typing import Optional, Tuple

from .constants import ASTEROID_MIN_RADIUS, ASTEROID_ROTATE_RADS_MAX, ASTEROID_ROTATE_RADS_MIN, WHITE
from .entities import Asteroid, CircleShape, Color, IdList
from .geometry import Vec2, random_float

ASTEROID_KINDS = 3
ASTEROID_SPAWN_RATE = 0.8  # seconds
ASTEROID_MAX_RADIUS = ASTEROID_MIN_RADIUS * ASTEROID_KINDS
ASTEROID_ROTATE_RADS = 0.523599  # 30 degrees
MAX_ASTEROIDS = 40
SPAWN_SPEED_MIN = 40
SPAWN_SPEED_MAX = 100
SPLIT_SPEEDUP = 1.2

COLOR_OPTIONS: Tuple[Color, ...] = (WHITE,)

# Inward direction of travel for asteroids entering from each screen edge:
# left, right, top, bottom.
EDGE_DIRECTIONS: Tuple[Vec2, ...] = (Vec2(1, 0), Vec2(-1, 0), Vec2(0, 1), Vec2(0, -1))


def create_asteroid(position: Vec2, velocity: Vec2, radius: float, asteroid_id: int, color: Color) -> Asteroid:
    """Build an asteroid from its parts."""
    return Asteroid(shape=CircleShape(position, radius, color, velocity), id=asteroid_id)


def edge_position(edge_index: int, scaler: float, width: float, height: float) -> Vec2:
    """Return a spawn point just off the given screen edge.

    ``scaler`` in [0, 1] picks the point along that edge.
    """
    if edge_index == 0:
        return Vec2(-ASTEROID_MAX_RADIUS, scaler * height)
    if edge_index == 1:
        return Vec2(width + ASTEROID_MAX_RADIUS, scaler * height)
    if edge_index == 2:
        return Vec2(scaler * width, -ASTEROID_MAX_RADIUS)
    if edge_index == 3:
        return Vec2(scaler * width, height + ASTEROID_MAX_RADIUS)
    raise ValueError(f"edge index must be 0..3, got {edge_index}")


class AsteroidField:
    """Spawns asteroids from the screen edges and splits them when hit."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.spawn_timer = 0.0
        self.next_id = 0
        self.asteroids: IdList[Asteroid] = IdList()

    def _pick_color(self) -> Color:
        return self.rng.choice(COLOR_OPTIONS)

    def spawn(self, radius: float, position: Vec2, velocity: Vec2) -> Asteroid:
        """Add a new asteroid with the next free id and return it."""
        asteroid = create_asteroid(position, velocity, radius, self.next_id, self._pick_color())
        self.asteroids.append(asteroid)
        self.next_id += 1
        return asteroid

    def split(self, index: int) -> None:
        """Destroy the asteroid at ``index``, breaking it in two if it is large enough."""
        target = self.asteroids[index]
        shape = target.shape
        if shape.radius > ASTEROID_MIN_RADIUS:
            angle = random_float(self.rng, ASTEROID_ROTATE_RADS_MIN, ASTEROID_ROTATE_RADS_MAX)
            new_radius = int(shape.radius - ASTEROID_MIN_RADIUS)
            color = self._pick_color()
            for turn in (angle, -angle):
                velocity = shape.velocity.rotate(turn).scale(SPLIT_SPEEDUP)
                self.asteroids.append(create_asteroid(shape.position, velocity, new_radius, self.next_id, color))
                self.next_id += 1
        self.asteroids.remove_by_id(target.id)

    def update(self, dt: float, width: float, height: float) -> Optional[Asteroid]:
        """Advance the spawn timer and spawn an asteroid when it runs out.

        Returns the asteroid spawned this step, if any.
        """
        self.spawn_timer += dt
        if self.spawn_timer <= ASTEROID_SPAWN_RATE:
            return None
        self.spawn_timer = 0.0
        if len(self.asteroids) >= MAX_ASTEROIDS:
            return None
        edge_index = self.rng.randrange(len(EDGE_DIRECTIONS))
        speed = self.rng.randint(SPAWN_SPEED_MIN, SPAWN_SPEED_MAX)
        velocity = EDGE_DIRECTIONS[edge_index].scale(speed)
        velocity = velocity.rotate(random_float(self.rng, -ASTEROID_ROTATE_RADS, ASTEROID_ROTATE_RADS))
        position = edge_position(edge_index, random_float(self.rng, 0.0, 1.0), width, height)
        kind = self.rng.randint(1, ASTEROID_KINDS)
        return self.spawn(ASTEROID_MIN_RADIUS * kind, position, velocity)