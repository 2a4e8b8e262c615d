"""2D vector maths, screen wrapping and small text helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> Vec2:
        """Return the vector rotated by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def scale(self, factor: float) -> Vec2:
        """Return the vector multiplied by ``factor``."""
        return Vec2(self.x * factor, self.y * factor)


def circles_collide(center1: Vec2, radius1: float, center2: Vec2, radius2: float) -> bool:
    """True if two circles overlap or touch."""
    dx = center2.x - center1.x
    dy = center2.y - center1.y
    reach = radius1 + radius2
    return dx * dx + dy * dy <= reach * reach


def wrap_position(position: Vec2, margin: float, width: float, height: float) -> Vec2:
    """Move a position that left the screen by ``margin`` to the opposite side.

    Only one axis is corrected per call, checking x before y.
    """
    if position.x >= width + margin:
        return Vec2(-margin, position.y)
    if position.x <= -margin:
        return Vec2(width + margin, position.y)
    if position.y <= -margin:
        return Vec2(position.x, height + margin)
    if position.y >= height + margin:
        return Vec2(position.x, -margin)
    return position


def random_float(rng: random.Random, low: float, high: float) -> float:
    """Return a uniformly distributed float between ``low`` and ``high``."""
    return low + rng.random() * (high - low)


def label_with_int(text: str, value: int) -> str:
    """Append an integer to a label."""
    return f"{text}{value}"


def label_with_vector(text: str, value: Vec2) -> str:
    """Append a vector, truncated to integers, as ``(x, y)`` to a label."""
    return f"{text}({int(value.x)}, {int(value.y)})"


def label_with_text(text: str, value: str) -> str:
    """Append a string to a label."""
    return f"{text}{value}"