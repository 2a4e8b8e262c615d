"""The player's ship: input handling, movement and firing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    PLAYER_RADIUS,
    PLAYER_SHOOT_COOLDOWN,
    PLAYER_SHOOT_SPEED,
    PLAYER_SPEED,
    PLAYER_START_POS_X,
    PLAYER_START_POS_Y,
    PLAYER_TURN_SPEED,
    SHOT_COOLDOWN,
    SHOT_RADIUS,
    WHITE,
)
from .entities import CircleShape, IdList, Shot
from .geometry import Vec2, wrap_position

LEFT_STICK_DEADZONE_X = 0.3
LEFT_STICK_DEADZONE_Y = 0.3
START_ROTATION = 3.14159  # facing down
BLINK_PERIOD = 10  # frames at 60 FPS
BACKWARD_SLOWDOWN = 1.5


@dataclass(frozen=True)
class Controls:
    """The actions requested by the player for one frame."""

    forward: bool = False
    backward: bool = False
    turn_left: bool = False
    turn_right: bool = False
    fire: bool = False

    @property
    def active(self) -> bool:
        """True if any action is requested."""
        return self.forward or self.backward or self.turn_left or self.turn_right or self.fire


def apply_deadzone(value: float, deadzone: float) -> float:
    """Return 0 for stick values strictly inside ``(-deadzone, deadzone)``."""
    if -deadzone < value < deadzone:
        return 0.0
    return value


def controls_from_gamepad(
    up: bool, down: bool, left: bool, right: bool, trigger: bool, left_x: float, left_y: float
) -> Controls:
    """Combine d-pad buttons, the fire trigger and the left stick into controls."""
    stick_x = apply_deadzone(left_x, LEFT_STICK_DEADZONE_X)
    stick_y = apply_deadzone(left_y, LEFT_STICK_DEADZONE_Y)
    return Controls(
        forward=up or -stick_y > LEFT_STICK_DEADZONE_Y,
        backward=down or stick_y > LEFT_STICK_DEADZONE_Y,
        turn_left=left or -stick_x > LEFT_STICK_DEADZONE_X,
        turn_right=right or stick_x > LEFT_STICK_DEADZONE_X,
        fire=trigger,
    )


def blink_visible(iframes: float) -> bool:
    """Whether the ship is drawn while invulnerability frames remain."""
    if iframes <= 0.0:
        return True
    return int(iframes * 60) % (2 * BLINK_PERIOD) < BLINK_PERIOD


def _start_shape() -> CircleShape:
    return CircleShape(Vec2(PLAYER_START_POS_X, PLAYER_START_POS_Y), PLAYER_RADIUS, WHITE, Vec2(0, 0))


@dataclass
class Player:
    """The player's ship and the shots it has fired."""

    shape: CircleShape = field(default_factory=_start_shape)
    rotation: float = START_ROTATION
    shots: IdList[Shot] = field(default_factory=IdList)
    shot_count: int = 0
    timer: float = 0.0

    def _forward(self) -> Vec2:
        return Vec2(0, -self.shape.radius).rotate(self.rotation)

    def triangle(self) -> Tuple[Vec2, Vec2, Vec2]:
        """Return the ship's tip, left base and right base corners."""
        r = self.shape.radius
        pos = self.shape.position
        return (
            pos + Vec2(0, -r).rotate(self.rotation),
            pos + Vec2(-r * 0.6, r * 0.8).rotate(self.rotation),
            pos + Vec2(r * 0.6, r * 0.8).rotate(self.rotation),
        )

    def rotate(self, dt: float) -> None:
        """Turn the ship; a negative ``dt`` turns it the other way."""
        self.rotation += PLAYER_TURN_SPEED * dt

    def move(self, dt: float, width: float, height: float) -> None:
        """Move forward for positive ``dt``, more slowly backward for negative."""
        speed = PLAYER_SPEED if dt > 0 else PLAYER_SPEED / BACKWARD_SLOWDOWN
        moved = self.shape.position + self._forward().scale(speed * dt)
        self.shape.position = wrap_position(moved, int(self.shape.radius), width, height)

    def shoot(self) -> Shot:
        """Fire a shot from the ship's centre and start the cooldown."""
        shape = CircleShape(self.shape.position, SHOT_RADIUS, WHITE, self._forward().scale(PLAYER_SHOOT_SPEED))
        shot = Shot(self.shot_count, shape, SHOT_COOLDOWN)
        self.shots.append(shot)
        self.timer = PLAYER_SHOOT_COOLDOWN
        self.shot_count += 1
        return shot

    def update(self, dt: float, controls: Controls, width: float, height: float) -> None:
        """Tick the cooldowns, expire old shots and apply the frame's controls."""
        if self.timer > 0:
            self.timer -= dt
        for shot in list(self.shots):
            if shot.timer > 0:
                shot.timer -= dt
            else:
                self.shots.pop_front()

        if controls.forward:
            self.move(dt, width, height)
        if controls.backward:
            self.move(-dt, width, height)
        if controls.turn_left:
            self.rotate(-dt)
        if controls.turn_right:
            self.rotate(dt)
        if controls.fire and self.timer <= 0:
            self.shoot()


__all__ = [
    "Controls",
    "Player",
    "apply_deadzone",
    "controls_from_gamepad",
    "blink_visible",
    "math",
]