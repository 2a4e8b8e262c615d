"""Game state machine: menus, scoring, shields and collision handling."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .constants import I_FRAMES_COUNTER
from .entities import move_asteroids, move_shots
from .field import AsteroidField
from .geometry import circles_collide
from .player import Controls, Player

POINTS_PER_HIT = 10
HITS_PER_SHIELD = 10


class GameState(enum.Enum):
    """The screen the game is currently showing."""

    MENU = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    GAME_OVER = enum.auto()


class Game:
    """Holds one session's player, asteroid field and score."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.player: Optional[Player] = None
        self.field: Optional[AsteroidField] = None
        self.score = 0
        self.high_score = 0
        self.has_shield = False
        self.shield_counter = 0
        self.iframes = 0.0

    @property
    def new_high_score(self) -> bool:
        """True if the current score beats the recorded high score."""
        return self.score > self.high_score

    def new_game(self) -> None:
        """Start a fresh round from the main menu."""
        self.state = GameState.PLAYING
        self.player = Player()
        self.field = AsteroidField(self.rng)
        self.score = 0
        self.has_shield = False
        self.shield_counter = 0

    def toggle_pause(self) -> None:
        """Switch between playing and paused; other states are left alone."""
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING

    def leave_game(self) -> None:
        """Abandon the round and return to the main menu."""
        self.state = GameState.MENU
        self.player = None
        self.field = None

    def finish_game_over(self) -> None:
        """Leave the game-over screen, recording a new high score."""
        self.state = GameState.MENU
        if self.score > self.high_score:
            self.high_score = self.score

    def _require_round(self) -> tuple[Player, AsteroidField]:
        if self.player is None or self.field is None:
            raise RuntimeError("no game in progress")
        return self.player, self.field

    def _register_hit(self) -> None:
        self.score += POINTS_PER_HIT
        self.shield_counter += 1
        if self.shield_counter >= HITS_PER_SHIELD:
            self.shield_counter = 0
            self.has_shield = True

    def check_collisions(self) -> bool:
        """Resolve asteroid hits on the ship and by shots.

        Returns True if the ship was destroyed and the game is over.
        """
        player, field = self._require_round()
        asteroids = field.asteroids
        shots = player.shots
        # Collections change while being scanned, so positions are tracked explicitly.
        i = 0
        while i < len(asteroids):
            asteroid = asteroids[i]
            hit_player = circles_collide(
                asteroid.shape.position, asteroid.shape.radius, player.shape.position, player.shape.radius
            )
            if hit_player and self.iframes <= 0.0:
                if not self.has_shield:
                    self.state = GameState.GAME_OVER
                    return True
                field.split(i)
                self.has_shield = False
                self.iframes = I_FRAMES_COUNTER

            j = 0
            while j < len(shots) and i < len(asteroids):
                target = asteroids[i]
                shot = shots[j]
                if circles_collide(
                    target.shape.position, target.shape.radius, shot.shape.position, shot.shape.radius
                ):
                    shots.remove_by_id(shot.id)
                    field.split(i)
                    self._register_hit()
                j += 1
            i += 1
        return False

    def step(self, dt: float, controls: Controls, width: float, height: float) -> None:
        """Advance a playing round by ``dt`` seconds; other states are untouched."""
        if self.state is not GameState.PLAYING:
            return
        player, field = self._require_round()
        field.update(dt, width, height)
        move_asteroids(field.asteroids, dt, width, height)
        player.update(dt, controls, width, height)
        move_shots(player.shots, dt)
        if self.iframes > 0.0:
            self.iframes -= dt
        self.check_collisions()