"""The windowed front end: input, drawing and the main loop."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from .constants import (
    BLACK,
    BLUE,
    BUTTON_HEIGHT,
    BUTTON_MARGIN,
    BUTTON_SPACING,
    BUTTON_WIDTH,
    BUTTON_Y,
    GRAY,
    GREEN,
    WHITE,
)
from .game import Game, GameState
from .geometry import label_with_int
from .player import Controls, blink_visible, controls_from_gamepad

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800
TARGET_FPS = 60
TITLE = "Asteroids"
RESOURCE_DIR = "resources"
BACKGROUND_FILE = "space3.jpg"
TRIGGER_AXIS = 5
TRIGGER_THRESHOLD = 0.0

PathLike = Union[str, "os.PathLike[str]"]


def button_rect(center_x: int, center_y: int, width: int, height: int) -> Tuple[int, int, int, int]:
    """Return ``(left, top, width, height)`` of a button centred on a point."""
    return (center_x - width // 2, center_y - height // 2, width, height)


def find_resource_dir(folder_name: str, app_dir: PathLike) -> Optional[Path]:
    """Look for ``folder_name`` in the working dir, the app dir and up to three levels above it."""
    candidates = [Path.cwd() / folder_name]
    base = Path(app_dir)
    candidates.extend(base.joinpath(*([".."] * up), folder_name) for up in range(4))
    for candidate in candidates:
        if candidate.is_dir():
            return candidate.resolve()
    return None


class _Screen:
    """Drawing helpers bound to one window surface."""

    def __init__(self, pygame_module, surface) -> None:
        self.pg = pygame_module
        self.surface = surface
        self._fonts: Dict[int, object] = {}

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = self.pg.font.Font(None, size)
        return self._fonts[size]

    def measure(self, text: str, size: int) -> int:
        return self.font(size).size(text)[0]

    def text(self, text: str, x: int, y: int, size: int, color=WHITE) -> None:
        self.surface.blit(self.font(size).render(text, True, color), (x, y))

    def centered_text(self, text: str, y: int, size: int) -> None:
        self.text(text, self.width // 2 - self.measure(text, size) // 2, y, size)

    def button(self, text: str, center_x: int, center_y: int, mouse: Tuple[int, int], clicked: bool) -> bool:
        rect = self.pg.Rect(button_rect(center_x, center_y, BUTTON_WIDTH, BUTTON_HEIGHT))
        hovered = rect.collidepoint(mouse)
        self.pg.draw.rect(self.surface, BLUE if hovered else GRAY, rect)
        text_height = BUTTON_HEIGHT - 2 * BUTTON_MARGIN
        text_width = self.measure(text, text_height)
        self.text(text, center_x - text_width // 2, center_y - text_height // 2, text_height)
        return bool(hovered and clicked)


def _button_centers(screen: _Screen, count: int) -> Iterable[Tuple[int, int]]:
    first = BUTTON_Y + BUTTON_HEIGHT // 2
    return [(screen.width // 2, first + n * (BUTTON_HEIGHT + BUTTON_SPACING)) for n in range(count)]


def _read_controls(pg, joystick, player_timer: float) -> Controls:
    keys = pg.key.get_pressed()
    keyboard = Controls(
        forward=keys[pg.K_w],
        backward=keys[pg.K_s],
        turn_left=keys[pg.K_a],
        turn_right=keys[pg.K_d],
        fire=keys[pg.K_SPACE],
    )
    if joystick is None:
        return keyboard
    hat_x, hat_y = joystick.get_hat(0) if joystick.get_numhats() else (0, 0)
    axes = joystick.get_numaxes()
    pad = controls_from_gamepad(
        up=hat_y > 0,
        down=hat_y < 0,
        left=hat_x < 0,
        right=hat_x > 0,
        trigger=axes > TRIGGER_AXIS and joystick.get_axis(TRIGGER_AXIS) > TRIGGER_THRESHOLD,
        left_x=joystick.get_axis(0) if axes > 0 else 0.0,
        left_y=joystick.get_axis(1) if axes > 1 else 0.0,
    )
    pad_used = pad.forward or pad.backward or pad.turn_left or pad.turn_right or (pad.fire and player_timer <= 0)
    return pad if pad_used else keyboard


def _draw_round(screen: _Screen, game: Game) -> None:
    pg = screen.pg
    player, field = game.player, game.field
    screen.text(label_with_int("Score: ", game.score), 10, 10, 20)
    screen.text(label_with_int("High Score: ", game.high_score), 150, 10, 20)
    for asteroid in field.asteroids:
        shape = asteroid.shape
        pg.draw.circle(screen.surface, shape.color, (shape.position.x, shape.position.y), shape.radius, 1)
    if blink_visible(game.iframes):
        pg.draw.polygon(screen.surface, WHITE, [(v.x, v.y) for v in player.triangle()])
        if game.has_shield:
            pos = player.shape.position
            pg.draw.circle(screen.surface, GREEN, (pos.x, pos.y), player.shape.radius, 1)
    for shot in player.shots:
        shape = shot.shape
        pg.draw.circle(screen.surface, shape.color, (shape.position.x, shape.position.y), shape.radius)


def _run_menu(screen: _Screen, game: Game, mouse, clicked) -> bool:
    """Draw the main menu; return False if the player chose to quit."""
    screen.centered_text(TITLE, 150, 75)
    new_center, quit_center = _button_centers(screen, 2)
    if screen.button("New Game", *new_center, mouse, clicked):
        game.new_game()
    elif screen.button("Quit Game", *quit_center, mouse, clicked):
        return False
    return True


def _run_pause(screen: _Screen, game: Game, mouse, clicked) -> None:
    screen.centered_text("Paused", 150, 75)
    (center,) = _button_centers(screen, 1)
    if screen.button("Leave Game", *center, mouse, clicked):
        game.leave_game()


def _run_game_over(screen: _Screen, game: Game, mouse, clicked) -> None:
    screen.centered_text("Game Over!", 150, 75)
    if game.new_high_score:
        screen.centered_text(label_with_int("New High Score: ", game.score), 250, 50)
    screen.centered_text(label_with_int("Final Score: ", game.score), 350, 35)
    (center,) = _button_centers(screen, 1)
    if screen.button("Leave Game", *center, mouse, clicked):
        game.finish_game_over()


def main(argv=None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="spacerocks", description="Shoot asteroids before they hit you.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    pygame.joystick.init()
    surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.NOFRAME)
    pygame.display.set_caption(TITLE)
    screen = _Screen(pygame, surface)

    resources = find_resource_dir(RESOURCE_DIR, Path(sys.argv[0]).resolve().parent)
    if resources is not None:
        os.chdir(resources)
    try:
        background = pygame.image.load(BACKGROUND_FILE).convert()
    except (pygame.error, FileNotFoundError):
        background = None

    clock = pygame.time.Clock()
    game = Game()
    joystick = None
    running = True
    dt = 0.0
    while running:
        clicked = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F4:
                    running = False
                elif event.key == pygame.K_ESCAPE:
                    game.toggle_pause()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                clicked = True
        if joystick is None and pygame.joystick.get_count() > 0:
            joystick = pygame.joystick.Joystick(0)
        elif joystick is not None and pygame.joystick.get_count() == 0:
            joystick = None

        mouse = pygame.mouse.get_pos()
        surface.fill(BLACK)
        if background is not None:
            surface.blit(background, (0, 0))

        if game.state is GameState.PAUSED:
            _run_pause(screen, game, mouse, clicked)
        elif game.state is GameState.MENU:
            running = _run_menu(screen, game, mouse, clicked) and running
        elif game.state is GameState.PLAYING:
            controls = _read_controls(pygame, joystick, game.player.timer)
            game.step(dt, controls, screen.width, screen.height)
            _draw_round(screen, game)
        elif game.state is GameState.GAME_OVER:
            _run_game_over(screen, game, mouse, clicked)

        pygame.display.flip()
        dt = clock.tick(TARGET_FPS) / 1000.0

    pygame.quit()
    return 0