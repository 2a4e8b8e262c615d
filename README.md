# spacerocks

A small asteroid-shooting arcade game. You fly a triangular ship around a
wrapping playfield, break incoming rocks into smaller pieces and try to beat
your high score.

## Installing

```
pip install .
```

This pulls in pygame, which draws the window and reads the keyboard and
gamepad.

## Playing

```
spacerocks
```

The borderless 1280×800 window opens on the main menu. Click **New Game** to
start or **Quit Game** to leave. During a round, Esc pauses; the pause screen
has a **Leave Game** button that returns to the main menu, and Esc again
resumes play.

### Controls

| Action         | Keyboard | Gamepad                      |
|----------------|----------|------------------------------|
| Thrust         | W        | D-pad up / left stick up     |
| Reverse        | S        | D-pad down / left stick down |
| Turn left      | A        | D-pad left / stick left      |
| Turn right     | D        | D-pad right / stick right    |
| Fire           | Space    | Right trigger                |
| Pause / resume | Esc      |                              |
| Quit           | F4       |                              |

When a gamepad is connected and one of its inputs is active in a frame, the
gamepad's controls are used for that frame instead of the keyboard's.
Reversing is slower than thrusting, and firing has a short cooldown.

### Rules

- Rocks drift in from the screen edges, up to forty at a time, in three
  sizes. Rocks, the ship and shots leaving one edge reappear at the opposite
  one (shots simply expire after a second).
- Shooting a rock scores 10 points. A larger rock splits into two smaller
  ones that move off at an angle and slightly faster; the smallest rocks
  vanish.
- Every ten hits charges a shield (shown as a green ring). The shield absorbs
  one collision, breaking that rock, and leaves you blinking and
  invulnerable for two seconds.
- Touching a rock without a shield ends the game. Leaving the game-over
  screen records a new high score for the rest of the session.

The background image `space3.jpg` is looked up in a `resources` folder in the
working directory, in the program's directory, or up to three levels above
it; the game runs on a plain black background if none is found.

### What it does not do

High scores are not saved between sessions, and the game has no sound.

## Using the pieces

The game logic runs without a window, which makes it easy to script or test:

```python
from spacerocks.game import Game, GameState
from spacerocks.player import Controls

game = Game()
game.new_game()
game.step(1 / 60, Controls(forward=True), 1280, 800)
print(game.state is GameState.PLAYING, game.score)
```

`Game` also offers `toggle_pause()`, `leave_game()`, `finish_game_over()` and
`check_collisions()`, and accepts a `random.Random` for repeatable rounds.

- `spacerocks.geometry` — `Vec2`, `circles_collide`, `wrap_position`,
  `random_float` and small label helpers.
- `spacerocks.entities` — `CircleShape`, `Shot`, `Asteroid` and the id-keyed
  `IdList`, plus `move_shots` and `move_asteroids`.
- `spacerocks.field` — `AsteroidField` (spawning and splitting rocks),
  `create_asteroid` and `edge_position`.
- `spacerocks.player` — `Player`, `Controls`, `controls_from_gamepad`,
  `apply_deadzone` and `blink_visible`.
- `spacerocks.app` — the pygame front end: `main`, `button_rect` and
  `find_resource_dir`.

## Running the tests

```
pip install ".[test]"
pytest
```