"""Game-wide tuning values."""

ASTEROID_MIN_RADIUS = 20
ASTEROID_ROTATE_RADS_MIN = 0.349066  # 20 degrees
ASTEROID_ROTATE_RADS_MAX = 0.872665  # 50 degrees

PLAYER_START_POS_X = 640
PLAYER_START_POS_Y = 400
PLAYER_RADIUS = 20
PLAYER_TURN_SPEED = 5
PLAYER_SPEED = 10
PLAYER_SHOOT_SPEED = 25
PLAYER_SHOOT_COOLDOWN = 0.35  # seconds
SHOT_COOLDOWN = 1.0
SHOT_RADIUS = 5

BUTTON_WIDTH = 250
BUTTON_HEIGHT = 60
BUTTON_MARGIN = 10
BUTTON_Y = 400
BUTTON_SPACING = 30  # space between buttons

I_FRAMES_COUNTER = 2.0

WHITE = (255, 255, 255, 255)
GREEN = (0, 228, 48, 255)
GRAY = (130, 130, 130, 255)
BLUE = (0, 121, 241, 255)
BLACK = (0, 0, 0, 255)