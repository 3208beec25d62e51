"""
constants.py: Centralized configuration for the game world, physics and window.
"""

# -------- World Config --------
SCREEN_WIDTH = 80               # Text grid columns, also the spawn distance
SCREEN_HEIGHT = 50              # Text grid rows, falling below this is a loss
FRAME_DURATION = 75.0           # Milliseconds per fixed physics step
SCORE_PER_OBSTACLE = 0.05
FRAME_COUNTER_WRAP = 2 ** 32   # Animation counter wraps back to 0 here

PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Physics Config (cells / step) --------
GRAVITY = 0.2                   # Velocity gained per physics step
MAX_FALL_VELOCITY = 2.0
FLAP_VELOCITY = -2.0            # Velocity set (not added) by a flap

# -------- Obstacle Config --------
MIN_GAP_SIZE = 5
MAX_GAP_SIZE = 30
GAP_JITTER = 5                  # gap_y is picked within +/- this of its seed
SPAWN_JITTER = 7                # seed is picked within +/- this of the tail gap
SPAWN_MARGIN = 20               # seed is clamped to [MARGIN, HEIGHT - MARGIN]

# -------- Sprite Layer Config --------
SPRITE_COORD_TO_CONSOLE_COORD = 8   # Pixels per text cell
SPRITE_LAYER_WIDTH = 640
SPRITE_LAYER_HEIGHT = 400
PLAYER_SPRITE_SIZE = 32
PLAYER_ANIMATION_FRAMES = 4
OBSTACLE_SPRITE_INDEX = 4

SPRITE_SHEET_PATH = "resources/all.png"
SPRITE_SHEET_REGIONS = (
    (0, 0, 939, 678),
    (939, 0, 939, 678),
    (1878, 0, 939, 678),
    (2817, 0, 939, 678),
    (3756, 0, 256, 256),
)

# -------- Window Config --------
WINDOW_TITLE = "Flappy Dragon"
WINDOW_SCALE = 2
RENDER_FPS = 60

# -------- Colors (RGBA) --------
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
NAVY = (0, 0, 128, 255)
TRANSPARENT = (0, 0, 0, 0)
