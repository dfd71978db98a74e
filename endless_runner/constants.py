"""Game-wide constants for the endless runner.

Lane geometry, spawn cadence and difficulty tuning knobs for the obstacle
and coin spawners, player speed ramp, scoring, preview window settings and
logging configuration.
"""
import os

# Lanes / road
NUMBER_OF_LANES = 3
LANE_WIDTH = 3.0
DEFAULT_ROAD_WIDTH = 9.0           # used when no road is supplied

# Spawn placement
MIN_SPAWN_DISTANCE = 20.0          # ahead of the player
MAX_SPAWN_DISTANCE = 40.0
MIN_SPAWN_INTERVAL = 0.05          # floor for the drawn cadence (s)

# Obstacle spawner
OBSTACLE_MIN_SPAWN_RATE = 0.3
OBSTACLE_MAX_SPAWN_RATE = 2.0
OBSTACLE_SPAWN_RATE_INCREASE_PER_PHASE = 0.2
OBSTACLE_PATTERN_CHANCE = 0.3
OBSTACLE_MIN_IN_PATTERN = 2
OBSTACLE_MAX_IN_PATTERN = 3
OBSTACLE_SIZE_MULTIPLIER = 1.0
OBSTACLE_SIZE_STEP_PER_PHASE = 0.1
OBSTACLE_PATTERN_SPACING = 4.0
OBSTACLE_SPAWN_HEIGHT = 0.5

# Coin spawner
COIN_MIN_SPAWN_RATE = 0.2
COIN_MAX_SPAWN_RATE = 1.0
COIN_SPAWN_RATE_INCREASE_PER_PHASE = 0.1
COIN_PATTERN_CHANCE = 0.4
COIN_MIN_IN_PATTERN = 3
COIN_MAX_IN_PATTERN = 6
COIN_VALUE_MULTIPLIER = 1.0
COIN_BASE_VALUE = 1
COIN_PATTERN_SPACING = 2.0
COIN_SPAWN_HEIGHT = 1.0

# Pattern lane tables
COIN_DIAMOND_LANES = (1, 0, 1, 2, 1)          # center, left, center, right, center
COIN_COMPLEX_LANES = (0, 2, 1, 0, 2, 1)
OBSTACLE_COMPLEX_LANES = (0, 2, 1, 0, 2)

# Difficulty phases
PHASE_DURATION = 60.0              # seconds per phase
SCORE_MULTIPLIER_PER_PHASE = 1.1

# Player
PLAYER_INITIAL_SPEED = 5.0
PLAYER_MAX_SPEED = 20.0
PLAYER_SPEED_INCREASE_INTERVAL = 30.0
PLAYER_SPEED_INCREASE_AMOUNT = 1.0
PLAYER_MOVE_SPEED = 10.0           # lateral speed at full steer
PLAYER_MAX_HORIZONTAL_SPEED = 15.0
PLAYER_SMOOTH_TIME = 0.1
PLAYER_SCORE_MULTIPLIER = 1.0
STOPPED_TIME_THRESHOLD = 0.5
STOPPED_DISTANCE_THRESHOLD = 0.1   # per second of travel

# Camera
CAMERA_OFFSET = (0.0, 5.0, -10.0)
CAMERA_SMOOTH_TIME = 0.3
GAME_OVER_SHAKE_DURATION = 0.4
GAME_OVER_SHAKE_MAGNITUDE = 0.6

# Preview window
WIDTH, HEIGHT = 960, 540
FPS = 60
BG_COLOR = (25, 28, 33)
ROAD_COLOR = (60, 65, 75)
LANE_LINE_COLOR = (110, 115, 125)
TEXT_COLOR = (235, 235, 235)
PLAYER_COLOR = (90, 170, 255)
COIN_COLOR = (255, 215, 0)
OBSTACLE_COLOR = (220, 80, 70)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22
PIXELS_PER_UNIT = 12               # top-down zoom
PLAYER_RADIUS = 0.6
COIN_RADIUS = 0.5
OBSTACLE_HALF_SIZE = 0.8
DESPAWN_BEHIND = 15.0              # drop items this far behind the player

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
