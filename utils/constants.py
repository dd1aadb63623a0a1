"""
Global constants for the maze raycaster
"""

import math

# Screen settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60

# Cell codes
CELL_OPEN = 0
CELL_WALL = 1
DECORATIVE_WALLS = (2, 3, 4, 5)

# Maze generation
DEFAULT_GRID_WIDTH = 51
DEFAULT_GRID_HEIGHT = 51
MIN_GRID_SIZE = 3
START_CELL = (1, 1)
DECORATION_COUNT = 5

# Carving offsets (distance 2 on the odd lattice)
CARVE_DIRS = [
    (0, -2),    # up
    (2, 0),     # right
    (0, 2),     # down
    (-2, 0),    # left
]

# 4-connected neighbours
NEIGHBOR_DIRS = [
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
]

# Camera settings
START_DIRECTION = (-1.0, 0.0)
FOV_PLANE_MAGNITUDE = 0.66
MOVE_SPEED = 0.15
ROT_SPEED = 0.08
LOOK_SPEED = 0.05
MAX_PITCH = math.pi / 3
BOB_STEP = 0.2
BOB_AMPLITUDE = 0.08
PITCH_SCALE = 150
BOB_SCALE = 20

# Raycasting
MIN_PERP_DIST = 0.01
WALL_BASE_BRIGHTNESS = 220
FOG_NEAR_FLOOR = 0.25
FOG_FAR_DISTANCE = 22.0
SIDE_FACTOR_X = 1.0
SIDE_FACTOR_Y = 0.8

# Brick overlay (level of detail cutoff)
BRICK_MIN_COLUMN_HEIGHT = 30
BRICK_MAX_DISTANCE = 10.0
BRICK_WIDTH = 20
BRICK_HEIGHT = 25
BRICK_U_SCALE = 100

# Mortar mark kinds
MORTAR_VERTICAL = 0
MORTAR_HORIZONTAL = 1

# Sky strip
SKY_WIDTH = 512
SKY_HEIGHT = 256

# Sprites
SPRITE_VISIBLE_RADIUS = 15.0
SPRITE_MIN_DEPTH = 0.1
SPRITE_MIN_SIZE = 5
SPRITE_SCALE = 0.5

# Items
ITEM_COIN = 'coin'
ITEM_KEY = 'key'
ITEM_TYPES = (ITEM_COIN, ITEM_KEY)
COIN_COUNT = 8
KEY_COUNT = 2
ITEM_COLLECTION_RADIUS = 0.5
ITEM_SPAWN_MARGIN = 5

# Minimap
MINIMAP_WINDOW_RADIUS = 20
MINIMAP_MIN_SIZE = 120
MINIMAP_MAX_SIZE = 200
MINIMAP_SCREEN_FRACTION = 0.12
MINIMAP_MARGIN = 10
MINIMAP_MARKER_SIZE = 4
MINIMAP_CAMERA_RADIUS = 3
MINIMAP_HEADING_LENGTH = 2.0

# Palettes
PALETTE_COLOR = 'color'
PALETTE_MONOCHROME = 'monochrome'

# Mouse drag rotation (units per pixel)
MOUSE_ROTATE_FACTOR = 0.05
