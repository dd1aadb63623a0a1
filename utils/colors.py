"""
Color palette for the maze raycaster
"""

import numpy as np
from utils.constants import (
    ITEM_COIN, ITEM_KEY, PALETTE_MONOCHROME, WALL_BASE_BRIGHTNESS
)

# Background colors
COLOR_BG = (0, 0, 0)
COLOR_FLOOR_NEAR = (0x1a, 0x1a, 0x1a)     # Floor gradient bottom
COLOR_FLOOR_FAR = (0x3a, 0x3a, 0x3a)      # Floor gradient at the horizon

# Sky gradient stops (top, middle, horizon)
COLOR_SKY_TOP = (0x1a, 0x4d, 0x7a)
COLOR_SKY_MID = (0x3b, 0x7f, 0xb8)
COLOR_SKY_HORIZON = (0x87, 0xce, 0xeb)

# Wall colors by cell code
COLOR_WALL_RED = (255, 80, 80)            # Plain wall
COLOR_WALL_GREEN = (80, 255, 80)
COLOR_WALL_BLUE = (100, 160, 255)
COLOR_WALL_WHITE = (255, 255, 255)
COLOR_WALL_YELLOW = (255, 255, 80)

WALL_COLORS = {
    1: COLOR_WALL_RED,
    2: COLOR_WALL_GREEN,
    3: COLOR_WALL_BLUE,
    4: COLOR_WALL_WHITE,
    5: COLOR_WALL_YELLOW,
}

# Mortar glyph tint
COLOR_MORTAR_V = (100, 100, 100)
COLOR_MORTAR_H = (80, 80, 80)

# Item colors
COLOR_COIN = (255, 215, 0)
COLOR_KEY = (0, 255, 255)
COLOR_MONOCHROME_ITEM = (255, 255, 255)

ITEM_COLORS = {
    ITEM_COIN: COLOR_COIN,
    ITEM_KEY: COLOR_KEY,
}

ITEM_GLYPHS = {
    ITEM_COIN: '◉',
    ITEM_KEY: '🔑',
}

# Minimap colors
COLOR_MINIMAP_BG = (0, 0, 0)
COLOR_MINIMAP_WALL = (0x44, 0x44, 0x44)
COLOR_MINIMAP_CAMERA = (0, 255, 0)


def get_item_color(item_type, palette):
    """Get RGB color for an item type under the active palette"""
    if palette == PALETTE_MONOCHROME:
        return COLOR_MONOCHROME_ITEM
    return ITEM_COLORS.get(item_type, COLOR_MONOCHROME_ITEM)


def wall_palette_lut(palette):
    """
    Build the wall color lookup table indexed by cell code

    Args:
        palette: PALETTE_COLOR or PALETTE_MONOCHROME

    Returns:
        numpy uint8 array shape (6, 3); row 0 (open) is unused
    """
    lut = np.zeros((6, 3), dtype=np.uint8)
    for code in range(1, 6):
        if palette == PALETTE_MONOCHROME:
            lut[code] = (WALL_BASE_BRIGHTNESS,) * 3
        else:
            lut[code] = WALL_COLORS[code]
    return lut
