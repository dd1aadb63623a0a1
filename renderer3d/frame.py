"""
Draw instructions - one frame of output for a rasterizer
"""

import math

import numpy as np

from utils.constants import BRICK_HEIGHT

GLYPH_MORTAR_V = '│'
GLYPH_MORTAR_H = '─'

# Indexed by mortar kind
MORTAR_GLYPHS = (GLYPH_MORTAR_V, GLYPH_MORTAR_H)


class Background:
    """
    Sky strip sampled by yaw plus a static floor gradient

    Attributes:
        sky: numpy uint8 array (SKY_WIDTH, SKY_HEIGHT, 3)
        sky_offset: Strip column shown at screen x = 0
        sky_y: Top of the sky band (horizon offset)
        sky_height: Sky band height in screen rows
        floor_y: Top of the floor band
        floor_colors: (far, near) gradient colors
    """
    def __init__(self, sky, sky_offset, sky_y, sky_height, floor_y, floor_colors):
        self.sky = sky
        self.sky_offset = sky_offset
        self.sky_y = sky_y
        self.sky_height = sky_height
        self.floor_y = floor_y
        self.floor_colors = floor_colors

    @property
    def sky_width(self):
        return self.sky.shape[0]

    def sky_column(self, x, screen_width):
        """Strip column sampled for screen column x"""
        return math.floor((x / screen_width) * self.sky_width + self.sky_offset) % self.sky_width


def mortar_capacity(num_rays, screen_height):
    """Upper bound on marks per frame: two per brick row in every column"""
    return num_rays * 2 * (screen_height // BRICK_HEIGHT + 3)


class MortarBuffer:
    """
    Preallocated brick-edge marks, reused every frame

    Only the first `count` entries are valid.

    Attributes:
        x: Screen column
        y: Screen row of the mark
        kind: MORTAR_VERTICAL or MORTAR_HORIZONTAL
        alpha: Blend factor over the wall color
    """

    def __init__(self, num_rays, screen_height):
        self.count = 0
        self.resize(num_rays, screen_height)

    def resize(self, num_rays, screen_height):
        capacity = mortar_capacity(num_rays, screen_height)
        self.x = np.zeros(capacity, dtype=np.int32)
        self.y = np.zeros(capacity, dtype=np.float64)
        self.kind = np.zeros(capacity, dtype=np.int8)
        self.alpha = np.zeros(capacity, dtype=np.float64)
        self.count = 0

    @property
    def capacity(self):
        return self.x.shape[0]

    def glyph(self, i):
        """Text glyph of mark i"""
        return MORTAR_GLYPHS[self.kind[i]]

    def __len__(self):
        return self.count


class SpritePlacement:
    """Projected item billboard"""
    __slots__ = ('screen_x', 'screen_y', 'size', 'type', 'glyph', 'color', 'depth')

    def __init__(self, screen_x, screen_y, size, item_type, glyph, color, depth):
        self.screen_x = screen_x
        self.screen_y = screen_y
        self.size = size
        self.type = item_type
        self.glyph = glyph
        self.color = color
        self.depth = depth

    def __repr__(self):
        return f"SpritePlacement({self.type}, x={self.screen_x}, y={self.screen_y}, size={self.size})"


class MinimapLayer:
    """
    Top-down primitives in minimap pixel space

    Attributes:
        size: Viewport side length in pixels
        scale: Pixels per world unit
        cells: list of (rect, color) wall blocks; rect = (x, y, w, h)
        markers: list of (rect, color) item markers
        camera_point: (x, y) camera center, drawn with camera_radius
        heading: ((x0, y0), (x1, y1)) heading segment
    """
    def __init__(self, size, scale):
        self.size = size
        self.scale = scale
        self.cells = []
        self.markers = []
        self.camera_point = None
        self.camera_radius = 0
        self.camera_color = None
        self.heading = None


class Frame:
    """
    Everything a rasterizer needs for one screen

    columns and mortar are the renderer's ColumnBuffer and MortarBuffer; both
    are reused between frames, so a frame is valid until the next render call.
    """
    def __init__(self, width, height, background, columns, mortar, sprites, minimap):
        self.width = width
        self.height = height
        self.background = background
        self.columns = columns
        self.mortar = mortar
        self.sprites = sprites
        self.minimap = minimap

    def __repr__(self):
        return (f"Frame({self.width}x{self.height}, sprites={len(self.sprites)}, "
                f"mortar={len(self.mortar)})")
