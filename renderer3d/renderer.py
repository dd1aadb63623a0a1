"""
3D Scene Renderer - turns World + Camera + Items into one Frame of draw instructions
Wall shading and brick mortar run as Numba JIT kernels over preallocated buffers
"""

import logging
import math
from numba import njit, int32, float64

from config import EngineConfig
from .frame import Background, Frame, MortarBuffer
from .minimap import MinimapProjector
from .raycaster import Raycaster
from .sprites import SpriteProjector
from .textures import TextureManager
from utils.colors import COLOR_FLOOR_FAR, COLOR_FLOOR_NEAR, wall_palette_lut
from utils.constants import (
    WALL_BASE_BRIGHTNESS, SIDE_FACTOR_X, SIDE_FACTOR_Y,
    BRICK_MIN_COLUMN_HEIGHT, BRICK_MAX_DISTANCE, BRICK_WIDTH, BRICK_HEIGHT, BRICK_U_SCALE,
    MORTAR_VERTICAL, MORTAR_HORIZONTAL, PALETTE_COLOR
)

logger = logging.getLogger(__name__)


@njit(cache=True)
def _numba_shade_columns(grid, lut, screen_height, horizon, fog_near, fog_far,
                         hit, side, map_x, map_y, perp,
                         cell_code, column_height, draw_start, draw_end,
                         intensity, brightness, rgb):
    """
    Project and shade every hit column (Numba JIT compiled)

    Args:
        grid: 2D numpy int8 array of cell codes
        lut: numpy uint8 array (6, 3), wall color per cell code
        screen_height: Screen height in pixels
        horizon: Horizon offset in rows
        fog_near, fog_far: Distance falloff floor and far distance
        hit, side, map_x, map_y, perp: Raycaster output
        cell_code .. rgb: Output arrays, written in place
    """
    h = float64(screen_height)
    last_row = int32(screen_height - 1)

    for x in range(hit.shape[0]):
        if not hit[x]:
            cell_code[x] = 0
            column_height[x] = 0
            draw_start[x] = 0
            draw_end[x] = -1
            intensity[x] = 0.0
            brightness[x] = 0
            rgb[x, 0] = 0
            rgb[x, 1] = 0
            rgb[x, 2] = 0
            continue

        code = grid[map_y[x], map_x[x]]
        cell_code[x] = code

        d = perp[x]
        line_height = int32(math.floor(h / d))
        start = int32(math.floor(-line_height / 2.0 + h / 2.0 + horizon))
        end = int32(math.floor(line_height / 2.0 + h / 2.0 + horizon))

        # Clamp to screen
        if start < 0:
            start = 0
        elif start > last_row:
            start = last_row
        if end < 0:
            end = 0
        elif end > last_row:
            end = last_row

        column_height[x] = line_height
        draw_start[x] = start
        draw_end[x] = end

        # Shading
        falloff = 1.0 - d / fog_far
        if falloff < fog_near:
            falloff = fog_near
        if side[x] == 0:
            shade = falloff * SIDE_FACTOR_X
        else:
            shade = falloff * SIDE_FACTOR_Y

        intensity[x] = shade
        brightness[x] = int32(math.floor(WALL_BASE_BRIGHTNESS * shade))
        for k in range(3):
            rgb[x, k] = int32(lut[code, k] * shade)


@njit(cache=True)
def _numba_brick_overlay(hit, column_height, perp, wall_x, draw_start, draw_end,
                         fog_near, fog_far, out_x, out_y, out_kind, out_alpha):
    """
    Mortar marks for near, tall columns (Numba JIT compiled)

    Bricks tile the wall's U coordinate; alternate brick columns are
    shifted down by half a brick.

    Returns:
        Number of marks written to the out_* arrays
    """
    capacity = out_x.shape[0]
    half_brick = BRICK_HEIGHT / 2.0
    n = 0

    for x in range(hit.shape[0]):
        if (not hit[x] or column_height[x] <= BRICK_MIN_COLUMN_HEIGHT
                or perp[x] >= BRICK_MAX_DISTANCE):
            continue

        u = wall_x[x] * BRICK_U_SCALE
        tex_x = int32(math.floor(u)) % BRICK_WIDTH
        row_offset = int32(math.floor(u / BRICK_WIDTH)) % 2

        falloff = 1.0 - perp[x] / fog_far
        if falloff < fog_near:
            falloff = fog_near
        start = draw_start[x]
        end = draw_end[x]
        middle = start + (end - start) / 2.0
        edge = tex_x < 3 or tex_x > BRICK_WIDTH - 3

        first_row = int32(math.floor(start / BRICK_HEIGHT))
        last_row = int32(math.ceil(end / BRICK_HEIGHT))
        for row in range(first_row, last_row + 1):
            if n + 2 > capacity:
                return n

            y_pos = row * BRICK_HEIGHT + (half_brick if row_offset == 1 else 0.0)

            if (edge and start - 5 <= y_pos <= end + 5
                    and abs(y_pos - middle) < half_brick):
                out_x[n] = x
                out_y[n] = y_pos
                out_kind[n] = MORTAR_VERTICAL
                out_alpha[n] = 0.12 * falloff
                n += 1

            top_edge = y_pos - 2
            if start <= top_edge <= end and tex_x % 4 == 0:
                out_x[n] = x
                out_y[n] = top_edge
                out_kind[n] = MORTAR_HORIZONTAL
                out_alpha[n] = 0.15 * falloff
                n += 1

    return n


class Renderer3D:
    """
    Per-frame renderer; holds only buffers and caches, no game state
    """

    def __init__(self, screen_width, screen_height, config=None):
        """
        Initialize 3D renderer

        Args:
            screen_width, screen_height: Screen dimensions
            config: EngineConfig for fog, sprite and minimap tuning
        """
        self.config = config if config is not None else EngineConfig()
        self.screen_width = screen_width
        self.screen_height = screen_height

        self.fog_near = float(self.config.fog_near_floor)
        self.fog_far = float(self.config.fog_far_distance)

        # Initialize components
        self.raycaster = Raycaster(num_rays=screen_width)
        self.mortar = MortarBuffer(screen_width, screen_height)
        self.texture_manager = TextureManager()
        self.sky = self.texture_manager.get_sky()
        self.sprite_projector = SpriteProjector(
            screen_width, screen_height, self.config.sprite_visible_radius
        )
        self.minimap_projector = MinimapProjector(
            screen_width, self.config.minimap_window_radius
        )

        # Wall lookup tables per palette
        self._luts = {}

    def _get_lut(self, palette):
        if palette not in self._luts:
            self._luts[palette] = wall_palette_lut(palette)
        return self._luts[palette]

    def set_render_area(self, width, height):
        """Update render area dimensions"""
        self.screen_width = width
        self.screen_height = height
        self.raycaster.set_resolution(width)
        self.mortar.resize(width, height)
        self.sprite_projector.set_render_area(width, height)
        self.minimap_projector.set_size(width)
        logger.debug("Render area %dx%d", width, height)

    def render(self, world, camera, items, palette=PALETTE_COLOR):
        """
        Build the draw instructions for one frame

        Args:
            world: World
            camera: Camera
            items: Iterable of Item
            palette: PALETTE_COLOR or PALETTE_MONOCHROME

        Returns:
            Frame
        """
        items = list(items)
        horizon = camera.horizon_offset()

        background = self._build_background(camera, horizon)
        columns = self._draw_walls(world, camera, horizon, palette)
        mortar = self._brick_overlay(columns)
        sprites = self.sprite_projector.project(camera, items, palette)
        minimap = self.minimap_projector.project(world, camera, items, palette)

        return Frame(self.screen_width, self.screen_height,
                     background, columns, mortar, sprites, minimap)

    def _build_background(self, camera, horizon):
        """Sky strip offset by yaw, floor gradient below the horizon"""
        sky_width = self.sky.shape[0]
        angle = math.atan2(camera.direction.y, camera.direction.x)
        sky_offset = math.floor(angle / (2 * math.pi) * sky_width)
        half_height = self.screen_height // 2

        return Background(
            self.sky, sky_offset,
            sky_y=horizon, sky_height=half_height,
            floor_y=half_height + horizon,
            floor_colors=(COLOR_FLOOR_FAR, COLOR_FLOOR_NEAR),
        )

    def _draw_walls(self, world, camera, horizon, palette):
        """Cast rays and shade columns in place"""
        c = self.raycaster.cast_all_rays(world.grid, camera)
        _numba_shade_columns(
            world.grid, self._get_lut(palette),
            int32(self.screen_height), float64(horizon),
            float64(self.fog_near), float64(self.fog_far),
            c.hit, c.side, c.map_x, c.map_y, c.perp,
            c.cell_code, c.column_height, c.draw_start, c.draw_end,
            c.intensity, c.brightness, c.rgb
        )
        return c

    def _brick_overlay(self, columns):
        """Fill the mortar buffer for this frame's near, tall columns"""
        m = self.mortar
        m.count = _numba_brick_overlay(
            columns.hit, columns.column_height, columns.perp, columns.wall_x,
            columns.draw_start, columns.draw_end,
            float64(self.fog_near), float64(self.fog_far),
            m.x, m.y, m.kind, m.alpha
        )
        return m
