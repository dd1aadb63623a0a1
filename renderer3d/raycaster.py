"""
Raycaster Engine - DDA (Digital Differential Analyzer) algorithm
Wolfenstein3D style raycasting over a cell-code grid
Optimized with Numba JIT compilation
"""

import math
import numpy as np
from numba import njit, float64, int32
from utils.constants import MIN_PERP_DIST


@njit(cache=True, error_model="numpy")
def _numba_cast_columns(grid, px, py, dir_x, dir_y, plane_x, plane_y,
                        num_rays, hit, side, map_xs, map_ys, perp, wall_x):
    """
    Cast one ray per screen column (Numba JIT compiled)

    Axis-aligned rays get an infinite delta distance from the IEEE division;
    the comparison below then never steps that axis.

    Args:
        grid: 2D numpy int8 array of cell codes, indexed [y, x]
        px, py: Camera position
        dir_x, dir_y: View direction
        plane_x, plane_y: Camera plane
        num_rays: Number of columns
        hit, side, map_xs, map_ys, perp, wall_x: Output arrays (num_rays,)
    """
    rows = grid.shape[0]
    cols = grid.shape[1]

    for x in range(num_rays):
        camera_x = 2.0 * x / num_rays - 1.0
        ray_x = dir_x + plane_x * camera_x
        ray_y = dir_y + plane_y * camera_x

        map_x = int32(math.floor(px))
        map_y = int32(math.floor(py))

        delta_x = abs(1.0 / ray_x)
        delta_y = abs(1.0 / ray_y)

        if ray_x < 0:
            step_x = int32(-1)
            side_dist_x = (px - map_x) * delta_x
        else:
            step_x = int32(1)
            side_dist_x = (map_x + 1.0 - px) * delta_x

        if ray_y < 0:
            step_y = int32(-1)
            side_dist_y = (py - map_y) * delta_y
        else:
            step_y = int32(1)
            side_dist_y = (map_y + 1.0 - py) * delta_y

        found = False
        s = int32(0)
        while True:
            # Ties step X
            if side_dist_x <= side_dist_y:
                side_dist_x += delta_x
                map_x += step_x
                s = int32(0)
            else:
                side_dist_y += delta_y
                map_y += step_y
                s = int32(1)

            # Leaving the grid is a miss
            if map_x < 0 or map_x >= cols or map_y < 0 or map_y >= rows:
                break

            if grid[map_y, map_x] != 0:
                found = True
                break

        hit[x] = found
        side[x] = s
        map_xs[x] = map_x
        map_ys[x] = map_y

        if not found:
            perp[x] = np.inf
            wall_x[x] = 0.0
            continue

        # Perpendicular distance (no fisheye)
        if s == 0:
            d = (map_x - px + (1 - step_x) / 2.0) / ray_x
        else:
            d = (map_y - py + (1 - step_y) / 2.0) / ray_y
        if d < MIN_PERP_DIST:
            d = MIN_PERP_DIST
        perp[x] = d

        # Hit point along the wall face
        if s == 0:
            u = py + d * ray_y
        else:
            u = px + d * ray_x
        wall_x[x] = u - math.floor(u)


class ColumnBuffer:
    """
    Preallocated per-column results, reused every frame

    Attributes:
        hit: bool, column has a wall
        side: 0 = X-facing, 1 = Y-facing
        map_x, map_y: Hit cell
        cell_code: Cell code of the hit cell
        perp: Perpendicular wall distance
        wall_x: Fractional hit position along the wall (U)
        column_height: floor(screen_height / perp)
        draw_start, draw_end: Clamped vertical range
        intensity: falloff x side factor
        brightness: floor(base x intensity)
        rgb: (num_rays, 3) shaded color
    """

    def __init__(self, num_rays):
        self.num_rays = num_rays
        self.hit = np.zeros(num_rays, dtype=np.bool_)
        self.side = np.zeros(num_rays, dtype=np.int32)
        self.map_x = np.zeros(num_rays, dtype=np.int32)
        self.map_y = np.zeros(num_rays, dtype=np.int32)
        self.cell_code = np.zeros(num_rays, dtype=np.int32)
        self.perp = np.zeros(num_rays, dtype=np.float64)
        self.wall_x = np.zeros(num_rays, dtype=np.float64)
        self.column_height = np.zeros(num_rays, dtype=np.int32)
        self.draw_start = np.zeros(num_rays, dtype=np.int32)
        self.draw_end = np.zeros(num_rays, dtype=np.int32)
        self.intensity = np.zeros(num_rays, dtype=np.float64)
        self.brightness = np.zeros(num_rays, dtype=np.int32)
        self.rgb = np.zeros((num_rays, 3), dtype=np.uint8)

    def __len__(self):
        return self.num_rays

    def visible_columns(self):
        """Indices of columns that hit a wall"""
        return np.flatnonzero(self.hit)


class Raycaster:
    """
    DDA Raycasting engine for 3D maze rendering
    Uses Numba JIT for high-performance ray casting
    """

    def __init__(self, num_rays=320):
        self.num_rays = num_rays
        self.columns = ColumnBuffer(num_rays)

    def set_resolution(self, num_rays):
        """Update ray count for different screen widths"""
        if num_rays != self.num_rays:
            self.num_rays = num_rays
            self.columns = ColumnBuffer(num_rays)

    def cast_all_rays(self, grid, camera):
        """
        Cast all rays for the screen using Numba JIT

        Args:
            grid: 2D numpy int8 array, indexed [y, x]
            camera: Camera

        Returns:
            ColumnBuffer with hit, side, map_x/map_y, perp and wall_x filled
        """
        c = self.columns
        pos, d, p = camera.position, camera.direction, camera.plane
        _numba_cast_columns(
            grid,
            float64(pos.x), float64(pos.y),
            float64(d.x), float64(d.y),
            float64(p.x), float64(p.y),
            self.num_rays,
            c.hit, c.side, c.map_x, c.map_y, c.perp, c.wall_x
        )
        return c
