"""
Minimap for 3D Mode - top-down view of the cells around the camera
"""

import math

from utils.colors import COLOR_MINIMAP_WALL, COLOR_MINIMAP_CAMERA, get_item_color
from utils.constants import (
    MINIMAP_WINDOW_RADIUS, MINIMAP_MIN_SIZE, MINIMAP_MAX_SIZE, MINIMAP_SCREEN_FRACTION,
    MINIMAP_MARKER_SIZE, MINIMAP_CAMERA_RADIUS, MINIMAP_HEADING_LENGTH, PALETTE_COLOR
)
from utils.helpers import clamp
from .frame import MinimapLayer


def minimap_size(screen_width):
    """Viewport side length for a given screen width"""
    return clamp(math.floor(screen_width * MINIMAP_SCREEN_FRACTION), MINIMAP_MIN_SIZE, MINIMAP_MAX_SIZE)


class MinimapProjector:
    """
    Builds minimap primitives; only a window of cells around the camera
    is read from the world
    """

    def __init__(self, screen_width, window_radius=MINIMAP_WINDOW_RADIUS):
        """
        Args:
            screen_width: Screen width the viewport size is derived from
            window_radius: Cells scanned on each side of the camera cell
        """
        self.window_radius = window_radius
        self.size = minimap_size(screen_width)
        self.camera_radius = MINIMAP_CAMERA_RADIUS

    def set_size(self, screen_width):
        """Recompute viewport size after a resize"""
        self.size = minimap_size(screen_width)

    def window(self, world, camera):
        """
        Scanned cell range [x0, x1) x [y0, y1), clamped to the grid

        Returns:
            (x0, y0, x1, y1)
        """
        cam_x = math.floor(camera.position.x)
        cam_y = math.floor(camera.position.y)
        r = self.window_radius
        return (
            max(0, cam_x - r),
            max(0, cam_y - r),
            min(world.width, cam_x + r),
            min(world.height, cam_y + r),
        )

    def project(self, world, camera, items, palette=PALETTE_COLOR):
        """
        Args:
            world: World
            camera: Camera
            items: Iterable of Item
            palette: Active palette for item markers

        Returns:
            MinimapLayer
        """
        scale = self.size / max(world.width, world.height)
        layer = MinimapLayer(self.size, scale)

        x0, y0, x1, y1 = self.window(world, camera)

        # Walls
        for y in range(y0, y1):
            for x in range(x0, x1):
                if world.cell_code(x, y) != 0:
                    layer.cells.append(((x * scale, y * scale, scale, scale), COLOR_MINIMAP_WALL))

        # Items
        half = MINIMAP_MARKER_SIZE / 2
        for item in items:
            if item.collected:
                continue
            ix, iy = math.floor(item.x), math.floor(item.y)
            if not (x0 <= ix < x1 and y0 <= iy < y1):
                continue
            rect = (item.x * scale - half, item.y * scale - half, MINIMAP_MARKER_SIZE, MINIMAP_MARKER_SIZE)
            layer.markers.append((rect, get_item_color(item.type, palette)))

        # Camera point and heading
        pos = camera.position
        tip = pos + camera.direction * MINIMAP_HEADING_LENGTH
        layer.camera_point = (pos.x * scale, pos.y * scale)
        layer.heading = ((pos.x * scale, pos.y * scale), (tip.x * scale, tip.y * scale))
        layer.camera_radius = self.camera_radius
        layer.camera_color = COLOR_MINIMAP_CAMERA

        return layer
