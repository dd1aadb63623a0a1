"""
Sprite projection - item billboards in screen space
"""

import math

from utils.colors import get_item_color
from utils.constants import (
    SPRITE_VISIBLE_RADIUS, SPRITE_MIN_DEPTH, SPRITE_MIN_SIZE, SPRITE_SCALE, PALETTE_COLOR
)
from utils.helpers import is_finite, distance_squared
from .frame import SpritePlacement


class SpriteProjector:
    """
    Projects uncollected items into screen space, farthest first
    """

    def __init__(self, screen_width, screen_height, visible_radius=SPRITE_VISIBLE_RADIUS):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.visible_radius = visible_radius

    def set_render_area(self, width, height):
        self.screen_width = width
        self.screen_height = height

    def project(self, camera, items, palette=PALETTE_COLOR):
        """
        Args:
            camera: Camera
            items: Iterable of Item (collected ones are skipped)
            palette: Active palette, selects marker colors

        Returns:
            list of SpritePlacement, back-to-front
        """
        px, py = camera.position.x, camera.position.y
        dir_x, dir_y = camera.direction.x, camera.direction.y
        plane_x, plane_y = camera.plane.x, camera.plane.y

        pending = [item for item in items if not item.collected]
        pending.sort(key=lambda item: distance_squared(px, py, item.x, item.y), reverse=True)

        det = plane_x * dir_y - dir_x * plane_y
        if det == 0:
            return []
        inv_det = 1.0 / det

        w, h = self.screen_width, self.screen_height
        placements = []
        for item in pending:
            dx = item.x - px
            dy = item.y - py

            if math.hypot(dx, dy) > self.visible_radius:
                continue

            tx = inv_det * (dir_y * dx - dir_x * dy)
            ty = inv_det * (-plane_y * dx + plane_x * dy)

            # Behind the camera
            if not is_finite(tx, ty) or ty <= SPRITE_MIN_DEPTH:
                continue

            screen_x = math.floor((w / 2) * (1 + tx / ty))
            size = abs(math.floor(h / ty)) * SPRITE_SCALE
            if size < SPRITE_MIN_SIZE:
                continue

            placements.append(SpritePlacement(
                screen_x, h / 2, size, item.type,
                item.get_glyph(), get_item_color(item.type, palette), ty
            ))

        return placements
