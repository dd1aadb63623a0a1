"""
Pygame rasterizer - draws a Frame onto a surface
"""

import math

import pygame
import pygame.surfarray

from utils.colors import COLOR_BG, COLOR_MINIMAP_BG, COLOR_MORTAR_V, COLOR_MORTAR_H
from utils.constants import ITEM_COIN, MINIMAP_MARGIN, MORTAR_VERTICAL
from utils.helpers import color_lerp


def _to_rect(rect):
    """Float (x, y, w, h) to a pixel Rect at least 1 px wide"""
    x, y, w, h = rect
    return pygame.Rect(int(x), int(y), max(1, math.ceil(w)), max(1, math.ceil(h)))

class PygameRasterizer:
    """
    Owns the cached surfaces (scaled sky, floor gradient, sprite shapes);
    everything else comes from the Frame
    """

    def __init__(self):
        self._sky_source = None
        self._sky_scaled = None
        self._floor = None
        self._sprite_cache = {}
        self._minimap_surface = None

    def draw(self, surface, frame):
        """
        Rasterize one frame

        Args:
            surface: pygame.Surface sized frame.width x frame.height
            frame: Frame from Renderer3D.render
        """
        surface.fill(COLOR_BG)
        self._draw_background(surface, frame)
        self._draw_columns(surface, frame.columns)
        self._draw_mortar(surface, frame)
        self._draw_sprites(surface, frame.sprites)
        self._draw_minimap(surface, frame)

    def _draw_background(self, surface, frame):
        bg = frame.background
        w = frame.width

        # Sky: one pre-scaled copy, blitted twice to wrap around
        if (self._sky_source is not bg.sky or self._sky_scaled is None
                or self._sky_scaled.get_size() != (w, bg.sky_height)):
            sky_surface = pygame.surfarray.make_surface(bg.sky)
            self._sky_scaled = pygame.transform.scale(sky_surface, (w, max(1, bg.sky_height)))
            self._sky_source = bg.sky

        shift = (bg.sky_offset * w // bg.sky_width) % w
        surface.blit(self._sky_scaled, (-shift, bg.sky_y))
        if shift:
            surface.blit(self._sky_scaled, (w - shift, bg.sky_y))

        # Floor gradient
        floor_h = frame.height - frame.height // 2
        if self._floor is None or self._floor.get_size() != (w, floor_h):
            self._floor = self._build_floor(w, floor_h, bg.floor_colors)
        surface.blit(self._floor, (0, bg.floor_y))

    @staticmethod
    def _build_floor(width, height, colors):
        """Vertical gradient from the horizon color to the near color"""
        floor = pygame.Surface((width, max(1, height)))
        far, near = colors
        for y in range(height):
            t = y / max(1, height - 1)
            pygame.draw.line(floor, color_lerp(far, near, t), (0, y), (width - 1, y))
        return floor

    def _draw_columns(self, surface, columns):
        for x in columns.visible_columns():
            start = int(columns.draw_start[x])
            end = int(columns.draw_end[x])
            if end <= start:
                continue
            r, g, b = columns.rgb[x]
            surface.fill((int(r), int(g), int(b)), (int(x), start, 1, end - start))

    def _draw_mortar(self, surface, frame):
        mortar = frame.mortar
        rgb = frame.columns.rgb
        for i in range(mortar.count):
            x = int(mortar.x[i])
            y = int(mortar.y[i])
            r, g, b = rgb[x]
            base = (int(r), int(g), int(b))
            if mortar.kind[i] == MORTAR_VERTICAL:
                color = color_lerp(base, COLOR_MORTAR_V, float(mortar.alpha[i]))
                surface.fill(color, (x, y - 6, 1, 12))
            else:
                color = color_lerp(base, COLOR_MORTAR_H, float(mortar.alpha[i]))
                surface.fill(color, (x, y, 1, 1))

    def _get_sprite_surface(self, item_type, color):
        """Pre-rendered sprite surface for fast blitting"""
        key = (item_type, color)
        if key not in self._sprite_cache:
            size = 64
            sprite = pygame.Surface((size, size), pygame.SRCALPHA)
            if item_type == ITEM_COIN:
                pygame.draw.circle(sprite, color, (size // 2, size // 2), size // 2 - 2)
                pygame.draw.circle(sprite, (0, 0, 0), (size // 2, size // 2), size // 4, 2)
            else:
                # Key head, shaft and teeth
                pygame.draw.circle(sprite, color, (size // 2, size // 4), size // 5)
                pygame.draw.rect(sprite, color, (size // 2 - 3, size // 3, 6, size // 2))
                pygame.draw.rect(sprite, color, (size // 2, size * 2 // 3, size // 6, 4))
            self._sprite_cache[key] = sprite
        return self._sprite_cache[key]

    def _draw_sprites(self, surface, sprites):
        """Painter's order: placements arrive farthest first"""
        for sprite in sprites:
            size = int(sprite.size)
            if size <= 0:
                continue
            scaled = pygame.transform.scale(self._get_sprite_surface(sprite.type, sprite.color), (size, size))
            surface.blit(scaled, (sprite.screen_x - size // 2, int(sprite.screen_y) - size // 2))

    def _draw_minimap(self, surface, frame):
        layer = frame.minimap
        if layer is None:
            return

        if self._minimap_surface is None or self._minimap_surface.get_width() != layer.size:
            self._minimap_surface = pygame.Surface((layer.size, layer.size))
        mm = self._minimap_surface
        mm.fill(COLOR_MINIMAP_BG)

        for rect, color in layer.cells:
            pygame.draw.rect(mm, color, _to_rect(rect))
        for rect, color in layer.markers:
            pygame.draw.rect(mm, color, _to_rect(rect))

        if layer.camera_point is not None:
            pygame.draw.circle(mm, layer.camera_color, layer.camera_point, layer.camera_radius)
            start, end = layer.heading
            pygame.draw.line(mm, layer.camera_color, start, end)

        surface.blit(mm, (frame.width - layer.size - MINIMAP_MARGIN, MINIMAP_MARGIN))
