"""
Game configuration - title, version and engine tuning options
"""

import logging

from utils.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT,
    MIN_GRID_SIZE, FOV_PLANE_MAGNITUDE, MOVE_SPEED, ROT_SPEED, BOB_AMPLITUDE,
    FOG_NEAR_FLOOR, FOG_FAR_DISTANCE, SPRITE_VISIBLE_RADIUS,
    ITEM_COLLECTION_RADIUS, MINIMAP_WINDOW_RADIUS, COIN_COUNT, KEY_COUNT,
    DECORATION_COUNT
)

logger = logging.getLogger(__name__)

GAME_TITLE = "Maze Raycaster"
GAME_VERSION = "1.0.0"


class EngineConfig:
    """Tuning options for one game session"""

    OPTIONS = {
        'screen_width': SCREEN_WIDTH,
        'screen_height': SCREEN_HEIGHT,
        'grid_width': DEFAULT_GRID_WIDTH,
        'grid_height': DEFAULT_GRID_HEIGHT,
        'fov_plane_magnitude': FOV_PLANE_MAGNITUDE,
        'move_speed': MOVE_SPEED,
        'rot_speed': ROT_SPEED,
        'bob_amplitude': BOB_AMPLITUDE,
        'fog_near_floor': FOG_NEAR_FLOOR,
        'fog_far_distance': FOG_FAR_DISTANCE,
        'sprite_visible_radius': SPRITE_VISIBLE_RADIUS,
        'item_collection_radius': ITEM_COLLECTION_RADIUS,
        'minimap_window_radius': MINIMAP_WINDOW_RADIUS,
        'coin_count': COIN_COUNT,
        'key_count': KEY_COUNT,
        'decoration_count': DECORATION_COUNT,
        'seed': None,
    }

    def __init__(self, **kwargs):
        for key in kwargs:
            if key not in self.OPTIONS:
                logger.warning("Unknown config option ignored: %s", key)

        # Screen
        self.screen_width = kwargs.get('screen_width', SCREEN_WIDTH)
        self.screen_height = kwargs.get('screen_height', SCREEN_HEIGHT)

        # Maze size
        self.grid_width = kwargs.get('grid_width', DEFAULT_GRID_WIDTH)
        self.grid_height = kwargs.get('grid_height', DEFAULT_GRID_HEIGHT)
        self.decoration_count = kwargs.get('decoration_count', DECORATION_COUNT)

        # Camera
        self.fov_plane_magnitude = kwargs.get('fov_plane_magnitude', FOV_PLANE_MAGNITUDE)
        self.move_speed = kwargs.get('move_speed', MOVE_SPEED)
        self.rot_speed = kwargs.get('rot_speed', ROT_SPEED)
        self.bob_amplitude = kwargs.get('bob_amplitude', BOB_AMPLITUDE)

        # Fog (distance falloff)
        self.fog_near_floor = kwargs.get('fog_near_floor', FOG_NEAR_FLOOR)
        self.fog_far_distance = kwargs.get('fog_far_distance', FOG_FAR_DISTANCE)

        # Sprites and items
        self.sprite_visible_radius = kwargs.get('sprite_visible_radius', SPRITE_VISIBLE_RADIUS)
        self.item_collection_radius = kwargs.get('item_collection_radius', ITEM_COLLECTION_RADIUS)
        self.coin_count = kwargs.get('coin_count', COIN_COUNT)
        self.key_count = kwargs.get('key_count', KEY_COUNT)

        # Minimap
        self.minimap_window_radius = kwargs.get('minimap_window_radius', MINIMAP_WINDOW_RADIUS)

        # RNG seed (None = nondeterministic)
        self.seed = kwargs.get('seed', None)

        self._validate()

    def _validate(self):
        """Reject values the engine cannot work with"""
        if self.grid_width < MIN_GRID_SIZE or self.grid_height < MIN_GRID_SIZE:
            raise ValueError(
                f"grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, "
                f"got {self.grid_width}x{self.grid_height}"
            )
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen dimensions must be positive")

        positive = (
            'fov_plane_magnitude', 'move_speed', 'rot_speed',
            'fog_far_distance', 'sprite_visible_radius', 'item_collection_radius',
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        if not 0.0 <= self.fog_near_floor <= 1.0:
            raise ValueError("fog_near_floor must be within [0, 1]")
        if self.minimap_window_radius < 0:
            raise ValueError("minimap_window_radius must not be negative")
        if self.coin_count < 0 or self.key_count < 0 or self.decoration_count < 0:
            raise ValueError("item and decoration counts must not be negative")

    def __repr__(self):
        return (f"EngineConfig(grid={self.grid_width}x{self.grid_height}, "
                f"screen={self.screen_width}x{self.screen_height}, seed={self.seed})")
