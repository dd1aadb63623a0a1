"""
Game session - input intents and the single owner of world, camera and items
"""

import logging
import random
from collections import deque
from enum import Enum, auto

from entities.item import ItemManager
from game.camera import Camera
from game.collision import CollisionHandler
from game.world import World
from utils.constants import PALETTE_COLOR, PALETTE_MONOCHROME
from utils.vector2 import Vector2

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Input intents"""
    MOVE_FORWARD = auto()
    MOVE_BACKWARD = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    ROTATE = auto()
    LOOK = auto()
    REGENERATE_MAZE = auto()
    RESET_CAMERA = auto()
    TOGGLE_PALETTE = auto()


MOVEMENT_INTENTS = {
    Intent.MOVE_FORWARD: Camera.move_forward,
    Intent.MOVE_BACKWARD: Camera.move_backward,
    Intent.STRAFE_LEFT: Camera.strafe_left,
    Intent.STRAFE_RIGHT: Camera.strafe_right,
}


class IntentQueue:
    """
    FIFO of (intent, amount) pairs posted by input handlers
    """
    def __init__(self):
        self._queue = deque()

    def post(self, intent, amount=0.0):
        """
        Queue an intent

        Args:
            intent: Intent value
            amount: Signed units for ROTATE / LOOK, ignored otherwise
        """
        if not isinstance(intent, Intent):
            raise ValueError(f"not an intent: {intent!r}")
        self._queue.append((intent, amount))

    def drain(self):
        """Remove and return every queued intent in posting order"""
        pending = list(self._queue)
        self._queue.clear()
        return pending

    def __len__(self):
        return len(self._queue)


class GameSession:
    """
    Owns the world, camera and items; applies intents once per tick
    """
    def __init__(self, config):
        """
        Args:
            config: EngineConfig
        """
        self.config = config
        self.rng = random.Random(config.seed)
        self.intents = IntentQueue()

        self.world = World(config.grid_width, config.grid_height,
                           rng=self.rng, decorations=config.decoration_count)
        self.camera = Camera.from_config(self.world.start_position, config)
        self.items = ItemManager()
        self.collision_handler = CollisionHandler(config.item_collection_radius)

        self.palette = PALETTE_COLOR
        self.steps = 0
        self.frames = 0

        self._spawn_items()

    def _spawn_items(self):
        self.items.spawn(self.world, self.rng,
                         coin_count=self.config.coin_count,
                         key_count=self.config.key_count)

    def apply(self, intent, amount=0.0):
        """
        Apply a single intent immediately

        Returns:
            Collision result dict for movement intents, otherwise None
        """
        move = MOVEMENT_INTENTS.get(intent)
        if move is not None:
            move(self.camera, self.world)
            return self.collision_handler.check_camera_position(self.camera, self.items)

        if intent == Intent.ROTATE:
            self.camera.rotate(amount)
        elif intent == Intent.LOOK:
            self.camera.look(amount)
        elif intent == Intent.REGENERATE_MAZE:
            self.regenerate()
        elif intent == Intent.RESET_CAMERA:
            self.reset_camera()
        elif intent == Intent.TOGGLE_PALETTE:
            self.toggle_palette()
        return None

    def tick(self, renderer=None):
        """
        Drain queued intents, apply them in order and build one frame

        A tick whose movement changed the camera position counts as one step.

        Args:
            renderer: Renderer3D, or None to advance state only

        Returns:
            Frame from the renderer, or None without one
        """
        start = None
        for intent, amount in self.intents.drain():
            if intent in MOVEMENT_INTENTS:
                if start is None:
                    start = Vector2(self.camera.position)
            elif intent in (Intent.REGENERATE_MAZE, Intent.RESET_CAMERA):
                start = None
            self.apply(intent, amount)

        if start is not None and self.camera.position != start:
            self.steps += 1

        self.frames += 1
        if renderer is None:
            return None
        return renderer.render(self.world, self.camera, self.items.items, self.palette)

    def regenerate(self):
        """New maze, camera back at start, fresh items; palette is kept"""
        self.world.regenerate()
        self.camera = Camera.from_config(self.world.start_position, self.config)
        self._spawn_items()
        self.steps = 0
        logger.info("New maze generated")

    def reset_camera(self):
        """Camera back to the start of the current maze"""
        self.camera.reset(self.world.start_position)

    def toggle_palette(self):
        """Switch between color and monochrome rendering"""
        if self.palette == PALETTE_COLOR:
            self.palette = PALETTE_MONOCHROME
        else:
            self.palette = PALETTE_COLOR
        logger.debug("Palette: %s", self.palette)

    def get_stats(self):
        """Counters shown in the window caption"""
        return {
            'steps': self.steps,
            'collisions': self.camera.collisions,
            'coins': self.items.coins_collected,
            'keys': self.items.keys_collected,
            'palette': self.palette,
        }
