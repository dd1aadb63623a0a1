"""
Collectible items
Coins and keys placed on open cells, picked up by walking over them
"""

import logging

from utils.colors import ITEM_GLYPHS
from utils.constants import (
    ITEM_COIN, ITEM_KEY, ITEM_TYPES, COIN_COUNT, KEY_COUNT, ITEM_SPAWN_MARGIN
)
from utils.helpers import distance

logger = logging.getLogger(__name__)


class Item:
    """
    Single collectible
    """
    def __init__(self, x, y, item_type):
        """
        Args:
            x, y: Continuous position (cell centers when spawned)
            item_type: 'coin' or 'key'
        """
        if item_type not in ITEM_TYPES:
            raise ValueError(f"unknown item type: {item_type!r}")
        self.x = x
        self.y = y
        self.type = item_type
        self.collected = False

    def is_coin(self):
        return self.type == ITEM_COIN

    def is_key(self):
        return self.type == ITEM_KEY

    def get_glyph(self):
        """Icon drawn for this item"""
        return ITEM_GLYPHS[self.type]

    def distance_to(self, x, y):
        return distance(self.x, self.y, x, y)

    def collect(self):
        """
        Mark as collected

        Returns:
            True on the first call, False if already collected
        """
        if self.collected:
            return False
        self.collected = True
        return True

    def __repr__(self):
        return f"Item({self.type}, ({self.x:.1f}, {self.y:.1f}), collected={self.collected})"


class ItemManager:
    """
    Manages the item collection of the current maze
    """
    def __init__(self):
        self.items = []
        self.coins_collected = 0
        self.keys_collected = 0

    def spawn(self, world, rng, coin_count=COIN_COUNT, key_count=KEY_COUNT):
        """
        Replace all items with a fresh set on open cells reachable from start

        Cells at least ITEM_SPAWN_MARGIN away from the border are preferred;
        small mazes fall back to every reachable cell. The start cell is
        left free when any other cell exists.

        Args:
            world: World to place items in
            rng: random.Random
            coin_count, key_count: How many of each type
        """
        self.clear()

        sx, sy = world.start_position
        start_cell = (int(sx), int(sy))
        reachable = sorted(world.reachable_cells())
        candidates = [c for c in reachable if c != start_cell] or reachable

        w, h = world.width, world.height
        m = ITEM_SPAWN_MARGIN
        inner = [(x, y) for x, y in candidates if m <= x < w - m and m <= y < h - m]
        if inner:
            candidates = inner

        if not candidates:
            logger.warning("No open cells to place items in")
            return self.items

        for item_type, count in ((ITEM_COIN, coin_count), (ITEM_KEY, key_count)):
            for _ in range(count):
                cx, cy = rng.choice(candidates)
                self.items.append(Item(cx + 0.5, cy + 0.5, item_type))

        logger.debug("Spawned %d items", len(self.items))
        return self.items

    def collect_near(self, x, y, radius):
        """
        Collect every uncollected item strictly within radius of (x, y)

        Returns:
            List of items collected by this call
        """
        collected = []
        for item in self.items:
            if item.collected or item.distance_to(x, y) >= radius:
                continue
            if item.collect():
                if item.is_coin():
                    self.coins_collected += 1
                else:
                    self.keys_collected += 1
                collected.append(item)
        return collected

    def get_uncollected_items(self):
        """Get list of uncollected items"""
        return [item for item in self.items if not item.collected]

    def count(self, item_type):
        return sum(1 for item in self.items if item.type == item_type)

    def clear(self):
        """Remove all items and reset counters"""
        self.items = []
        self.coins_collected = 0
        self.keys_collected = 0

    def __repr__(self):
        return f"ItemManager(items={len(self.items)}, uncollected={len(self.get_uncollected_items())})"
