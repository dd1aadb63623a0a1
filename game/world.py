"""
World - owns the maze grid and start position, answers wall queries
"""

import logging
import random

import numpy as np

from maze.generator import MazeGenerator
from maze import maze_core
from utils.constants import CELL_OPEN, CELL_WALL, DECORATION_COUNT

logger = logging.getLogger(__name__)


class World:
    """
    Grid world; coordinates outside the grid read as plain wall
    """

    def __init__(self, width, height, rng=None, decorations=DECORATION_COUNT):
        """
        Args:
            width, height: Grid dimensions
            rng: random.Random used for every regeneration
            decorations: Decorative wall attempts per maze
        """
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.generator = MazeGenerator(width, height, decorations)

        self.grid = None
        self.start_position = None
        self.regenerate()

    @classmethod
    def from_grid(cls, grid, start_position):
        """
        Wrap an explicit grid (fixed levels, tests)

        Args:
            grid: 2D array-like of cell codes indexed [y, x]
            start_position: (x, y) continuous start
        """
        world = cls.__new__(cls)
        world.grid = np.asarray(grid, dtype=np.int8)
        world.height, world.width = world.grid.shape
        world.rng = random.Random()
        world.generator = None
        world.start_position = (float(start_position[0]), float(start_position[1]))
        return world

    def regenerate(self):
        """Replace grid and start with a freshly generated maze"""
        if self.generator is None:
            raise RuntimeError("world was built from a fixed grid and cannot regenerate")
        self.grid, self.start_position = self.generator.generate(self.rng)
        logger.info("World regenerated (%dx%d)", self.width, self.height)

    def cell_code(self, x, y):
        """Cell code at (x, y); 1 for any out-of-range coordinate"""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return CELL_WALL
        return int(self.grid[y, x])

    def is_wall(self, x, y):
        """True unless (x, y) is an open cell"""
        return self.cell_code(x, y) != CELL_OPEN

    def open_cells(self):
        """All open cell coordinates"""
        return maze_core.open_cells(self.grid)

    def reachable_cells(self):
        """Open cells connected to the start cell"""
        sx, sy = self.start_position
        return maze_core.bfs_reachable(self.grid, (int(sx), int(sy)))

    def __repr__(self):
        return f"World({self.width}x{self.height}, start={self.start_position})"
