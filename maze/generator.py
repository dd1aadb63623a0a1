"""
Maze generation - randomized backtracker over the odd sub-lattice
Carving uses an explicit stack so large mazes never hit the recursion limit
"""

import logging
import random

import numpy as np

from utils.constants import (
    CELL_OPEN, CELL_WALL, DECORATIVE_WALLS, CARVE_DIRS, MIN_GRID_SIZE,
    START_CELL, DECORATION_COUNT
)

logger = logging.getLogger(__name__)


class InvalidDimensions(ValueError):
    """Raised when a maze is requested smaller than 3x3"""


def idx(width, x, y):
    """Helper to get 1D index"""
    return y * width + x


def in_interior(width, height, x, y):
    """Check if coordinates are strictly inside the border"""
    return 0 < x < width - 1 and 0 < y < height - 1


def check_dimensions(width, height):
    """Fail fast on sizes the carver cannot handle"""
    if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
        raise InvalidDimensions(
            f"maze must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}"
        )


def _shuffled_dirs(rng):
    """Fisher-Yates shuffle of the four carve offsets"""
    dirs = list(CARVE_DIRS)
    rng.shuffle(dirs)
    return dirs


# ========== CARVER: DFS BACKTRACKER ==========

def carve(width, height, rng):
    """
    Carve a perfect maze (no decoration) with a depth-first backtracker

    Each frame on the stack is [x, y, shuffled_dirs, next_dir]; the RNG is
    consumed in the same order a recursive carve would consume it.

    Returns:
        numpy int8 array shape (height, width), indexed [y, x]
    """
    check_dimensions(width, height)

    cells = np.full(width * height, CELL_WALL, dtype=np.int8)
    visited = [False] * (width * height)

    sx, sy = START_CELL
    cells[idx(width, sx, sy)] = CELL_OPEN
    visited[idx(width, sx, sy)] = True
    stack = [[sx, sy, _shuffled_dirs(rng), 0]]

    while stack:
        frame = stack[-1]
        cx, cy, dirs, i = frame
        if i >= len(dirs):
            stack.pop()
            continue
        frame[3] = i + 1

        dx, dy = dirs[i]
        nx, ny = cx + dx, cy + dy
        if not in_interior(width, height, nx, ny) or visited[idx(width, nx, ny)]:
            continue

        # Open the connector, then descend into the neighbour
        cells[idx(width, cx + dx // 2, cy + dy // 2)] = CELL_OPEN
        cells[idx(width, nx, ny)] = CELL_OPEN
        visited[idx(width, nx, ny)] = True
        stack.append([nx, ny, _shuffled_dirs(rng), 0])

    return cells.reshape(height, width)


def decorate(grid, rng, count=DECORATION_COUNT, protected=(START_CELL,)):
    """
    Overwrite up to `count` random open interior cells with decorative walls

    Picking a cell that is already a wall is a silent no-op. Cells in
    `protected` are never overwritten.

    Returns:
        Number of cells actually decorated
    """
    height, width = grid.shape
    placed = 0
    for _ in range(count):
        x = rng.randrange(1, width - 1)
        y = rng.randrange(1, height - 1)
        if (x, y) in protected:
            continue
        if grid[y, x] == CELL_OPEN:
            grid[y, x] = rng.choice(DECORATIVE_WALLS)
            placed += 1
    return placed


def generate(width, height, rng=None, decorations=DECORATION_COUNT):
    """
    Generate a decorated maze

    Args:
        width, height: Grid size (>= 3)
        rng: random.Random instance (fresh one if None)
        decorations: Number of decoration attempts

    Returns:
        (grid, start_position) where start_position is the continuous
        center of the start cell
    """
    if rng is None:
        rng = random.Random()

    grid = carve(width, height, rng)
    placed = decorate(grid, rng, decorations)

    sx, sy = START_CELL
    logger.debug("Generated %dx%d maze, %d decorative walls", width, height, placed)
    return grid, (sx + 0.5, sy + 0.5)


class MazeGenerator:
    """
    Maze generator bound to fixed dimensions
    """

    def __init__(self, width, height, decorations=DECORATION_COUNT):
        check_dimensions(width, height)
        self.width = width
        self.height = height
        self.decorations = decorations

    def generate(self, rng=None):
        """Generate a fresh (grid, start_position) pair"""
        return generate(self.width, self.height, rng, self.decorations)

    def __repr__(self):
        return f"MazeGenerator({self.width}x{self.height}, decorations={self.decorations})"
