import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import random

import numpy as np
import pytest

from game.world import World


def make_grid(width, height, open_cells):
    """All-wall grid with the given (x, y) cells opened"""
    grid = np.ones((height, width), dtype=np.int8)
    for x, y in open_cells:
        grid[y, x] = 0
    return grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def corridor_world():
    """Single open cell at (1, 1) boxed in by walls"""
    return World.from_grid(make_grid(3, 3, [(1, 1)]), (1.5, 1.5))


@pytest.fixture
def open_world():
    """40x40 grid with a solid border and an open interior"""
    grid = np.zeros((40, 40), dtype=np.int8)
    grid[0, :] = 1
    grid[-1, :] = 1
    grid[:, 0] = 1
    grid[:, -1] = 1
    return World.from_grid(grid, (20.5, 20.5))
