"""
Core maze functions - grid graph queries over a cell-code grid
"""

from collections import deque

from utils.constants import CELL_OPEN, NEIGHBOR_DIRS


def in_bounds(grid, x, y):
    """Check if coordinates are within grid bounds"""
    height, width = grid.shape
    return 0 <= x < width and 0 <= y < height


def is_open(grid, x, y):
    """Open cell inside the grid"""
    return in_bounds(grid, x, y) and grid[y, x] == CELL_OPEN


def neighbors_open(grid, x, y):
    """Get list of 4-connected open neighbour cells"""
    res = []
    for dx, dy in NEIGHBOR_DIRS:
        nx, ny = x + dx, y + dy
        if is_open(grid, nx, ny):
            res.append((nx, ny))
    return res


def open_cells(grid):
    """All open (x, y) coordinates, row by row"""
    height, width = grid.shape
    return [(x, y) for y in range(height) for x in range(width) if grid[y, x] == CELL_OPEN]


def bfs_reachable(grid, start):
    """
    Cells reachable from start through 4-connected open cells

    Returns:
        set of (x, y); empty if start itself is not open
    """
    if not is_open(grid, start[0], start[1]):
        return set()

    q = deque([start])
    seen = {start}
    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def lattice_stats(grid):
    """
    Count carved lattice cells and connectors

    Lattice cells have both coordinates odd; connectors are open cells with
    exactly one even coordinate.

    Returns:
        (nodes, connectors)
    """
    nodes = 0
    connectors = 0
    for x, y in open_cells(grid):
        if x % 2 == 1 and y % 2 == 1:
            nodes += 1
        elif (x % 2) != (y % 2):
            connectors += 1
    return nodes, connectors


def border_is_solid(grid):
    """True if every border cell is a wall"""
    height, width = grid.shape
    for x in range(width):
        if grid[0, x] == CELL_OPEN or grid[height - 1, x] == CELL_OPEN:
            return False
    for y in range(height):
        if grid[y, 0] == CELL_OPEN or grid[y, width - 1] == CELL_OPEN:
            return False
    return True
