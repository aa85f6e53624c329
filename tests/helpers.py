"""
Grid fixtures and graph checks shared by the tests
"""

from collections import deque

from maze_escape.utils.grid import Grid

# Single corridor from (1, 1) to the goal at (5, 3); row 0 is listed first.
CORRIDOR_ROWS = [
    "#######",
    "#.#...#",
    "#.#.#.#",
    "#...#.#",
    "#######",
]


def corridor_grid() -> Grid:
    return Grid.from_rows(CORRIDOR_ROWS)


def neighbours(grid: Grid, pos):
    x, y = pos
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        if grid.is_path(x + dx, y + dy):
            yield (x + dx, y + dy)


def flood_fill(grid: Grid, start):
    """Every path cell reachable from start by single orthogonal steps."""
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for nxt in neighbours(grid, pos):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def count_edges(grid: Grid) -> int:
    """Number of adjacent path-path pairs."""
    edges = 0
    for x, y in grid.path_cells():
        if grid.is_path(x + 1, y):
            edges += 1
        if grid.is_path(x, y + 1):
            edges += 1
    return edges
