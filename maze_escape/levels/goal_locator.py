"""
Goal placement for generated mazes
"""

from maze_escape.core.logger import get_logger
from maze_escape.utils.grid import Coordinate, Grid


def locate_goal(grid: Grid) -> Coordinate:
    """
    Pick the goal cell: the bottom-most, then right-most interior path cell.

    Rows are scanned from height-2 down to 1 and columns from width-2 down
    to 1; the first path cell wins. Falls back to the far corner cell when
    the interior holds no path at all.
    """
    for y in range(grid.height - 2, 0, -1):
        for x in range(grid.width - 2, 0, -1):
            if grid.is_path(x, y):
                return (x, y)

    fallback = (grid.width - 2, grid.height - 2)
    get_logger().warning(f"No interior path cell found, using fallback goal {fallback}")
    return fallback
