"""
Grid storage for maze tiles, plus coordinate and direction helpers
"""

from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

Coordinate = Tuple[int, int]


class Tile(Enum):
    """State of a single maze cell."""
    WALL = 0
    PATH = 1


class Direction(Enum):
    """Unit step on the grid. Row index grows upward, so UP is +y."""
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, pos: Coordinate) -> Coordinate:
        """Coordinate one cell away from pos in this direction."""
        return (pos[0] + self.dx, pos[1] + self.dy)


# Tie-break when several directions are held during one admitted step
DIRECTION_PRIORITY = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Grid:
    """
    Fixed-size rectangle of tiles, indexed by (x, y) coordinates.
    Backed by a numpy array of shape (height, width); every cell starts as a wall.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.tiles = np.full((height, width), Tile.WALL.value, dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, x: int, y: int) -> bool:
        """True for cells strictly inside the outer wall ring."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def get(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return Tile(int(self.tiles[y, x]))

    def set(self, x: int, y: int, tile: Tile):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        if self.frozen:
            raise ValueError("Grid is read-only; copy() it to edit")
        self.tiles[y, x] = tile.value

    @property
    def frozen(self) -> bool:
        return not self.tiles.flags.writeable

    def freeze(self) -> 'Grid':
        """Make the tiles read-only. Copies of a frozen grid are writable."""
        self.tiles.setflags(write=False)
        return self

    def is_path(self, x: int, y: int) -> bool:
        """Check walkability; out-of-range coordinates are never path."""
        return self.in_bounds(x, y) and self.tiles[y, x] == Tile.PATH.value

    def path_cells(self) -> Iterator[Coordinate]:
        ys, xs = np.nonzero(self.tiles == Tile.PATH.value)
        for x, y in zip(xs.tolist(), ys.tolist()):
            yield (x, y)

    def count(self, tile: Tile) -> int:
        return int(np.count_nonzero(self.tiles == tile.value))

    def copy(self) -> 'Grid':
        clone = Grid(self.width, self.height)
        clone.tiles = self.tiles.copy()
        return clone

    def to_rows(self) -> List[str]:
        """Text dump, '#' for walls and '.' for paths, row 0 first."""
        return [
            "".join("." if value == Tile.PATH.value else "#" for value in row)
            for row in self.tiles.tolist()
        ]

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Grid':
        """Build a grid from the text form produced by to_rows()."""
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Rows must be non-empty and of equal length")
        grid = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == ".":
                    grid.tiles[y, x] = Tile.PATH.value
                elif char != "#":
                    raise ValueError(f"Unknown tile character {char!r} at ({x}, {y})")
        return grid

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return False
        return np.array_equal(self.tiles, other.tiles)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, paths={self.count(Tile.PATH)})"
