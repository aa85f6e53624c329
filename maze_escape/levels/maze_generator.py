"""
Maze Escape - Procedural Maze Generator
Randomized depth-first carving over the odd interior lattice
"""

import os
import random
from typing import Iterator, List, Optional, Tuple

from maze_escape.core.constants import MAZE_HEIGHT, MAZE_WIDTH, MIN_MAZE_SIZE, START_POS
from maze_escape.core.logger import get_logger
from maze_escape.utils.grid import Coordinate, Grid, Tile

# Lattice neighbours sit two cells away; the cell in between is the wall to knock out
CARVE_STEPS: Tuple[Tuple[int, int], ...] = ((2, 0), (-2, 0), (0, 2), (0, -2))


class MazeGenerationError(RuntimeError):
    """Raised when a maze cannot be produced at all."""


class MazeGenerator:
    """
    Recursive backtracking ("carving") maze generator.

    The carved cells form a spanning tree over every odd/odd interior cell:
    each cell is entered from exactly one parent and never revisited, so any
    two path cells are joined by exactly one simple path. The outer ring of
    the grid is never touched.

    The recursion is driven by an explicit stack of frames, each holding a
    cell and the directions it has not tried yet, so large mazes do not hit
    Python's recursion limit. Directions are shuffled once per cell on entry,
    which visits cells in the same order a recursive carve would.
    """

    def __init__(self, width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
            raise ValueError(f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {width}x{height}")
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(f"Maze dimensions must be odd, got {width}x{height}")

        self.width = width
        self.height = height
        self.seed = seed
        self.rng = rng if rng is not None else self._make_rng(seed)

        self.grid: Optional[Grid] = None
        self.carve_count = 0

    @staticmethod
    def _make_rng(seed: Optional[int]) -> random.Random:
        if seed is not None:
            return random.Random(seed)
        try:
            entropy = int.from_bytes(os.urandom(8), "big")
        except NotImplementedError as e:
            raise MazeGenerationError("No system entropy source available for maze generation") from e
        return random.Random(entropy)

    def _check_start(self, start: Coordinate):
        x, y = start
        if not (0 < x < self.width - 1 and 0 < y < self.height - 1):
            raise ValueError(f"Start {start} must be an interior cell")
        if x % 2 == 0 or y % 2 == 0:
            raise ValueError(f"Start {start} must have odd coordinates")

    def _shuffled_steps(self) -> Iterator[Tuple[int, int]]:
        steps: List[Tuple[int, int]] = list(CARVE_STEPS)
        self.rng.shuffle(steps)
        return iter(steps)

    def generate(self, start: Coordinate = START_POS) -> Grid:
        """Carve a fresh maze starting at `start` and return its grid."""
        self._check_start(start)
        if self.rng is None:
            raise MazeGenerationError("Maze generator has no random source")

        grid = Grid(self.width, self.height)
        grid.set(start[0], start[1], Tile.PATH)
        carves = 0

        stack = [(start, self._shuffled_steps())]
        while stack:
            (x, y), steps = stack[-1]

            for dx, dy in steps:
                nx, ny = x + dx, y + dy
                if not grid.is_interior(nx, ny):
                    continue
                if grid.get(nx, ny) == Tile.PATH:
                    continue

                grid.set(nx, ny, Tile.PATH)
                grid.set(x + dx // 2, y + dy // 2, Tile.PATH)
                carves += 1
                stack.append(((nx, ny), self._shuffled_steps()))
                break
            else:
                # Every direction tried, backtrack
                stack.pop()

        # Finished mazes are read-only so holders cannot move walls under the player
        self.grid = grid.freeze()
        self.carve_count = carves
        get_logger().debug(
            f"Generated {self.width}x{self.height} maze from {start} "
            f"(seed={self.seed}, carves={carves})"
        )
        return grid


def generate_maze(width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT,
                  start: Coordinate = START_POS,
                  rng: Optional[random.Random] = None,
                  seed: Optional[int] = None) -> Grid:
    """Factory function to carve a single maze."""
    return MazeGenerator(width, height, rng=rng, seed=seed).generate(start)
