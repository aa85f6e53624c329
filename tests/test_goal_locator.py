"""
Tests for goal placement
"""

from maze_escape.levels.goal_locator import locate_goal
from maze_escape.levels.maze_generator import generate_maze
from maze_escape.utils.grid import Grid

from helpers import corridor_grid

def test_goal_in_corridor():
    """Test the goal is the bottom-most, right-most path cell."""
    assert locate_goal(corridor_grid()) == (5, 3)

def test_row_beats_column():
    """Test a higher row index wins over a further right column."""
    grid = Grid.from_rows([
        "#######",
        "#....##",
        "#.#####",
        "#.#####",
        "#######",
    ])
    assert locate_goal(grid) == (1, 3)

def test_goal_is_deterministic():
    grid = generate_maze(21, 21, seed=17)
    first = locate_goal(grid)
    assert all(locate_goal(grid) == first for _ in range(5))

def test_goal_on_generated_maze():
    """Test the goal of a full maze lands on the far lattice corner."""
    for seed in range(10):
        grid = generate_maze(21, 21, seed=seed)
        goal = locate_goal(grid)
        assert grid.is_path(*goal)
        assert goal == (19, 19)

def test_fallback_without_interior_path():
    """Test the far corner is returned when nothing is carved."""
    assert locate_goal(Grid(9, 7)) == (7, 5)
