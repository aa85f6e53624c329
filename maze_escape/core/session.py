"""
Maze Escape - Game Session
Owns the maze, player and goal positions, the run clock, and the
Playing/Won state machine
"""

import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from maze_escape.core.constants import MAZE_HEIGHT, MAZE_WIDTH, MOVE_INTERVAL, START_POS
from maze_escape.core.logger import get_logger
from maze_escape.core.move_gate import MoveGate
from maze_escape.levels.goal_locator import locate_goal
from maze_escape.levels.maze_generator import MazeGenerator
from maze_escape.utils.grid import DIRECTION_PRIORITY, Coordinate, Direction, Grid


class SessionState(Enum):
    PLAYING = auto()
    WON = auto()


@dataclass(frozen=True)
class WinTime:
    """Run duration frozen at the moment the goal was reached."""
    seconds: int
    millis: int

    @classmethod
    def from_nanos(cls, elapsed_ns: int) -> 'WinTime':
        """Whole seconds plus the truncated millisecond remainder."""
        seconds, millis = divmod(max(0, elapsed_ns) // 1_000_000, 1000)
        return cls(seconds, millis)

    @classmethod
    def from_elapsed(cls, elapsed: float) -> 'WinTime':
        return cls.from_nanos(round(elapsed * 1_000_000_000))

    @property
    def total(self) -> float:
        return self.seconds + self.millis / 1000.0

    def __str__(self):
        return f"{self.seconds}.{self.millis:03d} seconds"


@dataclass(frozen=True, eq=False)
class SessionSnapshot:
    """
    Read-only view of a session handed to the renderer each frame.
    `generation` increases whenever the grid and goal are replaced.
    """
    grid: Grid
    player: Coordinate
    goal: Coordinate
    state: SessionState
    win_time: Optional[WinTime]
    generation: int


class GameSession:
    """
    A single maze run.

    Grid and goal are always produced together by one generation pass and
    are only ever replaced as a pair. The player position only changes
    through accepted moves and restarts, and always sits on a path cell.
    """

    def __init__(self, width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT,
                 start: Coordinate = START_POS,
                 move_interval: float = MOVE_INTERVAL,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None,
                 clock: Callable[[], int] = time.monotonic_ns):
        self.width = width
        self.height = height
        self.start = start
        self._clock = clock

        self.generator = MazeGenerator(width, height, rng=rng, seed=seed)
        self.gate = MoveGate(move_interval)

        self._grid: Grid = self.generator.generate(start)
        self._goal: Coordinate = locate_goal(self._grid)
        self._player: Coordinate = start
        self._state = SessionState.PLAYING
        self._win_time: Optional[WinTime] = None
        self._start_time = self._clock()
        self._generation = 1

        get_logger().info(f"Session started: {width}x{height} maze, goal at {self._goal}")

    # =========================================================================
    # READ-ONLY STATE
    # =========================================================================

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def player(self) -> Coordinate:
        return self._player

    @property
    def goal(self) -> Coordinate:
        return self._goal

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_won(self) -> bool:
        return self._state == SessionState.WON

    @property
    def win_time(self) -> Optional[WinTime]:
        return self._win_time

    @property
    def generation(self) -> int:
        return self._generation

    def elapsed(self) -> float:
        """Seconds since the run started; frozen once the goal is reached."""
        if self._win_time is not None:
            return self._win_time.total
        return (self._clock() - self._start_time) / 1_000_000_000

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            grid=self._grid,
            player=self._player,
            goal=self._goal,
            state=self._state,
            win_time=self._win_time,
            generation=self._generation,
        )

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def _change_state(self, new_state: SessionState):
        if self._state == new_state:
            return
        old_state = self._state
        self._state = new_state
        get_logger().info(f"State changed: {old_state.name} -> {new_state.name}")

    @staticmethod
    def select_direction(intents: Iterable[Direction]) -> Optional[Direction]:
        """Pick one direction from those held, Up > Down > Left > Right."""
        held = set(intents)
        for direction in DIRECTION_PRIORITY:
            if direction in held:
                return direction
        return None

    def apply_move(self, direction: Direction) -> bool:
        """
        Try to step the player one cell. Returns True if the move was accepted.

        Moves into walls or off the grid, and any move after winning, are
        ignored without raising.
        """
        if self._state != SessionState.PLAYING:
            return False

        target = direction.step(self._player)
        if not self._grid.is_path(*target):
            return False

        self._player = target
        if target == self._goal:
            self._win_time = WinTime.from_nanos(self._clock() - self._start_time)
            self._change_state(SessionState.WON)
            get_logger().info(f"Goal reached at {target} in {self._win_time}")
        return True

    def restart(self, seed: Optional[int] = None):
        """
        Replace the maze and reset the run. Valid from any state.

        A seed starts a new random stream for this and later mazes; without
        one the session keeps drawing from its current random source.
        """
        if seed is not None:
            self.generator = MazeGenerator(self.width, self.height, seed=seed)

        grid = self.generator.generate(self.start)
        goal = locate_goal(grid)

        self._grid, self._goal = grid, goal
        self._player = self.start
        self._win_time = None
        self._start_time = self._clock()
        self._generation += 1
        self.gate.reset()
        self._change_state(SessionState.PLAYING)

        get_logger().info(f"Session restarted: goal at {goal} (generation {self._generation})")

    def tick(self, dt: float, intents: Iterable[Direction] = (),
             restart_requested: bool = False) -> SessionSnapshot:
        """
        Run one frame: restart if asked, then gate, then move and win check.

        While won, the gate is not advanced and intents are ignored.
        """
        if restart_requested:
            self.restart()

        if self._state == SessionState.WON:
            return self.snapshot()

        if self.gate.tick(dt):
            direction = self.select_direction(intents)
            if direction is not None:
                self.apply_move(direction)

        return self.snapshot()
