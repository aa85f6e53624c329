"""
Maze Escape - Move Gate
Repeating interval timer that admits at most one step per interval
"""


class MoveGate:
    """
    Rate limiter between raw input sampling and logical grid steps.

    Frame deltas are accumulated; once a full interval has built up, tick()
    returns True once and the interval is consumed. Whole extra intervals
    (after a long frame stall) are dropped rather than replayed, so only the
    fractional remainder carries over.
    """

    def __init__(self, interval: float):
        if interval <= 0:
            raise ValueError(f"Move interval must be positive, got {interval}")
        self._interval = float(interval)
        self._accumulated = 0.0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def accumulated(self) -> float:
        return self._accumulated

    @property
    def steps_per_second(self) -> float:
        return 1.0 / self._interval

    def tick(self, dt: float) -> bool:
        """Advance by dt seconds. Returns True if a step is admitted."""
        if dt < 0:
            raise ValueError(f"Frame delta cannot be negative, got {dt}")

        self._accumulated += dt
        if self._accumulated < self._interval:
            return False

        self._accumulated -= self._interval
        if self._accumulated >= self._interval:
            self._accumulated %= self._interval
        return True

    def reset(self):
        self._accumulated = 0.0
