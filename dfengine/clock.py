"""A stopwatch for timing the game loop, in microseconds."""

from __future__ import annotations

import time
from typing import Callable


def _now_microseconds() -> int:
    return time.perf_counter_ns() // 1000


class Clock:
    """Measures elapsed time in microseconds.

    ``timer`` returns the current time in microseconds.
    """

    def __init__(self, timer: Callable[[], int] = _now_microseconds) -> None:
        self._timer = timer
        self._previous = timer()

    def delta(self) -> int:
        """Return microseconds since the last delta() and reset the clock."""
        now = self._timer()
        elapsed = now - self._previous
        self._previous = now
        return elapsed

    def split(self) -> int:
        """Return microseconds since the last delta() without resetting."""
        return self._timer() - self._previous