"""Wall-clock stopwatch."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Measures seconds elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        """Seconds since the timer started."""
        return self._clock() - self._start

    def reset(self) -> None:
        """Start measuring from now."""
        self._start = self._clock()