"""Time sources used by the time-dependent formatters.

Contents
--------
* :class:`SystemClock` – :class:`ClockPort` returning aware UTC timestamps.
* :class:`ElapsedTimer` – lock-guarded "previous reading" cell backing the
  ``ms`` formatter.
"""

from __future__ import annotations

import threading
import time
from datetime import datetime, timezone

from lib_logform.application.ports.time import ClockPort, MonotonicClock


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        """Return the current UTC timestamp with timezone info."""
        return datetime.now(timezone.utc)


class ElapsedTimer:
    """Measure the interval between consecutive :meth:`lap` calls.

    The read-compute-update sequence runs under one lock and the clock is
    sampled inside it, so concurrent laps are serialised: no interval is
    negative and the intervals sum to the span between the first and last
    reading.

    Examples
    --------
    >>> ticks = iter([0.0, 1.5, 4.0])
    >>> timer = ElapsedTimer(clock=lambda: next(ticks))
    >>> timer.lap(), timer.lap()
    (1.5, 2.5)
    >>> timer.previous
    4.0
    """

    __slots__ = ("_clock", "_lock", "_previous")

    def __init__(self, clock: MonotonicClock = time.perf_counter) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._previous = clock()

    @property
    def previous(self) -> float:
        """Reading stored by the most recent lap (or at construction)."""

        with self._lock:
            return self._previous

    def lap(self) -> float:
        """Return seconds since the previous lap and remember the new reading."""

        with self._lock:
            current = self._clock()
            elapsed = current - self._previous
            self._previous = current
        return elapsed


__all__ = ["ElapsedTimer", "SystemClock"]
