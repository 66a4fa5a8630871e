"""Ports for wall-clock and monotonic time sources."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class MonotonicClock(Protocol):
    """Return a monotonically increasing reading in seconds."""

    def __call__(self) -> float: ...


__all__ = ["ClockPort", "MonotonicClock"]
