"""Protocols the formatter pipeline depends on."""

from __future__ import annotations

from .formatter import FormatterPort, TransformFn
from .time import ClockPort, MonotonicClock

__all__ = ["ClockPort", "FormatterPort", "MonotonicClock", "TransformFn"]
