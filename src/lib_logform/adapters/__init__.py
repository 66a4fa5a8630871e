"""Concrete adapters: time sources and strategy formatters."""

from __future__ import annotations

from .clock import ElapsedTimer, SystemClock

__all__ = ["ElapsedTimer", "SystemClock"]
