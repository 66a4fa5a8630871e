"""Domain entities and value objects used by the formatter pipeline."""

from __future__ import annotations

from .options import FormatOptions
from .record import LogRecord

__all__ = [
    "FormatOptions",
    "LogRecord",
]
