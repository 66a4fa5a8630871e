"""Use cases building and composing formatter stages."""

from __future__ import annotations

from .combine import combine
from .format import Format, create_format

__all__ = ["Format", "combine", "create_format"]
