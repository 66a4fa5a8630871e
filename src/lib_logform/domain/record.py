"""Domain record describing a structured log message.

Purpose
-------
Provide an immutable representation of the unit of data travelling through
the formatter pipeline.

Contents
--------
* :class:`LogRecord` dataclass with fluent helpers returning updated copies.

System Role
-----------
Sits in the domain layer. Formatters receive one record and hand back a new
one (or ``None`` for suppression), so two concurrent pipeline runs never share
a mutable record.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from . import values


def _ensure_text(name: str, value: Any) -> str:
    """Reject non-string ``level``/``message`` values."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


@dataclass(slots=True, frozen=True, eq=True, unsafe_hash=False)
class LogRecord:
    """Immutable log record transported through formatter pipelines.

    Attributes
    ----------
    level:
        Free-form, case-sensitive severity label (``"info"``, ``"error"``...).
    message:
        Primary human-readable text; rewritten by rendering formatters.
    metadata:
        Shallow copy of JSON-like key/value pairs. Callers use it for
        structured context, formatters use it to hand derived data (timestamps,
        padding tables, elapsed markers) to later stages.

    Examples
    --------
    >>> record = LogRecord.new("info", "hello").with_metadata("user", "ada")
    >>> record.metadata
    {'user': 'ada'}
    >>> record.with_metadata("user", "bob").metadata["user"], record.metadata["user"]
    ('bob', 'ada')
    """

    level: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)

    # Metadata is a dict, so records compare by value but are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _ensure_text("level", self.level)
        _ensure_text("message", self.message)
        object.__setattr__(self, "metadata", dict(self.metadata or {}))

    @classmethod
    def new(cls, level: str, message: str) -> "LogRecord":
        """Return a record without metadata."""

        return cls(level=level, message=message)

    def with_metadata(self, key: str, value: Any) -> "LogRecord":
        """Return a copy with ``metadata[key]`` set to ``value``."""

        metadata = dict(self.metadata)
        metadata[key] = value
        return replace(self, metadata=metadata)

    def with_metadata_items(self, items: Mapping[str, Any]) -> "LogRecord":
        """Return a copy with every entry of ``items`` merged into the metadata."""

        metadata = dict(self.metadata)
        metadata.update(items)
        return replace(self, metadata=metadata)

    def without_metadata(self, *keys: str) -> "LogRecord":
        """Return a copy with ``keys`` removed from the metadata."""

        metadata = {key: value for key, value in self.metadata.items() if key not in keys}
        return replace(self, metadata=metadata)

    def replace(self, **changes: Any) -> "LogRecord":
        """Return a copied record with ``changes`` applied."""

        return replace(self, **changes)

    def get(self, key: str, default: Any = None) -> Any:
        """Return ``metadata[key]`` or ``default``."""

        return self.metadata.get(key, default)

    def get_str(self, key: str) -> str | None:
        return values.as_str(self.metadata.get(key))

    def get_bool(self, key: str) -> bool | None:
        return values.as_bool(self.metadata.get(key))

    def get_number(self, key: str) -> float | int | None:
        return values.as_number(self.metadata.get(key))

    def get_mapping(self, key: str) -> dict[str, Any] | None:
        return values.as_mapping(self.metadata.get(key))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record to a plain dictionary."""

        return {"level": self.level, "message": self.message, "metadata": dict(self.metadata)}

    def to_json(self) -> str:
        """Serialize the record to JSON with sorted keys for deterministic output."""

        return json.dumps(self.to_dict(), sort_keys=True, default=str)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LogRecord":
        """Reconstruct a record from :meth:`to_dict` output."""

        return cls(
            level=payload["level"],
            message=payload["message"],
            metadata=dict(payload.get("metadata") or {}),
        )


__all__ = ["LogRecord"]
