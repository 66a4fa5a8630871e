"""Permissive accessors for JSON-like option and metadata values.

Purpose
-------
Metadata entries and formatter options carry dynamically shaped values (null,
bool, number, string, array, object). Formatters inspect them by key at their
own discretion, so every accessor here answers ``None`` on a shape mismatch
instead of raising.

Contents
--------
* :func:`as_str`, :func:`as_bool`, :func:`as_number` – scalar accessors.
* :func:`as_mapping`, :func:`as_sequence` – container accessors; mappings may
  also arrive JSON-encoded.
* :func:`parse_flag` – boolean-like coercion used for option switches.

System Role
-----------
Shared by :class:`lib_logform.domain.options.FormatOptions` and
:class:`lib_logform.domain.record.LogRecord` so options and metadata follow the
same lookup rules.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def as_str(value: Any) -> str | None:
    """Return ``value`` when it is a string."""

    return value if isinstance(value, str) else None


def as_bool(value: Any) -> bool | None:
    """Return ``value`` when it is a real boolean.

    >>> as_bool(True), as_bool("true")
    (True, None)
    """

    return value if isinstance(value, bool) else None


def as_number(value: Any) -> float | int | None:
    """Return ``value`` when it is an int or float (booleans excluded)."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def as_mapping(value: Any) -> dict[str, Any] | None:
    """Return a ``dict`` copy of a mapping or of a JSON-encoded object.

    Examples
    --------
    >>> as_mapping('{"info": "blue"}')
    {'info': 'blue'}
    >>> as_mapping('not json') is None
    True
    >>> as_mapping('[1, 2]') is None
    True
    """

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return None
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    return None


def as_sequence(value: Any) -> list[Any] | None:
    """Return a ``list`` copy of a non-string sequence or JSON-encoded array."""

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return None
        if isinstance(value, str):
            return None
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return list(value)
    return None


def parse_flag(value: Any, default: bool = False) -> bool:
    """Interpret boolean-like ``value`` and fall back to ``default``.

    Accepts booleans, numbers, and the usual textual switches. Anything else,
    ``None`` included, yields ``default``.

    Examples
    --------
    >>> parse_flag("TRUE"), parse_flag("off", True), parse_flag(None, True)
    (True, False, True)
    >>> parse_flag("maybe")
    False
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
    return default


__all__ = ["as_bool", "as_mapping", "as_number", "as_sequence", "as_str", "parse_flag"]
