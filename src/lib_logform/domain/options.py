"""Immutable option container shared by formatters.

Purpose
-------
Carry formatter configuration in two lifetimes: options bound to a formatter
at construction time and options supplied to a single ``transform`` call.

Contents
--------
* :class:`FormatOptions` – read-only mapping with permissive typed accessors
  and the overlay merge used by :class:`lib_logform.Format`.

System Role
-----------
Domain value object. The merge rule lives here so every formatter resolves
bound versus call options the same way: start from the bound options, overlay
the call options key by key.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from . import values


class FormatOptions(Mapping[str, Any]):
    """Read-only option mapping with typed, non-raising accessors.

    Examples
    --------
    >>> bound = FormatOptions({"format": "A", "alias": "t"})
    >>> effective = bound.merged({"format": "B"})
    >>> effective["format"], effective["alias"]
    ('B', 't')
    >>> bound["format"]
    'A'
    >>> FormatOptions({"all": "true"}).get_flag("all")
    True
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, /, **values_: Any) -> None:
        merged: dict[str, Any] = {}
        if data:
            merged.update(data)
        merged.update(values_)
        for key in merged:
            if not isinstance(key, str):
                raise TypeError(f"option names must be strings, got {key!r}")
        self._data = MappingProxyType(merged)

    @classmethod
    def coerce(cls, options: Mapping[str, Any] | None) -> "FormatOptions":
        """Return ``options`` as :class:`FormatOptions` (``None`` → empty)."""

        if isinstance(options, FormatOptions):
            return options
        return cls(options)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FormatOptions({dict(self._data)!r})"

    def with_value(self, key: str, value: Any) -> "FormatOptions":
        """Return a copy with ``key`` set to ``value`` (last write wins)."""

        return FormatOptions(self._data, **{key: value})

    def merged(self, overrides: Mapping[str, Any] | None) -> "FormatOptions":
        """Overlay ``overrides`` onto these options; overrides win on collision."""

        if not overrides:
            return self
        data = dict(self._data)
        data.update(overrides)
        return FormatOptions(data)

    def get_string(self, key: str) -> str | None:
        return values.as_str(self._data.get(key))

    def get_bool(self, key: str) -> bool | None:
        return values.as_bool(self._data.get(key))

    def get_number(self, key: str) -> float | int | None:
        return values.as_number(self._data.get(key))

    def get_mapping(self, key: str) -> dict[str, Any] | None:
        """Return a mapping option; JSON-encoded strings are decoded."""

        return values.as_mapping(self._data.get(key))

    def get_sequence(self, key: str) -> list[Any] | None:
        return values.as_sequence(self._data.get(key))

    def get_flag(self, key: str, default: bool = False) -> bool:
        """Return a boolean-like option, ``default`` when absent or unreadable."""

        return values.parse_flag(self._data.get(key), default)


__all__ = ["FormatOptions"]
