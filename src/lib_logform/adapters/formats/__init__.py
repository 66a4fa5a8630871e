"""Built-in strategy formatters and the name → factory registry.

Purpose
-------
Collect every concrete strategy in one namespace and let configuration-driven
callers (the CLI, environment options) build stages by name.

Contents
--------
* Strategy factories: :func:`align`, :func:`colorize`, :func:`ignore_private`,
  :func:`json`, :func:`ms`, :func:`pad_levels`, :func:`pretty_print`,
  :func:`printf`, :func:`simple`, :func:`timestamp`, :func:`uncolorize`.
* :data:`FORMAT_FACTORIES` and :func:`build_format`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lib_logform.application.use_cases.format import Format

from .align import align
from .colorize import COLOR_THEMES, colorize
from .ignore_private import ignore_private
from .json_format import json
from .ms import ms
from .pad_levels import pad_levels
from .pretty_print import pretty_print
from .printf import printf
from .simple import simple
from .timestamp import timestamp
from .uncolorize import strip_colors, uncolorize

FORMAT_FACTORIES: dict[str, Callable[..., Format]] = {
    "align": align,
    "colorize": colorize,
    "ignore_private": ignore_private,
    "json": json,
    "ms": ms,
    "pad_levels": pad_levels,
    "pretty_print": pretty_print,
    "simple": simple,
    "timestamp": timestamp,
    "uncolorize": uncolorize,
}
"""Option-driven factories addressable by name (``printf`` needs a callable)."""


def build_format(name: str, options: Mapping[str, Any] | None = None) -> Format:
    """Return the stage registered as ``name`` with ``options`` bound.

    Raises
    ------
    KeyError
        When ``name`` is not registered.

    Examples
    --------
    >>> build_format("timestamp", {"alias": "t"}).options["alias"]
    't'
    >>> build_format("yaml")
    Traceback (most recent call last):
    ...
    KeyError: "Unknown formatter 'yaml'; expected one of: align, colorize, ignore_private, json, ms, pad_levels, pretty_print, simple, timestamp, uncolorize"
    """

    normalized = name.strip().lower()
    try:
        factory = FORMAT_FACTORIES[normalized]
    except KeyError:
        known = ", ".join(sorted(FORMAT_FACTORIES))
        raise KeyError(f"Unknown formatter {name!r}; expected one of: {known}") from None
    return factory(dict(options or {}))


__all__ = [
    "COLOR_THEMES",
    "FORMAT_FACTORIES",
    "align",
    "build_format",
    "colorize",
    "ignore_private",
    "json",
    "ms",
    "pad_levels",
    "pretty_print",
    "printf",
    "simple",
    "strip_colors",
    "timestamp",
    "uncolorize",
]
