"""Rich-powered colorizer wrapping level and message text in ANSI styles.

Purpose
-------
Highlight records for terminal output using a level → style lookup. Styles
are parsed and rendered by Rich so the same tokens work here and in console
themes (``"red"``, ``"bold"``, ``"#ff00ff"``, ``"white on red3"``).

Contents
--------
* :data:`COLOR_THEMES` – built-in palettes keyed by theme name.
* :func:`colorize` – formatter factory.

System Role
-----------
Presentation stage. Place it after rendering formatters that must not see
escape sequences (JSON encoding in particular);
:func:`lib_logform.adapters.formats.uncolorize` reverses it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

logger = logging.getLogger(__name__)

COLOR_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "silly": "magenta",
        "debug": "blue",
        "verbose": "cyan",
        "http": "green",
        "info": "green",
        "warn": "yellow",
        "warning": "yellow",
        "error": "red",
        "critical": "bold red",
    },
    "dark": {
        "debug": "grey42",
        "info": "bright_white",
        "warn": "bold gold3",
        "warning": "bold gold3",
        "error": "bold red3",
        "critical": "bold white on red3",
    },
    "neon": {
        "debug": "#00ffd5",
        "info": "#39ff14",
        "warn": "#fff700",
        "warning": "#fff700",
        "error": "#ff073a",
        "critical": "bold #ff00ff on black",
    },
    "pastel": {
        "debug": "aquamarine1",
        "info": "light_sky_blue1",
        "warn": "khaki1",
        "warning": "khaki1",
        "error": "light_salmon1",
        "critical": "bold plum1",
    },
}
"""Built-in palettes keyed by theme name; ``colors`` entries override them."""

DEFAULT_THEME = "classic"


@lru_cache(maxsize=256)
def _style_for(tokens: tuple[str, ...]) -> Style:
    """Combine style ``tokens``; unparseable tokens are skipped."""

    styles: list[Style] = []
    for token in tokens:
        try:
            styles.append(Style.parse(token))
        except StyleSyntaxError:
            logger.debug("ignoring unknown colour token %r", token)
    return Style.combine(styles) if styles else Style.null()


def _tokens(value: Any) -> tuple[str, ...]:
    # Each entry is one Rich style definition ("white on red3" stays whole).
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        return tuple(item for item in value if isinstance(item, str) and item.strip())
    return ()


def _palette(options: FormatOptions) -> dict[str, Any]:
    theme_name = options.get_string("theme") or DEFAULT_THEME
    palette: dict[str, Any] = dict(COLOR_THEMES.get(theme_name.lower(), {}))
    if theme_name.lower() not in COLOR_THEMES:
        logger.debug("unknown colour theme %r, using no base palette", theme_name)
    if "colors" in options:
        colors = options.get_mapping("colors")
        if colors is None:
            logger.debug("ignoring malformed colors option %r", options["colors"])
        else:
            palette.update(colors)
    return palette


def _selected_fields(options: FormatOptions) -> tuple[bool, bool]:
    """Return ``(level, message)`` switches; level only when nothing is selected."""

    if not any(key in options for key in ("all", "level", "message")):
        return True, False
    if options.get_flag("all"):
        return True, True
    return options.get_flag("level"), options.get_flag("message")


def paint(text: str, level: str, colors: Mapping[str, Any]) -> str:
    """Wrap ``text`` in the style registered for ``level``.

    Examples
    --------
    >>> paint("info", "info", {"info": ["blue"]})
    '\\x1b[34minfo\\x1b[0m'
    >>> paint("info", "trace", {"info": "blue"})
    'info'
    """

    style = _style_for(_tokens(colors.get(level)))
    return style.render(text, color_system=ColorSystem.TRUECOLOR)


def _colorize(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    colors = _palette(options)
    color_level, color_message = _selected_fields(options)
    changes: dict[str, str] = {}
    if color_level:
        changes["level"] = paint(record.level, record.level, colors)
    if color_message:
        changes["message"] = paint(record.message, record.level, colors)
    return record.replace(**changes) if changes else record


colorize = create_format(_colorize, name="colorize")
"""Factory: ``colorize(colors=..., all=True)`` returns a configured stage."""


__all__ = ["COLOR_THEMES", "DEFAULT_THEME", "colorize", "paint"]
