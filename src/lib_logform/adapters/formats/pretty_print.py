"""Terminal formatter pretty-printing record metadata as indented JSON.

Purpose
-------
Produce multi-line, human-oriented output for development consoles.

Contents
--------
* :func:`pretty_print` – formatter factory; option ``colorize`` enables Rich
  JSON highlighting.

System Role
-----------
Rendering stage. The highlighted variant only adds SGR sequences, so
:func:`uncolorize` turns it back into the plain rendering.
"""

from __future__ import annotations

import io
import json
from typing import Any

from rich.console import Console
from rich.json import JSON

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

_HIDDEN_KEYS = frozenset({"level", "message", "splat"})
_INDENT = 2
_RENDER_WIDTH = 10_000


def _visible_metadata(record: LogRecord) -> dict[str, Any]:
    return {key: value for key, value in record.metadata.items() if key not in _HIDDEN_KEYS}


def _highlight(data: dict[str, Any]) -> str:
    console = Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        width=_RENDER_WIDTH,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(JSON.from_data(data, indent=_INDENT, ensure_ascii=False, default=str), soft_wrap=True)
    return capture.get().rstrip("\n")


def _pretty_print(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    """Render ``"{level}: {indented metadata JSON}"``.

    Examples
    --------
    >>> record = LogRecord("info", "login", {"user_id": 7})
    >>> print(pretty_print().transform(record).message)
    info: {
      "user_id": 7
    }
    """

    data = _visible_metadata(record)
    if options.get_flag("colorize"):
        rendered = _highlight(data)
    else:
        rendered = json.dumps(data, indent=_INDENT, ensure_ascii=False, default=str)
    return record.replace(message=f"{record.level}: {rendered}")


pretty_print = create_format(_pretty_print, name="pretty_print")


__all__ = ["pretty_print"]
