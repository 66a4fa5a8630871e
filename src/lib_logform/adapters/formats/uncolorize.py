"""Strip ANSI colour sequences from level and message text."""

from __future__ import annotations

import re

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_colors(text: str) -> str:
    """Return ``text`` without SGR escape sequences.

    >>> strip_colors("\\x1b[1;31merror\\x1b[0m")
    'error'
    """

    return ANSI_PATTERN.sub("", text)


def _uncolorize(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    changes: dict[str, str] = {}
    # Both fields are cleaned unless explicitly switched off.
    if options.get_flag("level", True):
        changes["level"] = strip_colors(record.level)
    if options.get_flag("message", True):
        changes["message"] = strip_colors(record.message)
    return record.replace(**changes) if changes else record


uncolorize = create_format(_uncolorize, name="uncolorize")


__all__ = ["ANSI_PATTERN", "strip_colors", "uncolorize"]
