"""Terminal formatter producing ``level: message {metadata}`` lines."""

from __future__ import annotations

import json

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

RESERVED_KEYS = frozenset({"level", "message", "splat", "padding"})
"""Metadata keys never echoed in the trailing JSON payload."""


def _padding_for(record: LogRecord) -> str:
    table = record.get_mapping("padding") or {}
    padding = table.get(record.level)
    return padding if isinstance(padding, str) else ""


def _simple(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    """Render ``"{level}:{padding} {message}"`` plus remaining metadata.

    Examples
    --------
    >>> simple().transform(LogRecord.new("info", "ready")).message
    'info: ready'
    >>> simple().transform(LogRecord("warn", "disk", {"free": 3})).message
    'warn: disk {"free": 3}'
    """

    line = f"{record.level}:{_padding_for(record)} {record.message}"
    rest = {key: value for key, value in record.metadata.items() if key not in RESERVED_KEYS}
    if rest:
        line = f"{line} {json.dumps(rest, default=str)}"
    return record.replace(message=line)


simple = create_format(_simple, name="simple")


__all__ = ["RESERVED_KEYS", "simple"]
