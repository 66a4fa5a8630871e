"""Public package surface for composable log-record formatters.

Build stages with the strategy factories, chain them with :func:`combine`
and call ``transform`` once per record::

    >>> from lib_logform import LogRecord, combine, ignore_private, simple
    >>> pipeline = combine([ignore_private(), simple()])
    >>> pipeline.transform(LogRecord.new("info", "ready")).message
    'info: ready'
"""

from __future__ import annotations

from .adapters.clock import ElapsedTimer, SystemClock
from .adapters.formats import (
    COLOR_THEMES,
    FORMAT_FACTORIES,
    align,
    build_format,
    colorize,
    ignore_private,
    json,
    ms,
    pad_levels,
    pretty_print,
    printf,
    simple,
    strip_colors,
    timestamp,
    uncolorize,
)
from .application.ports import ClockPort, FormatterPort
from .application.use_cases import Format, combine, create_format
from .domain import FormatOptions, LogRecord

__all__ = [
    "COLOR_THEMES",
    "ClockPort",
    "ElapsedTimer",
    "FORMAT_FACTORIES",
    "Format",
    "FormatOptions",
    "FormatterPort",
    "LogRecord",
    "SystemClock",
    "align",
    "build_format",
    "colorize",
    "combine",
    "create_format",
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
