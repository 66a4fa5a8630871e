"""Elapsed-time formatter reporting the gap since its previous invocation."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from lib_logform.adapters.clock import ElapsedTimer
from lib_logform.application.use_cases.format import Format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

DEFAULT_MS_ALIAS = "ms"


def ms(
    options: Mapping[str, Any] | None = None,
    /,
    *,
    timer: ElapsedTimer | None = None,
    **values: Any,
) -> Format:
    """Return a formatter writing ``"+<N>ms"`` into ``metadata[alias]``.

    Each formatter owns its :class:`ElapsedTimer`, so two ``ms()`` stages in
    one process measure independently. The first call measures from the
    moment the formatter was created.

    Examples
    --------
    >>> ticks = iter([10.0, 10.25])
    >>> stage = ms(timer=ElapsedTimer(clock=lambda: next(ticks)))
    >>> stage.transform(LogRecord.new("info", "tick")).metadata
    {'ms': '+250ms'}
    """

    cell = timer if timer is not None else ElapsedTimer()

    def _ms(record: LogRecord, effective: FormatOptions) -> LogRecord | None:
        elapsed = cell.lap()
        alias = effective.get_string("alias") or DEFAULT_MS_ALIAS
        return record.with_metadata(alias, f"+{math.floor(elapsed * 1000)}ms")

    return Format(_ms, FormatOptions(options, **values), name="ms")


def parse_ms(value: str) -> int | None:
    """Return the millisecond count from a ``"+<N>ms"`` marker.

    >>> parse_ms("+42ms"), parse_ms("soon")
    (42, None)
    """

    if value.startswith("+") and value.endswith("ms"):
        digits = value[1:-2]
        if digits.isdigit():
            return int(digits)
    return None


__all__ = ["DEFAULT_MS_ALIAS", "ms", "parse_ms"]
