"""Timestamp formatter injecting the current time into record metadata.

Purpose
-------
Stamp each record with a formatted wall-clock time so later rendering stages
(``printf``, ``simple``, ``json``) can include it.

Contents
--------
* :data:`DEFAULT_TIMESTAMP_FORMAT`, :data:`DEFAULT_TIMESTAMP_ALIAS`.
* :func:`timestamp` – formatter factory accepting an optional clock.

System Role
-----------
Time-dependent by design; tests inject a fixed :class:`ClockPort`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from lib_logform.adapters.clock import SystemClock
from lib_logform.application.ports.time import ClockPort
from lib_logform.application.use_cases.format import Format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_TIMESTAMP_ALIAS = "timestamp"


def format_timestamp(moment: datetime, pattern: str | None) -> str:
    """Render ``moment`` with ``pattern``; fall back to ISO 8601 when it fails.

    Examples
    --------
    >>> from datetime import timezone
    >>> moment = datetime(2025, 9, 30, 12, 0, 5, tzinfo=timezone.utc)
    >>> format_timestamp(moment, None)
    '2025-09-30 12:00:05'
    >>> format_timestamp(moment, "%H:%M")
    '12:00'
    """

    if pattern is None:
        pattern = DEFAULT_TIMESTAMP_FORMAT
    try:
        return moment.strftime(pattern)
    except ValueError:
        logger.debug("invalid timestamp format %r, using ISO 8601", pattern)
        return moment.isoformat()


def timestamp(
    options: Mapping[str, Any] | None = None,
    /,
    *,
    clock: ClockPort | None = None,
    **values: Any,
) -> Format:
    """Return a formatter writing the current time into ``metadata[alias]``.

    Parameters
    ----------
    options, values:
        Bound options; recognised keys are ``format`` (strftime pattern) and
        ``alias`` (metadata key).
    clock:
        Source of the current time; defaults to :class:`SystemClock` (UTC).

    Examples
    --------
    >>> from datetime import timezone
    >>> class FixedClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> stamp = timestamp(alias="t", clock=FixedClock())
    >>> stamp.transform(LogRecord.new("info", "m")).metadata
    {'t': '2025-09-30 12:00:00'}
    """

    source = clock if clock is not None else SystemClock()

    def _timestamp(record: LogRecord, effective: FormatOptions) -> LogRecord | None:
        alias = effective.get_string("alias") or DEFAULT_TIMESTAMP_ALIAS
        value = format_timestamp(source.now(), effective.get_string("format"))
        return record.with_metadata(alias, value)

    return Format(_timestamp, FormatOptions(options, **values), name="timestamp")


__all__ = ["DEFAULT_TIMESTAMP_ALIAS", "DEFAULT_TIMESTAMP_FORMAT", "format_timestamp", "timestamp"]
