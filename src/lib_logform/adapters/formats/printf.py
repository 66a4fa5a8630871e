"""Template formatter delegating message rendering to a caller function."""

from __future__ import annotations

from collections.abc import Callable

from lib_logform.application.use_cases.format import Format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord


def printf(template: Callable[[LogRecord], str]) -> Format:
    """Return a formatter replacing ``message`` with ``template(record)``.

    Examples
    --------
    >>> stage = printf(lambda r: f"{r.get('timestamp', '-')} {r.level}: {r.message}")
    >>> stage.transform(LogRecord.new("info", "up")).message
    '- info: up'
    """

    if not callable(template):
        raise TypeError(f"printf template must be callable, got {type(template).__name__}")

    def _printf(record: LogRecord, _options: FormatOptions) -> LogRecord | None:
        return record.replace(message=str(template(record)))

    return Format(_printf, name="printf")


__all__ = ["printf"]
