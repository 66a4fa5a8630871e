"""Prefix messages with a tab so they line up after variable-width levels."""

from __future__ import annotations

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord


def _align(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    return record.replace(message=f"\t{record.message}")


align = create_format(_align, name="align")


__all__ = ["align"]
