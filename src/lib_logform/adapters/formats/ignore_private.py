"""Filter formatter dropping records flagged as private."""

from __future__ import annotations

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord
from lib_logform.domain.values import parse_flag

DEFAULT_PRIVATE_KEY = "private"


def _ignore_private(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    """Suppress ``record`` when its private marker is boolean-like true.

    Examples
    --------
    >>> ignore_private().transform(LogRecord("error", "secret", {"private": True})) is None
    True
    >>> ignore_private().transform(LogRecord("error", "public", {"private": "false"})).message
    'public'
    """

    key = options.get_string("key") or DEFAULT_PRIVATE_KEY
    if parse_flag(record.get(key)):
        return None
    return record


ignore_private = create_format(_ignore_private, name="ignore_private")


__all__ = ["DEFAULT_PRIVATE_KEY", "ignore_private"]
