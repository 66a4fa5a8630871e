"""Terminal formatter rendering the whole record as a JSON object."""

from __future__ import annotations

import json as _json
import logging
import math
from typing import Any

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

logger = logging.getLogger(__name__)


def _indent(options: FormatOptions) -> int | None:
    indent = options.get_number("indent")
    if indent is None:
        return None
    if not math.isfinite(indent) or indent < 0:
        logger.debug("ignoring unusable json indent %r", indent)
        return None
    return int(indent)


def _render_json(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    """Overwrite ``message`` with ``{"level", "message", **metadata}`` as JSON.

    Metadata entries are written after ``level`` and ``message``, so a
    metadata key of the same name replaces the record field in the output.
    Values JSON cannot encode are rendered with ``str``.

    Examples
    --------
    >>> record = LogRecord("info", "hi", {"user": "ada"})
    >>> json().transform(record).message
    '{"level": "info", "message": "hi", "user": "ada"}'
    >>> json().transform(LogRecord("info", "hi", {"level": "audit"})).message
    '{"level": "audit", "message": "hi"}'
    """

    payload: dict[str, Any] = {"level": record.level, "message": record.message}
    payload.update(record.metadata)
    rendered = _json.dumps(
        payload,
        sort_keys=options.get_flag("sort_keys"),
        indent=_indent(options),
        default=str,
    )
    return record.replace(message=rendered)


json = create_format(_render_json, name="json")


__all__ = ["json"]
