"""Formatter port describing the single transformation capability.

Purpose
-------
Define the abstraction every pipeline stage satisfies so :func:`combine` and
callers depend on one narrow protocol instead of concrete strategies.

Contents
--------
* :class:`FormatterPort` – runtime-checkable protocol with ``transform``.
* :data:`TransformFn` – signature of the strategy functions wrapped by
  :class:`lib_logform.Format`.

System Role
-----------
Boundary between the pipeline sequencer and the strategy formatters. A
``None`` result means the record was suppressed.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

TransformFn = Callable[[LogRecord, FormatOptions], "LogRecord | None"]


@runtime_checkable
class FormatterPort(Protocol):
    """Transform one log record, or suppress it by returning ``None``."""

    def transform(self, record: LogRecord, call_options: Mapping[str, Any] | None = None) -> LogRecord | None:
        """Return the transformed ``record`` or ``None`` when it must be dropped."""


__all__ = ["FormatterPort", "TransformFn"]
