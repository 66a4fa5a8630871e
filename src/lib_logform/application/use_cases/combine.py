"""Use case folding an ordered list of formatters into one pipeline stage.

Purpose
-------
Chain formatters so a record flows left to right through each stage and the
first suppression short-circuits the rest.

Contents
--------
* :func:`combine` – factory returning the composite :class:`Format`.

System Role
-----------
The sequencer callers hand their stage list to. It binds no options of its
own: every member resolves its own bound options, and call options given to
the composite are not broadcast to the members.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from lib_logform.application.ports.formatter import FormatterPort
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

from .format import Format

logger = logging.getLogger(__name__)

Diagnostic = Callable[[str, dict[str, Any]], None]


def _build_diagnostic_emitter(diagnostic: Diagnostic | None) -> Diagnostic:
    if diagnostic is None:

        def _noop(event: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(event: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(event, payload)
        except Exception:
            logger.exception("pipeline diagnostic hook failed for %s", event)

    return _emit


def _describe(stage: FormatterPort) -> str:
    return getattr(stage, "name", None) or type(stage).__name__


def combine(formats: Iterable[FormatterPort], *, diagnostic: Diagnostic | None = None) -> Format:
    """Return a formatter running ``formats`` in order.

    Why
    ---
    Composition order is the caller's decision (colorizing before JSON
    encoding, for example, corrupts the encoded payload); the composite only
    guarantees left-to-right evaluation and early exit on suppression.

    Parameters
    ----------
    formats:
        Stages exposing ``transform``. An empty sequence yields the identity
        formatter.
    diagnostic:
        Optional callback receiving ``("suppressed", {"stage", "formatter"})``
        when a stage drops the record.

    Raises
    ------
    TypeError
        When a member does not provide a callable ``transform``.

    Examples
    --------
    >>> from lib_logform.adapters.formats import align, ignore_private
    >>> pipeline = combine([ignore_private(), align()])
    >>> pipeline.transform(LogRecord.new("info", "ok")).message
    '\\tok'
    >>> pipeline.transform(LogRecord("info", "hidden", {"private": True})) is None
    True
    """

    stages = tuple(formats)
    for index, stage in enumerate(stages):
        if not callable(getattr(stage, "transform", None)):
            raise TypeError(f"pipeline member {index} ({type(stage).__name__}) has no transform method")
    emit = _build_diagnostic_emitter(diagnostic)

    def _fold(record: LogRecord, _options: FormatOptions) -> LogRecord | None:
        current = record
        for index, stage in enumerate(stages):
            result = stage.transform(current, None)
            if result is None:
                emit("suppressed", {"stage": index, "formatter": _describe(stage)})
                return None
            current = result
        return current

    return Format(_fold, name="combine")


__all__ = ["combine"]
