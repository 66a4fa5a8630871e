"""Formatter abstraction binding a strategy function to its options.

Purpose
-------
Turn a plain strategy function into a reusable pipeline stage that carries
bound configuration and merges per-call overrides before every invocation.

Contents
--------
* :class:`Format` – the stage object implementing :class:`FormatterPort`.
* :func:`create_format` – factory helper producing option-binding
  constructors for custom strategies.

System Role
-----------
Application-layer core. Every built-in strategy in
:mod:`lib_logform.adapters.formats` and the :func:`combine` sequencer is a
:class:`Format`, so option precedence is resolved in exactly one place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lib_logform.application.ports.formatter import FormatterPort, TransformFn
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord


class Format(FormatterPort):
    """Pipeline stage wrapping ``transform_fn`` with bound options.

    Why
    ---
    Strategies stay pure functions of ``(record, options)`` while the stage
    owns configuration. Instances are immutable: :meth:`with_option` returns a
    new stage so one configured formatter can be shared across threads.

    Parameters
    ----------
    transform_fn:
        Callable receiving the record and the effective
        :class:`FormatOptions`; returns the new record or ``None`` to suppress.
    options:
        Bound options persisted across every invocation.
    name:
        Label used in ``repr`` and pipeline diagnostics.

    Examples
    --------
    >>> def volume(record, options):
    ...     if options.get_flag("yell"):
    ...         return record.replace(message=record.message.upper())
    ...     return record
    >>> loud = Format(volume, name="volume").with_option("yell", True)
    >>> loud.transform(LogRecord.new("info", "hey")).message
    'HEY'
    >>> loud.transform(LogRecord.new("info", "hey"), {"yell": False}).message
    'hey'
    """

    __slots__ = ("_transform_fn", "_options", "_name")

    def __init__(
        self,
        transform_fn: TransformFn,
        options: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        if not callable(transform_fn):
            raise TypeError(f"transform_fn must be callable, got {type(transform_fn).__name__}")
        self._transform_fn = transform_fn
        self._options = FormatOptions.coerce(options)
        self._name = name or getattr(transform_fn, "__name__", type(transform_fn).__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> FormatOptions:
        """Options bound at construction time."""

        return self._options

    def with_option(self, key: str, value: Any) -> "Format":
        """Return a copy with ``key`` bound to ``value`` (last write wins)."""

        return Format(self._transform_fn, self._options.with_value(key, value), name=self._name)

    def with_options(self, options: Mapping[str, Any] | None = None, /, **values: Any) -> "Format":
        """Return a copy with every entry of ``options`` and ``values`` bound."""

        return Format(
            self._transform_fn,
            self._options.merged(FormatOptions(options, **values)),
            name=self._name,
        )

    def effective_options(self, call_options: Mapping[str, Any] | None = None) -> FormatOptions:
        """Return the bound options overlaid with ``call_options``."""

        return self._options.merged(call_options)

    def transform(self, record: LogRecord, call_options: Mapping[str, Any] | None = None) -> LogRecord | None:
        """Run the strategy on ``record`` with the effective options.

        Returns
        -------
        LogRecord | None
            The transformed record, or ``None`` when the strategy suppressed it.

        Raises
        ------
        TypeError
            When the strategy returns something other than a record or ``None``.
        """

        result = self._transform_fn(record, self.effective_options(call_options))
        if result is not None and not isinstance(result, LogRecord):
            raise TypeError(f"formatter {self._name!r} returned {type(result).__name__}, expected LogRecord or None")
        return result

    def __repr__(self) -> str:
        return f"Format(name={self._name!r}, options={dict(self._options)!r})"


def create_format(transform_fn: TransformFn, *, name: str | None = None) -> Callable[..., Format]:
    """Return a constructor that binds options to ``transform_fn``.

    Examples
    --------
    >>> def shout(record, options):
    ...     return record.replace(message=record.message + options.get_string("suffix"))
    >>> shouter = create_format(shout)
    >>> shouter(suffix="!").transform(LogRecord.new("info", "hi")).message
    'hi!'
    """

    label = name or getattr(transform_fn, "__name__", None)

    def factory(options: Mapping[str, Any] | None = None, /, **values: Any) -> Format:
        return Format(transform_fn, FormatOptions(options, **values), name=label)

    factory.__name__ = label or "format"
    factory.__doc__ = getattr(transform_fn, "__doc__", None)
    return factory


__all__ = ["Format", "create_format"]
