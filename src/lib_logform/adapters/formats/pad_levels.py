"""Compute per-level padding so rendered levels line up in columns."""

from __future__ import annotations

from lib_logform.application.use_cases.format import create_format
from lib_logform.domain.options import FormatOptions
from lib_logform.domain.record import LogRecord

DEFAULT_LEVELS: tuple[str, ...] = ("error", "warn", "info", "http", "verbose", "debug", "silly")


def _known_levels(options: FormatOptions) -> list[str]:
    mapping = options.get_mapping("levels")
    if mapping is not None:
        return list(mapping)
    sequence = options.get_sequence("levels")
    if sequence is not None:
        return [item for item in sequence if isinstance(item, str)]
    return list(DEFAULT_LEVELS)


def padding_table(levels: list[str], filler: str = " ") -> dict[str, str]:
    """Return level → filler string padding each level to the longest one.

    Multi-character fillers repeat and are cut at the target width.

    >>> padding_table(["info", "error"])
    {'info': ' ', 'error': ''}
    >>> padding_table(["a", "abcd"], "-=")
    {'a': '-=-', 'abcd': ''}
    """

    width = max((len(level) for level in levels), default=0)
    table: dict[str, str] = {}
    for level in levels:
        gap = width - len(level)
        table[level] = (filler * gap)[:gap]
    return table


def _pad_levels(record: LogRecord, options: FormatOptions) -> LogRecord | None:
    levels = _known_levels(options)
    if record.level not in levels:
        levels.append(record.level)
    filler = options.get_string("filler") or " "
    return record.with_metadata("padding", padding_table(levels, filler))


pad_levels = create_format(_pad_levels, name="pad_levels")
"""Factory writing ``metadata["padding"]``; read by :func:`simple`."""


__all__ = ["DEFAULT_LEVELS", "pad_levels", "padding_table"]
