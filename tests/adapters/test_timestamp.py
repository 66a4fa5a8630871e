from __future__ import annotations

from datetime import datetime

import pytest

from lib_logform.adapters.formats.json_format import json as json_format
from lib_logform.adapters.formats.timestamp import DEFAULT_TIMESTAMP_FORMAT, timestamp
from lib_logform.application.use_cases.combine import combine
from lib_logform.domain.record import LogRecord


def test_timestamp_writes_alias_in_default_format() -> None:
    result = timestamp(alias="t").transform(LogRecord.new("info", "m"))
    assert result is not None
    datetime.strptime(result.metadata["t"], DEFAULT_TIMESTAMP_FORMAT)


def test_timestamp_defaults_to_timestamp_key(fixed_clock) -> None:
    result = timestamp(clock=fixed_clock).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.metadata == {"timestamp": "2025-09-23 12:30:45"}


@pytest.mark.parametrize("pattern", ["%Y-%m-%d %H:%M:%S", "%d/%m/%Y %H:%M", "%Y-%m-%dT%H:%M:%S%z"])
def test_timestamp_parses_back_with_configured_format(pattern: str) -> None:
    result = timestamp({"format": pattern, "alias": "time"}).transform(LogRecord.new("info", "m"))
    assert result is not None
    datetime.strptime(result.metadata["time"], pattern)


def test_call_format_overrides_bound_format(fixed_clock) -> None:
    stage = timestamp(clock=fixed_clock).with_option("format", "%Y")
    result = stage.transform(LogRecord.new("info", "m"), {"format": "%H:%M"})
    assert result is not None
    assert result.metadata["timestamp"] == "12:30"


def test_non_string_format_falls_back_to_default(fixed_clock) -> None:
    result = timestamp(clock=fixed_clock, format=42).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.metadata["timestamp"] == "2025-09-23 12:30:45"


def test_timestamp_keeps_existing_metadata(fixed_clock) -> None:
    record = LogRecord("info", "m", {"user": "ada"})
    result = timestamp(clock=fixed_clock).transform(record)
    assert result is not None
    assert result.metadata == {"user": "ada", "timestamp": "2025-09-23 12:30:45"}
    assert record.metadata == {"user": "ada"}


def test_timestamp_then_json_embeds_the_time(fixed_clock) -> None:
    pipeline = combine([timestamp(clock=fixed_clock, format="%Y-%m-%d %H:%M:%S", alias="time"), json_format(sort_keys=True)])
    result = pipeline.transform(LogRecord.new("info", "Test message"))
    assert result is not None
    assert result.message == '{"level": "info", "message": "Test message", "time": "2025-09-23 12:30:45"}'
