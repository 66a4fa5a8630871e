from __future__ import annotations

import json
import math

import pytest

from lib_logform.adapters.formats import FORMAT_FACTORIES, build_format
from lib_logform.adapters.formats.align import align
from lib_logform.adapters.formats.json_format import json as json_format
from lib_logform.adapters.formats.pad_levels import DEFAULT_LEVELS, pad_levels, padding_table
from lib_logform.adapters.formats.pretty_print import pretty_print
from lib_logform.adapters.formats.printf import printf
from lib_logform.adapters.formats.simple import simple
from lib_logform.adapters.formats.uncolorize import ANSI_PATTERN, strip_colors
from lib_logform.application.use_cases.combine import combine
from lib_logform.config import options_from_env
from lib_logform.domain.record import LogRecord


def test_json_render_includes_level_message_and_metadata() -> None:
    record = LogRecord("info", "This is a test message", {"user": "ada", "count": 2})
    result = json_format().transform(record)
    assert result is not None
    assert json.loads(result.message) == {"level": "info", "message": "This is a test message", "user": "ada", "count": 2}
    assert result.metadata == record.metadata


def test_json_metadata_wins_over_record_fields() -> None:
    result = json_format().transform(LogRecord("info", "real", {"message": "shadow", "level": "audit"}))
    assert result is not None
    assert result.message == '{"level": "audit", "message": "shadow"}'


def test_json_writes_level_and_message_first() -> None:
    result = json_format().transform(LogRecord("info", "hi", {"user": "ada"}))
    assert result is not None
    assert result.message == '{"level": "info", "message": "hi", "user": "ada"}'


def test_json_handles_unserialisable_values() -> None:
    result = json_format().transform(LogRecord("info", "m", {"payload": {1, 2} - {1, 2}}))
    assert result is not None
    assert json.loads(result.message)["payload"] == "set()"


def test_json_indent_option() -> None:
    result = json_format(indent=2, sort_keys=True).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.message == '{\n  "level": "info",\n  "message": "m"\n}'


@pytest.mark.parametrize("indent", [math.inf, -math.inf, math.nan, -1, float(json.loads("1e999"))])
def test_json_unusable_indent_degrades_to_compact(indent: float) -> None:
    result = json_format(indent=indent).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.message == '{"level": "info", "message": "m"}'


def test_json_indent_from_decoded_environment() -> None:
    options = options_from_env("json", {"LOGFORM_JSON_INDENT": "NaN"})
    assert math.isnan(options["indent"])
    result = json_format(options).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.message == '{"level": "info", "message": "m"}'


def test_simple_without_metadata() -> None:
    result = simple().transform(LogRecord.new("info", "This is a test message"))
    assert result is not None
    assert result.message == "info: This is a test message"


def test_simple_appends_remaining_metadata_as_json() -> None:
    record = LogRecord("info", "m", {"timestamp": "t", "splat": [1], "level": "x"})
    result = simple().transform(record)
    assert result is not None
    assert result.message == 'info: m {"timestamp": "t"}'


def test_simple_uses_padding_table_for_the_level() -> None:
    record = LogRecord("info", "m", {"padding": {"info": "   ", "error": "  "}})
    result = simple().transform(record)
    assert result is not None
    assert result.message == "info:    m"


def test_pad_levels_then_simple_aligns_messages() -> None:
    pipeline = combine([pad_levels(), simple()])
    lines = [pipeline.transform(LogRecord.new(level, "go")).message for level in ("info", "error", "verbose")]
    assert lines == ["info:    go", "error:   go", "verbose: go"]


def test_pad_levels_accepts_custom_levels_and_filler() -> None:
    result = pad_levels(levels=["a", "bbb"], filler=".").transform(LogRecord.new("a", "m"))
    assert result is not None
    assert result.metadata["padding"] == {"a": "..", "bbb": ""}


def test_pad_levels_accepts_mapping_of_levels() -> None:
    result = pad_levels(levels='{"error": 0, "info": 2}').transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.metadata["padding"] == {"error": "", "info": " "}


def test_pad_levels_includes_unknown_record_level() -> None:
    result = pad_levels().transform(LogRecord.new("notice-level", "m"))
    assert result is not None
    table = result.metadata["padding"]
    assert set(table) == set(DEFAULT_LEVELS) | {"notice-level"}
    assert table["notice-level"] == ""


def test_multi_character_filler_is_cut_to_the_column_width() -> None:
    result = pad_levels(levels=["a", "abcd", "ab"], filler="-=").transform(LogRecord.new("a", "m"))
    assert result is not None
    assert result.metadata["padding"] == {"a": "-=-", "abcd": "", "ab": "-="}


def test_padding_table_of_nothing_is_empty() -> None:
    assert padding_table([]) == {}


def test_printf_renders_with_template() -> None:
    stage = printf(lambda record: f"{record.get('timestamp', '')} - {record.level}: {record.message}")
    result = stage.transform(LogRecord("info", "m", {"timestamp": "now"}))
    assert result is not None
    assert result.message == "now - info: m"


def test_printf_requires_callable_template() -> None:
    with pytest.raises(TypeError, match="callable"):
        printf("%(message)s")  # type: ignore[arg-type]


def test_align_prefixes_tab() -> None:
    result = align().transform(LogRecord("info", "Test message", {"key": "value"}))
    assert result is not None
    assert result.message == "\tTest message"


def test_pretty_print_hides_reserved_keys() -> None:
    record = LogRecord(
        "info",
        "User logged in",
        {"user_id": 12345, "session_id": "abcde12345", "extra_info": {"key": "value"}, "splat": []},
    )
    result = pretty_print().transform(record)
    assert result is not None
    assert result.message == "info: " + json.dumps(
        {"user_id": 12345, "session_id": "abcde12345", "extra_info": {"key": "value"}}, indent=2
    )
    assert result.metadata == record.metadata


def test_pretty_print_colorize_highlights_and_uncolorizes_to_plain() -> None:
    record = LogRecord("info", "m", {"user_id": 12345, "ok": True, "name": "ada"})
    plain = pretty_print().transform(record)
    colored = pretty_print(colorize="true").transform(record)
    assert plain is not None and colored is not None
    assert ANSI_PATTERN.search(colored.message)
    assert strip_colors(colored.message) == plain.message


def test_terminal_formatters_are_lossy_when_chained() -> None:
    result = combine([json_format(), simple()]).transform(LogRecord.new("info", "m"))
    assert result is not None
    assert result.message == 'info: {"level": "info", "message": "m"}'


def test_registry_builds_named_formats() -> None:
    stage = build_format(" JSON ", {"sort_keys": True})
    assert stage.name == "json"
    assert stage.options["sort_keys"] is True


def test_registry_rejects_unknown_names() -> None:
    with pytest.raises(KeyError, match="Unknown formatter 'yaml'"):
        build_format("yaml")


def test_registry_lists_every_option_driven_factory() -> None:
    assert sorted(FORMAT_FACTORIES) == [
        "align",
        "colorize",
        "ignore_private",
        "json",
        "ms",
        "pad_levels",
        "pretty_print",
        "simple",
        "timestamp",
        "uncolorize",
    ]
