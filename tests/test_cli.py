"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import json
import sys
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_logform import __init__conf__
from lib_logform import cli as cli_mod
from lib_logform.__init__conf__ import summary_info


def run_cli(args: list[str] | None = None, env: dict[str, str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click command with ``CliRunner`` and capture output."""

    runner = CliRunner()
    original_argv = sys.argv
    sys.argv = [__init__conf__.shell_command]
    try:
        result = runner.invoke(
            cli_mod.cli,
            args or [],
            prog_name=__init__conf__.shell_command,
            env=env,
        )
    finally:
        sys.argv = original_argv
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout.startswith("Info for lib_logform:")
    assert __init__conf__.version in stdout


def test_cli_formats_lists_registry() -> None:
    exit_code, stdout, _ = run_cli(["formats"])

    assert exit_code == 0
    assert stdout.split() == sorted(stdout.split())
    assert {"json", "simple", "timestamp", "colorize"} <= set(stdout.split())


def test_cli_render_default_pipeline_adds_timestamp() -> None:
    exit_code, stdout, _ = run_cli(["render", "info", "ready"])

    assert exit_code == 0
    line = stdout.strip()
    assert line.startswith("info: ready ")
    assert "timestamp" in json.loads(line[len("info: ready ") :])


def test_cli_render_json_with_metadata() -> None:
    exit_code, stdout, _ = run_cli(
        ["render", "warn", "disk low", "--pipeline", "json", "--meta", "free=3", "--meta", "unit=GB", "--option", "json.sort_keys=true"]
    )

    assert exit_code == 0
    assert stdout.strip() == '{"free": 3, "level": "warn", "message": "disk low", "unit": "GB"}'


@pytest.mark.parametrize("indent", ["1e999", "NaN"])
def test_cli_render_json_ignores_non_finite_indent(indent: str) -> None:
    exit_code, stdout, _ = run_cli(["render", "info", "m", "--pipeline", "json", "--option", f"json.indent={indent}"])

    assert exit_code == 0
    assert stdout.strip() == '{"level": "info", "message": "m"}'


def test_cli_render_reports_suppression() -> None:
    exit_code, output, _ = run_cli(["render", "error", "secret", "--pipeline", "ignore_private,simple", "--meta", "private=true"])

    assert exit_code == 0
    assert output.strip() == "suppressed"


def test_cli_option_overrides_environment() -> None:
    env = {"LOGFORM_IGNORE_PRIVATE_KEY": "hidden"}
    args = ["render", "error", "secret", "--pipeline", "ignore_private,simple", "--meta", "hidden=true"]

    _, from_env, _ = run_cli(args, env=env)
    assert from_env.strip() == "suppressed"

    _, overridden, _ = run_cli([*args, "--option", "ignore_private.key=other"], env=env)
    assert overridden.strip() == 'error: secret {"hidden": true}'


def test_cli_render_rejects_unknown_formatter() -> None:
    exit_code, output, _ = run_cli(["render", "info", "m", "--pipeline", "simple,yaml"])

    assert exit_code == 2
    assert "Unknown formatter 'yaml'" in output


@pytest.mark.parametrize("bad", ["noequals", "nodot=1"])
def test_cli_render_rejects_malformed_option(bad: str) -> None:
    exit_code, output, _ = run_cli(["render", "info", "m", "--option", bad])

    assert exit_code == 2
    assert "--option" in output


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "traceback_force_color": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "formats"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "pretty_print" in captured.out
