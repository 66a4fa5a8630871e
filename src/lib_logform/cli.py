"""Click-based command line interface.

Purpose
-------
Offer a shell-friendly way to try formatter pipelines: build stages by name,
feed one record through them and print the result.

Contents
--------
* :func:`cli` – command group with ``info``, ``formats`` and ``render``.
* :func:`main` – entry point wrapped by ``lib_cli_exit_tools``.

System Role
-----------
Presentation edge. Pipeline construction goes through the public factories
and :func:`lib_logform.config.options_from_env`, so the CLI exercises exactly
what library users get.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from typing import Any

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters.formats import FORMAT_FACTORIES, build_format
from .application.use_cases.combine import combine
from .domain.record import LogRecord

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
DEFAULT_PIPELINE = "timestamp,simple"


def _parse_assignment(text: str, *, what: str) -> tuple[str, Any]:
    key, sep, raw = text.partition("=")
    if not sep or not key.strip():
        raise click.BadParameter(f"expected KEY=VALUE, got {text!r}", param_hint=what)
    try:
        value: Any = json.loads(raw)
    except ValueError:
        value = raw
    return key.strip(), value


def _stage_options(assignments: Sequence[str]) -> dict[str, dict[str, Any]]:
    per_stage: dict[str, dict[str, Any]] = {}
    for text in assignments:
        target, value = _parse_assignment(text, what="--option")
        stage, dot, key = target.partition(".")
        if not dot or not key:
            raise click.BadParameter(f"expected STAGE.KEY=VALUE, got {text!r}", param_hint="--option")
        per_stage.setdefault(stage.strip().lower(), {})[key] = value
    return per_stage


def _given(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) is not click.core.ParameterSource.DEFAULT


@click.group(
    invoke_without_command=True,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env before running commands (env: {config_module.DOTENV_ENV_VAR}).",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python traceback on errors.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, traceback: bool) -> None:
    """Compose log-record formatters from the shell."""

    explicit_dotenv = use_dotenv if _given(ctx, "use_dotenv") else None
    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit_dotenv, env_value=env_toggle):
        loaded = config_module.enable_dotenv()
        logger.debug("dotenv file loaded: %s", loaded)
    if _given(ctx, "traceback"):
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("formats", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_formats() -> None:
    """List the formatter names accepted by ``render --pipeline``."""

    for name in sorted(FORMAT_FACTORIES):
        click.echo(name)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("level")
@click.argument("message")
@click.option("--meta", "meta", multiple=True, metavar="KEY=VALUE", help="Metadata entry; VALUE is JSON-decoded when possible.")
@click.option(
    "--pipeline",
    default=DEFAULT_PIPELINE,
    show_default=True,
    help="Comma-separated formatter names applied in order.",
)
@click.option(
    "--option",
    "stage_options",
    multiple=True,
    metavar="STAGE.KEY=VALUE",
    help="Bound option for one stage; overrides LOGFORM_<STAGE>_<KEY> variables.",
)
def cli_render(level: str, message: str, meta: tuple[str, ...], pipeline: str, stage_options: tuple[str, ...]) -> None:
    """Run one record through PIPELINE and print the resulting message."""

    metadata = dict(_parse_assignment(item, what="--meta") for item in meta)
    overrides = _stage_options(stage_options)
    names = [name.strip().lower() for name in pipeline.split(",") if name.strip()]
    stages = []
    for name in names:
        options = config_module.options_from_env(name).merged(overrides.get(name))
        try:
            stages.append(build_format(name, options))
        except KeyError as exc:
            raise click.BadParameter(str(exc.args[0]), param_hint="--pipeline") from exc

    result = combine(stages).transform(LogRecord(level, message, metadata))
    if result is None:
        click.echo("suppressed", err=True)
        return
    click.echo(result.message)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
