"""Static package metadata surfaced by the CLI ``info`` command.

Values mirror ``pyproject.toml``; keep them in sync when releasing.
"""

from __future__ import annotations

from collections.abc import Callable

name = "lib_logform"
title = "Composable log-record formatter pipelines"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_logform"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_logform"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer`` (default: print).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_logform:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")


def summary_info() -> str:
    """Return the banner produced by :func:`print_info` as one string."""

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["print_info", "summary_info", "version"]
