"""Environment-driven configuration helpers.

Purpose
-------
Let deployments pre-configure formatter options through environment variables
(optionally loaded from a ``.env`` file) without touching code.

Contents
--------
* :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`, :func:`enable_dotenv` –
  opt-in ``.env`` loading via ``python-dotenv``.
* :func:`options_from_env` – collect ``LOGFORM_<NAME>_<KEY>`` variables into
  :class:`FormatOptions` for formatter ``<name>``.

System Role
-----------
Edge module used by the CLI. Library code never reads the environment on its
own; callers decide when configuration is applied.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from lib_logform.domain.options import FormatOptions
from lib_logform.domain.values import parse_flag

ENV_PREFIX = "LOGFORM_"
DOTENV_ENV_VAR = "LOGFORM_USE_DOTENV"

_DOTENV_LOCK = threading.Lock()
_DOTENV_PATH: Path | None = None
_DOTENV_LOADED = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise a truthy :data:`DOTENV_ENV_VAR` value
    enables loading.

    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    return parse_flag(env_value, False)


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file into :data:`os.environ`.

    Walks upwards from ``search_from`` (default: the working directory).
    Variables already present in the environment keep precedence. The first
    successful call wins; later calls return the cached path.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, ``None`` when none was found.
    """

    global _DOTENV_PATH, _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        if search_from is None:
            found = find_dotenv(usecwd=True)
        else:
            found = _find_upwards(Path(search_from))
        if not found:
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        _DOTENV_PATH = path
        _DOTENV_LOADED = True
        return path


def _find_upwards(start: Path) -> str:
    directory = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for candidate in (directory, *directory.parents):
        env_file = candidate / ".env"
        if env_file.is_file():
            return str(env_file)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH, _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_PATH = None
        _DOTENV_LOADED = False


def _decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def options_from_env(name: str, environ: Mapping[str, str] | None = None) -> FormatOptions:
    """Return options for formatter ``name`` taken from the environment.

    ``LOGFORM_TIMESTAMP_FORMAT=%H:%M`` yields ``{"format": "%H:%M"}`` for
    ``name="timestamp"``. Values that parse as JSON are decoded, everything
    else stays a raw string.

    Examples
    --------
    >>> env = {"LOGFORM_COLORIZE_ALL": "true", "LOGFORM_COLORIZE_COLORS": '{"info": "blue"}', "HOME": "/root"}
    >>> dict(options_from_env("colorize", env))
    {'all': True, 'colors': {'info': 'blue'}}
    >>> dict(options_from_env("timestamp", {"LOGFORM_TIMESTAMP_FORMAT": "%H:%M"}))
    {'format': '%H:%M'}
    """

    source = os.environ if environ is None else environ
    prefix = f"{ENV_PREFIX}{name.strip().upper()}_"
    collected: dict[str, Any] = {}
    for key, raw in source.items():
        if key.startswith(prefix) and len(key) > len(prefix):
            collected[key[len(prefix) :].lower()] = _decode(raw)
    return FormatOptions(collected)


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "enable_dotenv",
    "options_from_env",
    "should_use_dotenv",
]
