"""Environment configuration helpers.

Purpose
-------
Keep every read of process-wide configuration in one place: the ``LOGGER``
level seed, boolean toggles and optional ``.env`` loading via
:mod:`python-dotenv`.

Contents
--------
* :data:`LEVEL_ENV_VAR`, :data:`DOTENV_ENV_VAR` - variable names.
* :func:`level_from_env` - validated level seed (``None`` when absent/invalid).
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` support used by
  the CLI.

System Role
-----------
Loggers never look at the environment themselves; callers pass
``level=level_from_env()`` (or use :meth:`Logger.from_env`) so the seed is
read once, explicitly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain.levels import LogLevel

logger = logging.getLogger(__name__)

LEVEL_ENV_VAR = "LOGGER"
DOTENV_ENV_VAR = "LIB_COLOR_LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED: Path | None = None


def level_from_env(environ: Mapping[str, str] | None = None) -> LogLevel | None:
    """Return the level named by ``LOGGER`` or ``None``.

    Values that are not level names are ignored rather than raising, so a
    stray environment value never prevents a program from starting.

    Examples
    --------
    >>> level_from_env({"LOGGER": "info"}) is LogLevel.INFO
    True
    >>> level_from_env({"LOGGER": "verbose"}) is None
    True
    >>> level_from_env({}) is None
    True
    """

    source = os.environ if environ is None else environ
    value = source.get(LEVEL_ENV_VAR)
    if value is None:
        return None
    if not LogLevel.is_valid(value):
        logger.debug("Ignoring %s=%r: not a level name", LEVEL_ENV_VAR, value)
        return None
    return LogLevel.from_name(value)


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` should be loaded.

    An explicit CLI choice wins; otherwise the toggle variable decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _FALSY:
        return False
    return normalized in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search starts at ``search_from`` (default: the working directory) and
    walks up the parents. The file is loaded at most once per process.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, ``None`` when nothing was found.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if search_from is not None:
        candidate = _find_upwards(Path(search_from))
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("No .env file found")
        return None

    resolved = candidate.resolve()
    load_dotenv(dotenv_path=resolved, override=False)
    logger.debug("Loaded environment from %s", resolved)
    _DOTENV_LOADED = resolved
    return resolved


def _find_upwards(start: Path) -> Path | None:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "LEVEL_ENV_VAR",
    "enable_dotenv",
    "level_from_env",
    "should_use_dotenv",
]
