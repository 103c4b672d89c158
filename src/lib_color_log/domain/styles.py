"""ANSI escape tables for terminal styling.

Three disjoint families are exposed: system controls (reset, text attributes
and cursor movement), font colours and background colours. Lookups for
unknown names log a warning on this module's logger and return ``None`` so the
caller can skip the token and still deliver the message.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

logger = logging.getLogger(__name__)

SYSTEM: Mapping[str, str] = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underscore": "\x1b[4m",
    "reverse": "\x1b[7m",
    "strikethrough": "\x1b[9m",
    "backoneline": "\x1b[1A",
    "cleanthisline": "\x1b[K",
}

FONT: Mapping[str, str] = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
}

BACKGROUND: Mapping[str, str] = {
    "black": "\x1b[40m",
    "red": "\x1b[41m",
    "green": "\x1b[42m",
    "yellow": "\x1b[43m",
    "blue": "\x1b[44m",
    "magenta": "\x1b[45m",
    "cyan": "\x1b[46m",
    "white": "\x1b[47m",
}

RESET = SYSTEM["reset"]
CURSOR_UP = SYSTEM["backoneline"]
CLEAR_LINE = SYSTEM["cleanthisline"]

#: Text attributes that may be toggled through a ``setting`` mapping.
TEXT_ATTRIBUTES: tuple[str, ...] = ("bold", "italic", "dim", "underscore", "reverse", "strikethrough")

_ALIASES = {"underline": "underscore"}

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def font(name: str) -> str | None:
    """Return the font colour sequence for ``name`` or ``None`` when unknown.

    Examples
    --------
    >>> font("red") == "\\x1b[31m"
    True
    >>> font("chartreuse") is None
    True
    """

    code = FONT.get(name)
    if code is None:
        logger.warning("Font color %r not found, using the default.", name)
    return code


def background(name: str) -> str | None:
    """Return the background colour sequence for ``name`` or ``None``."""

    code = BACKGROUND.get(name)
    if code is None:
        logger.warning("Background color %r not found, using the default.", name)
    return code


def system(name: str) -> str | None:
    """Return a system control sequence, accepting ``underline`` as an alias."""

    code = SYSTEM.get(_ALIASES.get(name, name))
    if code is None:
        logger.warning("Style %r not found, skipping it.", name)
    return code


def attributes_from_setting(setting: Mapping[str, object]) -> str:
    """Concatenate the attributes switched on in ``setting``.

    Keys must be one of :data:`TEXT_ATTRIBUTES` and values booleans; anything
    else is reported and ignored.

    Examples
    --------
    >>> attributes_from_setting({"bold": True, "italic": False}) == "\\x1b[1m"
    True
    """

    sequence = ""
    for key, value in setting.items():
        if key not in TEXT_ATTRIBUTES:
            logger.warning("%s is not a valid style setting.", key)
            continue
        if value is True:
            sequence += SYSTEM[key]
        elif value is not False:
            logger.warning("The value of %s should be a boolean, got %r.", key, value)
    return sequence


def strip_ansi(text: str) -> str:
    """Return ``text`` without escape sequences.

    Examples
    --------
    >>> strip_ansi("\\x1b[31mred\\x1b[0m")
    'red'
    """

    return ANSI_PATTERN.sub("", text)


__all__ = [
    "ANSI_PATTERN",
    "BACKGROUND",
    "CLEAR_LINE",
    "CURSOR_UP",
    "FONT",
    "RESET",
    "SYSTEM",
    "TEXT_ATTRIBUTES",
    "attributes_from_setting",
    "background",
    "font",
    "strip_ansi",
    "system",
]
