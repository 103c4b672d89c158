"""Per-statement accumulator for styled console lines."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from . import styles

logger = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Return the textual form of a single message argument.

    Strings pass through untouched, everything else is rendered as compact
    JSON. Values JSON cannot encode fall back to :func:`str`.

    Examples
    --------
    >>> stringify("a"), stringify(1), stringify({"x": 1})
    ('a', '1', '{"x":1}')
    """

    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        logger.warning("Could not serialise %s for logging (%s), using str().", type(value).__name__, exc)
        return str(value)


def join_arguments(args: tuple[Any, ...]) -> str:
    """Stringify ``args`` and join them with single spaces."""

    return " ".join(stringify(arg) for arg in args)


class LineBuilder:
    """Accumulate text and escape sequences for one log statement.

    A builder belongs to exactly one statement: it is created, appended to and
    rendered without ever being shared, so two chains under construction at
    the same time cannot mix their fragments. When ``colorize`` is false every
    styling call is a no-op and the rendered line is plain text.

    Examples
    --------
    >>> LineBuilder(colorize=False).bold().append("a", 1).build()
    'a 1'
    >>> LineBuilder().color("red").append("x").build(trailing_reset=True) == "\\x1b[31mx\\x1b[0m"
    True
    """

    __slots__ = ("_parts", "colorize")

    def __init__(self, *, colorize: bool = True, seed: str = "") -> None:
        self.colorize = colorize
        self._parts: list[str] = [seed] if seed else []

    def append(self, *args: Any) -> "LineBuilder":
        if args:
            self._parts.append(join_arguments(args))
        return self

    def _style(self, sequence: str | None) -> "LineBuilder":
        if self.colorize and sequence:
            self._parts.append(sequence)
        return self

    def color(self, name: str) -> "LineBuilder":
        return self._style(styles.font(name) if self.colorize else None)

    def bg_color(self, name: str) -> "LineBuilder":
        return self._style(styles.background(name) if self.colorize else None)

    def style(self, name: str) -> "LineBuilder":
        """Append a system sequence by name (``bold``, ``underline`` ...)."""

        return self._style(styles.system(name) if self.colorize else None)

    def setting(self, setting: Mapping[str, object] | None) -> "LineBuilder":
        if not setting:
            return self
        return self._style(styles.attributes_from_setting(setting))

    def bold(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["bold"])

    def dim(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["dim"])

    def italic(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["italic"])

    def underscore(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["underscore"])

    underline = underscore

    def reverse(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["reverse"])

    def strikethrough(self) -> "LineBuilder":
        return self._style(styles.SYSTEM["strikethrough"])

    def reset(self) -> "LineBuilder":
        return self._style(styles.RESET)

    def build(self, *, trailing_reset: bool = False) -> str:
        """Return the accumulated line, optionally closed with a reset."""

        line = "".join(self._parts)
        if trailing_reset and self.colorize:
            line += styles.RESET
        return line


__all__ = ["LineBuilder", "join_arguments", "stringify"]
