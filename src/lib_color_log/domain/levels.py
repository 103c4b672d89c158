"""Ordered severity levels and their console presentation.

Purpose
-------
Model the seven severities understood by the emitter. Unlike the stdlib
numeric levels, filtering here is purely positional: a level is allowed when
it sits at or after the active level in :data:`LEVEL_ORDER`.

Contents
--------
* :class:`LogLevel` enum with parsing and ordering helpers.
* :class:`LevelStyle` and ``_STYLE_TABLE`` describing tag/message colours.

System Role
-----------
Consumed by :class:`lib_color_log.Logger` for gating and line assembly and by
:mod:`lib_color_log.config` when validating the ``LOGGER`` environment value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LogLevel(Enum):
    """Severity levels in filtering order (``DISABLE`` is the maximum)."""

    SUCCESS = "success"
    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARN = "warn"
    ERROR = "error"
    DISABLE = "disable"

    @property
    def ordinal(self) -> int:
        """Return the position of the level inside :data:`LEVEL_ORDER`.

        Examples
        --------
        >>> LogLevel.SUCCESS.ordinal, LogLevel.DISABLE.ordinal
        (0, 6)
        """

        return LEVEL_ORDER.index(self)

    @property
    def tag(self) -> str:
        """Return the bracketed tag written in front of messages."""

        return f"[{self.name}]"

    @property
    def style(self) -> "LevelStyle":
        """Return the colour association for this level."""

        try:
            return _STYLE_TABLE[self]
        except KeyError as exc:
            raise ValueError(f"{self.value!r} is not an emitting level") from exc

    def allows(self, level: "LogLevel") -> bool:
        """Return ``True`` when ``level`` passes a gate set at ``self``.

        Examples
        --------
        >>> LogLevel.NOTICE.allows(LogLevel.INFO)
        False
        >>> LogLevel.NOTICE.allows(LogLevel.ERROR)
        True
        >>> LogLevel.DISABLE.allows(LogLevel.ERROR)
        False
        """

        return level.ordinal >= self.ordinal

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in LEVEL_ORDER)

    @classmethod
    def is_valid(cls, name: object) -> bool:
        """Return ``True`` when ``name`` is an exact level name or member."""

        if isinstance(name, LogLevel):
            return True
        return isinstance(name, str) and name in cls.names()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Return the member whose value equals ``name``.

        Names are matched exactly (``"warn"``, not ``"WARN"``), mirroring the
        values accepted through the ``LOGGER`` environment variable.

        Raises
        ------
        ValueError
            If ``name`` is not one of :meth:`names`.

        Examples
        --------
        >>> LogLevel.from_name("notice") is LogLevel.NOTICE
        True
        >>> LogLevel.from_name("verbose")
        Traceback (most recent call last):
        ...
        ValueError: Unknown log level: 'verbose'
        """

        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unknown log level: {name!r}")


LEVEL_ORDER: tuple[LogLevel, ...] = (
    LogLevel.SUCCESS,
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.NOTICE,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.DISABLE,
)
# The sequence is significant: filtering compares positions, not severities.


@dataclass(slots=True, frozen=True)
class LevelStyle:
    """Colour names used to render one level.

    Attributes
    ----------
    tag_background:
        Background colour of the ``[LEVEL]`` tag.
    tag_font:
        Font colour of the tag, ``None`` keeps the terminal default.
    message_font:
        Font colour applied to the message arguments.
    """

    tag_background: str
    tag_font: str | None
    message_font: str


_STYLE_TABLE = {
    LogLevel.ERROR: LevelStyle("red", None, "red"),
    LogLevel.WARN: LevelStyle("yellow", "black", "yellow"),
    LogLevel.NOTICE: LevelStyle("magenta", "white", "magenta"),
    LogLevel.INFO: LevelStyle("green", "black", "green"),
    LogLevel.DEBUG: LevelStyle("cyan", "black", "cyan"),
    LogLevel.SUCCESS: LevelStyle("green", "black", "green"),
}


__all__ = ["LEVEL_ORDER", "LevelStyle", "LogLevel"]
