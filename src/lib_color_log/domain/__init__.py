"""Domain values used by the console logger: levels, styles, frames, lines."""

from __future__ import annotations

from .context import CallerContext, Frame, capture_frames, resolve_context
from .dates import DateFormat, format_timestamp
from .levels import LEVEL_ORDER, LevelStyle, LogLevel
from .line import LineBuilder

__all__ = [
    "CallerContext",
    "DateFormat",
    "Frame",
    "LEVEL_ORDER",
    "LevelStyle",
    "LineBuilder",
    "LogLevel",
    "capture_frames",
    "format_timestamp",
    "resolve_context",
]
