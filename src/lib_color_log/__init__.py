"""Public package surface for leveled, colourised console logging.

Importing the package builds :data:`logger`, a default :class:`Logger` whose
initial level is read once from the ``LOGGER`` environment variable.
:func:`create_named_logger` derives loggers that prefix lines with caller
context.

Examples
--------
>>> from io import StringIO
>>> from lib_color_log import Logger
>>> out = StringIO()
>>> lg = Logger(color=False, stream=out, level="info")
>>> lg.set_date(lambda: "T")
>>> lg.debug("hidden")
>>> lg.info("shown", 1)
>>> out.getvalue()
'T [INFO] shown 1\\n'
"""

from __future__ import annotations

from .domain.context import CallerContext, Frame, capture_frames, resolve_context
from .domain.dates import DateFormat
from .domain.levels import LEVEL_ORDER, LogLevel
from .domain.line import LineBuilder
from .errors import (
    ColorLogError,
    ConfigurationError,
    ContextResolutionError,
    InvalidLevelError,
    InvalidStreamError,
)
from .lib_color_log import Logger, LoggerOptions, Statement, summary_info

logger = Logger.from_env()
create_named_logger = logger.create_named_logger

__all__ = [
    "CallerContext",
    "ColorLogError",
    "ConfigurationError",
    "ContextResolutionError",
    "DateFormat",
    "Frame",
    "InvalidLevelError",
    "InvalidStreamError",
    "LEVEL_ORDER",
    "LineBuilder",
    "LogLevel",
    "Logger",
    "LoggerOptions",
    "Statement",
    "capture_frames",
    "create_named_logger",
    "logger",
    "resolve_context",
    "summary_info",
]
