"""Exception taxonomy raised by the console logger.

Configuration problems subclass :class:`ValueError` so callers that already
guard level parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class ColorLogError(Exception):
    """Base class for every error raised by :mod:`lib_color_log`."""


class ConfigurationError(ColorLogError, ValueError):
    """Raised synchronously when a logger is configured with invalid values."""


class InvalidLevelError(ConfigurationError):
    """Raised by :meth:`Logger.set_level` for names outside the level list."""


class InvalidStreamError(ConfigurationError):
    """Raised when a replacement output stream cannot be written to."""


class ContextResolutionError(ColorLogError, LookupError):
    """Raised when the configured stack depth points past the captured frames."""


__all__ = [
    "ColorLogError",
    "ConfigurationError",
    "ContextResolutionError",
    "InvalidLevelError",
    "InvalidStreamError",
]
