"""Protocols describing the collaborators injected into :class:`Logger`."""

from __future__ import annotations

from .console import ConsolePort
from .time import ClockPort

__all__ = ["ClockPort", "ConsolePort"]
