"""Concrete console adapters implementing :class:`ConsolePort`."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .console.stream_console import StreamConsoleAdapter, is_writable

__all__ = ["RichConsoleAdapter", "StreamConsoleAdapter", "is_writable"]
