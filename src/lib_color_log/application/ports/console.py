"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that put finished log lines on a
terminal, so the emitter only ever hands over an assembled string.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Lets :meth:`lib_color_log.Logger.set_log_stream` swap plain text streams for
Rich consoles without the emitter knowing which one it talks to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write one assembled line (without trailing newline) to a console."""

    def write(self, line: str) -> None:
        """Emit ``line`` followed by a newline."""


__all__ = ["ConsolePort"]
