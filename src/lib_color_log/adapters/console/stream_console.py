"""Plain text-stream adapter implementing :class:`ConsolePort`.

Purpose
-------
Write assembled lines, escape sequences included, straight to a text stream.

Contents
--------
* :func:`is_writable` - validation used before a stream is installed.
* :class:`StreamConsoleAdapter` - default adapter of every logger.

System Role
-----------
Default sink. When no stream is given the adapter resolves ``sys.stdout`` at
write time so redirected or captured stdout is honoured.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO

from lib_color_log.application.ports.console import ConsolePort


def is_writable(stream: object) -> bool:
    """Return ``True`` when ``stream`` accepts text writes.

    Binary streams (``BytesIO``, files opened with ``"b"``) are rejected.

    Examples
    --------
    >>> from io import StringIO
    >>> is_writable(StringIO())
    True
    >>> is_writable(object())
    False
    >>> is_writable(io.BytesIO())
    False
    """

    if not callable(getattr(stream, "write", None)):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    mode = getattr(stream, "mode", "")
    if isinstance(mode, str) and "b" in mode:
        return False
    if getattr(stream, "closed", False):
        return False
    writable = getattr(stream, "writable", None)
    if callable(writable):
        return bool(writable())
    return True


class StreamConsoleAdapter(ConsolePort):
    """Write each line plus a newline to a text stream and flush it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        """Write ``line`` to the stream.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> StreamConsoleAdapter(buffer).write("ready")
        >>> buffer.getvalue()
        'ready\\n'
        """

        stream = self.stream
        stream.write(line + "\n")
        flush = getattr(stream, "flush", None)
        if callable(flush):
            flush()


__all__ = ["StreamConsoleAdapter", "is_writable"]
