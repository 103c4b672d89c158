"""Caller attribution built on live Python frames.

Purpose
-------
Recover the module, function and line number of the code that issued a log
statement so named loggers can prefix their output with the real call site
instead of the logger's own internals.

Contents
--------
* :class:`Frame` – one captured stack entry.
* :class:`CallerContext` – the resolved attribution for a single depth.
* :func:`capture_frames` – snapshot of the current stack, innermost first.
* :func:`resolve_context` – bounds-checked depth lookup over captured frames.

System Role
-----------
Capturing and resolving are split so the resolution rules (module stem,
anonymous callers, depth bounds) can be exercised with synthetic frames while
the capture side stays a thin wrapper over :func:`inspect.currentframe`.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from typing import Iterable, Sequence

from lib_color_log.errors import ConfigurationError, ContextResolutionError

ANONYMOUS = "Anonymous"


@dataclass(slots=True, frozen=True)
class Frame:
    """Single stack entry.

    Attributes
    ----------
    source:
        Source location identifier (the code object's file name).
    function:
        Function name or ``None`` for module level code, lambdas and
        comprehensions.
    line:
        Line number currently executing in the frame.
    """

    source: str
    function: str | None
    line: int


@dataclass(slots=True, frozen=True)
class CallerContext:
    """Attribution rendered into a named logger prefix."""

    module: str
    function: str
    line: int


def _function_name(code_name: str) -> str | None:
    if not code_name or code_name.startswith("<"):
        return None
    return code_name


def capture_frames(skip_sources: Iterable[str] = ()) -> list[Frame]:
    """Return the current call stack, innermost caller first.

    Leading frames that belong to this module or to any file in
    ``skip_sources`` are dropped, so index ``0`` is the first frame outside
    the logging machinery.
    """

    skipped = {os.path.normcase(source) for source in skip_sources}
    skipped.add(_SOURCE)
    frames: list[Frame] = []
    current = inspect.currentframe()
    try:
        while current is not None:
            code = current.f_code
            if frames or os.path.normcase(code.co_filename) not in skipped:
                frames.append(
                    Frame(
                        source=code.co_filename,
                        function=_function_name(code.co_name),
                        line=current.f_lineno,
                    )
                )
            current = current.f_back
    finally:
        del current
    return frames


def module_name(source: str, *, show_extension: bool = True) -> str:
    """Return the last path segment of ``source``.

    Examples
    --------
    >>> module_name("/srv/app/handlers.py")
    'handlers.py'
    >>> module_name("/srv/app/archive.tar.gz", show_extension=False)
    'archive'
    """

    name = os.path.basename(source)
    if not show_extension:
        name = name.split(".", 1)[0]
    return name


def resolve_context(frames: Sequence[Frame], depth: int, *, show_extension: bool = True) -> CallerContext:
    """Return the attribution for ``frames[depth]``.

    Raises
    ------
    ConfigurationError
        If ``depth`` is negative.
    ContextResolutionError
        If ``depth`` points past the captured frames.

    Examples
    --------
    >>> frames = [Frame("/app/bar.py", "foo", 12), Frame("/app/main.py", None, 3)]
    >>> resolve_context(frames, 0, show_extension=False)
    CallerContext(module='bar', function='foo', line=12)
    >>> resolve_context(frames, 1).function
    'Anonymous'
    """

    if depth < 0:
        raise ConfigurationError(f"stack depth must be >= 0, got {depth}")
    if depth >= len(frames):
        raise ContextResolutionError(f"stack depth {depth} is out of range: only {len(frames)} frame(s) available")
    frame = frames[depth]
    return CallerContext(
        module=module_name(frame.source, show_extension=show_extension),
        function=frame.function or ANONYMOUS,
        line=frame.line,
    )


_SOURCE = os.path.normcase(capture_frames.__code__.co_filename)


__all__ = [
    "ANONYMOUS",
    "CallerContext",
    "Frame",
    "capture_frames",
    "module_name",
    "resolve_context",
]
