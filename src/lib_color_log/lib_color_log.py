"""Console logger façade wiring levels, caller context and console adapters.

Purpose
-------
Expose the public :class:`Logger` API: level-gated, colourised, timestamped
lines with optional caller attribution, plus a fluent styling surface for
free-form output.

Contents
--------
* :class:`LoggerOptions` – frozen prefix/context configuration.
* :class:`Logger` – level-filtered emitter.
* :class:`Statement` – fluent builder bound to a logger for one line.
* :func:`summary_info` – metadata banner used by the CLI.

System Role
-----------
Sits at the edge of the package: translates constructor arguments into
domain values (:mod:`lib_color_log.domain`), resolves the caller through
:func:`lib_color_log.domain.context.capture_frames` and hands finished lines to
a :class:`~lib_color_log.application.ports.ConsolePort` adapter.

Every statement assembles its text on its own
:class:`~lib_color_log.domain.line.LineBuilder`; the logger keeps no pending
buffer between calls. The only per-instance text state is the last committed
line, which the deprecated :meth:`Logger.joint` replays.
"""

from __future__ import annotations

import logging
import os
import warnings
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, TextIO, Union

from rich.console import Console

from .adapters import RichConsoleAdapter, StreamConsoleAdapter, is_writable
from .application.ports import ClockPort, ConsolePort
from .config import level_from_env
from .domain import styles
from .domain.context import CallerContext, capture_frames, resolve_context
from .domain.dates import DateFormat, format_timestamp
from .domain.levels import LogLevel
from .domain.line import LineBuilder
from .errors import ConfigurationError, InvalidLevelError, InvalidStreamError

logger = logging.getLogger(__name__)

StreamLike = Union[TextIO, Console, StreamConsoleAdapter, RichConsoleAdapter]


class _SystemClock(ClockPort):
    """Clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class LoggerOptions:
    """Prefix configuration fixed at construction time.

    Attributes
    ----------
    named:
        Append bracketed caller context after the timestamp.
    show_module, show_extension, show_caller, show_line_number:
        Which parts of the caller context appear inside the brackets.
    date_format:
        Timestamp rendering.
    stack_depth:
        Frame index handed to the context resolver; ``0`` is the code that
        called the logger. Required when ``named`` is set.
    debug_mode:
        Log the captured frames on this module's logger for every prefix.
    """

    named: bool = False
    show_module: bool = True
    show_extension: bool = True
    show_caller: bool = False
    show_line_number: bool = False
    date_format: DateFormat = DateFormat.ISO
    stack_depth: int | None = None
    debug_mode: bool = False

    def __post_init__(self) -> None:
        if self.named and self.stack_depth is None:
            raise ConfigurationError("stack_depth is required for named loggers")
        if self.stack_depth is not None and self.stack_depth < 0:
            raise ConfigurationError(f"stack_depth must be >= 0, got {self.stack_depth}")


def _coerce_level(level: str | LogLevel) -> LogLevel:
    if isinstance(level, LogLevel):
        return level
    if not LogLevel.is_valid(level):
        raise InvalidLevelError(f"Level you are trying to set is invalid: {level!r} (expected one of {', '.join(LogLevel.names())})")
    return LogLevel.from_name(level)


def _coerce_date_format(value: str | DateFormat) -> DateFormat:
    if isinstance(value, DateFormat):
        return value
    try:
        return DateFormat.from_name(value)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def _console_for(stream: StreamLike | None) -> ConsolePort:
    if stream is None:
        return StreamConsoleAdapter()
    if isinstance(stream, (StreamConsoleAdapter, RichConsoleAdapter)):
        return stream
    if isinstance(stream, Console):
        return RichConsoleAdapter(console=stream)
    if is_writable(stream):
        return StreamConsoleAdapter(stream)  # type: ignore[arg-type]
    raise InvalidStreamError(f"invalid writable stream object: {stream!r}")


class Statement:
    """Fluent builder for one line, committed through its logger.

    Obtained from the styling methods of :class:`Logger`; every call returns
    the same statement until :meth:`log` writes it.

    Examples
    --------
    >>> from io import StringIO
    >>> out = StringIO()
    >>> lg = Logger(color=False, stream=out)
    >>> _ = lg.bold().append("status: ").color("green").log("ok")
    >>> out.getvalue()
    'status: ok\\n'
    """

    __slots__ = ("_builder", "_logger")

    def __init__(self, owner: "Logger", *, seed: str = "") -> None:
        self._logger = owner
        self._builder = LineBuilder(colorize=owner.color_enabled, seed=seed)

    def append(self, *args: Any) -> "Statement":
        self._builder.append(*args)
        return self

    def color(self, name: str) -> "Statement":
        self._builder.color(name)
        return self

    def bg_color(self, name: str) -> "Statement":
        self._builder.bg_color(name)
        return self

    def style(self, name: str) -> "Statement":
        """Apply a system style by name, e.g. ``"bold"`` or ``"underline"``."""

        self._builder.style(name)
        return self

    def bold(self) -> "Statement":
        self._builder.bold()
        return self

    def dim(self) -> "Statement":
        self._builder.dim()
        return self

    def italic(self) -> "Statement":
        self._builder.italic()
        return self

    def underscore(self) -> "Statement":
        self._builder.underscore()
        return self

    underline = underscore

    def reverse(self) -> "Statement":
        self._builder.reverse()
        return self

    def strikethrough(self) -> "Statement":
        self._builder.strikethrough()
        return self

    def reset(self) -> "Statement":
        self._builder.reset()
        return self

    def render(self, *args: Any) -> str:
        """Return the finished line (``args`` appended) without writing it."""

        self._builder.append(*args)
        return self._builder.build(trailing_reset=True)

    def log(self, *args: Any) -> "Logger":
        """Append ``args``, write the line and return the owning logger."""

        self._logger._commit(self.render(*args))
        return self._logger


class Logger:
    """Level-filtered console logger.

    Parameters
    ----------
    named:
        Include caller context (module, function, line) after the timestamp.
    show_module:
        Show the calling module's file name in named mode.
    show_extension:
        Keep the file extension of the module name.
    show_caller:
        Show the calling function's name in named mode.
    show_line_number:
        Show the call-site line number in named mode.
    date_format:
        ``"iso"``, ``"utc"`` or ``"local"``.
    stack_depth:
        Frames to skip past the logging call; required when ``named``.
    debug_mode:
        Log captured frames at DEBUG on the ``lib_color_log`` logger.
    level:
        Initial minimum level; ``None`` allows everything. Use
        :meth:`from_env` to seed it from ``LOGGER``.
    color:
        Emit ANSI styling.
    stream:
        Text stream, :class:`rich.console.Console` or console adapter;
        defaults to ``sys.stdout``.
    clock:
        :class:`ClockPort` used for timestamps.

    Raises
    ------
    ConfigurationError
        For unknown date formats, a missing or negative ``stack_depth`` or an
        invalid ``level``.
    InvalidStreamError
        If ``stream`` cannot be written to.
    """

    def __init__(
        self,
        named: bool = False,
        show_module: bool = True,
        show_extension: bool = True,
        show_caller: bool = False,
        show_line_number: bool = False,
        date_format: str | DateFormat = DateFormat.ISO,
        stack_depth: int | None = None,
        debug_mode: bool = False,
        *,
        level: str | LogLevel | None = None,
        color: bool = True,
        stream: StreamLike | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        self.options = LoggerOptions(
            named=named,
            show_module=show_module,
            show_extension=show_extension,
            show_caller=show_caller,
            show_line_number=show_line_number,
            date_format=_coerce_date_format(date_format),
            stack_depth=stack_depth,
            debug_mode=debug_mode,
        )
        self._level: LogLevel | None = _coerce_level(level) if level is not None else None
        self._color = color
        self._console = _console_for(stream)
        self._clock: ClockPort = clock if clock is not None else _SystemClock()
        self._get_date: Callable[[], str] = self._default_date
        self._last_line = ""
        logger.debug("Logger created: %s, level=%s, color=%s", self.options, self._level, self._color)

    @classmethod
    def from_env(cls, *args: Any, environ: Mapping[str, str] | None = None, **kwargs: Any) -> "Logger":
        """Build a logger whose initial level comes from ``LOGGER``.

        Invalid or missing values leave the level unset.
        """

        return cls(*args, level=level_from_env(environ), **kwargs)

    def create_named_logger(
        self,
        *,
        show_module: bool = True,
        show_extension: bool = True,
        show_caller: bool = False,
        show_line_number: bool = False,
        date_format: str | DateFormat = DateFormat.ISO,
        stack_depth: int = 0,
        debug_mode: bool = False,
    ) -> "Logger":
        """Return a named logger sharing this logger's level, colour and console."""

        return Logger(
            True,
            show_module,
            show_extension,
            show_caller,
            show_line_number,
            date_format,
            stack_depth,
            debug_mode,
            level=self._level,
            color=self._color,
            stream=self._console,
            clock=self._clock,
        )

    # configuration -----------------------------------------------------

    @property
    def level(self) -> LogLevel | None:
        return self._level

    @property
    def color_enabled(self) -> bool:
        return self._color

    @property
    def console(self) -> ConsolePort:
        return self._console

    @property
    def last_line(self) -> str:
        return self._last_line

    def set_level(self, level: str | LogLevel) -> None:
        """Set the minimum level; invalid names raise and leave it unchanged."""

        self._level = _coerce_level(level)

    def set_level_no_color(self) -> None:
        self._color = False

    def set_level_color(self) -> None:
        self._color = True

    disable_color = set_level_no_color
    enable_color = set_level_color

    def set_log_stream(self, stream: StreamLike) -> None:
        """Replace the output destination.

        Raises
        ------
        InvalidStreamError
            If ``stream`` is neither writable nor a Rich console/adapter.
        """

        self._console = _console_for(stream)

    def set_date(self, callback: Callable[[], str]) -> None:
        """Install a custom timestamp function; its result is rendered with ``str``."""

        if not callable(callback):
            raise ConfigurationError("date callback must be callable")
        self._get_date = callback

    def is_level_valid(self, level: object) -> bool:
        return LogLevel.is_valid(level)

    def is_allowed(self, level: str | LogLevel) -> bool:
        """Return ``True`` if ``level`` passes the active level gate.

        Examples
        --------
        >>> lg = Logger(level="notice")
        >>> [lg.is_allowed(name) for name in ("info", "notice", "error")]
        [False, True, True]
        """

        if self._level is None:
            return True
        return self._level.allows(_coerce_level(level))

    is_allowed_level = is_allowed

    # prefix ------------------------------------------------------------

    def _default_date(self) -> str:
        return format_timestamp(self._clock.now(), self.options.date_format)

    def _resolve_caller(self) -> CallerContext:
        options = self.options
        frames = capture_frames(skip_sources=(_SOURCE,))
        depth = options.stack_depth or 0
        if options.debug_mode:
            logger.debug(
                "Captured %d frame(s), selecting depth %d: %s",
                len(frames),
                depth,
                [f"{os.path.basename(frame.source)}:{frame.function}:{frame.line}" for frame in frames],
            )
        return resolve_context(frames, depth, show_extension=options.show_extension)

    def get_prefix(self) -> str:
        """Return the timestamp, plus bracketed caller context in named mode.

        Raises
        ------
        ContextResolutionError
            If the configured depth exceeds the current stack.
        """

        timestamp = str(self._get_date())
        options = self.options
        if not options.named:
            return timestamp
        if not (options.show_module or options.show_caller or options.show_line_number):
            return timestamp

        caller = self._resolve_caller()
        context = ""
        if options.show_module:
            context += caller.module
        if options.show_caller:
            context += f" > {caller.function}" if options.show_module else caller.function
        if options.show_line_number:
            context += f":{caller.line}"
        return f"{timestamp} [{context}]"

    # emission ----------------------------------------------------------

    def _write(self, line: str) -> None:
        self._console.write(line)

    def _commit(self, line: str) -> None:
        self._write(line)
        self._last_line = line

    def format_line(self, level: str | LogLevel, *args: Any) -> str:
        """Return the line ``level`` would emit for ``args`` without writing it.

        The level gate is not consulted.
        """

        resolved = _coerce_level(level)
        style = resolved.style
        builder = LineBuilder(colorize=self._color)
        builder.append(self.get_prefix() + " ")
        builder.bg_color(style.tag_background)
        if style.tag_font is not None:
            builder.color(style.tag_font)
        builder.append(resolved.tag).reset().append(" ")
        builder.color(style.message_font).append(*args)
        return builder.build(trailing_reset=True)

    def _emit(self, level: LogLevel, args: tuple[Any, ...]) -> None:
        if not self.is_allowed(level):
            return
        self._commit(self.format_line(level, *args))

    def error(self, *args: Any) -> None:
        self._emit(LogLevel.ERROR, args)

    def warn(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, args)

    def notice(self, *args: Any) -> None:
        self._emit(LogLevel.NOTICE, args)

    def info(self, *args: Any) -> None:
        self._emit(LogLevel.INFO, args)

    def debug(self, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, args)

    def success(self, *args: Any) -> None:
        self._emit(LogLevel.SUCCESS, args)

    def log(self, *args: Any) -> "Logger":
        """Write ``args`` as-is (no prefix, no level gate)."""

        return Statement(self).log(*args)

    # fluent styling ----------------------------------------------------

    def append(self, *args: Any) -> Statement:
        return Statement(self).append(*args)

    def color(self, name: str) -> Statement:
        return Statement(self).color(name)

    def bg_color(self, name: str) -> Statement:
        return Statement(self).bg_color(name)

    def style(self, name: str) -> Statement:
        return Statement(self).style(name)

    def bold(self) -> Statement:
        return Statement(self).bold()

    def dim(self) -> Statement:
        return Statement(self).dim()

    def italic(self) -> Statement:
        return Statement(self).italic()

    def underscore(self) -> Statement:
        return Statement(self).underscore()

    underline = underscore

    def reverse(self) -> Statement:
        return Statement(self).reverse()

    def strikethrough(self) -> Statement:
        return Statement(self).strikethrough()

    def reset(self) -> Statement:
        return Statement(self).reset()

    # one-shot coloured output --------------------------------------------

    def font_color_log(self, color: str, text: Any, setting: Mapping[str, object] | None = None) -> None:
        """Write ``text`` in font ``color`` with optional text attributes."""

        builder = LineBuilder(colorize=self._color).setting(setting).color(color).append(text)
        self._write(builder.build(trailing_reset=True))

    def bg_color_log(self, color: str, text: Any, setting: Mapping[str, object] | None = None) -> None:
        """Write ``text`` on background ``color`` with optional text attributes."""

        builder = LineBuilder(colorize=self._color).setting(setting).bg_color(color).append(text)
        self._write(builder.build(trailing_reset=True))

    def color_log(self, colors: Mapping[str, str], text: Any, setting: Mapping[str, object] | None = None) -> None:
        """Write ``text`` using ``colors["font"]`` on ``colors["bg"]``."""

        builder = LineBuilder(colorize=self._color).setting(setting)
        builder.color(colors.get("font", "")).bg_color(colors.get("bg", "")).append(text)
        self._write(builder.build(trailing_reset=True))

    # legacy ------------------------------------------------------------

    def joint(self) -> Statement:
        """Erase the current terminal line and continue the previous one.

        .. deprecated::
            Build the whole line with :meth:`append` before committing it.
        """

        warnings.warn("`joint` is deprecated, please use `append`", DeprecationWarning, stacklevel=2)
        self._write(styles.CURSOR_UP + styles.CLEAR_LINE)
        previous = self._last_line.replace(styles.CURSOR_UP, "", 1)
        return Statement(self, seed=styles.CURSOR_UP + previous)


_SOURCE = os.path.normcase(Logger.__init__.__code__.co_filename)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["Logger", "LoggerOptions", "Statement", "summary_info"]
