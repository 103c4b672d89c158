"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Route assembled ANSI lines through Rich so the target console decides how
much of the styling survives (colour system downgrades, ``NO_COLOR``,
recording for exports).

Contents
--------
* :class:`RichConsoleAdapter` - adapter installed when a
  :class:`rich.console.Console` is passed to ``set_log_stream``.

System Role
-----------
Optional human-facing sink; the plain stream adapter stays the default.
"""

from __future__ import annotations

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from lib_color_log.application.ports.console import ConsolePort
from lib_color_log.domain import styles

_CURSOR_CONTROLS = (
    (styles.CURSOR_UP, Control.move(0, -1)),
    (styles.CLEAR_LINE, Control((ControlType.ERASE_IN_LINE, 0))),
)


def _split_cursor_controls(line: str) -> tuple[list[Control], str]:
    """Peel leading cursor-up/clear-line sequences off ``line``."""

    controls: list[Control] = []
    while True:
        for sequence, control in _CURSOR_CONTROLS:
            if line.startswith(sequence):
                controls.append(control)
                line = line[len(sequence) :]
                break
        else:
            return controls, line


class RichConsoleAdapter(ConsolePort):
    """Render ANSI-styled lines on a Rich console."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Wrap ``console`` or build one honouring the colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)

    @property
    def console(self) -> Console:
        return self._console

    def write(self, line: str) -> None:
        """Decode the escape sequences in ``line`` and print it.

        Leading cursor movements (as written by ``Logger.joint``) go out as
        Rich control codes; ``Text.from_ansi`` would drop them.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleAdapter(console=console).write("\\x1b[32mok\\x1b[0m")
        >>> console.export_text()
        'ok\\n'
        """

        controls, line = _split_cursor_controls(line)
        if controls:
            self._console.control(*controls)
        text = Text.from_ansi(line)
        self._console.print(text, highlight=False, soft_wrap=True)


__all__ = ["RichConsoleAdapter"]
