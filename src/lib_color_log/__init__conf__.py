"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_color_log"
title = "Leveled, colourised console logging with caller context"
version = "0.1.0"
shell_command = "lib_color_log"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one ``writer`` call per line.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_color_log:
    ...
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label:<{pad}} = {value}\n" for label, value in fields)

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
