"""Click command line interface for the console logger.

Purpose
-------
Offer a tiny CLI so installations can be smoke-tested and themes previewed:
``lib_color_log info`` prints the metadata banner, ``lib_color_log demo``
emits one line per level with the requested options.

Contents
--------
* :func:`cli` - root group handling ``--version`` and ``.env`` loading.
* :func:`info_command`, :func:`demo_command` - subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .domain.dates import DateFormat
from .domain.levels import LogLevel
from .errors import ColorLogError
from .lib_color_log import Logger, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_SAMPLES = (
    (LogLevel.SUCCESS, "Success message"),
    (LogLevel.DEBUG, "Debug message"),
    (LogLevel.INFO, "Information message"),
    (LogLevel.NOTICE, "Notice message"),
    (LogLevel.WARN, "Warning message"),
    (LogLevel.ERROR, "Error message"),
)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables (e.g. LOGGER) from the nearest .env first.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Leveled, colourised console logging."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info_command() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", type=click.Choice(LogLevel.names()), default=None, help="Minimum level (default: $LOGGER or everything).")
@click.option("--color/--no-color", default=True, show_default=True, help="Emit ANSI colours.")
@click.option("--named", is_flag=True, help="Prefix lines with caller context.")
@click.option("--caller/--no-caller", default=True, show_default=True, help="Show the calling function in named mode.")
@click.option("--line-number/--no-line-number", default=True, show_default=True, help="Show the line number in named mode.")
@click.option(
    "--date-format",
    type=click.Choice([member.value for member in DateFormat]),
    default=DateFormat.ISO.value,
    show_default=True,
)
def demo_command(level: str | None, color: bool, named: bool, caller: bool, line_number: bool, date_format: str) -> None:
    """Emit one sample line per level."""

    try:
        target = Logger.from_env(date_format=date_format, color=color)
        if level is not None:
            target.set_level(level)
        if named:
            target = target.create_named_logger(
                show_extension=False,
                show_caller=caller,
                show_line_number=line_number,
                date_format=date_format,
            )
        _emit_samples(target)
    except ColorLogError as exc:
        raise click.ClickException(str(exc)) from exc


def _emit_samples(target: Logger) -> None:
    emitters = {
        LogLevel.SUCCESS: target.success,
        LogLevel.DEBUG: target.debug,
        LogLevel.INFO: target.info,
        LogLevel.NOTICE: target.notice,
        LogLevel.WARN: target.warn,
        LogLevel.ERROR: target.error,
    }
    for level, message in _SAMPLES:
        emitters[level](message)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_color_log, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


__all__ = ["cli", "demo_command", "info_command", "main"]
