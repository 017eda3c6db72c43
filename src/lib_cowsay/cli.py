"""Command line adapter built on rich-click.

Purpose
-------
Expose :func:`lib_cowsay.cowsay` to shells through the ``lib_cowsay`` console
script and ``python -m lib_cowsay``.

Contents
--------
* :func:`cli` - root group handling ``--version``, traceback and ``.env``
  toggles.
* :func:`cli_say` - print a message with the cow.
* :func:`cli_info` - print the metadata banner.
* :func:`main` - run the group through :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Outermost layer: argument parsing, stdin handling and exit-code mapping live
here so the library façade stays free of process concerns.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click import get_text_stream
from click.core import ParameterSource

from . import __init__conf__
from . import config as cowsay_config
from .adapters import RichConsoleWriter, StdoutWriter
from .application.ports import WriterPort
from .lib_cowsay import cowsay as _cowsay
from .lib_cowsay import summary_info as _summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
STDIN_MARKER = "-"

logger = logging.getLogger(__name__)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load variables from the nearest .env (also enabled by {cowsay_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner when idle."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if cowsay_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(cowsay_config.DOTENV_ENV_VAR)):
        cowsay_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(_summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(_summary_info(), nl=False)


@cli.command("say", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("words", nargs=-1)
@click.option("--style", default=None, help="Rich style applied to the whole output, e.g. 'bold green'.")
@click.option("--force-color", is_flag=True, default=False, help="Emit colour codes even when stdout is not a terminal.")
def cli_say(words: tuple[str, ...], style: str | None, force_color: bool) -> None:
    """Print WORDS in a speech bubble above a cow.

    Use '-' to read the message from stdin.
    """

    message = _resolve_message(words)
    writer: WriterPort
    if style or force_color:
        writer = RichConsoleWriter(style=style, force_color=force_color)
    else:
        writer = StdoutWriter()
    _cowsay(message, writer=writer)


def _resolve_message(words: tuple[str, ...]) -> str:
    """Return the message from arguments, stdin or configuration.

    Explicit words win. ``-`` reads stdin as-is. Without words a piped stdin
    is read, and an empty or interactive stdin falls back to
    :func:`lib_cowsay.config.default_message`.
    """

    if words == (STDIN_MARKER,):
        return _read_stdin()
    if words:
        return " ".join(words)
    stdin = get_text_stream("stdin")
    if not stdin.isatty():
        piped = _read_stdin()
        if piped:
            return piped
    return cowsay_config.default_message()


def _read_stdin() -> str:
    text = get_text_stream("stdin").read()
    logger.debug("read %d characters from stdin", len(text))
    return text.rstrip("\r\n")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Put the traceback preferences back after the run so embedding callers
        keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
