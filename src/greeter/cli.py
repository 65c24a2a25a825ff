"""Operator CLI (``greeterctl``) built on rich-click.

Purpose
-------
Give maintainers and packaging smoke tests a conventional command surface next
to the argument-ignoring ``greeter`` process: a metadata banner, ``--version``,
a ``hello`` subcommand and the traceback / dotenv / log-level toggles.

Contents
--------
* :func:`cli` - root group; prints the banner when no subcommand is given.
* :func:`cli_info`, :func:`cli_hello` - subcommands.
* :func:`main` - runner delegating exit-code mapping to
  :mod:`lib_cli_exit_tools` and restoring its traceback preferences afterwards.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as greeter_config
from .adapters.diagnostics import LEVEL_NAMES, configure_logging
from .composition import build_greet
from .greeter import summary_info

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    __init__conf__.version,
    "--version",
    "-V",
    prog_name=__init__conf__.operator_command,
    message="%(prog)s version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (overrides {greeter_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--log-level",
    type=click.Choice(sorted(LEVEL_NAMES, key=LEVEL_NAMES.__getitem__), case_sensitive=False),
    default=None,
    help=f"Diagnostic level on stderr (default: {greeter_config.LOG_LEVEL_ENV_VAR} or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: str | None) -> None:
    """Apply global options, then print the banner when no subcommand runs."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(greeter_config.DOTENV_ENV_VAR)
    if greeter_config.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        greeter_config.enable_dotenv()

    settings = greeter_config.load_settings()
    configure_logging(log_level or settings.log_level)
    if log_level is None and settings.rejected_log_level is not None:
        logger.warning("ignoring unknown log level %r, using %s", settings.rejected_log_level, settings.log_level)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the greeting, exactly as the greeter process does."""

    build_greet()()


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` and return its exit status.

    Traceback preferences set by ``--traceback`` only last for this call; the
    previous :mod:`lib_cli_exit_tools` configuration is restored afterwards.
    """

    previous = (
        lib_cli_exit_tools.config.traceback,
        lib_cli_exit_tools.config.traceback_force_color,
    )
    args = list(argv) if argv is not None else None
    try:
        return lib_cli_exit_tools.run_cli(cli, argv=args, prog_name=__init__conf__.operator_command)
    finally:
        lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous


__all__ = ["cli", "main"]
