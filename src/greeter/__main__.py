"""Greeter process: print ``Hello, World!`` and exit with status ``0``.

Purpose
-------
Back ``python -m greeter`` and the ``greeter`` console script. Every command
line argument is accepted and discarded; option-looking strings such as
``--help`` or ``--version`` are ignored the same way as ``foo`` or ``bar``.

Contents
--------
* :func:`greet_command` - Click command collecting and ignoring all arguments.
* :func:`main` - test-friendly runner returning the exit status.

System Role
-----------
Presentation edge for the greet use case. Exception-to-exit-code mapping is
left to :mod:`lib_cli_exit_tools`; the command itself has no error branch.
"""

from __future__ import annotations

import logging
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from .adapters.diagnostics import configure_logging
from .composition import build_greet
from .config import load_settings

logger = logging.getLogger(f"{__package__}.__main__")

IGNORE_ALL_ARGUMENTS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "allow_interspersed_args": True,
    "help_option_names": [],
}


@click.command(context_settings=IGNORE_ALL_ARGUMENTS, add_help_option=False)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
def greet_command(ignored: tuple[str, ...]) -> int:
    """Write the greeting; ``ignored`` is never inspected."""

    return build_greet()()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the greeter and return its exit status.

    Parameters
    ----------
    argv:
        Optional argument strings (defaults to ``sys.argv[1:]``); ignored.

    Returns
    -------
    int
        ``0`` on every invocation.

    Examples
    --------
    >>> main(["foo", "bar"])
    Hello, World!
    0
    """

    settings = load_settings()
    configure_logging(settings.log_level)
    if settings.rejected_log_level is not None:
        logger.warning("ignoring unknown log level %r, using %s", settings.rejected_log_level, settings.log_level)

    args = list(argv) if argv is not None else None
    return lib_cli_exit_tools.run_cli(greet_command, argv=args, prog_name=__init__conf__.shell_command)


if __name__ == "__main__":
    raise SystemExit(main())
