"""Rich-powered diagnostic logging on standard error.

Purpose
-------
Route the ``greeter`` logger hierarchy to a Rich handler writing to stderr so
diagnostics never mix with the greeting on stdout.

Contents
--------
* :data:`LEVEL_NAMES` - accepted level names mapped to :mod:`logging` constants.
* :func:`coerce_level` - normalise a level name or number.
* :func:`configure_logging` - install (or replace) the Rich handler.

System Role
-----------
Called by the entry points in :mod:`greeter.__main__` and :mod:`greeter.cli`
once settings are known. Library modules only call ``logging.getLogger``.
"""

from __future__ import annotations

import logging
from typing import Mapping

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "greeter"

LEVEL_NAMES: Mapping[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_MARKER = "_greeter_diagnostics"


def coerce_level(level: str | int) -> int:
    """Translate ``level`` into a :mod:`logging` constant.

    Examples
    --------
    >>> coerce_level("debug")
    10
    >>> coerce_level(40)
    40
    >>> coerce_level("loud")
    Traceback (most recent call last):
    ...
    ValueError: Unknown log level: 'loud'
    """

    if isinstance(level, int):
        return level
    normalized = level.strip().upper()
    try:
        return LEVEL_NAMES[normalized]
    except KeyError as exc:
        raise ValueError(f"Unknown log level: {level!r}") from exc


def configure_logging(level: str | int = logging.WARNING, *, console: Console | None = None) -> logging.Logger:
    """Attach a Rich stderr handler to the ``greeter`` logger.

    Calling this again replaces the handler installed by a previous call, so
    entry points may reconfigure freely (the operator CLI does after parsing
    ``--log-level``).

    Parameters
    ----------
    level:
        Threshold for the ``greeter`` logger hierarchy.
    console:
        Optional Rich console; defaults to one bound to stderr.

    Returns
    -------
    logging.Logger
        The configured ``greeter`` logger.
    """

    target = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(target.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            target.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    setattr(handler, _HANDLER_MARKER, True)
    target.addHandler(handler)
    target.setLevel(coerce_level(level))
    target.propagate = False
    return target


__all__ = ["LEVEL_NAMES", "ROOT_LOGGER_NAME", "coerce_level", "configure_logging"]
