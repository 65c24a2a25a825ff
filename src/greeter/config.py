"""Environment-driven settings and opt-in ``.env`` loading.

Purpose
-------
Collect the few knobs the entry points honour. None of them influence what is
written to stdout; they only steer stderr diagnostics and whether a nearby
``.env`` file is loaded before the operator CLI runs.

Contents
--------
* :class:`GreeterSettings` and :func:`load_settings`.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - dotenv toggling with
  CLI-over-environment precedence.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from greeter.adapters.diagnostics import LEVEL_NAMES

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "GREETER_LOG_LEVEL"
DOTENV_ENV_VAR = "GREETER_USE_DOTENV"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_ATTEMPTED = False
_DOTENV_PATH: Path | None = None


@dataclass(frozen=True, slots=True)
class GreeterSettings:
    """Resolved runtime settings.

    Attributes
    ----------
    log_level:
        Upper-case level name for stderr diagnostics.
    rejected_log_level:
        Raw ``GREETER_LOG_LEVEL`` value when it was not a known level name;
        entry points report it once logging is configured.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    rejected_log_level: str | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> GreeterSettings:
    """Read :class:`GreeterSettings` from ``environ`` (defaults to ``os.environ``).

    An unknown level name falls back to ``WARNING`` rather than failing; the
    greeter must exit successfully regardless of its environment.

    Examples
    --------
    >>> load_settings({"GREETER_LOG_LEVEL": "debug"}).log_level
    'DEBUG'
    >>> load_settings({"GREETER_LOG_LEVEL": "chatty"})
    GreeterSettings(log_level='WARNING', rejected_log_level='chatty')
    >>> load_settings({}).log_level
    'WARNING'
    """

    source = os.environ if environ is None else environ
    raw = source.get(LOG_LEVEL_ENV_VAR)
    if raw is None or not raw.strip():
        return GreeterSettings()
    normalized = raw.strip().upper()
    if normalized not in LEVEL_NAMES:
        return GreeterSettings(rejected_log_level=raw)
    return GreeterSettings(log_level=normalized)


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise ``GREETER_USE_DOTENV`` is consulted.

    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file into ``os.environ`` once per process.

    The search walks upward from the current working directory. Variables
    already present in the environment are left alone. The lookup is only
    remembered once loading succeeded, so a file that fails to parse is
    reported again on the next call.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    if _DOTENV_ATTEMPTED:
        return _DOTENV_PATH

    located = find_dotenv(usecwd=True)
    if not located:
        _DOTENV_ATTEMPTED = True
        logger.debug("no .env file found")
        return None

    resolved = Path(located).resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_ATTEMPTED = True
    _DOTENV_PATH = resolved
    logger.debug("loaded environment from %s", resolved)
    return resolved


def _reset_dotenv_state_for_testing() -> None:
    """Forget the remembered ``.env`` lookup."""

    global _DOTENV_ATTEMPTED, _DOTENV_PATH
    _DOTENV_ATTEMPTED = False
    _DOTENV_PATH = None


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DOTENV_ENV_VAR",
    "GreeterSettings",
    "LOG_LEVEL_ENV_VAR",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
