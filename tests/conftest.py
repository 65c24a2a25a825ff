from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

import lib_cli_exit_tools
import pytest
from rich.console import Console

from greeter import config as greeter_config
from greeter.adapters.diagnostics import ROOT_LOGGER_NAME


@pytest.fixture
def record_console() -> Console:
    """Rich console writing to memory so tests can inspect rendered output."""

    return Console(file=StringIO(), record=True, width=120, force_terminal=False, color_system=None)


@pytest.fixture(autouse=True)
def _isolate_greeter_logger() -> Iterator[None]:
    """Undo handler/level changes made by ``configure_logging`` in a test."""

    target = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(target.handlers)
    level = target.level
    propagate = target.propagate
    yield
    target.handlers[:] = handlers
    target.setLevel(level)
    target.propagate = propagate


@pytest.fixture(autouse=True)
def _isolate_cli_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment toggles and exit-tool preferences test-local."""

    monkeypatch.delenv(greeter_config.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(greeter_config.DOTENV_ENV_VAR, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    greeter_config._reset_dotenv_state_for_testing()
    yield
    greeter_config._reset_dotenv_state_for_testing()
