from __future__ import annotations

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from greeter.adapters.diagnostics import ROOT_LOGGER_NAME, coerce_level, configure_logging


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" Warning ", logging.WARNING),
        ("error", logging.ERROR),
        ("CRITICAL", logging.CRITICAL),
    ],
)
def test_coerce_level_accepts_case_insensitive_names(name: str, expected: int) -> None:
    assert coerce_level(name) == expected


def test_coerce_level_passes_numbers_through() -> None:
    assert coerce_level(15) == 15


def test_coerce_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        coerce_level("verbose")


def test_configure_logging_installs_single_rich_handler(record_console: Console) -> None:
    target = configure_logging("INFO", console=record_console)
    configure_logging("DEBUG", console=record_console)

    rich_handlers = [handler for handler in target.handlers if isinstance(handler, RichHandler)]
    assert target is logging.getLogger(ROOT_LOGGER_NAME)
    assert len(rich_handlers) == 1
    assert target.level == logging.DEBUG
    assert target.propagate is False


def test_configured_logger_renders_to_console(record_console: Console) -> None:
    configure_logging("INFO", console=record_console)

    logging.getLogger("greeter.tests").info("diagnostic line")

    assert "diagnostic line" in record_console.export_text()


def test_records_below_threshold_are_dropped(record_console: Console) -> None:
    configure_logging("WARNING", console=record_console)

    logging.getLogger("greeter.tests").debug("quiet line")

    assert "quiet line" not in record_console.export_text()


def test_default_console_targets_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING")

    logging.getLogger("greeter.tests").warning("goes to stderr")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "goes to stderr" in captured.err
