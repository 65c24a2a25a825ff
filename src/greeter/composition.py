"""Composition root wiring adapters into the greet use case."""

from __future__ import annotations

from typing import Callable

from greeter.adapters.console import ClickStdoutAdapter
from greeter.application.ports.output import OutputPort
from greeter.application.use_cases.greet import create_greet
from greeter.domain.message import GREETING, Message


def build_greet(output: OutputPort | None = None, *, message: Message = GREETING) -> Callable[[], int]:
    """Return the greet use case bound to ``output`` (stdout by default)."""

    return create_greet(output if output is not None else ClickStdoutAdapter(), message=message)


__all__ = ["build_greet"]
