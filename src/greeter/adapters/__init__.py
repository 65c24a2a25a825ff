"""Concrete adapters: stdout output and stderr diagnostics."""

from __future__ import annotations

from .console import ClickStdoutAdapter
from .diagnostics import configure_logging

__all__ = [
    "ClickStdoutAdapter",
    "configure_logging",
]
