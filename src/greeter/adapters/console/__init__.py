"""Console adapters."""

from __future__ import annotations

from .click_stdout import ClickStdoutAdapter

__all__ = ["ClickStdoutAdapter"]
