"""Use cases orchestrating domain values and ports."""

from __future__ import annotations

from .greet import EXIT_SUCCESS, create_greet

__all__ = ["EXIT_SUCCESS", "create_greet"]
