"""Protocols consumed by the application layer."""

from __future__ import annotations

from .output import OutputPort

__all__ = ["OutputPort"]
