"""Domain value objects used by the greeter."""

from __future__ import annotations

from .message import GREETING, Message

__all__ = [
    "GREETING",
    "Message",
]
