"""Public package surface exposing the greeting and its metadata banner.

``import greeter`` and ``python -m greeter`` share the same greet use case, so
:func:`hello_world` writes exactly what the ``greeter`` console script writes.
"""

from __future__ import annotations

from .domain.message import GREETING, Message
from .greeter import hello_world, summary_info

__all__ = [
    "GREETING",
    "Message",
    "hello_world",
    "summary_info",
]
