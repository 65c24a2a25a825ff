"""Output port describing where rendered text is written.

Purpose
-------
Give the greet use case a narrow dependency on "something that accepts text"
so tests and alternative front-ends can substitute their own sinks.

Contents
--------
* :class:`OutputPort` - runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Boundary between the application layer and the console adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputPort(Protocol):
    """Accept already-rendered text for the user-facing stream."""

    def write(self, text: str) -> None:
        """Write ``text`` verbatim; no terminator is appended."""


__all__ = ["OutputPort"]
