"""Message value object carrying the greeting text.

Purpose
-------
Hold the one piece of data the greeter owns: an immutable line of text that is
rendered to the output port exactly as constructed.

Contents
--------
* :class:`Message` - frozen value object with rendering helpers.
* :data:`GREETING` - the canonical ``"Hello, World!"`` message.

System Role
-----------
Innermost layer; the application use case depends on it, nothing here depends
on Click, Rich, or the process environment.
"""

from __future__ import annotations

from dataclasses import dataclass

_LINE_BREAKS = ("\n", "\r")


@dataclass(frozen=True, slots=True)
class Message:
    """Immutable single-line text emitted by the greeter.

    Parameters
    ----------
    text:
        Line content without a trailing terminator.

    Examples
    --------
    >>> Message("Hi").render()
    'Hi\\n'
    >>> Message("a\\nb")
    Traceback (most recent call last):
    ...
    ValueError: Message text must be a single line: 'a\\nb'
    """

    text: str

    def __post_init__(self) -> None:
        if any(mark in self.text for mark in _LINE_BREAKS):
            raise ValueError(f"Message text must be a single line: {self.text!r}")

    def render(self) -> str:
        """Return the text followed by exactly one newline."""

        return f"{self.text}\n"

    def encode(self) -> bytes:
        """Return the UTF-8 bytes written to standard output.

        >>> GREETING.encode()
        b'Hello, World!\\n'
        """

        return self.render().encode("utf-8")


GREETING = Message("Hello, World!")
#: Canonical greeting written by the ``greeter`` process.


__all__ = ["GREETING", "Message"]
