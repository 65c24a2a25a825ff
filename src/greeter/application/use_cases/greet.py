"""Greet use case writing the greeting once and reporting success.

Purpose
-------
Provide the application-layer routine behind every greeting entry point: the
``greeter`` process, ``greeterctl hello`` and :func:`greeter.hello_world`.

System Role
-----------
Invoked by :mod:`greeter.composition` with the stdout adapter; tests inject
recording ports instead.
"""

from __future__ import annotations

import logging
from typing import Callable

from greeter.application.ports.output import OutputPort
from greeter.domain.message import GREETING, Message

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0


def create_greet(
    output: OutputPort,
    *,
    message: Message = GREETING,
) -> Callable[[], int]:
    """Return a callable that writes ``message`` to ``output``.

    Why
    ---
    Binding the port once in the composition root keeps the entry points free
    of wiring; the returned function carries no state between calls, so every
    invocation produces identical output.

    Parameters
    ----------
    output:
        Port receiving the rendered message.
    message:
        Message to emit; defaults to :data:`greeter.domain.message.GREETING`.

    Returns
    -------
    Callable[[], int]
        Function performing the single write and returning the exit status.

    Examples
    --------
    >>> class Collect:
    ...     def __init__(self):
    ...         self.chunks = []
    ...     def write(self, text):
    ...         self.chunks.append(text)
    >>> sink = Collect()
    >>> greet = create_greet(sink)
    >>> greet()
    0
    >>> sink.chunks
    ['Hello, World!\\n']
    """

    def greet() -> int:
        """Write the rendered message once and return ``0``."""
        output.write(message.render())
        logger.debug("greeting emitted", extra={"greeting": message.text})
        return EXIT_SUCCESS

    return greet


__all__ = ["EXIT_SUCCESS", "create_greet"]
