"""Click-backed stdout adapter implementing :class:`OutputPort`.

Purpose
-------
Write rendered text to the process's standard output via :func:`click.echo`.

System Role
-----------
Default user-facing sink wired by :func:`greeter.composition.build_greet`.
``click.echo`` resolves ``sys.stdout`` on every call, so redirections installed
by ``CliRunner`` or ``capsys`` are honoured without rebuilding the adapter.
"""

from __future__ import annotations

from typing import IO

import click

from greeter.application.ports.output import OutputPort


class ClickStdoutAdapter(OutputPort):
    """Forward text to stdout (or an explicit stream) unchanged."""

    def __init__(self, *, stream: IO[str] | None = None) -> None:
        """Optionally pin the adapter to ``stream`` instead of ``sys.stdout``."""
        self._stream = stream

    def write(self, text: str) -> None:
        """Echo ``text`` without appending a newline.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> ClickStdoutAdapter(stream=buffer).write("Hello, World!\\n")
        >>> buffer.getvalue()
        'Hello, World!\\n'
        """
        click.echo(text, file=self._stream, nl=False)


__all__ = ["ClickStdoutAdapter"]
