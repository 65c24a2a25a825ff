"""Library facade exposing the greeting and the metadata banner.

Purpose
-------
Offer the same behaviour as the ``greeter`` process to Python callers without
going through Click, plus the metadata banner used by ``greeterctl info``.

Contents
--------
* :func:`hello_world` - write the greeting to stdout.
* :func:`summary_info` - return the metadata banner as one string.

System Role
-----------
Thin edge over :mod:`greeter.composition`; entry points and host code share it.
"""

from __future__ import annotations

from .composition import build_greet


def hello_world() -> None:
    """Print the canonical greeting.

    Why
    ---
    Lets ``import greeter`` users and doctests reach the exact output of the
    ``greeter`` console script.

    Side Effects
    ------------
    Writes ``"Hello, World!"`` followed by a newline to stdout.

    Examples
    --------
    >>> hello_world()
    Hello, World!
    """

    build_greet()()


def summary_info() -> str:
    """Return the metadata banner used by the operator CLI.

    Outputs
    -------
    str
        Multi-line banner ending with a newline; identical across calls.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """

    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["hello_world", "summary_info"]
