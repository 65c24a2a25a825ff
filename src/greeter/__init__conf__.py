"""Static package metadata surfaced by the CLI banner and ``--version``."""

from __future__ import annotations

from importlib import metadata as _metadata
from typing import Callable

name = "greeter"
title = "Prints Hello, World! and exits successfully"
homepage = "https://github.com/bitranox/greeter"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "greeter"
operator_command = "greeterctl"

_SOURCE_VERSION = "1.0.0"


def _resolve_version() -> str:
    try:
        return _metadata.version(name)
    except _metadata.PackageNotFoundError:
        return _SOURCE_VERSION


version = _resolve_version()

_FIELDS = (
    ("name", name),
    ("title", title),
    ("version", version),
    ("homepage", homepage),
    ("author", author),
    ("author_email", author_email),
    ("shell_command", shell_command),
    ("operator_command", operator_command),
)


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    ``writer`` receives complete lines including their newline; it defaults to
    writing on stdout.

    >>> print_info()  # doctest: +ELLIPSIS +NORMALIZE_WHITESPACE
    Info for greeter:
    <BLANKLINE>
        name = greeter
    ...
    """

    emit = writer if writer is not None else _stdout_writer
    width = max(len(key) for key, _ in _FIELDS)
    emit(f"Info for {name}:\n")
    emit("\n")
    for key, value in _FIELDS:
        emit(f"    {key:<{width}} = {value}\n")


def _stdout_writer(text: str) -> None:
    print(text, end="")


__all__ = [
    "author",
    "author_email",
    "homepage",
    "name",
    "operator_command",
    "print_info",
    "shell_command",
    "title",
    "version",
]
