from __future__ import annotations

import dataclasses

import pytest

from greeter.domain.message import GREETING, Message


def test_greeting_text_is_hello_world() -> None:
    assert GREETING.text == "Hello, World!"


def test_render_appends_single_newline() -> None:
    assert GREETING.render() == "Hello, World!\n"


def test_encode_returns_utf8_bytes_of_rendered_line() -> None:
    assert GREETING.encode() == b"Hello, World!\n"


def test_message_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        GREETING.text = "Goodbye"  # type: ignore[misc]


@pytest.mark.parametrize("text", ["two\nlines", "carriage\rreturn", "trailing\n"])
def test_message_rejects_line_terminators(text: str) -> None:
    with pytest.raises(ValueError, match="single line"):
        Message(text)


def test_non_ascii_text_encodes_as_utf8() -> None:
    assert Message("Grüß dich").encode() == "Grüß dich\n".encode("utf-8")


def test_equal_messages_compare_equal() -> None:
    assert Message("Hello, World!") == GREETING
