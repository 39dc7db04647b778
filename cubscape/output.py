"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def put_char(ch: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(ch) != 1:
        raise ValueError("expected exactly one character")
    (stream or sys.stdout).write(ch)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` unchanged."""
    (stream or sys.stdout).write(text)


def put_line(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = stream or sys.stdout
    out.write(text)
    out.write("\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("expected an integer")
    (stream or sys.stdout).write(str(number))