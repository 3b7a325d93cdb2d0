"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from cstrkit.convert import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected exactly one character")
    _target(stream).write(c)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of a signed 32-bit integer to ``stream``."""
    _target(stream).write(itoa(n))