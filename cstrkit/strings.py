"""Searching, comparing, slicing and joining text.

Positions are returned as indices into the string, or None when
nothing is found. Negative lengths and limits raise ValueError.
"""

from __future__ import annotations

from typing import Callable

__all__ = [
    "find_char",
    "rfind_char",
    "contains",
    "compare",
    "compare_n",
    "strndup",
    "join_space",
    "map_indexed",
    "find_in",
    "find_substring",
    "trim",
    "substr",
]

_NUL = "\0"


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError("expected exactly one character")
    return ch


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def find_char(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    _single_char(ch)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``; NUL finds ``len(text)``."""
    _single_char(ch)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def contains(text: str, fragment: str) -> bool:
    """True when ``fragment`` is non-empty and sits at the very end of ``text``.

    A match only counts once both strings run out together, so an
    occurrence followed by more text is not reported.
    """
    return bool(fragment) and len(fragment) <= len(text) and text.endswith(fragment)


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare_n(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the character codes at the first mismatch,
    a missing character counting as 0, or 0 when no mismatch is found.
    """
    _non_negative(n, "n")
    limit = min(n, max(len(a), len(b)))
    for index in range(limit):
        left, right = _code_at(a, index), _code_at(b, index)
        if left != right:
            return left - right
    return 0


def compare(a: str, b: str) -> int:
    """Compare ``a`` and ``b`` in full; see :func:`compare_n`."""
    return compare_n(a, b, max(len(a), len(b)))


def strndup(text: str, n: int) -> str:
    """Copy of at most the first ``n`` characters of ``text``."""
    return text[: _non_negative(n, "n")]


def join_space(a: str, b: str) -> str:
    """Join two strings with a single space between them."""
    return f"{a} {b}"


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def find_in(big: str, little: str, limit: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``limit`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _non_negative(limit, "limit")
    if not little:
        return 0
    index = big[:limit].find(little)
    return None if index < 0 else index


def find_substring(haystack: str, needle: str) -> int | None:
    """Index of the first ``needle`` in ``haystack``; an empty needle is at 0."""
    index = haystack.find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if not isinstance(charset, str):
        raise TypeError("charset must be a string")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start at or beyond the end gives the empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]