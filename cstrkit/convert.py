"""Integer/string conversion and single-character splitting."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "split"]

_LONG_MAX = 2**63 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ATOI_SPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    """Truncate ``value`` to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic C routine does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text with no digits gives 0.
    Should the accumulated magnitude exceed a 64-bit signed integer, the
    result is -1 for a positive number and 0 for a negative one; otherwise
    the value is truncated to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        candidate = result * 10 + (ord(ch) - ord("0"))
        if candidate > _LONG_MAX:
            return 0 if sign < 0 else -1
        result = candidate
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]