"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %.

A ``%`` followed by any other character drops the ``%`` and outputs that
character. Surplus arguments are ignored; too few raise TypeError.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

__all__ = ["format_string", "printf"]

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _conv_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _PTR_MASK
    if not address:
        return "(nil)"
    return f"0x{address:x}"


def _conv_signed(value: Any) -> str:
    return str(_as_int32(_require_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _conv_hex_lower(value: Any) -> str:
    return f"{_require_int(value, 'x') & _UINT_MASK:x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_require_int(value, 'X') & _UINT_MASK:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete '%' specifier")
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](value)
        else:
            yield spec


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)