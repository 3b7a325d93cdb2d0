"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
Classifiers return a bool; case converters return a value of the same
kind they were given.
"""

from __future__ import annotations

from typing import overload

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_space",
    "to_upper",
    "to_lower",
]

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: str | int) -> int:
    """Return the integer code of ``c``, a single character or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a single character or an integer code, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for the decimal digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) < 127


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACE_CODES


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c):
    """Map a-z to A-Z; every other value is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c):
    """Map A-Z to a-z; every other value is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code