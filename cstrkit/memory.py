"""Byte-buffer primitives working in place on ``bytearray`` objects.

Buffers that hold C-style strings keep their text up to the first NUL
byte, or to the end of the buffer when there is none. Writing past the
end of a buffer raises ValueError instead of corrupting memory.
"""

from __future__ import annotations

from typing import Callable

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "strcpy",
    "strcat",
    "strlcpy",
    "strlcat",
    "iteri",
]

_NUL = 0


def _c_strlen(data: bytes | bytearray, limit: int | None = None) -> int:
    """Length of the NUL-terminated string in ``data``, capped at ``limit``."""
    end = len(data) if limit is None else min(limit, len(data))
    index = data.find(_NUL, 0, end)
    return end if index < 0 else index


def _check_count(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative")
    if n > available:
        raise ValueError(f"{what} {n} exceeds the {available} bytes available")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_count(n, len(buf), "count")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes."""
    _check_count(n, len(data), "count")
    index = data.find(value & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; the difference at the first mismatch, else 0."""
    _check_count(n, min(len(a), len(b)), "count")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, min(len(dest), len(src)), "count")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` between regions that may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - max(dest_offset, src_offset), "count")
    buf[dest_offset : dest_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def strcpy(dest: bytearray, src: bytes | bytearray | None) -> bytearray:
    """Copy the string in ``src`` and a NUL terminator into ``dest``.

    A ``src`` of None copies the empty string.
    """
    text = b"" if src is None else bytes(src[: _c_strlen(src)])
    _check_count(len(text) + 1, len(dest), "string size")
    dest[: len(text) + 1] = text + b"\0"
    return dest


def strcat(dest: bytearray, src: bytes | bytearray | None) -> bytearray:
    """Append the string in ``src`` to the string in ``dest``, NUL-terminated.

    A ``src`` of None leaves ``dest`` untouched.
    """
    if src is None:
        return dest
    start = _c_strlen(dest)
    text = bytes(src[: _c_strlen(src)])
    _check_count(start + len(text) + 1, len(dest), "string size")
    dest[start : start + len(text) + 1] = text + b"\0"
    return dest


def strlcpy(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` and terminate when ``size`` > 0.

    Returns the length of the string in ``src``.
    """
    _check_count(size, len(dest), "size")
    src_len = _c_strlen(src)
    if size:
        copied = min(src_len, size - 1)
        dest[: copied + 1] = bytes(src[:copied]) + b"\0"
    return src_len


def strlcat(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to ``dest`` so the result fits in ``size`` bytes.

    Returns the length of the string ``dest`` held within ``size`` bytes
    plus the length of ``src``: the length it tried to create.
    """
    _check_count(size, len(dest), "size")
    dest_len = _c_strlen(dest, size)
    src_len = _c_strlen(src)
    if size == 0:
        return src_len
    copied = max(0, min(src_len, size - 1 - dest_len))
    dest[dest_len : dest_len + copied] = src[:copied]
    if dest_len < size:
        dest[dest_len + copied] = _NUL
    return dest_len + src_len


def iteri(buf: bytearray, func: Callable[[int, int], int | None]) -> None:
    """Call ``func(index, byte)`` for each byte of the string in ``buf``.

    When ``func`` returns an integer, that byte is replaced by it.
    """
    for index in range(_c_strlen(buf)):
        result = func(index, buf[index])
        if result is not None:
            buf[index] = result & 0xFF