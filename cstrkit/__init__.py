"""String, byte-buffer, formatting, linked-list and line-reading helpers with C library semantics."""

__version__ = "0.1.0"
__all__ = [
    "convert",
    "ctype",
    "linkedlist",
    "memory",
    "output",
    "printf",
    "printf_error",
    "reader",
    "strings",
]