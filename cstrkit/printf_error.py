"""Formatted error output that can end the program.

The conversions are those of :mod:`cstrkit.printf`; the text goes to
standard error by default, after which the program exits with the
requested status unless that status is -1.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cstrkit.printf import format_string

__all__ = ["exit_error", "printf_error"]

NO_EXIT = -1


def exit_error(status: int) -> int:
    """Exit with ``status`` unless it is -1, in which case return -1.

    Exiting is done by raising :class:`SystemExit`.
    """
    if status != NO_EXIT:
        raise SystemExit(status)
    return NO_EXIT


def printf_error(
    exit_status: int, fmt: str, *args: Any, file: TextIO | None = None
) -> int:
    """Write the formatted message to ``file`` (standard error by default).

    Afterwards the program exits with ``exit_status``; a status of -1
    suppresses the exit and -1 is returned.
    """
    text = format_string(fmt, *args)
    target = sys.stderr if file is None else file
    target.write(text)
    target.flush()
    return exit_error(exit_status)