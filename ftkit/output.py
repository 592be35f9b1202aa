"""Writing characters, strings and integers to a text stream.

Every function writes to *stream*, or to standard output when *stream* is
None.
"""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character, given as a one-character string or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c & 0xFF)
    else:
        raise TypeError(f"expected str or int, got {type(c).__name__}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text*; nothing is written when it is None."""
    if text is None:
        return
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text* followed by a newline; nothing at all when it is None."""
    if text is None:
        return
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of *n*, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _target(stream).write(str(n))