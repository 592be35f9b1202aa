"""Conversion between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

__all__ = ["atoi", "itoa"]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


def atoi(text: str | bytes | bytearray) -> int:
    """Parse a leading decimal integer from *text*.

    Leading blanks (space, tab, newline, vertical tab, form feed, carriage
    return) are skipped, then one optional ``+`` or ``-`` sign is read,
    then as many ASCII digits as follow. Anything after the digits is
    ignored. Text with no digits in that position yields 0.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    if not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of *n*, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)