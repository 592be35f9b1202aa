"""A small formatted-output facility.

The format string is copied through, except for ``%`` followed by a
conversion letter:

``%c``  a character (a byte value or a one-character string)
``%s``  a string; None prints as ``(null)``
``%p``  an address in lowercase hexadecimal after ``0x``
``%d``, ``%i``  a signed 32-bit integer in decimal
``%u``  an unsigned 32-bit integer in decimal
``%x``, ``%X``  an unsigned 32-bit integer in lower- or uppercase hex
``%%``  a literal percent sign

Any other letter after ``%`` is dropped along with the ``%`` and takes no
argument. Integers are wrapped to the width of their conversion.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = [
    "HEX_UP",
    "HEX_LOW",
    "change_base",
    "format_string",
    "print_formatted",
]

HEX_UP = "0123456789ABCDEF"
HEX_LOW = "0123456789abcdef"

_UINT32 = 1 << 32
_INT32_MIN = -(1 << 31)
_UINT64_MASK = (1 << 64) - 1


def change_base(num: int, digits: str) -> str:
    """Write the non-negative *num* in the base given by *digits*.

    The base is ``len(digits)``; ``digits[k]`` is the symbol for digit k.
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"expected int, got {type(num).__name__}")
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    base = len(digits)
    if base < 2:
        raise ValueError(f"need at least two digit symbols, got {digits!r}")
    symbols = []
    while True:
        num, rem = divmod(num, base)
        symbols.append(digits[rem])
        if num == 0:
            break
    return "".join(reversed(symbols))


def _as_int32(value: Any) -> int:
    value = _as_integer(value)
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _as_uint32(value: Any) -> int:
    return _as_integer(value) % _UINT32


def _as_integer(value: Any) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if isinstance(value, int):
        return int(value)
    raise TypeError(f"expected an integer argument, got {type(value).__name__}")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_integer(value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if not isinstance(value, str):
        raise TypeError(f"%s expects str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value
    else:
        address = id(value)
    return "0x" + change_base(address & _UINT64_MASK, HEX_LOW)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda v: str(_as_int32(v)),
    "i": lambda v: str(_as_int32(v)),
    "u": lambda v: str(_as_uint32(v)),
    "x": lambda v: change_base(_as_uint32(v), HEX_LOW),
    "X": lambda v: change_base(_as_uint32(v), HEX_UP),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec) if spec is not None else None
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string {fmt!r}"
            ) from None
        yield convert(value)


def format_string(fmt: str | None, *args: Any) -> str:
    """Return *fmt* with its conversions filled from *args*.

    A *fmt* of None gives an empty string. Extra arguments are ignored;
    too few raise ``TypeError``.
    """
    if fmt is None:
        return ""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def print_formatted(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    if text:
        (sys.stdout if stream is None else stream).write(text)
    return len(text)