"""Byte-buffer primitives: filling, copying, searching and comparing.

Buffers are ``bytearray`` or writable ``memoryview`` objects for the
functions that write, and any bytes-like object for those that only read.
Requests that reach past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

__all__ = [
    "bzero",
    "memset",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
    "INT_MAX",
]

INT_MAX = 2**31 - 1


def _check_span(buf, start: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"{name}: span [{start}, {start + n}) exceeds buffer of length {len(buf)}"
        )


def memset(buf, value: int, n: int):
    """Set the first *n* bytes of *buf* to ``value & 0xFF``; return *buf*."""
    _check_span(buf, 0, n, "buf")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy *n* bytes from *src* to the start of *dest*; return *dest*."""
    _check_span(dest, 0, n, "dest")
    _check_span(src, 0, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf, dest_offset: int, src_offset: int, n: int):
    """Copy *n* bytes inside *buf* from *src_offset* to *dest_offset*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buf*.
    """
    _check_span(buf, src_offset, n, "src")
    _check_span(buf, dest_offset, n, "dest")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value & 0xFF`` among the first *n*, or None."""
    _check_span(buf, 0, n, "buf")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first pair of bytes that differ, or 0
    if all *n* bytes are equal.
    """
    if n == 0:
        return 0
    _check_span(a, 0, n, "a")
    _check_span(b, 0, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``ValueError`` when either factor reaches ``INT_MAX`` or when a
    negative factor is paired with a non-zero one.
    """
    if size >= INT_MAX or count >= INT_MAX:
        raise ValueError(f"allocation of {count} x {size} bytes is too large")
    if (size < 0 and count != 0) or (count < 0 and size != 0):
        raise ValueError(f"allocation of {count} x {size} bytes is negative")
    return bytearray(count * size)