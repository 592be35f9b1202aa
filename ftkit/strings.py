"""Operations on NUL-terminated strings.

Text arguments may be ``str`` or bytes-like; a string ends at its first NUL
character, or at its end if it has none. Searches return an index or
``None``. The bounded copy functions write into a ``bytearray`` (or a
writable ``memoryview``) and always leave a terminating NUL byte when they
write anything.
"""

from __future__ import annotations

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
]


def _body(text):
    """Return *text* up to (not including) its first NUL."""
    if isinstance(text, str):
        end = text.find("\0")
    else:
        text = bytes(text)
        end = text.find(0)
    return text if end < 0 else text[:end]


def _byte_body(buf) -> bytes:
    if isinstance(buf, str):
        raise TypeError("expected a bytes-like buffer, got str")
    return _body(buf)


def _char_code(c) -> int:
    """Return the character code of *c*, reduced to a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _find_char(text, c, *, last: bool) -> int | None:
    """Index of the first (or last) occurrence of *c* in *text*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    body = _body(text)
    code = _char_code(c)
    if code == 0:
        return len(body)
    target = chr(code) if isinstance(body, str) else bytes([code])
    index = body.rfind(target) if last else body.find(target)
    return None if index < 0 else index


def _codes(text) -> list[int]:
    body = _body(text)
    return [ord(ch) for ch in body] if isinstance(body, str) else list(body)


def _check_count(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(buf) -> int:
    """Number of characters before the first NUL."""
    return len(_body(buf))


def strchr(text, c) -> int | None:
    """Index of the first occurrence of *c*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    return _find_char(text, c, last=False)


def strrchr(text, c) -> int | None:
    """Index of the last occurrence of *c*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    return _find_char(text, c, last=True)


def strncmp(s1, s2, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first pair of character codes that
    differ, the terminator counting as 0, or 0 if none differ.
    """
    _check_count(n, "n")
    a, b = _codes(s1), _codes(s2)
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(haystack, needle, length: int) -> int | None:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0.
    """
    _check_count(length, "length")
    hay = _body(haystack)
    pattern = _body(needle)
    if not pattern:
        return 0
    index = hay[:length].find(pattern)
    return None if index < 0 else index


def strlcpy(dest, src, size: int) -> int:
    """Copy *src* into *dest*, writing at most ``size - 1`` bytes plus a NUL.

    Nothing is written when *size* is 0. Returns the length of *src*, so a
    result of *size* or more means the copy was cut short.
    """
    _check_count(size, "size")
    body = _byte_body(src)
    if size > 0:
        count = min(size - 1, len(body))
        if count + 1 > len(dest):
            raise ValueError(
                f"dest of length {len(dest)} cannot hold {count + 1} bytes"
            )
        dest[:count] = body[:count]
        dest[count] = 0
    return len(body)


def strlcat(dest, src, size: int) -> int:
    """Append *src* to the string in *dest*, for a buffer of *size* bytes.

    At most ``size - strlen(dest) - 1`` bytes are appended, then a NUL.
    Returns ``strlen(src) + min(size, strlen(dest))``: the length of the
    string it tried to build. *dest* may be None only when *size* is 0.
    """
    _check_count(size, "size")
    body = _byte_body(src)
    if dest is None:
        if size == 0:
            return len(body)
        raise ValueError("dest is None but size is not 0")
    dest_len = len(_byte_body(dest))
    if size <= dest_len:
        return len(body) + size
    count = min(len(body), size - dest_len - 1)
    end = dest_len + count
    if end + 1 > len(dest):
        raise ValueError(
            f"dest of length {len(dest)} cannot hold {end + 1} bytes"
        )
    dest[dest_len:end] = body[:count]
    dest[end] = 0
    return len(body) + dest_len