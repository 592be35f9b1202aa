"""Building new strings from existing ones: splitting, joining, trimming,
slicing and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = ["split", "strjoin", "strtrim", "substr", "strmapi", "striteri"]


def _require_str(value: Any, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    _require_str(text, "text")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strjoin(s1, s2):
    """Return *s1* followed by *s2*; both must be str or both bytes-like."""
    if isinstance(s1, str) and isinstance(s2, str):
        return s1 + s2
    if isinstance(s1, (bytes, bytearray)) and isinstance(s2, (bytes, bytearray)):
        return bytes(s1) + bytes(s2)
    raise TypeError(
        f"cannot join {type(s1).__name__} with {type(s2).__name__}"
    )


def strtrim(text: str, charset: str) -> str:
    """Trim characters of *charset* from the ends of *text*.

    Trailing characters of *charset* are all removed. The leading run of
    *charset* characters is cut only up to and including its last newline;
    a newline directly after the run is cut as well. When the run holds no
    newline, just its first character is removed, so indentation on the
    first line survives.
    """
    _require_str(text, "text")
    _require_str(charset, "charset")
    lead = len(text) - len(text.lstrip(charset))
    start = 0
    if lead:
        start = max(text.rfind("\n", 0, lead + 1), 0) + 1
    return text[start:].rstrip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from index *start*.

    A *start* at or past the end yields an empty string.
    """
    _require_str(text, "text")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for each character."""
    _require_str(text, "text")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buf: MutableSequence, func: Callable[[int, Any], Any]) -> None:
    """Replace each element of *buf* in place with ``func(index, element)``.

    Processing stops at the first NUL element (``0`` or ``"\\0"``).
    """
    if isinstance(buf, (str, bytes)):
        raise TypeError(f"buf must be mutable, got {type(buf).__name__}")
    for index, value in enumerate(buf):
        if value == 0 or value == "\0":
            break
        buf[index] = func(index, value)