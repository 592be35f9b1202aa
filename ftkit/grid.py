"""Helpers for grid-shaped maps: visited markers and shape checks."""

from __future__ import annotations

import operator

__all__ = ["NotRectangularError", "new_visited", "ensure_rectangular"]


class NotRectangularError(ValueError):
    """Raised when a map's rows are not all the same length."""

    def __init__(self, message: str = "Map is not rectangular") -> None:
        super().__init__(message)


def new_visited(rows: int, cols: int) -> list[list[bool]]:
    """Return a *rows* by *cols* grid of ``False`` markers, each row its own list."""
    if rows < 0:
        raise ValueError(f"rows must not be negative, got {rows}")
    if cols < 0:
        raise ValueError(f"cols must not be negative, got {cols}")
    return [[False] * cols for _ in range(rows)]


def ensure_rectangular(invalid) -> None:
    """Raise ``NotRectangularError`` when the *invalid* flag equals 1.

    *invalid* is a bool or an integer flag; any other value of the flag
    means the map passed the check.
    """
    try:
        flag = operator.index(invalid)
    except TypeError as exc:
        raise TypeError(
            f"invalid must be a bool or an integer, got {type(invalid).__name__}"
        ) from exc
    if flag == 1:
        raise NotRectangularError()