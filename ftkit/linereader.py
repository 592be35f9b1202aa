"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any, AnyStr, Generic

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 200


class LineReader(Generic[AnyStr]):
    """Return successive lines of *source*, each with its newline kept.

    *source* is either an open file descriptor (an ``int``, read as bytes)
    or any object with a ``read(size)`` method, binary or text. Data is
    pulled in chunks of at most *buffer_size* characters; what follows the
    newline of a returned line is kept for the next call. The final line is
    returned without a newline if the data does not end with one.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self.buffer_size = buffer_size
        self._read: Callable[[int], AnyStr]
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            fd = source
            self._read = lambda size: os.read(fd, size)
        elif callable(getattr(source, "read", None)):
            self._read = source.read
        else:
            raise TypeError(
                f"source must be a file descriptor or readable, got {type(source).__name__}"
            )
        self._pending: AnyStr | None = None

    def _fill(self) -> AnyStr:
        """Read chunks into the pending data until it holds a newline or input ends."""
        pending = self._pending
        while True:
            chunk = self._read(self.buffer_size)
            if pending is None:
                pending = chunk
            else:
                pending = pending + chunk
            newline = "\n" if isinstance(pending, str) else b"\n"
            if not chunk or newline in chunk:
                return pending

    def next_line(self) -> AnyStr | None:
        """The next line, ending in a newline unless it is the last; None at the end."""
        data = self._fill()
        newline = "\n" if isinstance(data, str) else b"\n"
        index = data.find(newline)
        if index < 0:
            self._pending = None
            return data if data else None
        self._pending = data[index + 1:]
        return data[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> Any:
    """Return the next line from *reader*, or None when no data is left."""
    return reader.next_line()