"""Line-by-line reading from raw file descriptors with a per-descriptor buffer."""

from __future__ import annotations

import os
from typing import Iterator

DEFAULT_BUFFER_SIZE = 3
_ENCODING = "utf-8"


class LineReader:
    """Reads lines from file descriptors, keeping leftover bytes per descriptor."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 0:
            raise ValueError(f"buffer size must not be negative, got {buffer_size}")
        self.buffer_size = buffer_size
        self._cache: dict[int, bytes] = {}

    def next_line(self, fd: int) -> str | None:
        """Return the next line of fd, newline included, or None at end of input.

        A negative descriptor or a zero buffer size gives None. Read errors
        are raised as OSError.
        """
        if not self.buffer_size or fd < 0:
            return None
        data = self._cache.pop(fd, b"")
        while b"\n" not in data:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            data += chunk
        cut = data.find(b"\n")
        if cut >= 0:
            line, rest = data[: cut + 1], data[cut + 1 :]
            if rest:
                self._cache[fd] = rest
        else:
            line = data
        if not line:
            return None
        return line.decode(_ENCODING, errors="surrogateescape")

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of fd."""
        while (line := self.next_line(fd)) is not None:
            yield line

    def clear(self) -> None:
        """Drop the buffered leftovers of every descriptor."""
        self._cache.clear()