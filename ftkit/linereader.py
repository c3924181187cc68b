"""Read a file descriptor line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42

_readers: Dict[int, "LineReader"] = {}


class LineReader:
    """Return successive lines, newline included, from a file descriptor."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @staticmethod
    def _decode(line: bytes) -> str:
        return line.decode("utf-8", errors="surrogateescape")

    def readline(self) -> Optional[str]:
        """Return the next line, or None once nothing is left to read."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                line = bytes(self._pending)
                self._pending.clear()
                return self._decode(line) if line else None
            self._pending += chunk
        end = self._pending.index(b"\n") + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return self._decode(line)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping a separate buffer for each descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    line = reader.readline()
    if line is None:
        del _readers[fd]
    return line