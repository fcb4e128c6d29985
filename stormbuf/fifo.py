"""Byte FIFO buffer with a non-destructive read cursor."""

from __future__ import annotations

import enum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


class Position(enum.Enum):
    """How a seek offset is interpreted."""

    ABSOLUTE = enum.auto()
    RELATIVE = enum.auto()


class ExecutionMode(enum.Enum):
    """How pipeline stages are scheduled."""

    SYNC = enum.auto()
    ASYNC = enum.auto()


class InsufficientData(Exception):
    """Raised when a read or extract cannot be satisfied."""


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"cannot write object of type {type(data).__name__}")


class FIFO:
    """A growable byte queue.

    ``extract`` removes bytes from the head; ``read`` returns bytes from a
    separate read cursor without removing them. A closed buffer accepts no
    further writes; a buffer in error state can be neither read nor written.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._position = 0
        self._closed = False
        self._error = False

    def __len__(self) -> int:
        return len(self._buffer)

    def copy(self) -> "FIFO":
        """Return an independent copy with the same data, cursor and closed state."""
        other = FIFO()
        other._buffer = bytearray(self._buffer)
        other._position = self._position
        other._closed = self._closed
        return other

    def available_bytes(self) -> int:
        """Number of bytes between the read cursor and the end of the data."""
        size = len(self._buffer)
        return size - self._position if self._position <= size else 0

    def size(self) -> int:
        return len(self._buffer)

    def empty(self) -> bool:
        return not self._buffer

    def clear(self) -> None:
        """Drop all data and reset the read cursor."""
        self._buffer.clear()
        self._position = 0

    def clean(self) -> None:
        """Drop the bytes already passed by the read cursor."""
        if 0 < self._position <= len(self._buffer):
            del self._buffer[: self._position]
            self._position = 0

    def close(self) -> None:
        self._closed = True

    def set_error(self) -> None:
        self._error = True

    def is_readable(self) -> bool:
        return not self._error

    def is_writable(self) -> bool:
        return not self._closed and not self._error

    def eof(self) -> bool:
        """True when no more data can be read from this buffer."""
        return not self.is_readable() or (
            not self.is_writable() and self.available_bytes() == 0
        )

    def write(self, data: BytesLike) -> bool:
        """Append data; return False if the buffer is not writable."""
        payload = _as_bytes(data)
        if not self.is_writable():
            return False
        self._buffer.extend(payload)
        return True

    def read(self, count: int = 0) -> bytes:
        """Return up to ``count`` bytes from the read cursor (all when 0)."""
        available = self.available_bytes()
        if not self.is_readable():
            raise InsufficientData("FIFO is not readable")
        if count > 0 and available == 0:
            raise InsufficientData("Insufficient data to read")
        if self._closed and count > available:
            raise InsufficientData("Insufficient data in closed FIFO")
        read_size = available if count == 0 else min(count, available)
        start = self._position
        self._position += read_size
        return bytes(self._buffer[start : start + read_size])

    def extract(self, count: int = 0) -> bytes:
        """Remove and return up to ``count`` bytes from the head (all when 0)."""
        size = len(self._buffer)
        if not self.is_readable():
            raise InsufficientData("FIFO is not readable")
        if count > 0 and size == 0:
            raise InsufficientData("Insufficient data to extract")
        if self._closed and count > size:
            raise InsufficientData("Insufficient data in closed FIFO")
        extract_size = size if count == 0 else min(count, size)
        result = bytes(self._buffer[:extract_size])
        del self._buffer[:extract_size]
        self._position = max(self._position - extract_size, 0)
        return result

    def seek(self, offset: int, mode: Position) -> None:
        """Move the read cursor, clamped to the stored data."""
        target = offset if mode is Position.ABSOLUTE else self._position + offset
        self._position = min(max(target, 0), len(self._buffer))