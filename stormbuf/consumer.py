"""Thread-safe blocking FIFO and its read-only consumer view."""

from __future__ import annotations

import threading
from typing import Callable

from stormbuf.fifo import FIFO, BytesLike, Position


class BlockingFIFO:
    """A FIFO shared between threads.

    ``read`` and ``extract`` with a positive count block until that many
    bytes are available or the buffer stops being writable; in the latter
    case whatever remains is returned.
    """

    def __init__(self) -> None:
        self._fifo = FIFO()
        self._cond = threading.Condition()

    def available_bytes(self) -> int:
        """Bytes readable from the current read cursor."""
        with self._cond:
            return self._fifo.available_bytes()

    def size(self) -> int:
        """Total number of bytes stored."""
        with self._cond:
            return self._fifo.size()

    def empty(self) -> bool:
        """True if no bytes are stored."""
        with self._cond:
            return self._fifo.empty()

    def is_readable(self) -> bool:
        """True unless the buffer is in error state."""
        with self._cond:
            return self._fifo.is_readable()

    def is_writable(self) -> bool:
        """True unless the buffer is closed or in error state."""
        with self._cond:
            return self._fifo.is_writable()

    def eof(self) -> bool:
        """True when no more data can be read."""
        with self._cond:
            return self._fifo.eof()

    def clear(self) -> None:
        """Drop all stored data and reset the read cursor."""
        with self._cond:
            self._fifo.clear()
            self._cond.notify_all()

    def close(self) -> None:
        """Stop accepting writes and wake waiting readers."""
        with self._cond:
            self._fifo.close()
            self._cond.notify_all()

    def set_error(self) -> None:
        """Mark the buffer as failed and wake waiting readers."""
        with self._cond:
            self._fifo.set_error()
            self._cond.notify_all()

    def __len__(self) -> int:
        return self.size()

    def write(self, data: BytesLike) -> bool:
        """Append data and wake waiting readers; False if not writable."""
        with self._cond:
            written = self._fifo.write(data)
            if written:
                self._cond.notify_all()
            return written

    def _take(self, name: str, measure: Callable[[], int], count: int) -> bytes:
        with self._cond:
            self._cond.wait_for(
                lambda: count == 0
                or measure() >= count
                or not self._fifo.is_writable()
            )
            # Once no more data can arrive, hand over whatever is left.
            if count > measure():
                count = 0
            return getattr(self._fifo, name)(count)

    def read(self, count: int = 0) -> bytes:
        """Blocking non-destructive read from the read cursor."""
        return self._take("read", self._fifo.available_bytes, count)

    def extract(self, count: int = 0) -> bytes:
        """Blocking destructive read from the head."""
        return self._take("extract", self._fifo.size, count)

    def seek(self, offset: int, mode: Position) -> None:
        """Move the read cursor, clamped to the stored data."""
        with self._cond:
            self._fifo.seek(offset, mode)
            self._cond.notify_all()


class Consumer:
    """Read-only view of a shared blocking buffer."""

    def __init__(self, buffer: BlockingFIFO) -> None:
        self._buffer = buffer

    def available_bytes(self) -> int:
        """Bytes readable from the shared read cursor."""
        return self._buffer.available_bytes()

    def size(self) -> int:
        """Total number of bytes stored."""
        return self._buffer.size()

    def empty(self) -> bool:
        """True if no bytes are stored."""
        return self._buffer.empty()

    def is_readable(self) -> bool:
        """True unless the buffer is in error state."""
        return self._buffer.is_readable()

    def is_writable(self) -> bool:
        """True while more data may still arrive."""
        return self._buffer.is_writable()

    def eof(self) -> bool:
        """True when no more data can be read."""
        return self._buffer.eof()

    def clear(self) -> None:
        """Drop all stored data for every sharer of the buffer."""
        self._buffer.clear()

    def read(self, count: int = 0) -> bytes:
        """Blocking non-destructive read from the shared read cursor."""
        return self._buffer.read(count)

    def extract(self, count: int = 0) -> bytes:
        """Blocking destructive read from the head of the shared buffer."""
        return self._buffer.extract(count)

    def seek(self, position: int, mode: Position) -> None:
        """Move the shared read cursor."""
        self._buffer.seek(position, mode)