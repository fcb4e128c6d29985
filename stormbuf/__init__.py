"""Byte FIFO buffers, a thread-safe blocking variant and a read-only consumer view."""

__version__ = "0.1.0"
__all__ = ["consumer", "fifo"]