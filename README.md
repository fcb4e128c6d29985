# stormbuf

In-memory byte buffers for Python.

- `stormbuf.fifo.FIFO` is a first-in, first-out byte buffer. It has a separate
  read cursor. You can read data without removing it (`read`), seek back to read
  it again, and remove data from the front (`extract`).
- `stormbuf.consumer.BlockingFIFO` is a thread-safe buffer built on `FIFO`.
  Reads with a positive count block until enough data has arrived, or until the
  buffer stops being writable.
- `stormbuf.consumer.Consumer` is a read-only view of a `BlockingFIFO`. Several
  consumers may share one buffer, and they also share its read cursor.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## FIFO

```python
from stormbuf.fifo import FIFO, Position, InsufficientData

fifo = FIFO()
fifo.write("ABCDEF")           # str (encoded as UTF-8) or bytes-like; returns True
fifo.read(3)                   # b"ABC"; the data stays in the buffer
fifo.size()                    # 6  (len(fifo) gives the same)
fifo.available_bytes()         # 3, counted from the read cursor
fifo.seek(0, Position.ABSOLUTE)
fifo.extract(2)                # b"AB"; removed from the front
fifo.extract(0)                # b"CDEF"; a count of 0 means "everything"

fifo.close()
fifo.write("more")             # False: a closed buffer accepts no more writes
try:
    fifo.read(10)
except InsufficientData:
    pass
```

How the buffer behaves:

- `read(count)` returns bytes from the read cursor and moves the cursor on.
  `extract(count)` always takes bytes from the head. If the cursor was past the
  removed bytes, it moves back by the same amount. Otherwise it goes to 0.
- A count of 0 returns everything available and never raises while the buffer
  is readable. A positive count returns at most what is available.
- `InsufficientData` is raised in three cases. The buffer is in error state. A
  positive count is asked for while nothing is available. Or the buffer is
  closed and the count is more than what is available.
- `seek(offset, mode)` keeps the cursor between 0 and `size()`. `Position.RELATIVE`
  moves the cursor from its current place.
- `clear()` drops all data and resets the cursor. `clean()` drops the bytes the
  cursor has already passed.
- `close()` stops writes. `set_error()` makes the buffer neither readable nor
  writable. `eof()` is true when the buffer is not readable, or when it is not
  writable and nothing is left to read.
- `copy()` returns an independent buffer with the same data, cursor and closed
  state.
- `write` raises `TypeError` for values that are not `str` or bytes-like.

## BlockingFIFO and Consumer

```python
import threading
from stormbuf.consumer import BlockingFIFO, Consumer

buffer = BlockingFIFO()
consumer = Consumer(buffer)

def produce():
    for i in range(100):
        buffer.write(f"{i},")
    buffer.close()

threading.Thread(target=produce).start()

received = bytearray()
while True:
    chunk = consumer.extract(10)   # waits for 10 bytes, or for close
    if not chunk and consumer.eof():
        break
    received += chunk
```

`BlockingFIFO` offers the same operations as `FIFO`, apart from `clean` and
`copy`. Each call holds a lock. `write`, `close`, `set_error`, `clear` and `seek`
wake any threads that are waiting.

A `read` or `extract` with a positive count waits until that many bytes are
there, or until the buffer is closed or in error. Once the buffer is closed, the
call returns whatever is left, and it may return `b""`. It does not raise. If
the buffer is in error, the call raises `InsufficientData`.

`Consumer` passes calls on to its buffer. It has no `write`, `close` or
`set_error`, so data is written to the `BlockingFIFO` itself. Calling `clear()`
on a consumer clears the shared buffer, so every other consumer of that buffer
is affected too.

## What the package does not do

`stormbuf.fifo` defines an `ExecutionMode` enum with the values `SYNC` and
`ASYNC`. The package has no pipeline that uses it, and no producer type. To
chain processing stages, you connect `BlockingFIFO` objects and threads
yourself.