# gopatterns

A few small building blocks for Python programs:

- `gopatterns.channellatch.ChannelLatch` is a thread-safe latch. It queues
  items while it is *held* and hands them out once it is *released*, oldest
  first.
- `gopatterns.chunkbuffer.ChunkBuffer` is a FIFO byte buffer. It keeps each
  write as its own chunk, so a write never copies the data already held.
- `gopatterns.sequences` provides `dedup` and `decommon`. Both return sorted
  copies of sequences of hashable, sortable values.

The package depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## ChannelLatch

```python
import threading
from gopatterns.channellatch import ChannelLatch

latch = ChannelLatch()
latch.add(1)
latch.add(2)
latch.add(3)
latch.remove(2)          # drop queued items equal to 2

results = []
worker = threading.Thread(target=lambda: results.extend(latch.drain()))
worker.start()

latch.release()          # items start flowing to the consumer
worker.join()
print(results)           # [1, 3]
latch.stop()
```

A new latch starts out holding. When a released latch has handed out every
item, it is *drained*. Adding an item to a drained latch makes it release
again.

Methods:

- `add(item)` queues an item.
- `remove(item)` drops every queued item equal to `item`.
- `release()` lets items be handed out.
- `hold()` stops items being handed out until the next `release()`.
- `receive(block=True, timeout=None)` takes the next released item.
  - It raises `LatchEmpty` if no item is ready: at once when `block=False`, or
    after `timeout` seconds.
  - It raises `LatchClosed` once the latch has been stopped.
- `drain(timeout=None)` returns an iterator over released items.
  - While the latch is held, the iterator waits.
  - Iteration ends when the latch is drained or stopped.
  - If `timeout` is given, iteration also ends once that many seconds have
    passed since the call.
- `wait_drained()` blocks until the latch is drained or stopped.
- `stop()` closes the latch and wakes every waiter.
  - After `stop()`, the methods `add`, `remove`, `release` and `hold` raise
    `LatchClosed`.

A latch is also a context manager. Leaving the `with` block calls `stop()`.

## ChunkBuffer

```python
from gopatterns.chunkbuffer import ChunkBuffer

buf = ChunkBuffer()
buf.write(b"hello ")
buf.write(b"world")
print(len(buf))          # 11
print(buf.read(8))       # b'hello wo'
print(buf.read(100))     # b'rld'
print(buf.read(1))       # b''
```

- `write(data)` stores a copy of `data` and returns the number of bytes
  written.
- `read(size=-1)` removes and returns at most `size` bytes. A negative size
  returns everything held. The result is `b""` when the buffer is empty.
- `len(buf)` is the number of bytes currently held.

## Sequence helpers

```python
from gopatterns.sequences import dedup, decommon

dedup([3, 1, 3, 2, 1])            # [1, 2, 3]
decommon([1, 2, 3, 4], [2, 4, 5]) # ([1, 3], [5])
```

`dedup` returns the distinct elements as a new sorted list.

`decommon` removes the elements the two inputs share, matching them one for
one, and returns sorted copies of what is left in each. For example, an
element that appears three times in the first input and once in the second
is kept twice in the first result.

## What this package does not do

This is a library only. It has no command-line tool. `ChannelLatch` is built
on threads. It provides no asyncio interface.