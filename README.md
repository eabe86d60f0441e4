# lunchbox

Building blocks for multi-threaded Python programs: a fixed-capacity ring
queue, a vector whose elements never move, futures, a thread pool, an
object pool, an integer interval set and a few bit and sequence helpers.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `lunchbox.lfqueue` | `LFQueue`: a fixed-capacity queue for one reader and one writer thread. `push` raises `QueueFull` when there is no room; `pop` and `front` raise `IndexError` when empty. Also `is_empty`, `clear`, `resize`, `capacity`. |
| `lunchbox.lfvector` | `LFVector`: a vector stored in slots of doubling size, so elements are never relocated. Writers are serialized by an internal lock (`write_lock()` for batches of `append(item, lock=False)`); `LFVectorFull` is raised past `2**slots - 1` elements. Also `from_iterable`, `expand`, `resize`, `pop`, `erase_at`, `remove`, `begin`/`end`, `allocated_slots`. |
| `lunchbox.indexiter` | `IndexIterator`: a position-based iterator that can be moved, compared and indexed relative to its position. |
| `lunchbox.future` | `Future`, `FutureImpl`, `FutureFunction` (calls a function once, on first wait), `FutureBool`, `FutureTimeout`, `make_true_future()`, `make_false_future()`. Comparing or testing a `Future` waits for its result. |
| `lunchbox.threadpool` | `ThreadPool`: runs callables on worker threads. `post` returns a `concurrent.futures.Future`, `post_detached` does not; `ThreadPool.instance()` is a global pool sized to the CPU count. Closing cancels tasks still queued. |
| `lunchbox.intervalset` | `IntervalSet`: stores integers as sorted closed intervals, fusing overlapping and adjacent ones. |
| `lunchbox.pool` | `Pool`: a thread-safe cache of reusable objects, created by a factory when empty. |
| `lunchbox.bitops` | `index_of_last_bit`, `byteswap`, `byteswap_all`, and the `U128` format name. |
| `lunchbox.algorithm` | `find`, `find_if` (both return an index or `None`), `usort`. |

## Examples

Running work on a thread pool:

```python
from lunchbox.threadpool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.post(lambda: 6 * 7)
    print(future.result())  # 42
```

A lazily computed future:

```python
from lunchbox.future import Future, FutureFunction

answer = Future(FutureFunction(lambda: 42))
print(answer.is_ready())  # False
print(answer == 42)       # True, computes the value
print(answer.is_ready())  # True
```

A bounded single-reader, single-writer queue:

```python
from lunchbox.lfqueue import LFQueue, QueueFull

queue = LFQueue(2)
queue.push("a")
queue.push("b")
try:
    queue.push("c")
except QueueFull:
    print("full")
print(queue.pop())  # a
```

A vector with stable storage:

```python
from lunchbox.lfvector import LFVector

vector = LFVector.from_iterable([1, 2, 3])
vector.append(4)
print(list(vector), vector.allocated_slots)  # [1, 2, 3, 4] (0, 1, 2)
```

Tracking ranges of integers:

```python
from lunchbox.intervalset import IntervalSet

received = IntervalSet()
received.insert(1, 5)
received.insert(7, 9)
print(len(received), 6 in received)  # 8 False
print(received.intervals())          # [(1, 5), (7, 9)]
```

Bits and sequences:

```python
from lunchbox.bitops import byteswap, index_of_last_bit
from lunchbox.algorithm import usort

print(index_of_last_bit(8), index_of_last_bit(0))  # 3 -1
print(hex(byteswap(0x1234, "H")))                  # 0x3412

items = [3, 1, 3, 2]
usort(items)
print(items)  # [1, 2, 3]
```

## What it does not provide

The only queue here is `LFQueue`, which never blocks: there is no queue
whose `pop` waits for an element or whose `push` waits for room, and no
value that threads can wait on until it reaches a condition. Use
`queue.Queue` and `threading.Condition` from the standard library for those.
The package has no command-line interface.