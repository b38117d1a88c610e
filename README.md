# labkit

A collection of small, self-contained building blocks:

- **Data structures**: a doubly linked list, a singly linked list, a circular
  list, a growable array, a queue and a stack, plus a bubble sort that takes
  an ordering predicate.
- **Concurrency**: a multi-producer / single-consumer queue, an atomic
  reference, and a demo that runs several printing tasks on threads.
- **HTTP**: a small server that answers GET requests from the files of a
  directory, builds an index page from a `default.html` template and runs
  `.php` scripts through the `php` command, plus a line-based TCP client.
- **Solar system**: a frame-by-frame model of planets circling a sun, with
  pause and zoom.
- **Odds and ends**: listing the pairs of numbers in which the second does not
  divide the first, and locating a resource directory near the working or
  application directory.

No third-party dependencies; Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Linked lists

```python
from labkit.doubly_linked_list import DoublyLinkedList
from labkit.ordering import ascending, descending

items = DoublyLinkedList([13, 11, 1000, 12])
items.push_head(1)
items.push_tail(99)
items.insert(2, 7)
items.bubble_sort(ascending)
print(items.render())
print(items.render_reverse())
print(len(items), list(items), list(reversed(items)))
```

`SinglyLinkedList` from `labkit.singly_linked_list` offers the same kind of
operations going one way only, and `CircularList` from `labkit.circular_list`
wraps around from its last node to its first. Indexes out of range raise
`IndexError`; removing a value that is not there raises `ValueError`.

The sort on its own works on any list of values:

```python
from labkit.ordering import bubble_sort, descending

bubble_sort([3, 1, 2], descending)   # [3, 2, 1], sorted in place
```

### Queue, stack and array

```python
from labkit.linked_queue import LinkedQueue, QueueEmptyError
from labkit.stack import Stack, StackEmptyError
from labkit.dynamic_array import DynamicArray

queue = LinkedQueue([10, 20, 30])
queue.enqueue(40)
queue.dequeue()          # 10

stack = Stack([10, 20, 30])
stack.push(40)
stack.peek()             # 40
stack.bottom()           # 10

array = DynamicArray(1, doubling=True)
for value in (10, 20, 30):
    array.append(value)
array.pop()              # 30
array.capacity           # 4
```

Taking from an empty queue or stack raises `QueueEmptyError` or
`StackEmptyError`. Without `doubling`, a `DynamicArray` grows by one slot at a
time.

### MPSC queue and atomic reference

```python
from labkit.mpsc import AtomicRef, MPSCQueue, run_producers

queue = MPSCQueue()
run_producers(queue, producers=2, items_per_producer=5)
print(list(queue.drain()))

ref = AtomicRef(None)
ref.store(42)
ref.exchange(7)          # 42
```

### HTTP request handling

```python
from labkit.http_files import parse_request, handle_request

request = parse_request("GET /index.html HTTP/1.1\r\n\r\n")
response = handle_request("GET / HTTP/1.1\r\n\r\n", "site")
```

`labkit.http_server.serve` runs the accept loop; it takes a handler, so the
same loop can use `handle_request`, `handle_simple_request` or a handler of
your own.

### Solar system

```python
from labkit.solar_system import SolarSystem

system = SolarSystem()
system.apply_scroll(2)   # zoom in by two wheel steps
system.advance()
system.positions()["earth"]
```

## Commands

| Command | What it does |
| --- | --- |
| `labkit-doubly-linked-list` | builds, sorts and prints a doubly linked list |
| `labkit-singly-linked-list` | builds, sorts and prints a singly linked list |
| `labkit-circular-list` | prints a circular list |
| `labkit-dynamic-array` | grows, shrinks and prints a dynamic array |
| `labkit-queue` | enqueues, dequeues and reports on a queue |
| `labkit-stack` | pushes onto a stack and reports its size |
| `labkit-mpsc` | two producer threads feeding one consumer (`atomic` for the atomic reference demo) |
| `labkit-tasks` | several threads printing numbered lines (`--tasks`, `--iterations`) |
| `labkit-primes` | prints the non-divisor pairs up to a limit (default 5) |
| `labkit-solar-system` | steps the orbit model and prints positions (`--frames`, `--zoom`) |
| `labkit-serve` | serves a directory over HTTP (`--mode files`, `simple` or `goodbye`) |
| `labkit-client` | sends lines typed at the terminal to a server and prints the replies |

Run any of them with `--help` to see its options.

## What it does not do

There is no graphical interface: the solar system model computes positions
and prints them rather than drawing a window. There is no calculator. The
HTTP server answers one request per connection, handles GET only and does
not parse headers.