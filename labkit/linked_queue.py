"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, Optional


class QueueEmptyError(IndexError):
    """Raised when a value is requested from an empty queue."""


class LinkedQueue:
    """A queue adding at the rear and removing from the front."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque(values if values is not None else ())

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("dequeue from empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear value without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def render(self) -> str:
        """Return the values front to rear as `` [a] <=  [b] ``."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return "<= ".join(f" [{value}] " for value in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


def main(argv=None) -> int:
    """Run a few queue operations and print the result."""
    queue = LinkedQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    queue.dequeue()
    for value in (321, 432, 890):
        queue.enqueue(value)
    print()
    print(queue.render())
    print(f"\n Is empty? {'EMPTY' if queue.is_empty() else 'NO'}")
    print()
    print(f"\n First Element of queue: {queue.front()}")
    print(f" Last Element of queue: {queue.rear()}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())