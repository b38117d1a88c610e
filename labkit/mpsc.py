"""A multi-producer, single-consumer queue and an atomically swapped reference."""

from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class AtomicRef(Generic[T]):
    """A reference whose load, store and exchange are atomic."""

    def __init__(self, value: T = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def exchange(self, value: T) -> T:
        """Replace the current value and return the one it replaced."""
        with self._lock:
            old, self._value = self._value, value
            return old


@dataclass(eq=False)
class _Node:
    data: Any = None
    next: Optional["_Node"] = field(default=None, repr=False)


class MPSCQueue:
    """A linked queue safe for many producers and one consumer.

    Producers swap themselves in as the newest node atomically; the single
    consumer walks from a dummy node at the oldest end.
    """

    def __init__(self) -> None:
        dummy = _Node()
        self._head: AtomicRef[_Node] = AtomicRef(dummy)
        self._tail = dummy

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the newest end; callable from any thread."""
        node = _Node(item)
        previous = self._head.exchange(node)
        previous.next = node

    def dequeue(self) -> Any:
        """Remove and return the oldest item; only one thread may call this."""
        following = self._tail.next
        if following is None:
            raise IndexError("dequeue from empty queue")
        self._tail = following
        item, following.data = following.data, None
        return item

    def drain(self) -> Iterator[Any]:
        """Yield and remove items until the queue is empty."""
        while True:
            try:
                yield self.dequeue()
            except IndexError:
                return


def run_producers(queue: MPSCQueue, producers: int, items_per_producer: int) -> int:
    """Enqueue ``0 .. items_per_producer - 1`` from each of ``producers`` threads.

    Waits for every producer and returns the number of items enqueued.
    """
    if producers < 0 or items_per_producer < 0:
        raise ValueError("producers and items_per_producer must not be negative")

    def produce() -> None:
        for value in range(items_per_producer):
            queue.enqueue(value)

    threads = [threading.Thread(target=produce) for _ in range(producers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return producers * items_per_producer


def _produce_slowly(queue: MPSCQueue, count: int, delay: float) -> None:
    for value in range(count):
        queue.enqueue(value)
        print(f"Produced: {value}")
        time.sleep(delay)


def _consume(queue: MPSCQueue, count: int, delay: float) -> None:
    for _ in range(count):
        while True:
            try:
                item = queue.dequeue()
                break
            except IndexError:
                time.sleep(delay)
        print(f"Consumed: {item}")


def _queue_demo() -> None:
    queue = MPSCQueue()
    threads = [
        threading.Thread(target=_produce_slowly, args=(queue, 5, 0.1)),
        threading.Thread(target=_produce_slowly, args=(queue, 5, 0.1)),
        threading.Thread(target=_consume, args=(queue, 10, 0.05)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    for _ in queue.drain():
        pass


def _atomic_demo() -> None:
    ref: AtomicRef[Optional[int]] = AtomicRef(None)

    def update() -> None:
        ref.store(42)
        print("Pointer updated to: 42")

    def read() -> None:
        value = ref.load()
        if value is not None:
            print(f"Pointer read: {value}")
        else:
            print("Pointer is NULL.")

    threads = [threading.Thread(target=update), threading.Thread(target=read)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv=None) -> int:
    """Run the producer/consumer demo or the atomic reference demo."""
    parser = argparse.ArgumentParser(description="Concurrent queue demonstrations.")
    parser.add_argument("demo", nargs="?", choices=("queue", "atomic"), default="queue")
    args = parser.parse_args(argv)
    if args.demo == "atomic":
        _atomic_demo()
    else:
        _queue_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())