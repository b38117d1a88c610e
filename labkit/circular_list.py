"""A circular singly linked list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = field(default=None, repr=False)


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._tail: Optional[_Node] = None
        self._length = 0
        for value in values if values is not None else ():
            self.push_tail(value)

    def _link(self, value: Any) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._length += 1
        return node

    def push_head(self, value: Any) -> None:
        """Insert ``value`` as the first node."""
        self._link(value)

    def push_tail(self, value: Any) -> None:
        """Insert ``value`` as the last node."""
        self._tail = self._link(value)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._tail is None:
            raise ValueError("remove from empty list")
        previous = self._tail
        for _ in range(self._length):
            current = previous.next
            if current.value == value:
                if current is previous:
                    self._tail = None
                else:
                    previous.next = current.next
                    if current is self._tail:
                        self._tail = previous
                current.next = None
                self._length -= 1
                return
            previous = current
        raise ValueError(f"{value!r} not in list")

    def render(self) -> str:
        """Return the values from head around to tail as ``[a, b, c]``."""
        return "[" + ", ".join(map(str, self)) + "]"

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._length):
            yield node.value
            node = node.next


def main(argv=None) -> int:
    """Build a one-element circular list and print it."""
    items = CircularList()
    items.push_head(10)
    if len(items) == 0:
        print("List is empty!")
    else:
        print(items.render())
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())