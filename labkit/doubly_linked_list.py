"""A doubly linked list of values with head and tail access."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

from .ordering import bubble_sort, descending


@dataclass(eq=False)
class Node:
    """A list node linked to its neighbours in both directions."""

    value: Any
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list keeping head, tail and length."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._length = 0
        for value in values if values is not None else ():
            self.push_tail(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, node: Node) -> Any:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        node.prev = node.next = None
        self._length -= 1
        return node.value

    def push_head(self, value: Any) -> Node:
        """Insert ``value`` before the head and return its node."""
        node = Node(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._length += 1
        return node

    def push_tail(self, value: Any) -> Node:
        """Append ``value`` after the tail and return its node."""
        node = Node(value, prev=self.tail)
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._length += 1
        return node

    def insert(self, index: int, value: Any) -> Node:
        """Insert ``value`` at ``index``; indexes out of range go to head or tail."""
        if index <= 0:
            return self.push_head(value)
        if index >= self._length:
            return self.push_tail(value)
        previous = self.get(index - 1)
        node = Node(value, prev=previous, next=previous.next)
        previous.next.prev = node
        previous.next = node
        self._length += 1
        return node

    def pop_head(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self.head)

    def pop_tail(self) -> Any:
        """Remove the tail and return its value."""
        if self.tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self.tail)

    def remove_value(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        node = self.search(value)
        if node is None:
            raise ValueError(f"{value!r} not in list")
        self._unlink(node)

    def remove_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        return self._unlink(self.get(index))

    def clear(self) -> None:
        """Remove every node."""
        self.head = None
        self.tail = None
        self._length = 0

    def get(self, index: int) -> Node:
        """Return the node at ``index``."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        return next(itertools.islice(self._nodes(), index, None))

    def search(self, value: Any) -> Optional[Node]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def search_replace(self, old: Any, new: Any) -> bool:
        """Replace the first ``old`` with ``new``; return whether one was found."""
        node = self.search(old)
        if node is None:
            return False
        node.value = new
        return True

    def replace(self, index: int, new_value: Any) -> Any:
        """Set the value at ``index`` and return the previous value."""
        node = self.get(index)
        old, node.value = node.value, new_value
        return old

    def bubble_sort(self, predicate: Callable[[Any, Any], bool]) -> Optional[Node]:
        """Sort the values in place, keeping the nodes; return the head."""
        values = bubble_sort(list(self), predicate)
        for node, value in zip(self._nodes(), values):
            node.value = value
        return self.head

    def render(self) -> str:
        """Return the values from head to tail as ``[a, b, c]``."""
        return "[" + ", ".join(map(str, self)) + "]"

    def render_reverse(self) -> str:
        """Return the values from tail to head as ``[c, b, a]``."""
        return "[" + ", ".join(map(str, reversed(self))) + "]"

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev


def main(argv=None) -> int:
    """Build a small list, sort it and print it."""
    items = DoublyLinkedList()
    for index, value in enumerate((13, 11, 1000, 12)):
        items.insert(index, value)
    print(items.render())
    head = items.bubble_sort(descending)
    print(items.render())
    chain = " -> ".join(str(items.get(i).value) for i in range(1, 4))
    print(f"Head: {head.value} -> {chain}")
    items.insert(8, 888)
    items.insert(0, 32)
    items.insert(-1, 121)
    print(items.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())