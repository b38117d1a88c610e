"""A singly linked list of values with head and tail references."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

from .ordering import bubble_sort, descending


@dataclass(eq=False)
class SinglyNode:
    """A list node linked to the node after it."""

    value: Any
    next: Optional["SinglyNode"] = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list keeping head, tail and length."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[SinglyNode] = None
        self.tail: Optional[SinglyNode] = None
        self._length = 0
        for value in values if values is not None else ():
            self.push_tail(value)

    def _nodes(self) -> Iterator[SinglyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _remove_after(self, previous: Optional[SinglyNode]) -> Any:
        """Unlink the node after ``previous`` (the head when None)."""
        target = self.head if previous is None else previous.next
        if previous is None:
            self.head = target.next
        else:
            previous.next = target.next
        if target is self.tail:
            self.tail = previous
        target.next = None
        self._length -= 1
        return target.value

    def push_head(self, value: Any) -> SinglyNode:
        """Insert ``value`` before the head and return its node."""
        node = SinglyNode(value, next=self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._length += 1
        return node

    def push_tail(self, value: Any) -> SinglyNode:
        """Append ``value`` after the tail and return its node."""
        node = SinglyNode(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1
        return node

    def insert(self, index: int, value: Any) -> SinglyNode:
        """Insert ``value`` at ``index``, clamped to the range of the list."""
        index = max(0, min(index, self._length))
        if index == 0:
            return self.push_head(value)
        if index == self._length:
            return self.push_tail(value)
        previous = self.get(index - 1)
        node = SinglyNode(value, next=previous.next)
        previous.next = node
        self._length += 1
        return node

    def pop_head(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        return self._remove_after(None)

    def pop_tail(self) -> Any:
        """Remove the tail and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self._length == 1:
            return self._remove_after(None)
        return self._remove_after(self.get(self._length - 2))

    def remove_value(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        previous = None
        for node in self._nodes():
            if node.value == value:
                self._remove_after(previous)
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def remove_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        return self._remove_after(None if index == 0 else self.get(index - 1))

    def search(self, value: Any) -> Optional[SinglyNode]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def search_replace(self, old: Any, new: Any) -> bool:
        """Replace the first ``old`` with ``new``; return whether one was found."""
        node = self.search(old)
        if node is None:
            return False
        node.value = new
        return True

    def get(self, index: int) -> SinglyNode:
        """Return the node at ``index``."""
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        return next(itertools.islice(self._nodes(), index, None))

    def replace(self, index: int, new_value: Any) -> Any:
        """Set the value at ``index`` and return the previous value."""
        node = self.get(index)
        old, node.value = node.value, new_value
        return old

    def bubble_sort(
        self, predicate: Callable[[Any, Any], bool]
    ) -> Optional[SinglyNode]:
        """Sort the values in place, keeping the nodes; return the head."""
        values = bubble_sort(list(self), predicate)
        for node, value in zip(self._nodes(), values):
            node.value = value
        return self.head

    def render(self) -> str:
        """Return the values as ``[ a b c ]``."""
        return "[ " + "".join(f"{value} " for value in self) + "]"

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())


def main(argv=None) -> int:
    """Build a small list, sort it in descending order and print it."""
    items = SinglyLinkedList()
    items.push_tail(32)
    items.push_tail(3542)
    items.push_head(10)
    for value in (32, 3, 6, 1, -1):
        items.push_tail(value)
    items.bubble_sort(descending)
    if items.head is None:
        print("List is empty. Nothing to print!")
    else:
        print(items.render())
    print()
    try:
        items.get(32)
    except IndexError:
        print("Node: at 32 not found in list")
    else:
        print("Node: at 32 found in list")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())