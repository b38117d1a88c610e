"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class StackEmptyError(IndexError):
    """Raised when a value is requested from an empty stack."""


class Stack:
    """A stack; iteration runs from the top to the bottom."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(values if values is not None else ())

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottom value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return whether the stack holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def render(self) -> str:
        """Return the values top to bottom, joined by downward arrows."""
        if not self._items:
            return "Stack is empty"
        return "\n  ↓\n".join(f" {value} " for value in self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)


def main(argv=None) -> int:
    """Push a few values and print the size of the stack."""
    stack = Stack()
    for value in (10, 20, 30, 40, 50, 21):
        stack.push(value)
    print(f"\nSize of stack: {len(stack)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())