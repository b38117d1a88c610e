"""A growable array with an explicit capacity."""

from __future__ import annotations

from typing import Any, Iterator


class DynamicArray:
    """An array that grows when full.

    By default the capacity grows by one slot at a time. With ``doubling``
    set it doubles when full and halves once fewer than a quarter of the
    slots are in use after a pop.
    """

    def __init__(self, capacity: int = 1, doubling: bool = False) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._doubling = doubling
        self._data: list[Any] = []

    @property
    def capacity(self) -> int:
        """The number of slots currently reserved."""
        return self._capacity

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, growing the capacity when full."""
        if len(self._data) == self._capacity:
            grown = self._capacity * 2 if self._doubling else self._capacity + 1
            self.resize(grown)
        self._data.append(value)

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._data:
            raise IndexError("pop from empty array")
        value = self._data.pop()
        if self._doubling and len(self._data) < self._capacity // 4:
            self.resize(self._capacity // 2)
        return value

    def remove_at(self, index: int) -> Any:
        """Remove the value at ``index``, shifting later values down."""
        if not 0 <= index < len(self._data):
            raise IndexError("array index out of range")
        return self._data.pop(index)

    def resize(self, capacity: int) -> None:
        """Set the capacity, keeping every stored value."""
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if capacity < len(self._data):
            raise ValueError("capacity smaller than the number of stored values")
        self._capacity = capacity

    def render(self) -> str:
        """Return a line listing the stored values."""
        return "Array contains these elements: " + ",".join(map(str, self._data))

    def __getitem__(self, index: int) -> Any:
        if not -len(self._data) <= index < len(self._data):
            raise IndexError("array index out of range")
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)


def main(argv=None) -> int:
    """Fill an array, remove from it and print its state."""
    array = DynamicArray(1)
    for value in (10, 20, 30, 40, 50, 60):
        array.append(value)
    array.resize(50)
    print()
    print(array.render())
    print(f"Array's size: {len(array)}")
    print("\n")
    array.remove_at(2)
    print(array.render())
    print(f"Array's size: {len(array)}")
    print("\n")
    array.append(43)
    print(array.render())
    print(f"Array's size: {len(array)}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())