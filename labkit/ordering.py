"""Ordering predicates and an in-place bubble sort driven by them."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, TypeVar

T = TypeVar("T")

SortPredicate = Callable[[Any, Any], bool]


def ascending(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` must be swapped for ascending order."""
    return a > b


def descending(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` must be swapped for descending order."""
    return a < b


def bubble_sort(
    values: MutableSequence[T], predicate: Callable[[T, T], bool]
) -> MutableSequence[T]:
    """Sort ``values`` in place, swapping neighbours while ``predicate`` holds.

    Each pass shrinks the unsorted range by one; sorting stops after the
    first pass that makes no swap. The same sequence is returned.
    """
    end = len(values)
    swapped = True
    while swapped and end > 1:
        swapped = False
        for i in range(end - 1):
            if predicate(values[i], values[i + 1]):
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        end -= 1
    return values