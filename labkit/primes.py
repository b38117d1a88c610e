"""Pairs of numbers in which the second does not divide the first."""

from __future__ import annotations

import argparse
from typing import Iterator


def non_divisor_pairs(limit: int) -> Iterator[tuple[int, int]]:
    """Yield ``(i, j)`` for ``2 <= i, j <= limit`` where ``j`` does not divide ``i``.

    Pairs come in order of ``i`` and then ``j``.
    """
    for i in range(2, limit + 1):
        for j in range(2, limit + 1):
            if i % j != 0:
                yield i, j


def main(argv=None) -> int:
    """Print each non-divisor pair as ``i=>j`` followed by a blank line."""
    parser = argparse.ArgumentParser(description="List non-divisor pairs.")
    parser.add_argument("limit", nargs="?", type=int, default=5)
    args = parser.parse_args(argv)
    for i, j in non_divisor_pairs(args.limit):
        print(f"{i}=>{j}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())