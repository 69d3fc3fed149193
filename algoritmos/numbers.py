"""Small number problems: diagonal walk, triangular numbers, binary search."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from math import isqrt
from typing import Optional


def diagonal_position(n: int) -> tuple[int, int]:
    """Cell ``(row, col)`` reached at step ``n`` of a zig-zag diagonal walk.

    Even diagonals run down-left from the top row, odd ones up-right.
    """
    if n < 1:
        raise ValueError("the step must be a positive integer")
    k = (isqrt(8 * n + 1) - 1) // 2
    while k * (k + 1) // 2 < n:
        k += 1
    position = n - k * (k - 1) // 2
    if k % 2 == 0:
        return position, k + 1 - position
    return k + 1 - position, position


def is_triangular(n: int) -> bool:
    """Whether ``n`` equals ``i * (i + 1) / 2`` for some ``i >= 0``."""
    if n < 0:
        return False
    k = (isqrt(8 * n + 1) - 1) // 2
    return k * (k + 1) // 2 == n


def binary_search(
    values: Sequence[int], key: int, lo: int = 0, hi: Optional[int] = None
) -> int:
    """Index of ``key`` in sorted ``values[lo:hi + 1]``, or ``-insertion_point - 1``."""
    if hi is None:
        hi = len(values) - 1
    while lo <= hi:
        middle = (lo + hi) // 2
        if values[middle] == key:
            return middle
        if key > values[middle]:
            lo = middle + 1
        else:
            hi = middle - 1
    return -lo - 1


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def dora_main(argv: Optional[list[str]] = None) -> int:
    """Print ``row col`` for each step read, stopping at 0."""
    for n in _tokens(sys.stdin):
        if n == 0:
            break
        row, col = diagonal_position(n)
        print(f"{row} {col}")
    return 0


def triangular_main(argv: Optional[list[str]] = None) -> int:
    """Read one integer and print YES if it is triangular, NO otherwise."""
    n = next(_tokens(sys.stdin), None)
    if n is None:
        raise ValueError("expected an integer")
    print("YES" if is_triangular(n) else "NO")
    return 0


if __name__ == "__main__":
    sys.exit(dora_main())