"""Josephus problem solved by walking a circular linked list."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Optional

from algoritmos.circular import CircularLinkedList


def _check(n: int, k: int) -> None:
    if n < 1 or k < 1:
        raise ValueError("n and k must both be positive")


def _rounds(n: int, k: int) -> Iterator[tuple[int, CircularLinkedList]]:
    """Yield each eliminated soldier with the circle left behind."""
    circle = CircularLinkedList(range(1, n + 1))
    for _ in range(n - 1):
        circle.rotate(k - 1)
        yield circle.pop_first(), circle


def eliminations(n: int, k: int) -> list[int]:
    """Soldiers in the order they are eliminated (all but the survivor)."""
    _check(n, k)
    return [removed for removed, _ in _rounds(n, k)]


def solve(n: int, k: int) -> int:
    """Position of the last soldier standing."""
    _check(n, k)
    circle = CircularLinkedList(range(1, n + 1))
    for _ in range(n - 1):
        circle.rotate(k - 1)
        circle.pop_first()
    return next(iter(circle))


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def main(argv: Optional[list[str]] = None) -> int:
    tokens = _tokens(sys.stdin)
    for n, k in zip(tokens, tokens):
        if n <= 0 or k <= 0:
            break
        survivor = n
        for _, circle in _rounds(n, k):
            print(circle.render())
            survivor = next(iter(circle))
        print(survivor)
    return 0


if __name__ == "__main__":
    sys.exit(main())