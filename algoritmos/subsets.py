"""Count pairs of elements whose sum does not exceed a limit."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import combinations, islice
from typing import Optional

from algoritmos.rbtree import RedBlackTree


def count_pairs_brute(values: Iterable[int], limit: int) -> int:
    """Number of index pairs ``i < j`` with ``values[i] + values[j] <= limit``."""
    return sum(1 for a, b in combinations(list(values), 2) if a + b <= limit)


def count_pairs(values: Iterable[int], limits: Iterable[int]) -> list[int]:
    """Answer each limit with a red-black tree of the values.

    For every element ``u`` below half the limit, the elements after ``u``
    in sorted order that do not exceed ``limit - u`` are counted through
    their in-order positions.
    """
    values = list(values)
    limits = list(limits)
    if not values:
        return [0] * len(limits)

    tree = RedBlackTree(values)
    tree.assign_positions()
    results = []
    for limit in limits:
        total = 0
        u = tree.minimum()
        while u is not None and limit - u.key > u.key:
            target = limit - u.key
            z = tree.search(target)
            if z is None:
                # Insert the target temporarily to locate its floor element.
                z = tree.insert(target)
                v = tree.predecessor(z)
                total += (v.position if v is not None else u.position) - u.position
                tree.delete_node(z)
            else:
                total += z.position - u.position
            u = tree.successor(u)
        results.append(total)
    return results


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read n q, n values and q limits; print the pair count for each limit."
    )
    parser.add_argument("--brute", action="store_true", help="check every pair directly")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    header = list(islice(tokens, 2))
    if len(header) < 2:
        raise ValueError("expected the counts n and q")
    n, q = header
    values = list(islice(tokens, n))
    limits = list(islice(tokens, q))
    if len(values) < n or len(limits) < q:
        raise ValueError("input ended early")

    if args.brute:
        results = [count_pairs_brute(values, limit) for limit in limits]
    else:
        results = count_pairs(values, limits)
    for result in results:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())