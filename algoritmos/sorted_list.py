"""Singly linked list that keeps its integer keys in ascending order."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    key: int
    next: Optional["_Node"] = None


class SortedLinkedList:
    """Ascending singly linked list; equal keys are allowed."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Insert ``key`` before the first element that is not smaller."""
        if self._head is None or key <= self._head.key:
            self._head = _Node(key, self._head)
        else:
            previous = self._head
            while previous.next is not None and key > previous.next.key:
                previous = previous.next
            previous.next = _Node(key, previous.next)
        self._size += 1

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        if self._head is None:
            raise KeyError(f"the list is empty, cannot delete {key}")
        previous: Optional[_Node] = None
        current: Optional[_Node] = self._head
        while current is not None and key > current.key:
            previous, current = current, current.next
        if current is None or current.key != key:
            raise KeyError(key)
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1

    def render(self) -> str:
        """Render as `` k ->  k ->  NULL ``."""
        return "".join(f" {key} -> " for key in self) + " NULL "

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.key
            node = node.next

    def __len__(self) -> int:
        return self._size


def make_list(n: int) -> SortedLinkedList:
    """Build the list ``1, 2, ..., n`` (empty when ``n < 1``)."""
    result = SortedLinkedList()
    for key in range(n, 0, -1):
        result.insert(key)
    return result


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def process(lines: Iterable[str]) -> Iterator[str]:
    """Run ``operation element`` pairs (1 insert, 2 delete) and yield output lines."""
    items = SortedLinkedList()
    tokens = _tokens(lines)
    for operation, element in zip(tokens, tokens):
        if operation == 1:
            items.insert(element)
            yield items.render()
        elif operation == 2:
            if not items:
                yield " The ascendent linked list is empty ."
            else:
                try:
                    items.delete(element)
                except KeyError:
                    yield f" The {element} is not in the ascendent linked list ."
            yield items.render()
        else:
            yield " Bad use . "
            yield " 1. Insert "
            yield " 2. Delete "


def main(argv: Optional[list[str]] = None) -> int:
    for line in process(sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())