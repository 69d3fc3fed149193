"""Circular singly and doubly linked lists addressed through their tail."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(eq=False)
class _Node:
    key: int
    next: Optional["_Node"] = None


@dataclass(eq=False)
class _DNode:
    key: int
    next: Optional["_DNode"] = None
    prev: Optional["_DNode"] = None


class CircularLinkedList:
    """Circular singly linked list; appending makes the new node the tail."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.append(key)

    def append(self, key: int) -> None:
        node = _Node(key)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_first(self) -> int:
        """Remove and return the element after the tail."""
        if self._tail is None:
            raise IndexError("the circular linked list is empty")
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
        self._size -= 1
        return first.key

    def rotate(self, steps: int) -> None:
        """Advance the tail ``steps`` nodes forward."""
        if self._tail is None:
            raise IndexError("cannot rotate an empty circular linked list")
        for _ in range(steps):
            self._tail = self._tail.next

    def render(self) -> str:
        """Render as ``a -> b -> ... `` from first to tail, or ``NULL``."""
        if self._tail is None:
            return "NULL"
        return "".join(f"{key} -> " for key in self) + "... "

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.key
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularDoublyLinkedList:
    """Circular doubly linked list; appending makes the new node the tail."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._tail: Optional[_DNode] = None
        self._size = 0
        for key in keys:
            self.append(key)

    def append(self, key: int) -> None:
        node = _DNode(key)
        if self._tail is None:
            node.next = node
            node.prev = node
        else:
            node.next = self._tail.next
            node.prev = self._tail
            self._tail.next = node
            node.next.prev = node
        self._tail = node
        self._size += 1

    def pop_first(self) -> int:
        """Remove and return the element after the tail."""
        if self._tail is None:
            raise IndexError("the circular linked list is empty")
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
            self._tail.next.prev = self._tail
        self._size -= 1
        return first.key

    def render(self) -> str:
        """Render the first element followed by an ellipsis, or ``NULL``."""
        if self._tail is None:
            return "NULL"
        return f"{self._tail.next.key} -> ... "

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.key
            if node is self._tail:
                return
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail
        while True:
            yield node.key
            node = node.prev
            if node is self._tail:
                return

    def __len__(self) -> int:
        return self._size


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def process(lines: Iterable[str], doubly: bool = False) -> Iterator[str]:
    """Run operations (``1 element`` append, ``2`` pop first) and yield output lines."""
    ring: Union[CircularLinkedList, CircularDoublyLinkedList] = (
        CircularDoublyLinkedList() if doubly else CircularLinkedList()
    )
    tokens = _tokens(lines)
    for operation in tokens:
        if operation == 1:
            element = next(tokens, None)
            if element is None:
                return
            ring.append(element)
            yield ring.render()
        elif operation == 2:
            if not ring:
                yield "The circular linked list is empty"
            else:
                ring.pop_first()
            yield ring.render()
        else:
            yield "Bad use."
            yield " 1. Insert "
            yield " 2. Delete"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Circular linked list operations.")
    parser.add_argument("--doubly", action="store_true", help="use a doubly linked list")
    args = parser.parse_args(argv)
    for line in process(sys.stdin, doubly=args.doubly):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())