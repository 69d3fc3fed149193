"""Red-black tree keyed by any mutually comparable values (ints, strings)."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

NIL_KEY = -2147483647


class Color(IntEnum):
    BLACK = 0
    RED = 1


@dataclass(eq=False, repr=False)
class Node:
    """A tree node; the tree's sentinel leaf has ``is_nil`` set."""

    key: Any
    color: Color = Color.RED
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = None
    position: int = 0
    is_nil: bool = field(default=False)

    def __repr__(self) -> str:
        if self.is_nil:
            return "Node(NIL)"
        return f"Node({self.key!r}, {self.color.name})"


class RedBlackTree:
    """A red-black tree that allows duplicate keys (equal keys go right)."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._nil = Node(None, Color.BLACK, is_nil=True)
        self._root = self._nil
        self._size = 0
        for key in keys:
            self.insert(key)

    # -- inspection -------------------------------------------------------

    @property
    def root(self) -> Optional[Node]:
        return None if self._root is self._nil else self._root

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self.nodes())

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def nodes(self) -> Iterator[Node]:
        """Yield nodes in key order."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not self._nil:
            while current is not self._nil:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def render(self, repeat_keys: bool = False) -> str:
        """In-order listing as ``(key, COLOR) `` items, optionally followed by ``key ``."""
        parts = []
        for node in self.nodes():
            parts.append(f"({node.key}, {node.color.name}) ")
            if repeat_keys:
                parts.append(f"{node.key} ")
        return "".join(parts)

    def search(self, key: Any) -> Optional[Node]:
        x = self._root
        while x is not self._nil and key != x.key:
            x = x.left if key < x.key else x.right
        return None if x is self._nil else x

    def _subtree_min(self, x: Node) -> Node:
        while x.left is not self._nil:
            x = x.left
        return x

    def _subtree_max(self, x: Node) -> Node:
        while x.right is not self._nil:
            x = x.right
        return x

    def minimum(self) -> Node:
        if self._root is self._nil:
            raise ValueError("minimum of an empty tree")
        return self._subtree_min(self._root)

    def maximum(self) -> Node:
        if self._root is self._nil:
            raise ValueError("maximum of an empty tree")
        return self._subtree_max(self._root)

    def successor(self, node: Node) -> Optional[Node]:
        if node.right is not self._nil:
            return self._subtree_min(node.right)
        y = node.parent
        while y is not self._nil and node is y.right:
            node, y = y, y.parent
        return None if y is self._nil else y

    def predecessor(self, node: Node) -> Optional[Node]:
        if node.left is not self._nil:
            return self._subtree_max(node.left)
        y = node.parent
        while y is not self._nil and node is y.left:
            node, y = y, y.parent
        return None if y is self._nil else y

    def assign_positions(self) -> None:
        """Number the nodes 1..n in key order."""
        for position, node in enumerate(self.nodes(), 1):
            node.position = position

    # -- rotations --------------------------------------------------------

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    # -- insertion --------------------------------------------------------

    def insert(self, key: Any) -> Node:
        nil = self._nil
        z = Node(key, Color.RED, nil, nil, nil)
        y = nil
        x = self._root
        while x is not nil:
            y = x
            x = x.left if key < x.key else x.right
        z.parent = y
        if y is nil:
            self._root = z
        elif key < y.key:
            y.left = z
        else:
            y.right = z
        self._insert_fixup(z)
        self._size += 1
        return z

    def _insert_fixup(self, z: Node) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._left_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._right_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._left_rotate(z.parent.parent)
        self._root.color = Color.BLACK

    # -- deletion ---------------------------------------------------------

    def delete(self, key: Any) -> None:
        node = self.search(key)
        if node is None:
            raise KeyError(key)
        self.delete_node(node)

    def delete_node(self, node: Node) -> None:
        """Remove ``node``'s key; the successor's key may move into ``node``."""
        nil = self._nil
        if node.left is nil or node.right is nil:
            y = node
        else:
            y = self._subtree_min(node.right)
        x = y.left if y.left is not nil else y.right
        x.parent = y.parent
        if y.parent is nil:
            self._root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
        if y is not node:
            node.key = y.key
            node.position = y.position
        if y.color is Color.BLACK:
            self._delete_fixup(x)
        self._size -= 1

    def _delete_fixup(self, x: Node) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._left_rotate(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._right_rotate(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._left_rotate(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._right_rotate(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._left_rotate(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._right_rotate(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def clear(self) -> None:
        self._nil.parent = None
        self._root = self._nil
        self._size = 0


def _tokens(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"expected an integer, got {token!r}") from None


def process(lines: Iterable[str]) -> Iterator[str]:
    """Run ``operation element`` pairs (1 insert, 2 delete) and yield output lines."""
    tree = RedBlackTree()
    tokens = _tokens(lines)
    for operation, element in zip(tokens, tokens):
        if operation == 1:
            tree.insert(element)
            yield tree.render(repeat_keys=True)
            if tree.root is not None:
                yield f"key[T]: {tree.root.key}"
        elif operation == 2:
            node = tree.search(element)
            if node is None:
                yield f"the element {element} is not in the tree"
            else:
                tree.delete_node(node)
            yield tree.render(repeat_keys=True)
            if tree.root is None:
                yield f"key[T]: {NIL_KEY}"
        else:
            yield "Bad use!"
            yield " 1. Insert"
            yield " 2. Delete"


def main(argv: Optional[list[str]] = None) -> int:
    for line in process(sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())