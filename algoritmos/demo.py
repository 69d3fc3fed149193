"""Walk-through of a red-black tree keyed by strings."""

from __future__ import annotations

import sys
from typing import Optional

from algoritmos.rbtree import RedBlackTree

FRUITS = ("apple", "banana", "cherry", "date", "elderberry")


def run_demo() -> list[str]:
    """Insert, search and delete a few strings; return the report lines."""
    lines: list[str] = []
    tree = RedBlackTree()
    for fruit in FRUITS:
        lines.append(f"Insertando '{fruit}'")
        tree.insert(fruit)
    lines.append(tree.render(repeat_keys=True))

    lines.append("")
    lines.append("Buscando 'cherry':")
    found = tree.search("cherry")
    if found is not None:
        lines.append(f"Elemento encontrado: {found.key}")
    else:
        lines.append("Elemento no encontrado")

    lines.append("")
    lines.append("Eliminando 'banana'")
    tree.delete("banana")

    lines.append("")
    lines.append("Caminata en orden del árbol después de eliminación:")
    lines.append(tree.render(repeat_keys=True))
    return lines


def main(argv: Optional[list[str]] = None) -> int:
    for line in run_demo():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())