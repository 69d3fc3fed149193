# algoritmos

Classic data structures and the small problems they are used to solve, in
plain Python with no third-party dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `algoritmos.rbtree` | `RedBlackTree`: insert, delete (by key or node), search, minimum/maximum, successor/predecessor, in-order positions, `render`, `clear`, iteration, `len` and `in`. Keys may be any mutually comparable values (integers, strings); equal keys are allowed. `Node` and `Color` describe the nodes. |
| `algoritmos.sorted_list` | `SortedLinkedList`, a singly linked list kept in ascending order, and `make_list(n)` for the list `1..n`. |
| `algoritmos.circular` | `CircularLinkedList` (append, `pop_first`, `rotate`) and `CircularDoublyLinkedList` (append, `pop_first`, forward and reversed iteration). |
| `algoritmos.josephus` | `solve(n, k)` for the surviving position and `eliminations(n, k)` for the order in which soldiers are removed. |
| `algoritmos.subsets` | Counting pairs whose sum does not exceed a limit: `count_pairs(values, limits)` (red-black tree based) and `count_pairs_brute(values, limit)`. |
| `algoritmos.numbers` | `diagonal_position(n)` for the zig-zag walk across a grid, `is_triangular(n)` and `binary_search(values, key, lo, hi)`. |
| `algoritmos.demo` | `run_demo()`, a short walk through a red-black tree of fruit names, returned as lines. |

Errors are raised the Python way: deleting a missing key raises `KeyError`,
taking from an empty circular list raises `IndexError`, and invalid arguments
(for example `solve(0, 3)` or `diagonal_position(0)`) raise `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algoritmos.rbtree import RedBlackTree

tree = RedBlackTree([41, 38, 31, 12, 19, 8])
print(list(tree))          # keys in ascending order
print(len(tree), 19 in tree)
print(tree.minimum().key, tree.maximum().key)

tree.delete(38)
print(tree.render())       # "(key, RED) (key, BLACK) ..." in order
```

```python
from algoritmos.sorted_list import SortedLinkedList

items = SortedLinkedList([5, 1, 3])
print(items.render())      # " 1 ->  3 ->  5 ->  NULL "
```

```python
from algoritmos.josephus import eliminations, solve

print(eliminations(5, 2), solve(5, 2))
```

```python
from algoritmos.numbers import binary_search

print(binary_search([1, 3, 5, 7], 5))   # 2
print(binary_search([1, 3, 5, 7], 4))   # -3: insertion point 2, encoded as -2 - 1
```

## Command-line tools

Every tool reads whitespace-separated integers from standard input and writes
to standard output.

- `algoritmos-rbtree` reads pairs `operation element`; `1` inserts and `2`
  deletes. After each step it prints the tree in order as
  `(key, COLOR) key ...` and the root's key as `key[T]: ...`.
- `algoritmos-sorted-list` reads the same pairs for the ascending linked list
  and prints the list after each step.
- `algoritmos-circular` reads `1 element` to append and `2` to remove the
  first element, printing the list after each step. With `--doubly` it uses
  the doubly linked list, whose printout shows only the first element.
- `algoritmos-josephus` reads pairs `n k`, prints the circle after each
  elimination and then the survivor, and stops at a pair that is not positive.
- `algoritmos-subsets` reads `n q`, then `n` values, then `q` limits, and
  prints for each limit how many pairs of values sum to at most that limit.
  `--brute` checks every pair directly instead of using the tree.
- `algoritmos-dora` reads step numbers until `0` and prints `row col` for each
  step of the diagonal walk.
- `algoritmos-triangular` reads one number and prints `YES` if it is
  triangular and `NO` otherwise.
- `algoritmos-demo` prints the red-black tree demonstration.

Example:

```
printf '1 10\n1 20\n1 30\n2 20\n' | algoritmos-rbtree
```

## Limits

`binary_search` is available only as a function; there is no command that
reads a list and queries for it. The structures live in memory only and
nothing is saved between runs.