import io

import pytest
from hypothesis import given, strategies as st

from algoritmos.rbtree import NIL_KEY, Color, RedBlackTree, main, process


def _black_height(node):
    """Return black height of subtree, asserting red-black invariants."""
    if node.is_nil:
        assert node.color is Color.BLACK
        return 1
    if node.color is Color.RED:
        assert node.left.color is Color.BLACK
        assert node.right.color is Color.BLACK
    if not node.left.is_nil:
        assert node.left.parent is node
        assert not node.key < node.left.key
    if not node.right.is_nil:
        assert node.right.parent is node
        assert not node.right.key < node.key
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (node.color is Color.BLACK)


def _check(tree):
    root = tree.root
    if root is not None:
        assert root.color is Color.BLACK
        _black_height(root)
    assert len(list(tree)) == len(tree)


def test_insert_keeps_sorted_order_and_invariants():
    tree = RedBlackTree()
    for key in [5, 3, 8, 1, 4, 7, 9, 2, 6]:
        tree.insert(key)
        _check(tree)
    assert list(tree) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert len(tree) == 9


def test_three_ascending_inserts_rotate_to_balanced():
    tree = RedBlackTree([1, 2, 3])
    assert tree.root.key == 2
    assert tree.render(repeat_keys=True) == "(1, RED) 1 (2, BLACK) 2 (3, RED) 3 "
    assert tree.render() == "(1, RED) (2, BLACK) (3, RED) "


def test_search_and_contains():
    tree = RedBlackTree([10, 20, 30])
    assert tree.search(20).key == 20
    assert tree.search(25) is None
    assert 30 in tree
    assert 31 not in tree


def test_minimum_maximum_and_empty_errors():
    tree = RedBlackTree([4, 9, 1, 7])
    assert tree.minimum().key == 1
    assert tree.maximum().key == 9
    with pytest.raises(ValueError):
        RedBlackTree().minimum()
    with pytest.raises(ValueError):
        RedBlackTree().maximum()


def test_successor_and_predecessor_walk():
    keys = [15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9]
    tree = RedBlackTree(keys)
    node = tree.minimum()
    forward = []
    while node is not None:
        forward.append(node.key)
        node = tree.successor(node)
    assert forward == sorted(keys)
    node = tree.maximum()
    backward = []
    while node is not None:
        backward.append(node.key)
        node = tree.predecessor(node)
    assert backward == sorted(keys, reverse=True)


def test_delete_and_missing_key():
    tree = RedBlackTree(range(1, 11))
    tree.delete(5)
    _check(tree)
    assert 5 not in tree
    assert list(tree) == [1, 2, 3, 4, 6, 7, 8, 9, 10]
    with pytest.raises(KeyError):
        tree.delete(5)


def test_delete_node_until_empty():
    tree = RedBlackTree([8, 3, 1, 6, 4, 7, 10, 14, 13])
    while tree.root is not None:
        tree.delete_node(tree.root)
        _check(tree)
    assert len(tree) == 0
    assert list(tree) == []


def test_duplicates_are_kept():
    tree = RedBlackTree([2, 2, 1, 2])
    assert list(tree) == [1, 2, 2, 2]
    tree.delete(2)
    assert list(tree) == [1, 2, 2]
    _check(tree)


def test_string_keys():
    tree = RedBlackTree(["date", "apple", "cherry", "banana", "elderberry"])
    assert list(tree) == ["apple", "banana", "cherry", "date", "elderberry"]
    tree.delete("banana")
    assert list(tree) == ["apple", "cherry", "date", "elderberry"]
    _check(tree)
    assert "(apple, " in tree.render()


def test_assign_positions():
    tree = RedBlackTree([30, 10, 20, 40])
    tree.assign_positions()
    assert [(n.key, n.position) for n in tree.nodes()] == [
        (10, 1),
        (20, 2),
        (30, 3),
        (40, 4),
    ]


def test_clear():
    tree = RedBlackTree([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert tree.root is None
    tree.insert(7)
    assert list(tree) == [7]


@given(st.lists(st.integers(-1000, 1000)))
def test_random_inserts(keys):
    tree = RedBlackTree(keys)
    _check(tree)
    assert list(tree) == sorted(keys)


@given(st.lists(st.integers(-50, 50), min_size=1), st.data())
def test_random_deletes(keys, data):
    tree = RedBlackTree(keys)
    remaining = sorted(keys)
    to_delete = data.draw(st.lists(st.sampled_from(keys), max_size=len(keys)))
    for key in to_delete:
        if key in remaining:
            tree.delete(key)
            remaining.remove(key)
        else:
            with pytest.raises(KeyError):
                tree.delete(key)
        _check(tree)
    assert list(tree) == remaining


def test_process_insert_and_delete():
    out = list(process(["1 5", "2 5"]))
    assert out == [
        "(5, BLACK) 5 ",
        "key[T]: 5",
        "",
        f"key[T]: {NIL_KEY}",
    ]


def test_process_missing_element_and_bad_operation():
    out = list(process(["1 3 2 9", "7 0"]))
    assert out[2] == "the element 9 is not in the tree"
    assert out[3] == "(3, BLACK) 3 "
    assert out[4:] == ["Bad use!", " 1. Insert", " 2. Delete"]


def test_process_rejects_non_integer():
    with pytest.raises(ValueError):
        list(process(["1 x"]))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 4\n1 2\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "(4, BLACK) 4 "
    assert lines[2] == "(2, RED) 2 (4, BLACK) 4 "
    assert lines[3] == "key[T]: 4"