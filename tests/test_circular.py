import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoritmos.circular import (
    CircularDoublyLinkedList,
    CircularLinkedList,
    main,
    process,
)

keys = st.lists(st.integers(-1000, 1000))


@given(keys)
def test_singly_iterates_in_append_order(values):
    ring = CircularLinkedList(values)
    assert list(ring) == values
    assert len(ring) == len(values)


@given(keys)
def test_singly_pop_first_is_fifo(values):
    ring = CircularLinkedList(values)
    assert [ring.pop_first() for _ in values] == values
    assert len(ring) == 0


@given(keys)
def test_doubly_iterates_both_ways(values):
    ring = CircularDoublyLinkedList(values)
    assert list(ring) == values
    assert list(reversed(ring)) == values[::-1]


@given(keys)
def test_doubly_pop_first_is_fifo(values):
    ring = CircularDoublyLinkedList(values)
    popped = []
    while ring:
        popped.append(ring.pop_first())
        assert list(reversed(ring)) == list(ring)[::-1]
    assert popped == values


@given(st.lists(st.integers(), min_size=1), st.integers(0, 50))
def test_rotate_shifts_start(values, steps):
    ring = CircularLinkedList(values)
    ring.rotate(steps)
    shift = steps % len(values)
    assert list(ring) == values[shift:] + values[:shift]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().pop_first()
    with pytest.raises(IndexError):
        CircularDoublyLinkedList().pop_first()


def test_rotate_empty_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().rotate(1)


def test_render():
    assert CircularLinkedList([1, 2, 3]).render() == "1 -> 2 -> 3 -> ... "
    assert CircularLinkedList().render() == "NULL"
    assert CircularDoublyLinkedList([1, 2, 3]).render() == "1 -> ... "
    assert CircularDoublyLinkedList().render() == "NULL"


def test_process_singly():
    assert list(process(["1 4", "1 7", "2", "3"])) == [
        "4 -> ... ",
        "4 -> 7 -> ... ",
        "7 -> ... ",
        "Bad use.",
        " 1. Insert ",
        " 2. Delete",
    ]


def test_process_delete_on_empty():
    assert list(process(["2"], doubly=True)) == [
        "The circular linked list is empty",
        "NULL",
    ]


def test_process_doubly():
    assert list(process(["1 4 1 7 2"], doubly=True)) == [
        "4 -> ... ",
        "4 -> ... ",
        "7 -> ... ",
    ]


def test_main_with_doubly_flag(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5\n1 6\n"))
    assert main(["--doubly"]) == 0
    assert capsys.readouterr().out.splitlines() == ["5 -> ... ", "5 -> ... "]