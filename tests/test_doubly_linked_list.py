import pytest

from dsalgo.doubly_linked_list import DoublyLinkedList


@pytest.fixture
def filled():
    dll = DoublyLinkedList()
    for value in range(1, 6):
        dll.insert_at_head(value)
    return dll


def test_insert_at_head_order(filled):
    assert list(filled) == [5, 4, 3, 2, 1]
    assert len(filled) == 5


def test_reversed_matches_forward(filled):
    assert list(reversed(filled)) == list(filled)[::-1]


def test_delete_sequence_from_example(filled):
    assert filled.delete(1) is True
    assert list(filled) == [5, 4, 3, 2]
    assert filled.delete(5) is True
    assert list(filled) == [4, 3, 2]
    assert filled.delete(3) is True
    assert list(filled) == [4, 2]
    assert filled.delete(12) is False
    assert list(filled) == [4, 2]
    assert str(filled) == "List : 4->2->null"


def test_delete_keeps_back_links(filled):
    filled.delete(3)
    filled.delete(1)
    assert list(reversed(filled)) == [2, 4, 5]
    assert len(filled) == 3


def test_empty_list():
    dll = DoublyLinkedList()
    assert dll.is_empty() is True
    assert str(dll) == "List is Empty!"
    assert dll.delete(1) is False
    with pytest.raises(IndexError):
        dll.delete_at_head()


def test_delete_at_head_returns_value(filled):
    assert filled.delete_at_head() == 5
    assert list(filled) == [4, 3, 2, 1]


def test_delete_at_head_single_element():
    dll = DoublyLinkedList([7])
    assert dll.delete_at_head() == 7
    assert dll.is_empty() is True
    assert list(reversed(dll)) == []


def test_constructor_keeps_order():
    values = [3, 1, 4, 1, 5]
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert len(dll) == len(values)


def test_delete_only_first_match():
    dll = DoublyLinkedList([1, 2, 1])
    assert dll.delete(1) is True
    assert list(dll) == [2, 1]


def test_insert_after_emptying():
    dll = DoublyLinkedList([1])
    dll.delete(1)
    dll.insert_at_head(9)
    assert list(dll) == [9]
    assert list(reversed(dll)) == [9]