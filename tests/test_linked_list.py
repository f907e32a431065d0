import pytest

from dsalgo.linked_list import LinkedList, Node

SAMPLE = [57, 36, 89, 44, 66, 99, 88, 83]


def test_build_keeps_order():
    assert list(LinkedList(SAMPLE)) == SAMPLE


def test_empty_list():
    empty = LinkedList()
    assert empty.is_empty()
    assert len(empty) == 0
    assert str(empty) == "List is Empty!"


def test_str_format():
    assert str(LinkedList([0, 1, 2])) == "List : 0->1->2->null"


def test_insert_at_tail_appends():
    items = LinkedList()
    for value in range(10):
        items.insert_at_tail(value)
    assert list(items) == list(range(10))
    assert not items.is_empty()


def test_insert_at_head_prepends():
    items = LinkedList([2, 3])
    items.insert_at_head(1)
    assert list(items) == [1, 2, 3]
    assert isinstance(items.head, Node)
    assert items.head.data == 1


def test_search_and_contains():
    items = LinkedList(SAMPLE)
    assert items.search(89)
    assert not items.search(14)
    assert 66 in items
    assert 14 not in items
    assert not LinkedList().search(1)


def test_delete_head_returns_value():
    items = LinkedList([5, 6, 7])
    assert items.delete_head() == 5
    assert list(items) == [6, 7]


def test_delete_head_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete_head()


@pytest.mark.parametrize("value", SAMPLE)
def test_delete_removes_value(value):
    items = LinkedList(SAMPLE)
    assert items.delete(value)
    assert list(items) == [v for v in SAMPLE if v != value]


def test_delete_only_first_occurrence():
    items = LinkedList([1, 2, 1])
    assert items.delete(1)
    assert list(items) == [2, 1]


def test_delete_missing_returns_false():
    items = LinkedList(SAMPLE)
    assert not items.delete(14)
    assert list(items) == SAMPLE
    assert not LinkedList().delete(1)


def test_length():
    assert len(LinkedList(range(10))) == 10


def test_reverse():
    items = LinkedList(range(10))
    items.reverse()
    assert list(items) == list(reversed(range(10)))
    assert len(items) == 10


def test_reverse_empty_and_single():
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []
    single = LinkedList([4])
    single.reverse()
    assert list(single) == [4]


def test_detect_loop():
    items = LinkedList(range(5))
    assert not items.detect_loop()
    items.insert_loop()
    assert items.detect_loop()


def test_insert_loop_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().insert_loop()


def test_find_mid_odd_length():
    assert LinkedList(range(12, 25)).find_mid() == 18


def test_find_mid_even_length_takes_first_middle():
    assert LinkedList([1, 2, 3, 4]).find_mid() == 2


def test_find_mid_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().find_mid()


def test_remove_duplicates():
    items = LinkedList([1, 1, 2])
    items.remove_duplicates()
    assert list(items) == [1, 2]


def test_remove_duplicates_keeps_first_occurrences():
    values = [3, 1, 3, 2, 1, 3]
    items = LinkedList(values)
    items.remove_duplicates()
    assert list(items) == list(dict.fromkeys(values))


@pytest.mark.parametrize("n", range(1, len(SAMPLE) + 1))
def test_find_nth_from_end(n):
    assert LinkedList(SAMPLE).find_nth(n) == SAMPLE[-n]


@pytest.mark.parametrize("n", [0, -1, len(SAMPLE) + 1])
def test_find_nth_out_of_range(n):
    with pytest.raises(IndexError):
        LinkedList(SAMPLE).find_nth(n)


def test_find_nth_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().find_nth(1)