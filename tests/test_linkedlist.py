import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.linkedlist import LinkedList, Node, merge_sorted

values = st.lists(st.integers(min_value=-50, max_value=50), max_size=15)


def test_source_driver_sequence():
    items = LinkedList()
    for value in (1, 2, 3):
        items.append(value)
    items.prepend(0)
    assert str(items) == "0->1->2->3->NULL"
    assert 5 not in items
    items.reverse_in_groups(2)
    assert list(items) == [1, 0, 3, 2]
    items.move_last_to_front()
    assert list(items) == [2, 1, 0, 3]


def test_empty_list_string():
    assert str(LinkedList()) == "NULL"


@given(values)
def test_iteration_round_trip(data):
    items = LinkedList(data)
    assert list(items) == data
    assert len(items) == len(data)
    assert all(value in items for value in data)


@given(values)
def test_reverse(data):
    items = LinkedList(data)
    items.reverse()
    assert list(items) == data[::-1]
    items.reverse_recursive()
    assert list(items) == data


@given(values, st.integers(min_value=1, max_value=20))
def test_reverse_in_groups_keeps_elements(data, k):
    items = LinkedList(data)
    items.reverse_in_groups(k)
    result = list(items)
    assert sorted(result) == sorted(data)
    assert result[:k] == data[:k][::-1]
    if k >= len(data):
        assert result == data[::-1]


@given(values)
def test_reverse_in_groups_of_one_is_identity(data):
    items = LinkedList(data)
    items.reverse_in_groups(1)
    assert list(items) == data


def test_reverse_in_groups_rejects_zero():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).reverse_in_groups(0)


@given(values.filter(lambda d: len(d) >= 2))
def test_move_last_to_front(data):
    items = LinkedList(data)
    items.move_last_to_front()
    assert list(items) == data[-1:] + data[:-1]


def test_move_last_to_front_short_lists():
    single = LinkedList([7])
    single.move_last_to_front()
    assert list(single) == [7]
    empty = LinkedList()
    empty.move_last_to_front()
    assert list(empty) == []


@given(values, st.data())
def test_delete_first_occurrence(data, draw):
    if not data:
        with pytest.raises(ValueError):
            LinkedList(data).delete(0)
        return
    value = draw.draw(st.sampled_from(data))
    items = LinkedList(data)
    items.delete(value)
    expected = list(data)
    expected.remove(value)
    assert list(items) == expected


def test_delete_missing_raises():
    with pytest.raises(ValueError):
        LinkedList([1, 2, 3]).delete(9)


def test_merge_source_example():
    a = LinkedList([5, 10, 15])
    b = LinkedList([2, 3, 20])
    merged = merge_sorted(a, b)
    assert list(merged) == [2, 3, 5, 10, 15, 20]
    assert list(a) == [] and list(b) == []


@given(values, values)
def test_merge_sorted_is_sorted_union(first, second):
    merged = merge_sorted(LinkedList(sorted(first)), LinkedList(sorted(second)))
    assert list(merged) == sorted(first + second)


def test_merge_prefers_first_on_ties():
    left = Node(1)
    right = Node(1)
    a = LinkedList()
    a.head = left
    b = LinkedList()
    b.head = right
    merged = merge_sorted(a, b)
    assert merged.head is left
    assert merged.head.next is right