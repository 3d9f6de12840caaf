import pytest

from dsa_kit.linkedlist import DoublyLinkedList, SinglyLinkedList


def _singly(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.append(value)
    return lst


def _doubly(values):
    lst = DoublyLinkedList()
    for value in values:
        lst.append(value)
    return lst


def test_singly_sum_source_case():
    assert _singly([1, 2, 3, 4]).sum() == 10


def test_singly_iteration_and_length():
    lst = _singly([1, 2, 3, 4])
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4


def test_singly_reverse_source_case():
    lst = _singly([1, 2, 3, 4])
    lst.reverse()
    assert list(lst) == [4, 3, 2, 1]


def test_singly_append_after_reverse_goes_to_end():
    lst = _singly([1, 2, 3])
    lst.reverse()
    lst.append(0)
    assert list(lst) == [3, 2, 1, 0]


def test_singly_empty():
    lst = SinglyLinkedList()
    lst.reverse()
    assert list(lst) == []
    assert lst.sum() == 0


def test_doubly_source_case():
    dl = _doubly([1, 2, 3])
    dl.insert_at(1, 0)
    assert dl.get(1) == 1
    assert len(dl) == 4
    assert list(dl) == [1, 1, 2, 3]


def test_doubly_prepend_and_append():
    dl = DoublyLinkedList()
    dl.append(2)
    dl.prepend(1)
    dl.append(3)
    assert list(dl) == [1, 2, 3]


def test_doubly_insert_in_middle():
    dl = _doubly([1, 2, 4])
    dl.insert_at(3, 2)
    assert list(dl) == [1, 2, 3, 4]
    assert dl.get(2) == 3
    dl.insert_at(5, 4)
    assert list(dl) == [1, 2, 3, 4, 5]


def test_doubly_insert_into_empty():
    dl = DoublyLinkedList()
    dl.insert_at(7, 0)
    assert list(dl) == [7]
    assert len(dl) == 1


def test_doubly_insert_past_end_raises():
    dl = _doubly([1, 2])
    with pytest.raises(IndexError):
        dl.insert_at(9, 3)


def test_doubly_remove_head_middle_tail():
    dl = _doubly([1, 2, 3, 4, 5])
    assert dl.remove_at(0) == 1
    assert dl.remove_at(1) == 3
    assert dl.remove_at(2) == 5
    assert list(dl) == [2, 4]
    assert len(dl) == 2
    dl.append(6)
    assert list(dl) == [2, 4, 6]


def test_doubly_remove_only_element():
    dl = _doubly([1])
    assert dl.remove_at(0) == 1
    assert list(dl) == []
    dl.append(2)
    assert list(dl) == [2]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_doubly_get_out_of_bounds(index):
    dl = _doubly([1, 2, 3])
    with pytest.raises(IndexError):
        dl.get(index)


def test_doubly_remove_out_of_bounds():
    with pytest.raises(IndexError):
        DoublyLinkedList().remove_at(0)