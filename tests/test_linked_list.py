import pytest

from algokit.linked_list import LinkedList, Node


def test_elements_can_be_inserted():
    ll = LinkedList([1, 2, 3, 4, 5])
    assert len(ll) == 5

    ll.insert(2, 9)
    assert ll == LinkedList([1, 2, 9, 3, 4, 5])

    ll.insert(0, 8)
    assert ll == LinkedList([8, 1, 2, 9, 3, 4, 5])

    ll.insert(7, 7)
    assert ll == LinkedList([8, 1, 2, 9, 3, 4, 5, 7])

    assert len(ll) == 8


def test_elements_can_be_removed():
    ll = LinkedList([8, 1, 2, 9, 3, 4, 5, 7])

    ll.remove(3)
    assert ll == LinkedList([8, 1, 2, 3, 4, 5, 7])

    ll.remove(0)
    assert ll == LinkedList([1, 2, 3, 4, 5, 7])

    ll.remove(5)
    assert ll == LinkedList([1, 2, 3, 4, 5])

    assert len(ll) == 5


def test_outside_positions_do_nothing():
    ll = LinkedList([1, 2, 3, 4, 5])

    assert ll.insert(99, 0) is False
    assert ll == LinkedList([1, 2, 3, 4, 5])

    assert ll.remove(99) is False
    assert ll == LinkedList([1, 2, 3, 4, 5])


def test_get_by_index():
    ll = LinkedList([1, 2, 3, 4, 5])
    assert ll.get(0).data == 1
    assert ll.get(2).data == 3
    assert ll.get(4).data == 5
    assert ll.get(99) is None
    assert ll.get(5) is None


def test_clone_is_equal_and_independent():
    ll = LinkedList([1, 2, 3, 4, 5])
    cloned = ll.clone()
    assert ll == cloned
    cloned.remove(0)
    assert list(ll) == [1, 2, 3, 4, 5]
    assert list(cloned) == [2, 3, 4, 5]


def test_push_front():
    ll = LinkedList([2, 3])
    assert ll.push_front(1) is True
    assert list(ll) == [1, 2, 3]


def test_insert_at_end_of_empty_list():
    ll = LinkedList()
    assert ll.insert(0, "a") is True
    assert ll.insert(1, "b") is True
    assert list(ll) == ["a", "b"]


def test_remove_from_empty_list():
    ll = LinkedList()
    assert ll.remove(0) is False
    assert len(ll) == 0


@pytest.mark.parametrize(
    "values, text",
    [([], "..."), ([1], "1"), ([1, 2, 3], "1->2->3")],
)
def test_str(values, text):
    assert str(LinkedList(values)) == text


def test_node_str():
    assert str(Node(42)) == "42"


def test_lists_of_different_length_differ():
    assert (LinkedList([1, 2]) == LinkedList([1, 2, 3])) is False