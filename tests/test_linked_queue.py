import pytest

from algokit.linked_queue import LinkedQueue


def test_front_and_rear_after_mixed_operations():
    q = LinkedQueue()
    q.enqueue(2)
    q.enqueue(1)
    q.dequeue()
    q.enqueue(3)
    q.enqueue(4)
    q.enqueue(5)
    q.dequeue()
    assert q.front() == 3
    assert q.rear() == 5


def test_dequeue_returns_values_in_order():
    q = LinkedQueue()
    for value in (1, 2, 3):
        q.enqueue(value)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [1, 2, 3]
    assert len(q) == 0


def test_dequeue_empty_returns_none():
    q = LinkedQueue()
    assert q.dequeue() is None
    assert len(q) == 0


def test_empty_queue_front_and_rear_raise():
    q = LinkedQueue()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.rear()


def test_queue_reusable_after_emptying():
    q = LinkedQueue()
    q.enqueue("a")
    q.dequeue()
    q.enqueue("b")
    assert q.front() == "b"
    assert q.rear() == "b"
    assert list(q) == ["b"]