"""A first-in first-out queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """A queue with constant-time enqueue and dequeue."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove the front value and return it; an empty queue yields None."""
        if self._front is None:
            return None
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> Any:
        """The value at the front; IndexError if the queue is empty."""
        if self._front is None:
            raise IndexError("front of an empty queue")
        return self._front.data

    def rear(self) -> Any:
        """The value at the rear; IndexError if the queue is empty."""
        if self._rear is None:
            raise IndexError("rear of an empty queue")
        return self._rear.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next