"""A singly linked list with positional insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list."""

    data: T
    next: Node[T] | None = None

    def __str__(self) -> str:
        return str(self.data)


class LinkedList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Node[T] | None = None
        self._size = 0
        for value in reversed(list(values)):
            self._head = Node(value, self._head)
            self._size += 1

    def _node_at(self, pos: int) -> Node[T]:
        node = self._head
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, pos: int, value: T) -> bool:
        """Insert ``value`` before position ``pos``; False if ``pos`` is past the end."""
        if pos < 0 or pos > self._size:
            return False
        if pos == 0:
            self._head = Node(value, self._head)
        else:
            previous = self._node_at(pos - 1)
            previous.next = Node(value, previous.next)
        self._size += 1
        return True

    def get(self, pos: int) -> Node[T] | None:
        """The node at position ``pos``, or None if there is none."""
        if pos < 0 or pos >= self._size:
            return None
        return self._node_at(pos)

    def push_front(self, value: T) -> bool:
        """Insert ``value`` at the front."""
        return self.insert(0, value)

    def remove(self, pos: int) -> bool:
        """Remove the element at ``pos``; False if there is no such element."""
        if pos < 0 or pos >= self._size:
            return False
        if pos == 0:
            assert self._head is not None
            self._head = self._head.next
        else:
            previous = self._node_at(pos - 1)
            assert previous.next is not None
            previous.next = previous.next.next
        self._size -= 1
        return True

    def clone(self) -> LinkedList[T]:
        """A new list holding the same values in new nodes."""
        return LinkedList(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        if not self._size:
            return "..."
        return "->".join(str(value) for value in self)