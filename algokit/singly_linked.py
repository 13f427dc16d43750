"""Bare singly linked nodes: generation and in-place reversal."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node holding an integer and a link to the next node."""

    data: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.data
            node = node.next


def generate(n: int) -> ListNode | None:
    """A chain holding 1, 2, ..., ``n``."""
    head: ListNode | None = None
    for value in range(n, 0, -1):
        head = ListNode(value, head)
    return head


def generate_random(n: int) -> ListNode | None:
    """A chain of ``n`` random two-digit integers."""
    head: ListNode | None = None
    for _ in range(n):
        head = ListNode(random.randint(10, 99), head)
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the chain in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_range(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse positions ``left`` to ``right`` (zero-based, inclusive) in place.

    Returns the head of the chain afterwards.
    """
    if left < 0 or right < left:
        raise ValueError(f"invalid range {left}..{right}")
    if right >= len(to_list(head)):
        raise IndexError(f"position {right} is past the end of the chain")

    previous: ListNode | None = None
    current = head
    for _ in range(left):
        assert current is not None
        previous, current = current, current.next

    tail = current
    reversed_head: ListNode | None = None
    for _ in range(right - left + 1):
        assert current is not None
        current.next, reversed_head, current = reversed_head, current, current.next

    assert tail is not None
    tail.next = current
    if previous is None:
        return reversed_head
    previous.next = reversed_head
    return head


def to_list(head: ListNode | None) -> list[int]:
    """The values of the chain from ``head`` onwards."""
    return list(head) if head is not None else []