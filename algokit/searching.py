"""Linear and binary search and insertion into sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], x: Any) -> int:
    """Index of the first element equal to ``x``, or -1."""
    return next((i for i, value in enumerate(items) if value == x), -1)


def binary_search(items: Sequence[Any], x: Any) -> int:
    """Index of an element equal to ``x`` in the sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == x:
            return mid
        if items[mid] > x:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_all(items: Sequence[Any], x: Any) -> list[int]:
    """Indices of every element equal to ``x``."""
    return [i for i, value in enumerate(items) if value == x]


def search_position(items: Sequence[Any], x: Any) -> int:
    """Index of the first element not less than ``x``, or -1 if there is none."""
    return next((i for i, value in enumerate(items) if value >= x), -1)


def insert_at(items: Sequence[Any], x: Any, position: int) -> list[Any]:
    """A new list with ``x`` placed at ``position``."""
    if not 0 <= position <= len(items):
        raise IndexError(f"position {position} out of range for {len(items)} items")
    return [*items[:position], x, *items[position:]]


def insert_sorted(items: Sequence[Any], x: Any) -> list[Any]:
    """A new list with ``x`` inserted into the sorted ``items`` keeping the order."""
    position = search_position(items, x)
    if position == -1:
        position = len(items)
    return insert_at(items, x, position)