"""Selection sort and quick sort, with a timing comparison of the two."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, NamedTuple


class Timing(NamedTuple):
    """Milliseconds taken by each sort on an array of ``10 ** power`` elements."""

    power: int
    selection_ms: float
    quick_ms: float


def random_array(n: int, low: int, high: int) -> list[int]:
    """``n`` random integers drawn uniformly from ``low`` to ``high`` inclusive."""
    return [random.randint(low, high) for _ in range(n)]


def format_array(items: Sequence[Any], show_index: bool = True) -> str:
    """Render ``items`` in braces, optionally prefixing each value with its index."""
    if show_index:
        parts = (f"{i}: {value}" for i, value in enumerate(items))
    else:
        parts = (str(value) for value in items)
    return "{" + ", ".join(parts) + "}"


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest remaining value."""
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def partition(items: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``items[start:end + 1]`` around ``items[start]``; return the pivot's index."""
    pivot = items[start]
    pivot_index = start + sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    items[pivot_index], items[start] = items[start], items[pivot_index]
    i, j = start, end
    while i < pivot_index < j:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: MutableSequence[Any], start: int = 0, end: int | None = None) -> None:
    """Sort ``items[start:end + 1]`` in place with quick sort."""
    if end is None:
        end = len(items) - 1
    pending = [(start, end)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = partition(items, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))


def benchmark(max_power: int = 4) -> Iterator[Timing]:
    """Time both sorts on random arrays of 10, 100, ... ``10 ** max_power`` elements."""
    for power in range(1, max_power + 1):
        n = 10**power
        first = random_array(n, 0, n)
        second = random_array(n, 0, n)

        started = time.perf_counter()
        selection_sort(first)
        selection_ms = (time.perf_counter() - started) * 1000

        started = time.perf_counter()
        quick_sort(second)
        quick_ms = (time.perf_counter() - started) * 1000

        yield Timing(power, selection_ms, quick_ms)


def main(argv: list[str] | None = None) -> int:
    """Print the timing comparison of selection sort and quick sort."""
    parser = argparse.ArgumentParser(description="Compare selection sort and quick sort.")
    parser.add_argument("--max-power", type=int, default=4)
    args = parser.parse_args(argv)
    for timing in benchmark(args.max_power):
        print(
            f"1e+0{timing.power}: {timing.selection_ms:g} (ss), {timing.quick_ms:g} (qs)"
        )
    return 0