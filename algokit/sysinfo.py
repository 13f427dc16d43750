"""CPU and memory usage read from the Linux /proc filesystem."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from pathlib import Path

STAT_PATH = "/proc/stat"
MEMINFO_PATH = "/proc/meminfo"
_CPU_FIELDS = 10
_IDLE = 3


def read_cpu_fields(path: str | Path = STAT_PATH) -> tuple[int, ...]:
    """The first ten tick counters of the aggregate ``cpu`` line of a stat file."""
    with open(path, encoding="ascii") as stream:
        first = stream.readline().split()
    if len(first) < 2:
        raise ValueError(f"no cpu counters in {path}")
    return tuple(int(value) for value in first[1 : 1 + _CPU_FIELDS])


def cpu_usage(before: Sequence[int], after: Sequence[int]) -> float:
    """Busy fraction of CPU time between two readings of the tick counters."""
    ticks = sum(after) - sum(before)
    idle = after[_IDLE] - before[_IDLE]
    if ticks == 0:
        raise ValueError("no CPU ticks elapsed between readings")
    return (ticks - idle) / ticks


def measure_cpu(interval: float = 3.0, path: str | Path = STAT_PATH) -> float:
    """Busy fraction of CPU time over ``interval`` seconds."""
    before = read_cpu_fields(path)
    time.sleep(interval)
    after = read_cpu_fields(path)
    return cpu_usage(before, after)


def read_memory(path: str | Path = MEMINFO_PATH) -> tuple[int, int]:
    """Total and free memory, the values of the first two lines of a meminfo file."""
    with open(path, encoding="ascii") as stream:
        lines = [stream.readline().split() for _ in range(2)]
    try:
        return int(lines[0][1]), int(lines[1][1])
    except (IndexError, ValueError) as exc:
        raise ValueError(f"malformed memory information in {path}") from exc


def memory_bar(total: float, free: float) -> str:
    """A 100-character bar of ``|`` for the free share and ``.`` for the rest."""
    percentage = int(free / total * 100)
    return "|" * percentage + "." * (100 - percentage) + f" {percentage}%"


def main(argv: list[str] | None = None) -> int:
    """Print memory or CPU usage."""
    parser = argparse.ArgumentParser(description="Show memory or CPU usage.")
    parser.add_argument("what", nargs="?", choices=["memory", "cpu"], default="memory")
    parser.add_argument("--interval", type=float, default=3.0)
    parser.add_argument("--stat", default=STAT_PATH)
    parser.add_argument("--meminfo", default=MEMINFO_PATH)
    args = parser.parse_args(argv)

    if args.what == "cpu":
        usage = measure_cpu(args.interval, args.stat)
        print(f"CPU: {usage * 100:g}%")
    else:
        total, free = read_memory(args.meminfo)
        print(f"{float(total):g}")
        print(f"{float(free):g}")
        print(memory_bar(total, free))
    return 0