"""Selection, insertion and quick sort with comparison and swap statistics."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, MutableSequence, Sequence

from algolab.arrays import ArrayFormatError, read_array

Before = Callable[[Any, Any], bool]

_HELP = (
    "Usage: {program} <input file path>\n\n"
    "Sort an array given in a file in disk.\n"
    "\n"
    "The input file must have the following format:\n"
    " * The first line must contain only a positive integer,"
    " which is the length of the array.\n"
    " * The second line must contain the members of the array"
    " separated by one or more spaces. Each member must be an integer."
    "\n\n"
    "In other words, the file format is:\n"
    "<amount of array elements>\n"
    "<array elem 1> <array elem 2> ... <array elem N>\n\n"
)


@dataclass
class SortStats:
    """Counts comparisons and swaps and measures processor time."""

    comparisons: int = 0
    swaps: int = 0
    started: float = field(default_factory=time.process_time)

    def reset(self) -> None:
        """Zero the counters and restart the clock."""
        self.comparisons = 0
        self.swaps = 0
        self.started = time.process_time()

    def elapsed_ms(self) -> float:
        """Return the processor time since the last reset, in milliseconds."""
        return (time.process_time() - self.started) * 1000.0


def goes_before(x: Any, y: Any) -> bool:
    """The default total order: ascending."""
    return x <= y


def _counting(before: Before, stats: SortStats | None) -> Before:
    if stats is None:
        return before

    def compare(x: Any, y: Any) -> bool:
        stats.comparisons += 1
        return before(x, y)

    return compare


def swap(
    items: MutableSequence[Any], i: int, j: int, stats: SortStats | None = None
) -> None:
    """Exchange the elements at ``i`` and ``j``; a swap is counted even if ``i == j``."""
    items[i], items[j] = items[j], items[i]
    if stats is not None:
        stats.swaps += 1


def selection_sort(
    items: MutableSequence[Any],
    before: Before = goes_before,
    stats: SortStats | None = None,
) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    compare = _counting(before, stats)
    length = len(items)
    for i in range(length):
        min_pos = i
        for j in range(i + 1, length):
            if not compare(items[min_pos], items[j]):
                min_pos = j
        swap(items, i, min_pos, stats)


def insertion_sort(
    items: MutableSequence[Any],
    before: Before = goes_before,
    stats: SortStats | None = None,
) -> None:
    """Sort ``items`` in place by inserting each element into the sorted prefix."""
    compare = _counting(before, stats)
    for start in range(1, len(items)):
        i = start
        while i > 0 and compare(items[i], items[i - 1]):
            swap(items, i, i - 1, stats)
            i -= 1


def _partition(
    items: MutableSequence[Any],
    left: int,
    right: int,
    compare: Before,
    stats: SortStats | None,
) -> int:
    pivot = left
    i = left + 1
    j = right
    while i <= j:
        if compare(items[i], items[pivot]):
            i += 1
        elif compare(items[pivot], items[j]):
            j -= 1
        elif compare(items[pivot], items[i]) and compare(items[j], items[pivot]):
            swap(items, i, j, stats)
            i += 1
            j -= 1
    swap(items, j, pivot, stats)
    return j


def partition(
    items: MutableSequence[Any],
    left: int,
    right: int,
    before: Before = goes_before,
    stats: SortStats | None = None,
) -> int:
    """Partition ``items[left..right]`` around ``items[left]`` and return the pivot position.

    Afterwards every element left of the pivot goes before it and the pivot
    goes before every element to its right.
    """
    return _partition(items, left, right, _counting(before, stats), stats)


def quick_sort(
    items: MutableSequence[Any],
    before: Before = goes_before,
    stats: SortStats | None = None,
) -> None:
    """Sort ``items`` in place with quicksort, pivoting on the first element."""
    compare = _counting(before, stats)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if right > left:
            pivot = _partition(items, left, right, compare, stats)
            pending.append((pivot + 1, right))
            pending.append((left, pivot - 1))


_ALGORITHMS: tuple[tuple[str, Callable[..., None]], ...] = (
    ("selection_sort", selection_sort),
    ("insertion_sort", insertion_sort),
    ("quick_sort", quick_sort),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort an array file with each algorithm and print their statistics."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sorting"
        print(_HELP.format(program=program), end="")
        return 1
    try:
        values = read_array(args[0])
    except OSError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except ArrayFormatError as exc:
        print(exc, file=sys.stderr)
        return 1

    stats = SortStats()
    for name, algorithm in _ALGORITHMS:
        copy = list(values)
        stats.reset()
        algorithm(copy, goes_before, stats)
        elapsed = stats.elapsed_ms()
        print(f"statistics for {name}")
        print(
            f"time elapsed={elapsed:g},    comparisons: {stats.comparisons:10d},"
            f"    swaps: {stats.swaps:10d}"
        )
    return 0