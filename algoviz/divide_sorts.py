"""Divide-and-conquer sorts that show every step: merge sort and quick sort."""

from __future__ import annotations

from heapq import merge as _merge_runs
from typing import Iterable

from algoviz.render import Trace, join_values, red


def _ensure(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace()


def _show_run(trace: Trace, items: list[int], left: int, right: int, label: str) -> None:
    trace.line(f"{label} sub-array: {join_values(items[left:right + 1])}")


def _merge_sort_range(
    items: list[int], left: int, right: int, label: str, trace: Trace
) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _show_run(trace, items, left, right, label)
    _merge_sort_range(items, left, mid, f"{label} (Left)", trace)
    _merge_sort_range(items, mid + 1, right, f"{label} (Right)", trace)
    items[left:right + 1] = _merge_runs(items[left:mid + 1], items[mid + 1:right + 1])
    _show_run(trace, items, left, right, label)


def merge_sort(values: Iterable[int], trace: Trace | None = None) -> list[int]:
    """Sort with top-down merge sort, showing each run before splitting and after merging."""
    trace = _ensure(trace)
    items = list(values)
    _merge_sort_range(items, 0, len(items) - 1, "Main", trace)
    return items


def _sub_row(items: list[int], start: int, end: int, highlight: int | None = None) -> str:
    return "".join(
        f"{red(f'[{items[k]}]')} " if k == highlight else f"{items[k]} "
        for k in range(start, end + 1)
    )


def _partition(items: list[int], start: int, end: int, trace: Trace) -> int:
    """Partition around the first element; return the pivot's final index."""
    pivot = items[start]
    left = start + 1
    right = end

    trace.write(f"\nPartitioning around pivot {pivot}:\n")
    trace.write("Array: \n")
    trace.line(_sub_row(items, start, end))

    while True:
        while left <= right and items[left] <= pivot:
            left += 1
            trace.line(_sub_row(items, start, end, left))
        while left <= right and items[right] > pivot:
            right -= 1
            trace.line(_sub_row(items, start, end, right))
        if left > right:
            break
        items[left], items[right] = items[right], items[left]
        trace.line(_sub_row(items, start, end, left))

    items[start], items[right] = items[right], items[start]
    trace.write(f"Pivot {pivot} is in its correct position: ")
    trace.line(_sub_row(items, start, end, right))
    return right


def quick_sort(values: Iterable[int], trace: Trace | None = None) -> list[int]:
    """Sort with quick sort using the first element of each range as pivot."""
    trace = _ensure(trace)
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(items, start, end, trace)
        # Right range pushed first so the left range is handled first.
        pending.append((p + 1, end))
        pending.append((start, p - 1))
    return items