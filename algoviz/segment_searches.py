"""Searches that narrow a sorted list segment by segment: ternary and exponential."""

from __future__ import annotations

from typing import Iterable

from algoviz.render import Trace, green, red


def _ensure(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace()


def _segment_row(items: list[int], left: int, right: int, mid1: int, mid2: int) -> str:
    return " ".join(
        red(items[k]) if k in (mid1, mid2) else str(items[k]) for k in range(left, right + 1)
    )


def ternary_search(
    values: Iterable[int], target: int, trace: Trace | None = None
) -> int | None:
    """Split the sorted range in three at each step; return the index found or None."""
    trace = _ensure(trace)
    items = list(values)
    left, right = 0, len(items) - 1
    while right >= left:
        mid1 = (right - left) // 3 + left
        mid2 = 2 * (right - left) // 3 + left

        trace.write(f"\nSearching in range [{left} to {right}]\n\n")
        trace.line("Mid 1 = (high - low) / 3 + low")
        trace.line(f"Mid 1 = ({right} - {left}) / 3 + {left}")
        trace.write(f"Mid 1 = {mid1}\n\n")
        trace.line("Mid 2 = 2 * (high - low) / 3 + low")
        trace.line(f"Mid 2 = 2 * ({right} - {left}) / 3 + {left}")
        trace.line(f"Mid 2 = {mid2}")
        trace.write(f"Midpoints: ({items[mid1]}) and ({items[mid2]})\n\n")
        trace.write(f"Array: \t{_segment_row(items, left, right, mid1, mid2)}")

        if items[mid1] == target:
            return mid1
        if items[mid2] == target:
            return mid2

        if target < items[mid1]:
            trace.write(f"\n\n{target} < {items[mid1]}")
            trace.write("\nSearching in the left segment\n\n")
            right = mid1 - 1
        elif target > items[mid2]:
            trace.write(f"\n\n{target} > {items[mid2]}")
            trace.write("\nSearching in the right segment\n")
            left = mid2 + 1
        else:
            trace.write(f"\n\n{items[mid1]} < {target} < {items[mid2]}")
            trace.write("\nSearching in the middle segment\n\n")
            left, right = mid1 + 1, mid2 - 1
    return None


def _bounded_binary(items: list[int], left: int, right: int, target: int, trace: Trace) -> int | None:
    while left <= right:
        mid = left + (right - left) // 2
        trace.line("\nmid = low + (high - low) / 2")
        trace.line(f"mid = {left} + ({right} - {left}) / 2")
        trace.write(f"mid = {mid}\n\n")
        if items[mid] == target:
            return mid
        if items[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def exponential_search(
    values: Iterable[int], target: int, trace: Trace | None = None
) -> int | None:
    """Double the probe index until it passes ``target``, then binary search the last span.

    Once the doubled index runs past the end of the list the search stops
    without looking at the values after the last probe.
    """
    trace = _ensure(trace)
    items = list(values)
    n = len(items)
    if not items:
        return None

    first = items[0]
    if first == target:
        trace.line(f"arr[0] == key  ?  {green(first)} == {green(target)}, YES")
        return 0
    trace.line(f"arr[0] == key  ?  {red(first)} == {red(target)}, NO")

    i = 1
    while i < n:
        probe = items[i]
        prefix = f"arr[{i}]  > key  ?  "
        if probe == target:
            trace.line(f"{prefix}{red(probe)} > {red(target)}, NO")
            return i
        if probe > target:
            trace.line(f"{prefix}{green(probe)} > {green(target)}, YES")
            return _bounded_binary(items, i // 2, i, target, trace)
        trace.line(f"{prefix}{red(probe)} > {red(target)}, NO")
        i *= 2

    if i > n:
        trace.write(f"arr[{i}] is not found in the array\n\n")
    return None