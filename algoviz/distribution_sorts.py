"""Distribution sorts that show every step: bucket sort and radix sort."""

from __future__ import annotations

from typing import Iterable

from algoviz.render import Trace, green, join_values, red


def _ensure(trace: Trace | None) -> Trace:
    return trace if trace is not None else Trace()


def bucket_sort(values: Iterable[int], gap: int, trace: Trace | None = None) -> list[int]:
    """Scatter values into buckets of width ``gap``, sort each, then gather them."""
    trace = _ensure(trace)
    items = list(values)
    if not items:
        raise ValueError("bucket sort needs at least one value")
    if gap <= 0:
        raise ValueError("bucket gap must be positive")

    low = min(items)
    high = max(items)
    bucket_count = (high - low + 1 + gap - 1) // gap
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in items:
        buckets[(value - low) // gap].append(value)

    def bounds(index: int) -> str:
        return f"Bucket [{index * gap + low} - {(index + 1) * gap + low - 1}] :"

    trace.line("Scatter Step: ")
    for index, bucket in enumerate(buckets):
        trace.line(f"{red(bounds(index))} " + "".join(f" {value} " for value in bucket))

    for bucket in buckets:
        bucket.sort()

    trace.line("\nSort Step: ")
    for index, bucket in enumerate(buckets):
        trace.line(f"{green(bounds(index))} " + "".join(f"   {value} " for value in bucket))

    gathered = [value for bucket in buckets for value in bucket]
    trace.line("\nGather Step: ")
    trace.line(join_values(gathered))
    return gathered


def radix_sort(values: Iterable[int], trace: Trace | None = None) -> list[int]:
    """Least-significant-digit radix sort in base 10 for non-negative integers."""
    trace = _ensure(trace)
    items = list(values)
    if not items:
        raise ValueError("radix sort needs at least one value")
    if any(value < 0 for value in items):
        raise ValueError("radix sort handles non-negative values only")

    largest = max(items)
    width = len(str(largest))
    exp = 1
    while largest // exp > 0:
        digit_exp = exp
        items = sorted(items, key=lambda value: value // digit_exp % 10)
        trace.line(red(f"{exp}'s "))
        for value in items:
            trace.line(str(value).zfill(width))
        trace.line()
        exp *= 10
    return items