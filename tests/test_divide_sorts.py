import pytest

from algoviz.divide_sorts import merge_sort, quick_sort
from algoviz.render import Trace, red

SAMPLES = [
    [],
    [7],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 1, 4, 0],
    [-3, 10, -7, 0, 2, 2],
    list(range(10, 0, -1)),
    list(range(12)),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_sorts(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_sorts(values):
    assert quick_sort(values) == sorted(values)


def test_merge_sort_does_not_mutate_input():
    values = [3, 1, 2]
    merge_sort(values)
    assert values == [3, 1, 2]


def test_quick_sort_does_not_mutate_input():
    values = [3, 1, 2]
    quick_sort(values)
    assert values == [3, 1, 2]


def test_merge_sort_trace_first_and_last_lines():
    trace = Trace()
    merge_sort([3, 1, 2], trace)
    lines = trace.text().splitlines()
    assert lines[0] == "Main sub-array: 3 1 2 "
    assert lines[-1] == "Main sub-array: 1 2 3 "


def test_merge_sort_trace_labels_halves():
    trace = Trace()
    merge_sort([4, 3, 2, 1], trace)
    text = trace.text()
    assert "Main (Left) sub-array: " in text
    assert "Main (Right) sub-array: " in text


def test_merge_sort_single_element_is_silent():
    trace = Trace()
    assert merge_sort([5], trace) == [5]
    assert trace.text() == ""


def test_quick_sort_trace_announces_pivots():
    trace = Trace()
    quick_sort([3, 1, 2], trace)
    text = trace.text()
    assert "Partitioning around pivot 3:" in text
    assert "Pivot 3 is in its correct position: " in text


def test_quick_sort_trace_highlights_final_pivot():
    trace = Trace()
    quick_sort([2, 1], trace)
    assert f"Pivot 2 is in its correct position: 1 {red('[2]')} \n" in trace.text()


def test_quick_sort_empty_trace_for_trivial_input():
    trace = Trace()
    assert quick_sort([9], trace) == [9]
    assert trace.text() == ""


def test_trace_echoes_to_stream():
    import io

    stream = io.StringIO()
    trace = Trace(stream)
    quick_sort([5, 2, 8], trace)
    assert stream.getvalue() == trace.text()