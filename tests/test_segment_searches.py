import pytest

from algoviz.render import Trace
from algoviz.segment_searches import exponential_search, ternary_search

SORTED_LISTS = [
    [5],
    [1, 2],
    [1, 3, 5, 7, 9],
    [2, 4, 6, 8, 10, 12, 14, 16],
    [1, 1, 2, 3, 5, 8, 13, 21, 34],
]


@pytest.mark.parametrize("items", SORTED_LISTS)
def test_ternary_finds_every_present_value(items):
    for target in items:
        result = ternary_search(items, target)
        assert items[result] == target


@pytest.mark.parametrize("items", SORTED_LISTS)
def test_ternary_reports_absent_values(items):
    for target in (items[0] - 1, items[-1] + 1):
        assert ternary_search(items, target) is None


def test_ternary_absent_between_values():
    assert ternary_search([1, 3, 5, 7, 9], 4) is None


def test_ternary_empty_list():
    trace = Trace()
    assert ternary_search([], 3, trace) is None
    assert trace.text() == ""


def test_ternary_trace_names_segments():
    trace = Trace()
    ternary_search([1, 3, 5, 7, 9, 11, 13], 1, trace)
    text = trace.text()
    assert "Searching in range [0 to 6]" in text
    assert "Mid 1 = (high - low) / 3 + low" in text


def test_ternary_trace_for_right_segment():
    trace = Trace()
    result = ternary_search([1, 3, 5, 7, 9, 11, 13], 13, trace)
    assert result == 6
    assert "Searching in the right segment" in trace.text()


def test_exponential_first_element():
    trace = Trace()
    assert exponential_search([4, 8, 15], 4, trace) == 0
    assert "arr[0] == key  ?" in trace.text()
    assert "YES" in trace.text()


@pytest.mark.parametrize(
    "items, target",
    [
        ([10, 20, 30], 30),
        ([1, 2, 3, 4, 5], 5),
        ([1, 3, 5, 7, 9, 11, 13, 15, 17], 11),
        ([2, 4, 6, 8, 10], 6),
    ],
)
def test_exponential_finds_reachable_values(items, target):
    result = exponential_search(items, target)
    assert items[result] == target


def test_exponential_binary_phase_is_traced():
    trace = Trace()
    result = exponential_search([1, 3, 5, 7, 9, 11, 13, 15, 17], 11, trace)
    assert result is not None
    assert "mid = low + (high - low) / 2" in trace.text()


def test_exponential_absent_value():
    assert exponential_search([1, 3, 5, 7], 4) is None


def test_exponential_stops_when_index_passes_end():
    trace = Trace()
    assert exponential_search([1, 2, 3, 4, 5, 6], 6, trace) is None
    assert "is not found in the array" in trace.text()


def test_exponential_empty_list():
    assert exponential_search([], 1) is None