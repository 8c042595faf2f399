from collections import Counter

import pytest

from gopatterns.sequences import decommon, dedup

SAMPLES = [
    [],
    [5],
    [4, 4, 4],
    [9, -2, 7, -2, 0, 9, 13],
    list(range(20, 0, -3)),
    [1, 2, 2, 3, 3, 3, 4, 4, 4, 4],
]


def test_dedup_worked_example():
    assert dedup([3, 1, 3, 2, 1]) == [1, 2, 3]


def test_dedup_empty():
    assert dedup([]) == []


@pytest.mark.parametrize("values", SAMPLES)
def test_dedup_is_sorted_unique_and_complete(values):
    result = dedup(values)
    assert result == sorted(result)
    assert len(result) == len(set(result))
    assert set(result) == set(values)


def test_dedup_does_not_modify_input():
    values = [3, 1, 2, 1]
    snapshot = list(values)
    dedup(values)
    assert values == snapshot


def test_dedup_accepts_any_iterable():
    assert dedup(iter([2, 1, 2])) == dedup([1, 2])


def test_decommon_worked_example():
    assert decommon([3, 1, 2], [4, 2, 3]) == ([1], [4])


def test_decommon_removes_one_occurrence_per_match():
    assert decommon([1, 1, 2], [1]) == ([1, 2], [])


def test_decommon_identical_inputs_leave_nothing():
    values = [7, 3, 3, 1]
    assert decommon(values, list(reversed(values))) == ([], [])


def test_decommon_disjoint_inputs_only_sort():
    first, second = [5, 1, 3], [6, 2, 4]
    assert decommon(first, second) == (sorted(first), sorted(second))


@pytest.mark.parametrize("first", SAMPLES)
@pytest.mark.parametrize("second", SAMPLES)
def test_decommon_invariants(first, second):
    out_first, out_second = decommon(first, second)
    assert out_first == sorted(out_first)
    assert out_second == sorted(out_second)
    assert not set(out_first) & set(out_second)
    assert Counter(out_first) <= Counter(first)
    assert Counter(out_second) <= Counter(second)
    assert len(first) - len(out_first) == len(second) - len(out_second)


def test_decommon_does_not_modify_inputs():
    first, second = [3, 2, 1], [2, 5]
    decommon(first, second)
    assert first == [3, 2, 1]
    assert second == [2, 5]