import math

import numpy as np
import pytest

from statcalc.constants import SAMPLE_DATA
from statcalc.statistics_engine import (
    EmptyInputError,
    NonFiniteInputError,
    compute_statistics,
)


def test_example_sample():
    report = compute_statistics(SAMPLE_DATA)
    assert report.count == 20
    assert report.total == 792
    assert report.mean == pytest.approx(39.6)
    assert report.median == 41
    assert report.min_val == 12
    assert report.max_val == 65
    assert report.value_range == 53
    assert report.q1 == pytest.approx(26.25)
    assert report.q3 == pytest.approx(52.75)
    assert report.iqr == pytest.approx(26.5)
    assert report.variance == pytest.approx(261.14)
    assert not report.has_mode


def test_odd_count_median_is_middle_element():
    assert compute_statistics([9, 1, 5]).median == 5


def test_even_count_median_averages_middle_pair():
    assert compute_statistics([4, 1, 3, 2]).median == 2.5


def test_mode_tie_reports_all_tied_values():
    report = compute_statistics([1, 1, 2, 2, 3])
    assert report.mode == (1.0, 2.0)
    assert report.has_mode


def test_mode_single_winner():
    assert compute_statistics([3, 7, 7, 1]).mode == (7.0,)


def test_all_unique_values_report_no_mode():
    report = compute_statistics([1, 2, 3])
    assert report.mode == ()
    assert not report.has_mode


def test_single_value_reports_no_mode():
    report = compute_statistics([5])
    assert report.mode == ()
    assert report.count == 1
    assert report.median == 5
    assert report.variance == 0
    assert report.q1 == report.q3 == 5


def test_mode_order_follows_when_values_reached_max_frequency():
    # 1 reaches frequency 2 before 2 does
    assert compute_statistics([2, 1, 1, 2]).mode == (1.0, 2.0)


def test_all_values_equal_has_mode():
    report = compute_statistics([4, 4, 4])
    assert report.mode == (4.0,)
    assert report.std_dev == 0


def test_population_variance_divides_by_n():
    report = compute_statistics([2, 4, 4, 4, 5, 5, 7, 9])
    assert report.mean == 5
    assert report.variance == 4
    assert report.std_dev == 2
    assert report.std_dev == pytest.approx(float(np.std([2, 4, 4, 4, 5, 5, 7, 9])))


@pytest.mark.parametrize("sample", [
    [3.5, -1.25, 8.0, 0.0, 2.75],
    [100, 1, 50, 50, 2, 99],
    [-10, -20, -30],
    list(SAMPLE_DATA),
])
def test_report_invariants(sample):
    report = compute_statistics(sample)
    tol = 1e-12
    assert report.min_val <= report.median <= report.max_val
    assert report.min_val - tol <= report.mean <= report.max_val + tol
    assert report.variance >= 0
    assert report.std_dev == pytest.approx(math.sqrt(report.variance))
    assert report.value_range == report.max_val - report.min_val
    assert report.iqr == report.q3 - report.q1
    assert report.q1 <= report.q3


def test_compute_is_idempotent():
    sample = [0.1, 0.2, 0.3, 0.7, 1.9, 0.2]
    assert compute_statistics(sample) == compute_statistics(list(sample))


def test_input_is_not_mutated():
    sample = [5.0, 3.0, 9.0, 1.0]
    compute_statistics(sample)
    assert sample == [5.0, 3.0, 9.0, 1.0]

    arr = np.array(sample)
    compute_statistics(arr)
    assert arr.tolist() == [5.0, 3.0, 9.0, 1.0]


def test_empty_sample_raises():
    with pytest.raises(EmptyInputError):
        compute_statistics([])


def test_empty_input_error_is_value_error():
    assert issubclass(EmptyInputError, ValueError)


@pytest.mark.parametrize("bad", [float('nan'), float('inf'), float('-inf')])
def test_non_finite_values_rejected(bad):
    with pytest.raises(NonFiniteInputError):
        compute_statistics([1.0, bad, 3.0])


def test_two_dimensional_input_rejected():
    with pytest.raises(ValueError):
        compute_statistics([[1, 2], [3, 4]])


@pytest.mark.parametrize("sample", [
    [1e308, 1e308],
    [-1e308, 1e308],
    [1e200, -1e200, 5.0],
])
def test_overflowing_finite_sample_rejected(sample):
    with pytest.raises(NonFiniteInputError, match="overflow"):
        compute_statistics(sample)


def test_large_finite_sample_keeps_invariants():
    report = compute_statistics([1e150, 2e150, 3e150, 4e150])
    assert math.isfinite(report.variance)
    assert report.min_val <= report.mean <= report.max_val
    assert report.min_val <= report.median <= report.max_val
    assert report.median == pytest.approx(2.5e150)
