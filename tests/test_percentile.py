import numpy as np
import pytest

from statcalc.statistics_engine import EmptyInputError, calculate_percentile


def test_interpolates_between_ranks():
    # index = 0.25 * 3 = 0.75 -> 10 * 0.25 + 20 * 0.75
    assert calculate_percentile([10, 20, 30, 40], 25) == 17.5


def test_integral_index_returns_element():
    assert calculate_percentile([10, 20, 30, 40, 50], 50) == 30
    assert calculate_percentile([10, 20, 30, 40, 50], 25) == 20


def test_bounds_return_min_and_max():
    data = [1.5, 2.5, 9.0]
    assert calculate_percentile(data, 0) == 1.5
    assert calculate_percentile(data, 100) == 9.0


def test_single_element():
    assert calculate_percentile([7.0], 75) == 7.0


def test_returns_python_float():
    assert type(calculate_percentile(np.array([1.0, 2.0]), 50)) is float


@pytest.mark.parametrize("p", [10, 33.3, 50, 90])
def test_matches_numpy_linear_method(p):
    data = sorted([3.2, 1.1, 8.8, 4.4, 6.0, 2.7, 9.9])
    assert calculate_percentile(data, p) == pytest.approx(np.percentile(data, p))


def test_empty_sequence_raises():
    with pytest.raises(EmptyInputError):
        calculate_percentile([], 50)


@pytest.mark.parametrize("p", [-1, 100.5])
def test_out_of_range_percentile_raises(p):
    with pytest.raises(ValueError):
        calculate_percentile([1, 2, 3], p)
