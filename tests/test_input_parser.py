import warnings

import pytest

from statcalc.input_parser import parse_input_data, parse_number
from statcalc.statistics_engine import EmptyInputError, compute_statistics


def test_mixed_separators():
    text = "1, 2;3\n4   5\t6"
    assert parse_input_data(text) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_preserves_input_order_and_signs():
    assert parse_input_data("-3.5 +2 .5 10") == [-3.5, 2.0, 0.5, 10.0]


def test_scientific_notation():
    assert parse_input_data("1e3, -2.5E-2") == [1000.0, -0.025]


def test_leading_numeric_prefix_is_read():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert parse_input_data("12abc 1.2.3 7kg") == [12.0, 1.2, 7.0]


def test_non_numeric_tokens_dropped_with_warning():
    with pytest.warns(UserWarning, match="2 non-numeric"):
        values = parse_input_data("1, abc, 2, ???")
    assert values == [1.0, 2.0]


def test_non_finite_tokens_dropped():
    with pytest.warns(UserWarning):
        values = parse_input_data("1 NaN Infinity inf 1e999 2")
    assert values == [1.0, 2.0]


def test_warning_truncates_long_token_lists():
    text = " ".join(f"x{i}" for i in range(15))
    with pytest.warns(UserWarning, match="and 5 more"):
        assert parse_input_data(text) == []


def test_blank_text_returns_empty_list():
    assert parse_input_data("  \n , ; ") == []


def test_punctuation_only_input_signals_empty_input():
    with pytest.warns(UserWarning):
        sample = parse_input_data("!!! ... ??")
    assert sample == []
    with pytest.raises(EmptyInputError):
        compute_statistics(sample)


@pytest.mark.parametrize("token, expected", [
    ("12abc", 12.0),
    ("-2.5E-2", -0.025),
    (".5", 0.5),
    ("nan", None),
    ("inf", None),
    ("1e999", None),
    ("", None),
])
def test_parse_number_reads_leading_prefix(token, expected):
    assert parse_number(token) == expected
