from statcalc.constants import SAMPLE_DATA
from statcalc.data_model import ProbabilityResult
from statcalc.formatting import (
    format_mode,
    format_number,
    format_probability,
    format_report_cards,
)
from statcalc.statistics_engine import compute_statistics


def test_card_labels_in_display_order():
    cards = format_report_cards(compute_statistics(SAMPLE_DATA))
    assert [label for label, _ in cards] == [
        "Count", "Sum", "Mean", "Median", "Mode", "Std Deviation",
        "Variance", "Range", "Q1 (25%)", "Q3 (75%)", "IQR", "Min", "Max",
    ]


def test_card_values_use_two_decimals():
    cards = dict(format_report_cards(compute_statistics(SAMPLE_DATA)))
    assert cards["Count"] == "20"
    assert cards["Sum"] == "792.00"
    assert cards["Mean"] == "39.60"
    assert cards["Median"] == "41.00"
    assert cards["Mode"] == "No mode"
    assert cards["Variance"] == "261.14"
    assert cards["Std Deviation"] == "16.16"
    assert cards["Q1 (25%)"] == "26.25"
    assert cards["Q3 (75%)"] == "52.75"
    assert cards["Min"] == "12.00"
    assert cards["Max"] == "65.00"


def test_mode_lists_tied_values():
    assert format_mode(compute_statistics([1, 1, 2, 2, 3])) == "1, 2"
    assert format_mode(compute_statistics([0.5, 0.5, 3])) == "0.5"


def test_format_number_drops_trailing_zero():
    assert format_number(12.0) == "12"
    assert format_number(-3) == "-3"
    assert format_number(2.25) == "2.25"


def test_probability_four_decimals():
    result = ProbabilityResult("normal", 0.0, 0.0, 1.0, 0.3989422804, False)
    assert format_probability(result) == "0.3989"


def test_placeholder_probability_is_labelled():
    result = ProbabilityResult("poisson", 1.0, 0.0, 1.0, 0.3, True)
    assert format_probability(result) == "0.3000 (placeholder)"
