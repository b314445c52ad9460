"""
Text formatting for result cards, history entries and probabilities.

Kept separate from the Qt widgets so the exact strings shown to the
user can be tested without a display.
"""

from typing import List, Sequence, Tuple

from .data_model import ProbabilityResult, StatisticsReport

NO_MODE_TEXT = "No mode"


def format_number(value: float) -> str:
    """Shortest readable form of a sample value: ``12`` not ``12.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_values(values: Sequence[float]) -> str:
    return ", ".join(format_number(v) for v in values)


def format_mode(report: StatisticsReport) -> str:
    """Comma-joined modal values, or ``"No mode"``."""
    if not report.has_mode:
        return NO_MODE_TEXT
    return format_values(report.mode)


def format_report_cards(report: StatisticsReport) -> List[Tuple[str, str]]:
    """Return ``(label, value_text)`` pairs for the thirteen result cards.

    Count is an integer, Mode is a value list, everything else is shown
    with two decimals.
    """
    return [
        ("Count", str(report.count)),
        ("Sum", f"{report.total:.2f}"),
        ("Mean", f"{report.mean:.2f}"),
        ("Median", f"{report.median:.2f}"),
        ("Mode", format_mode(report)),
        ("Std Deviation", f"{report.std_dev:.2f}"),
        ("Variance", f"{report.variance:.2f}"),
        ("Range", f"{report.value_range:.2f}"),
        ("Q1 (25%)", f"{report.q1:.2f}"),
        ("Q3 (75%)", f"{report.q3:.2f}"),
        ("IQR", f"{report.iqr:.2f}"),
        ("Min", f"{report.min_val:.2f}"),
        ("Max", f"{report.max_val:.2f}"),
    ]


def format_probability(result: ProbabilityResult) -> str:
    """Four-decimal probability; placeholder values are labelled."""
    text = f"{result.value:.4f}"
    if result.is_stub:
        text += " (placeholder)"
    return text
