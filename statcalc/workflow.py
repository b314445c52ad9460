"""
Calculate and probability workflows for the Statistics Calculator.

The decisions behind the two action buttons live here, free of Qt, so
the main window only forwards widget text in and renders the outcome.
Each function returns an outcome record carrying the notification kind
and message plus whatever the window needs to display.
"""

import warnings
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import NOTIFY_ERROR, NOTIFY_SUCCESS
from .data_model import ProbabilityResult, StatisticsReport
from .input_parser import parse_input_data, parse_number
from .probability import evaluate_probability
from .statistics_engine import (
    EmptyInputError, NonFiniteInputError, compute_statistics,
)

MSG_NO_DATA = "Please enter some data!"
MSG_NO_NUMBERS = "No valid numbers found!"
MSG_TOO_LARGE = "Values are too large to compute statistics!"
MSG_CALCULATED = "Statistics calculated successfully!"
MSG_IGNORED_SUFFIX = " (some entries were not numbers and were ignored)"
MSG_INVALID_FIELDS = "Please enter valid numbers for all fields!"
MSG_PROBABILITY_DONE = "Probability calculated!"


@dataclass(frozen=True)
class CalculationOutcome:
    """Result of pressing Calculate.

    Parameters
    ----------
    kind : str
        ``NOTIFY_SUCCESS`` or ``NOTIFY_ERROR``.
    message : str
        Notification text.
    sample : tuple of float
        Parsed values; empty on error.
    report : StatisticsReport or None
        Set only on success.
    ignored : tuple of str
        Parser warnings for dropped tokens.
    """
    kind: str
    message: str
    sample: Tuple[float, ...] = ()
    report: Optional[StatisticsReport] = None
    ignored: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.report is not None


@dataclass(frozen=True)
class ProbabilityOutcome:
    kind: str
    message: str
    result: Optional[ProbabilityResult] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def run_calculation(text: str) -> CalculationOutcome:
    """Parse *text* and compute its statistics report."""
    if not text.strip():
        return CalculationOutcome(NOTIFY_ERROR, MSG_NO_DATA)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        sample = parse_input_data(text)
    ignored = tuple(str(w.message) for w in caught)

    try:
        report = compute_statistics(sample)
    except EmptyInputError:
        return CalculationOutcome(NOTIFY_ERROR, MSG_NO_NUMBERS, ignored=ignored)
    except NonFiniteInputError:
        return CalculationOutcome(
            NOTIFY_ERROR, MSG_TOO_LARGE, tuple(sample), ignored=ignored,
        )

    message = MSG_CALCULATED
    if ignored:
        message += MSG_IGNORED_SUFFIX
    return CalculationOutcome(
        NOTIFY_SUCCESS, message, tuple(sample), report, ignored,
    )


def run_probability(distribution: str, x_text: str, mean_text: str,
                    std_text: str) -> ProbabilityOutcome:
    """Read the three parameter fields and evaluate *distribution*.

    Fields are read like data tokens: a leading number is taken
    (``"12abc"`` is 12) and NaN or infinite entries are refused.
    """
    fields: List[float] = []
    for text in (x_text, mean_text, std_text):
        value = parse_number(text.strip())
        if value is None:
            return ProbabilityOutcome(NOTIFY_ERROR, MSG_INVALID_FIELDS)
        fields.append(value)

    x, mean, std_dev = fields
    try:
        result = evaluate_probability(distribution, x, mean, std_dev)
    except ValueError as exc:
        return ProbabilityOutcome(
            NOTIFY_ERROR, f"Cannot calculate probability: {exc}",
        )
    return ProbabilityOutcome(NOTIFY_SUCCESS, MSG_PROBABILITY_DONE, result)
