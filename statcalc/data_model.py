"""
Data model for the Statistics Calculator.

Immutable dataclasses for one calculation.  A ``StatisticsReport`` is
built once by ``statistics_engine`` and never mutated; the result cards,
history list and chart receive it read-only.

The "no mode" case is modelled as an empty ``mode`` tuple rather than a
string, so every numeric field keeps a numeric type.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StatisticsReport:
    """Descriptive statistics for one sample.

    Parameters
    ----------
    count : int
        Number of observations (always >= 1).
    total : float
        Plain sum of all observations.
    mean : float
        ``total / count``.
    median : float
        Middle value of the sorted sample, or the average of the two
        middle values for an even count.
    mode : tuple of float
        Modal value(s) in the order each first reached the maximum
        frequency.  Empty when every observation is its own mode
        ("no mode").
    std_dev : float
        Population standard deviation (divisor ``n``).
    variance : float
        Population variance (divisor ``n``).
    value_range : float
        ``max_val - min_val``.
    q1, q3 : float
        25th and 75th percentiles by linear rank interpolation.
    iqr : float
        ``q3 - q1``.
    min_val, max_val : float
        Smallest and largest observation.
    """
    count: int
    total: float
    mean: float
    median: float
    mode: Tuple[float, ...]
    std_dev: float
    variance: float
    value_range: float
    q1: float
    q3: float
    iqr: float
    min_val: float
    max_val: float

    @property
    def has_mode(self) -> bool:
        return bool(self.mode)


@dataclass(frozen=True)
class HistoryEntry:
    """One past calculation: the sample and its report."""
    sample: Tuple[float, ...]
    report: StatisticsReport


@dataclass(frozen=True)
class ProbabilityResult:
    """Result of one point-probability evaluation.

    ``is_stub`` is ``True`` when ``value`` is a fixed placeholder rather
    than a computed density or mass.
    """
    distribution: str
    x: float
    mean: float
    std_dev: float
    value: float
    is_stub: bool
