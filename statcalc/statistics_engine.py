"""
Descriptive statistics engine for the Statistics Calculator.

Pure functions only: ``compute_statistics`` turns a sample into a
``StatisticsReport`` and ``calculate_percentile`` is the rank
interpolation primitive used for the quartiles.  Nothing here touches
Qt or holds state between calls, so the GUI, the tests and any batch
caller share the same code path.

Conventions
-----------
- Variance and standard deviation use the population divisor ``n``
  (``np.std(..., ddof=0)`` semantics), not the ``n - 1`` estimator.
- Percentiles interpolate linearly between ranks at
  ``index = p / 100 * (n - 1)``.
- The input is never mutated; sorting operates on a copy.
"""

import math
from typing import Dict, List, Sequence

import numpy as np

from .data_model import StatisticsReport


class EmptyInputError(ValueError):
    """Raised when a sample contains no values."""


class NonFiniteInputError(ValueError):
    """Raised when a sample contains NaN or an infinity, or overflows."""


# ── Percentile helper ────────────────────────────────────────────────────

def calculate_percentile(sorted_values: Sequence[float], percentile: float) -> float:
    """Return the *percentile* of an ascending sequence by rank interpolation.

    Parameters
    ----------
    sorted_values : sequence of float
        Values sorted ascending.  Not checked; unsorted input gives an
        interpolated value between whatever elements sit at the ranks.
    percentile : float
        Target percentile in ``[0, 100]``.

    Returns
    -------
    float

    Examples
    --------
    >>> calculate_percentile([10, 20, 30, 40], 25)
    17.5
    >>> calculate_percentile([10, 20, 30, 40, 50], 50)
    30.0
    """
    n = len(sorted_values)
    if n == 0:
        raise EmptyInputError("cannot take a percentile of an empty sample")
    if not 0 <= percentile <= 100:
        raise ValueError(f"percentile must be within [0, 100], got {percentile}")

    index = (percentile / 100) * (n - 1)
    lower_index = math.floor(index)
    upper_index = math.ceil(index)

    if lower_index == upper_index:
        return float(sorted_values[lower_index])

    weight = index - lower_index
    return float(
        sorted_values[lower_index] * (1 - weight)
        + sorted_values[upper_index] * weight
    )


# ── Mode ─────────────────────────────────────────────────────────────────

def _modal_values(values: Sequence[float]) -> List[float]:
    """Return the most frequent value(s) in the order they reached the max.

    Scans *values* once in input order.  A value that raises the running
    maximum frequency resets the list; a value that ties it is appended.
    """
    frequency: Dict[float, int] = {}
    max_freq = 0
    modes: List[float] = []
    for val in values:
        freq = frequency.get(val, 0) + 1
        frequency[val] = freq
        if freq > max_freq:
            max_freq = freq
            modes = [val]
        elif freq == max_freq:
            modes.append(val)
    return modes


# ── Engine ───────────────────────────────────────────────────────────────

def compute_statistics(sample: Sequence[float]) -> StatisticsReport:
    """Compute the full ``StatisticsReport`` for *sample*.

    Parameters
    ----------
    sample : sequence of float
        Observations in input order.  Must be non-empty and finite.

    Returns
    -------
    StatisticsReport

    Raises
    ------
    EmptyInputError
        If *sample* has no values.
    NonFiniteInputError
        If *sample* contains NaN or +/-inf, or its values are so large
        that the sum, variance or spread overflows a float.
    """
    values = np.array(sample, dtype=float)
    if values.ndim != 1:
        raise ValueError(
            f"sample must be one-dimensional, got shape {values.shape}"
        )
    n = values.size
    if n == 0:
        raise EmptyInputError("sample contains no values")
    if not np.all(np.isfinite(values)):
        bad = [float(v) for v in values[~np.isfinite(values)]][:5]
        raise NonFiniteInputError(f"sample contains non-finite values: {bad}")

    sorted_values = np.sort(values, kind='stable')

    # Finite samples near the float limit can still overflow the sums
    with np.errstate(over='ignore', invalid='ignore'):
        total = float(np.sum(values))
        mean = total / n

        mid = n // 2
        if n % 2 == 0:
            # Halving first keeps the midpoint finite for huge neighbours
            median = float(sorted_values[mid - 1] / 2 + sorted_values[mid] / 2)
        else:
            median = float(sorted_values[mid])

        variance = float(np.mean((values - mean) ** 2))

    # Every value tying at the max frequency reports as "no mode"
    modes = _modal_values(values.tolist())
    mode = () if len(modes) == n else tuple(modes)

    std_dev = math.sqrt(variance)

    min_val = float(sorted_values[0])
    max_val = float(sorted_values[-1])

    q1 = calculate_percentile(sorted_values, 25)
    q3 = calculate_percentile(sorted_values, 75)

    derived = {
        'sum': total, 'mean': mean, 'median': median,
        'variance': variance, 'range': max_val - min_val, 'iqr': q3 - q1,
    }
    overflowed = [name for name, val in derived.items() if not math.isfinite(val)]
    if overflowed:
        raise NonFiniteInputError(
            f"values too large: {', '.join(overflowed)} overflow"
        )

    return StatisticsReport(
        count=int(n),
        total=total,
        mean=mean,
        median=median,
        mode=mode,
        std_dev=std_dev,
        variance=variance,
        value_range=max_val - min_val,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        min_val=min_val,
        max_val=max_val,
    )
