"""
Point probability evaluator for the Statistics Calculator.

Only the normal distribution is implemented.  Binomial and Poisson
return fixed placeholder values flagged with ``is_stub=True`` so the
GUI can label them; they are NOT probability mass functions.
"""

import math

from scipy.stats import norm

from .constants import DIST_NORMAL, STUB_PROBABILITIES
from .data_model import ProbabilityResult


def normal_pdf(x: float, mean: float, std_dev: float) -> float:
    """Gaussian density ``exp(-z**2 / 2) / (std_dev * sqrt(2*pi))``.

    ``z = (x - mean) / std_dev``.  Raises ``ValueError`` for a
    non-positive *std_dev*.
    """
    if std_dev <= 0:
        raise ValueError(
            f"standard deviation must be positive, got {std_dev}"
        )
    return float(norm.pdf(x, loc=mean, scale=std_dev))


def evaluate_probability(
    distribution: str,
    x: float,
    mean: float,
    std_dev: float,
) -> ProbabilityResult:
    """Evaluate the point probability of *x* under *distribution*.

    Parameters
    ----------
    distribution : str
        ``"normal"``, ``"binomial"`` or ``"poisson"`` (case-insensitive).
    x, mean, std_dev : float
        Evaluation point and distribution parameters.  All must be
        finite.

    Returns
    -------
    ProbabilityResult

    Raises
    ------
    ValueError
        For an unknown distribution, a non-finite input, or a
        non-positive standard deviation on the normal distribution.
    """
    name = distribution.strip().lower()
    for label, value in (('x', x), ('mean', mean), ('std_dev', std_dev)):
        if not math.isfinite(value):
            raise ValueError(f"{label} must be a finite number, got {value}")

    if name == DIST_NORMAL:
        value = normal_pdf(x, mean, std_dev)
        is_stub = False
    elif name in STUB_PROBABILITIES:
        value = STUB_PROBABILITIES[name]
        is_stub = True
    else:
        known = ", ".join([DIST_NORMAL, *STUB_PROBABILITIES])
        raise ValueError(
            f"unknown distribution {distribution!r}; expected one of: {known}"
        )

    return ProbabilityResult(
        distribution=name,
        x=float(x),
        mean=float(mean),
        std_dev=float(std_dev),
        value=value,
        is_stub=is_stub,
    )
