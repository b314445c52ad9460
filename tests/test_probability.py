import math

import pytest

from statcalc.probability import evaluate_probability, normal_pdf


def test_normal_density_at_mean():
    result = evaluate_probability("normal", 0.0, 0.0, 1.0)
    assert result.value == pytest.approx(0.39894, abs=1e-5)
    assert result.value == pytest.approx(1 / math.sqrt(2 * math.pi))
    assert not result.is_stub


@pytest.mark.parametrize("x, mean, std_dev", [
    (1.5, 0.0, 1.0),
    (12.0, 10.0, 2.5),
    (-3.0, 4.0, 0.75),
])
def test_normal_density_matches_closed_form(x, mean, std_dev):
    z = (x - mean) / std_dev
    expected = math.exp(-0.5 * z * z) / (std_dev * math.sqrt(2 * math.pi))
    assert normal_pdf(x, mean, std_dev) == pytest.approx(expected)


def test_peak_scales_with_std_dev():
    assert normal_pdf(5.0, 5.0, 2.0) == pytest.approx(
        1 / (2.0 * math.sqrt(2 * math.pi))
    )


def test_distribution_name_is_case_insensitive():
    assert evaluate_probability(" Normal ", 0, 0, 1).distribution == "normal"


@pytest.mark.parametrize("name, placeholder", [
    ("binomial", 0.5),
    ("poisson", 0.3),
])
def test_placeholder_distributions_are_flagged(name, placeholder):
    result = evaluate_probability(name, 3.0, 1.0, 1.0)
    assert result.value == placeholder
    assert result.is_stub


def test_unknown_distribution_raises():
    with pytest.raises(ValueError, match="unknown distribution"):
        evaluate_probability("cauchy", 0, 0, 1)


@pytest.mark.parametrize("std_dev", [0.0, -1.0])
def test_non_positive_std_dev_raises(std_dev):
    with pytest.raises(ValueError, match="positive"):
        evaluate_probability("normal", 0, 0, std_dev)


def test_non_finite_inputs_raise():
    with pytest.raises(ValueError, match="finite"):
        evaluate_probability("normal", float('nan'), 0, 1)
