"""
Unit tests for objectives and their combinators.
"""

import math

import pytest

from bacteria.exceptions import ConfigurationError
from objectives.objective import (
    Objective, UNCURED_PROPORTION, conditional_add, maximum_concentration,
    multiply, overdose_amount, sum_of, total_antibiotic, treatment_duration,
    uncured_proportion, weighting,
)
from treatment.model import AggregateResult


def make_result(**overrides):
    values = dict(total_dosage=100, peak_concentration=26.0, s1_extinct=60,
                  s2_extinct=40, both_extinct=30, samples=100, duration=10)
    values.update(overrides)
    return AggregateResult(**values)


def test_uncured_proportion():
    """Test uncured proportion uses the actual sample count."""
    assert uncured_proportion().compute(make_result()) == pytest.approx(0.7)
    assert uncured_proportion().compute(make_result(both_extinct=5, samples=10)) == 0.5


def test_uncured_proportion_is_shared():
    """Test the factory returns the shared instance."""
    assert uncured_proportion() is UNCURED_PROPORTION


def test_uncured_proportion_bounds():
    """Test values stay within [0, 1]."""
    for cured in range(0, 11):
        value = uncured_proportion().compute(make_result(both_extinct=cured, samples=10))
        assert 0.0 <= value <= 1.0


def test_uncured_proportion_without_samples():
    """Test no samples gives NaN."""
    assert math.isnan(uncured_proportion().compute(make_result(samples=0)))


def test_overdose_amount():
    """Test overdose is the excess over the limit, or zero."""
    assert overdose_amount(60).compute(make_result(peak_concentration=97.1)) == pytest.approx(37.1)
    assert overdose_amount(60).compute(make_result(peak_concentration=60.0)) == 0.0
    assert overdose_amount(60).compute(make_result(peak_concentration=12.0)) == 0.0


def test_simple_objectives():
    """Test objectives reading one statistic."""
    result = make_result()

    assert maximum_concentration().compute(result) == 26.0
    assert treatment_duration().compute(result) == 10.0
    assert total_antibiotic().compute(result) == 100.0


def test_weighting_value():
    """Test the reference weighting formula."""
    result = make_result()
    expected = 1.0 * 0.5 * ((1 - 0.6) + (1 - 0.4)) + 0.1 * 100 / 184

    assert weighting().compute(result) == pytest.approx(expected)
    assert weighting(2.0, 0.0).compute(result) == pytest.approx(1.0)


def test_weighting_penalties():
    """Test penalty values for infeasible schedules, even without samples."""
    nan = float("nan")
    over_total = make_result(total_dosage=190, s1_extinct=nan, s2_extinct=nan,
                             both_extinct=nan, samples=0)
    over_conc = make_result(peak_concentration=97.0, s1_extinct=nan,
                            s2_extinct=nan, both_extinct=nan, samples=0)

    assert weighting().compute(over_total) == 10.0 ** 10
    assert weighting().compute(over_conc) == 10.0 ** 10


def test_sum_of():
    """Test summing objectives."""
    objective = sum_of(total_antibiotic(), treatment_duration(), maximum_concentration())
    assert objective.compute(make_result()) == pytest.approx(136.0)


def test_multiply():
    """Test scaling an objective."""
    assert multiply(total_antibiotic(), 0.5).compute(make_result()) == 50.0


def test_conditional_add():
    """Test the extra objective is added only when the predicate holds."""
    objective = conditional_add(uncured_proportion(), lambda value: value > 0.5,
                                total_antibiotic())

    assert objective.compute(make_result()) == pytest.approx(100.7)
    assert objective.compute(make_result(both_extinct=80)) == pytest.approx(0.2)


def test_invalid_objectives():
    """Test combinators reject non-objectives."""
    with pytest.raises(ConfigurationError):
        sum_of(total_antibiotic(), lambda result: 1.0)
    with pytest.raises(ConfigurationError):
        multiply(None, 2.0)
    with pytest.raises(ConfigurationError):
        conditional_add(total_antibiotic(), None, total_antibiotic())
    with pytest.raises(ConfigurationError):
        Objective("broken", 42)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
