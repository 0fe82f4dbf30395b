"""
Unit tests for the event rate formulas.
"""

import pytest

from bacteria.config import BIOLOGICAL_PARAMS
from bacteria.rates import event_rates, hill_kill_rate


def test_no_bacteria_no_events():
    """Test that empty populations have all rates zero."""
    assert event_rates(0, 0, 25.0) == (0.0, 0.0, 0.0, 0.0)


def test_rates_without_antibiotic():
    """Test natural rates when no antibiotic is present."""
    growth_1, growth_2, death_1, death_2 = event_rates(450, 50, 0.0)
    r = BIOLOGICAL_PARAMS["r"]

    assert growth_1 == pytest.approx(r * 450 * 0.5)
    assert growth_2 == pytest.approx(r * 50 * 0.5 * 0.8)
    assert death_1 == pytest.approx(0.2 * 450)
    assert death_2 == pytest.approx(0.2 * 50)


def test_no_growth_at_carrying_capacity():
    """Test that growth stops at the carrying capacity."""
    growth_1, growth_2, death_1, death_2 = event_rates(900, 100, 0.0)

    assert growth_1 == 0.0
    assert growth_2 == 0.0
    assert death_1 > 0.0
    assert death_2 > 0.0


def test_hill_term_zero_without_antibiotic():
    """Test that the drug-induced death term vanishes at zero concentration."""
    p = BIOLOGICAL_PARAMS
    assert hill_kill_rate(0.0, p["max_s"], p["min_s"], p["mic_s"], p["k_s"]) == 0.0


def test_hill_term_increases_and_saturates():
    """Test the Hill term is increasing and bounded by max - min."""
    p = BIOLOGICAL_PARAMS
    values = [hill_kill_rate(c, p["max_s"], p["min_s"], p["mic_s"], p["k_s"])
              for c in (1.0, 8.0, 16.0, 32.0, 1000.0)]

    assert all(a < b for a, b in zip(values, values[1:]))
    assert values[-1] < p["max_s"] - p["min_s"]


def test_resistant_strain_dies_slower():
    """Test the resistant strain suffers less drug-induced death."""
    _, _, death_1, death_2 = event_rates(100, 100, 20.0)
    assert death_2 < death_1


def test_rates_non_negative():
    """Test rates are never negative over a range of states."""
    for s1, s2 in [(0, 10), (10, 0), (500, 500), (1, 999)]:
        for conc in (0.0, 5.0, 60.0):
            assert all(rate >= 0.0 for rate in event_rates(s1, s2, conc))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
