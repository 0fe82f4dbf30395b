"""
Unit tests for a single stochastic run.
"""

import math

import numpy as np
import pytest

import bacteria.simulation
from bacteria.config import BIOLOGICAL_PARAMS
from bacteria.exceptions import NumericDegeneracyError
from bacteria.rates import event_rates
from bacteria.simulation import RunResult, interval_doses, simulate_run


class ScriptedRandom:
    """Generator stand-in returning scripted draws, then a constant."""

    def __init__(self, values, default=0.5):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


ZERO = (0,) * 10


def test_interval_doses():
    """Test doses are applied from the second interval on."""
    cint = interval_doses(tuple(range(1, 11)))

    assert len(cint) == 12
    assert cint[0] == 0
    assert cint[1:11] == tuple(range(1, 11))
    assert cint[-1] == 0


def test_empty_populations_need_no_draws():
    """Test a run starting extinct returns immediately."""
    rng = ScriptedRandom([])
    assert simulate_run(ZERO, 0, 0, rng) == RunResult(0, 0)
    assert rng.calls == 0


def test_death_event_selected_from_last_segment():
    """Test the event partition order: a high draw picks strain 1 death."""
    # With one bacterium of strain 1, growth_1 takes ~93% of the interval
    rng = ScriptedRandom([0.99, 0.5])
    result = simulate_run(ZERO, 1, 0, rng)

    assert result == RunResult(0, 0)
    assert rng.calls == 2


def test_growth_event_selected_from_first_segment():
    """Test a low draw picks strain 1 growth."""
    rng = ScriptedRandom([0.0, 0.5, 0.99, 0.5, 0.99, 0.5])
    result = simulate_run(ZERO, 1, 0, rng)

    assert result == RunResult(0, 0)
    assert rng.calls == 6


def test_two_draws_per_event():
    """Test every event consumes exactly two draws."""
    rng = ScriptedRandom([], default=0.7)
    simulate_run((10,) * 10, 30, 5, rng)
    assert rng.calls % 2 == 0


def test_untreated_infection_persists():
    """Test that without antibiotic the bacteria are not eradicated."""
    result = simulate_run(ZERO, 900, 100, np.random.default_rng(1))
    assert result.strain_1 + result.strain_2 > 0


def test_same_seed_same_run():
    """Test runs are reproducible with a seeded generator."""
    doses = (10,) * 10
    first = simulate_run(doses, 300, 50, np.random.default_rng(123))
    second = simulate_run(doses, 300, 50, np.random.default_rng(123))
    assert first == second


def test_zero_rate_sum_is_fatal():
    """Test a zero total rate with bacteria present raises."""
    params = dict(BIOLOGICAL_PARAMS, r=0.0, ms=0.0, mr=0.0)
    with pytest.raises(NumericDegeneracyError):
        simulate_run(ZERO, 10, 10, np.random.default_rng(0), params=params)


def test_event_limit_is_fatal():
    """Test the event circuit breaker."""
    with pytest.raises(NumericDegeneracyError):
        simulate_run(ZERO, 900, 100, np.random.default_rng(0), max_events=10)


def test_zero_waiting_draw_is_finite():
    """Test a zero waiting-time draw gives a zero wait, not an error."""
    rng = ScriptedRandom([0.99, 0.0])
    assert simulate_run(ZERO, 1, 0, rng) == RunResult(0, 0)
    assert rng.calls == 2


def test_concentration_decays_from_interval_start(monkeypatch):
    """Test decay within a day is measured from that day's dose time."""
    seen = []

    def recording_rates(s1, s2, concentration, params):
        seen.append(concentration)
        return event_rates(s1, s2, concentration, params)

    monkeypatch.setattr(bacteria.simulation, "event_rates", recording_rates)

    # Day 0: growth, then a long wait carrying time past the first boundary
    # Day 1: dose of 60, growth, then a short wait inside the day
    rng = ScriptedRandom([0.0, 0.99, 0.0, 0.5], default=0.999)
    simulate_run((60,) + (0,) * 9, 1, 0, rng)

    first_wait = -math.log(0.01) / sum(event_rates(1, 0, 0.0))
    second_wait = -math.log(0.5) / sum(event_rates(2, 0, 60.0))
    assert first_wait > 1.0
    assert first_wait + second_wait <= 2.0

    assert seen[0] == 0.0
    assert seen[1] == 60.0
    decay = BIOLOGICAL_PARAMS["a"]
    assert seen[2] == pytest.approx(60.0 * math.exp(-decay * second_wait))
    assert seen[2] != pytest.approx(
        60.0 * math.exp(-decay * (first_wait + second_wait - 1.0)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
