"""
Unit tests for the fixed and dynamic sampling policies.
"""

import numpy as np
import pytest

from bacteria.sampling import DynamicSampling, ExtinctionCounts, FixedSampling
from bacteria.simulation import RunResult


ZERO = (0,) * 10


def test_extinction_counts():
    """Test outcome classification."""
    counts = ExtinctionCounts()

    assert counts.record(RunResult(0, 0)) is True
    assert counts.record(RunResult(0, 4)) is False
    assert counts.record(RunResult(3, 0)) is False
    assert counts.record(RunResult(3, 4)) is False

    assert counts.s1_extinct == 2
    assert counts.s2_extinct == 2
    assert counts.both_extinct == 1
    assert counts.samples == 4


def test_fixed_runs_exact_count():
    """Test fixed sampling executes exactly the configured runs."""
    counts = FixedSampling(5).sample(ZERO, 50, 10, np.random.default_rng(0))
    assert counts.samples == 5


def test_fixed_counts_cures():
    """Test runs starting extinct are all counted as cured."""
    counts = FixedSampling(4).sample(ZERO, 0, 0, np.random.default_rng(0))

    assert counts.both_extinct == 4
    assert counts.s1_extinct == 4
    assert counts.s2_extinct == 4


def test_dynamic_single_run():
    """Test target 1 with at most 1 run executes exactly one run."""
    counts = DynamicSampling(1, 1).sample(ZERO, 900, 100, np.random.default_rng(0))
    assert counts.samples == 1


def test_dynamic_stops_at_target_failures():
    """Test sampling stops once the target failures are observed."""
    # Untreated infections are never cured, every run is a failure
    counts = DynamicSampling(3, 50).sample(ZERO, 200, 20, np.random.default_rng(0))

    assert counts.samples == 3
    assert counts.both_extinct == 0


def test_dynamic_stops_at_maximum_runs():
    """Test sampling stops at the maximum when failures never occur."""
    counts = DynamicSampling(2, 7).sample(ZERO, 0, 0, np.random.default_rng(0))

    assert counts.samples == 7
    assert counts.both_extinct == 7


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
