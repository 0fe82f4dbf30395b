"""
Sampling policies that repeat simulation runs for one schedule.
"""

import logging

from .simulation import simulate_run

logger = logging.getLogger(__name__)


class ExtinctionCounts:
    """
    Extinction counters accumulated over a sampling pass.

    Attributes:
        s1_extinct (int): Runs ending with strain 1 extinct
        s2_extinct (int): Runs ending with strain 2 extinct
        both_extinct (int): Runs ending with both strains extinct (cured)
        samples (int): Runs actually executed
    """

    def __init__(self):
        self.s1_extinct = 0
        self.s2_extinct = 0
        self.both_extinct = 0
        self.samples = 0

    def record(self, result):
        """
        Add one run outcome.

        Args:
            result (RunResult): Final populations of the run

        Returns:
            bool: True if the run cured the infection
        """
        s1_gone = result.strain_1 < 1
        s2_gone = result.strain_2 < 1
        if s1_gone:
            self.s1_extinct += 1
        if s2_gone:
            self.s2_extinct += 1
        cured = s1_gone and s2_gone
        if cured:
            self.both_extinct += 1
        self.samples += 1
        return cured

    def __repr__(self):
        return (f"ExtinctionCounts(s1={self.s1_extinct}, s2={self.s2_extinct}, "
                f"both={self.both_extinct}, samples={self.samples})")


class FixedSampling:
    """Run the simulation exactly ``runs`` times."""

    def __init__(self, runs):
        self.runs = runs

    def sample(self, doses, initial_load_1, initial_load_2, rng):
        """
        Execute the fixed number of runs.

        Args:
            doses (sequence): Padded dosing schedule
            initial_load_1 (int): Initial strain 1 population
            initial_load_2 (int): Initial strain 2 population
            rng (numpy.random.Generator): Source of randomness

        Returns:
            ExtinctionCounts: Accumulated outcomes
        """
        counts = ExtinctionCounts()
        for _ in range(self.runs):
            counts.record(simulate_run(doses, initial_load_1, initial_load_2, rng))
        return counts

    def __repr__(self):
        return f"FixedSampling(runs={self.runs})"


class DynamicSampling:
    """
    Sequential early-stopping policy.

    Runs until ``target_failures`` runs have ended without curing both
    strains, or ``maximum_runs`` runs have executed, whichever comes first.
    A partial cure (one strain left) counts as a failure.
    """

    def __init__(self, target_failures, maximum_runs):
        self.target_failures = target_failures
        self.maximum_runs = maximum_runs

    def sample(self, doses, initial_load_1, initial_load_2, rng):
        """
        Execute runs until a stopping condition is met.

        Args:
            doses (sequence): Padded dosing schedule
            initial_load_1 (int): Initial strain 1 population
            initial_load_2 (int): Initial strain 2 population
            rng (numpy.random.Generator): Source of randomness

        Returns:
            ExtinctionCounts: Accumulated outcomes; ``samples`` is the number
            of runs actually executed
        """
        counts = ExtinctionCounts()
        failures_observed = 0
        while (counts.samples < self.maximum_runs
               and failures_observed < self.target_failures):
            result = simulate_run(doses, initial_load_1, initial_load_2, rng)
            if not counts.record(result):
                failures_observed += 1

        if failures_observed >= self.target_failures:
            logger.debug("Stopped after %d runs: %d failures observed",
                         counts.samples, failures_observed)
        return counts

    def __repr__(self):
        return (f"DynamicSampling(target_failures={self.target_failures}, "
                f"maximum_runs={self.maximum_runs})")
