"""
AntibioticModel: sample-size policy, initial loads and randomness for
repeated stochastic evaluation of dosing schedules.
"""

import logging
from collections import namedtuple

import numpy as np

from bacteria.config import (
    DEFAULT_INITIAL_LOAD_1, DEFAULT_INITIAL_LOAD_2, MAX_LENGTH, MAX_TOTAL_LOAD,
    MATLAB_REF_MAX_CONC, MATLAB_REF_PENALTY_CONC, MATLAB_REF_PENALTY_V_MAX,
    MATLAB_REF_V_MAX, MATLAB_REF_W1, MATLAB_REF_W2,
)
from bacteria.exceptions import ConfigurationError
from bacteria.sampling import DynamicSampling, FixedSampling
from .concentration import peak_concentration
from .schedule import (
    total_dosage, treatment_duration, validate_schedule,
)

logger = logging.getLogger(__name__)


AggregateResult = namedtuple("AggregateResult", [
    "total_dosage",          # sum of all doses
    "peak_concentration",    # highest daily concentration
    "s1_extinct",            # runs with strain 1 extinct
    "s2_extinct",            # runs with strain 2 extinct
    "both_extinct",          # runs with both strains extinct
    "samples",               # runs actually executed
    "duration",              # treatment duration in days
])


def weighted_fitness(result, w1=MATLAB_REF_W1, w2=MATLAB_REF_W2):
    """
    Weighted fitness consistent with the MATLAB reference implementation.

    Schedules over the dosage cap or the concentration ceiling receive the
    fixed penalty values instead.

    Args:
        result (AggregateResult): Statistics of one evaluation
        w1 (float): Weight of the extinction penalty
        w2 (float): Weight of the normalized total dosage

    Returns:
        float: Fitness to minimize
    """
    if result.total_dosage > MATLAB_REF_V_MAX:
        return MATLAB_REF_PENALTY_V_MAX
    if result.peak_concentration > MATLAB_REF_MAX_CONC:
        return MATLAB_REF_PENALTY_CONC
    s1_pen = 1 - result.s1_extinct / result.samples
    s2_pen = 1 - result.s2_extinct / result.samples
    return (w1 * 0.5 * (s1_pen + s2_pen)
            + w2 * result.total_dosage / MATLAB_REF_V_MAX)


class AntibioticModel:
    """
    Stochastic model for antibiotic treatment.

    Build instances through :meth:`fixed_sample_size` or
    :meth:`dynamic_sample_size`. Instances are not modified by evaluation
    and can be reused across many schedules.

    Attributes:
        policy (FixedSampling or DynamicSampling): Sample-size policy
        initial_load_1 (int): Initial strain 1 population
        initial_load_2 (int): Initial strain 2 population
        random (numpy.random.Generator): Shared generator, or None to give
            every evaluation call its own fresh generator
    """

    def __init__(self, policy, initial_load_1=DEFAULT_INITIAL_LOAD_1,
                 initial_load_2=DEFAULT_INITIAL_LOAD_2, random=None):
        _check_loads(initial_load_1, initial_load_2)
        if random is not None and not isinstance(random, np.random.Generator):
            raise ConfigurationError(
                f"random = {random!r}, expected a numpy.random.Generator.")
        self.policy = policy
        self.initial_load_1 = initial_load_1
        self.initial_load_2 = initial_load_2
        self.random = random

    @classmethod
    def fixed_sample_size(cls, runs, initial_load_1=DEFAULT_INITIAL_LOAD_1,
                          initial_load_2=DEFAULT_INITIAL_LOAD_2, random=None):
        """
        Model that runs exactly ``runs`` samples per evaluation.

        Args:
            runs (int): Number of samples, at least 1
            initial_load_1 (int): Initial strain 1 load, in [0, 1000]
            initial_load_2 (int): Initial strain 2 load, in [0, 1000]
            random (numpy.random.Generator): Optional generator

        Returns:
            AntibioticModel: The configured model
        """
        _check_count("runs", runs)
        return cls(FixedSampling(runs), initial_load_1, initial_load_2, random)

    @classmethod
    def dynamic_sample_size(cls, target_failures, maximum_runs,
                            initial_load_1=DEFAULT_INITIAL_LOAD_1,
                            initial_load_2=DEFAULT_INITIAL_LOAD_2, random=None):
        """
        Model that samples until ``target_failures`` failures are observed
        or ``maximum_runs`` runs have executed.

        Args:
            target_failures (int): Failures to observe before stopping
            maximum_runs (int): Maximum runs, at least ``target_failures``
            initial_load_1 (int): Initial strain 1 load, in [0, 1000]
            initial_load_2 (int): Initial strain 2 load, in [0, 1000]
            random (numpy.random.Generator): Optional generator

        Returns:
            AntibioticModel: The configured model
        """
        _check_count("target_failures", target_failures)
        _check_count("maximum_runs", maximum_runs)
        if target_failures > maximum_runs:
            raise ConfigurationError(
                f"target_failures = {target_failures}, maximum_runs = "
                f"{maximum_runs}, expected: target_failures <= maximum_runs.")
        return cls(DynamicSampling(target_failures, maximum_runs),
                   initial_load_1, initial_load_2, random)

    def evaluate(self, solution):
        """
        Fitness of a schedule weighting cure failures against total dosage.

        Consistent with the MATLAB reference implementation: infeasible
        schedules get the penalty values without any stochastic run.

        Args:
            solution (sequence): Length 10 schedule of non-negative ints

        Returns:
            float: Fitness to minimize
        """
        doses = validate_schedule(solution, MAX_LENGTH)
        return weighted_fitness(self.aggregate(doses, short_circuit=True))

    def aggregate(self, doses, short_circuit=False):
        """
        Raw statistics for a padded schedule.

        Args:
            doses (sequence): Schedule of ``MAX_LENGTH`` non-negative ints
            short_circuit (bool): Skip the stochastic phase when the
                schedule exceeds the dosage cap or concentration ceiling

        Returns:
            AggregateResult: Statistics of the evaluation; extinction counts
            are NaN and ``samples`` is 0 when short-circuited

        Raises:
            InputValidationError: If the schedule is not ``MAX_LENGTH``
                non-negative ints
        """
        doses = validate_schedule(doses, MAX_LENGTH)
        v_tot = total_dosage(doses)
        highest_conc = peak_concentration(doses)
        duration = treatment_duration(doses)

        if short_circuit and (highest_conc > MATLAB_REF_MAX_CONC
                              or v_tot > MATLAB_REF_V_MAX):
            logger.debug("Skipping stochastic runs: total=%d, peak=%.3f",
                         v_tot, highest_conc)
            nan = float("nan")
            return AggregateResult(v_tot, highest_conc, nan, nan, nan, 0, duration)

        rng = self.random if self.random is not None else np.random.default_rng()
        counts = self.policy.sample(doses, self.initial_load_1,
                                    self.initial_load_2, rng)
        logger.debug("Evaluated %s: %r", tuple(doses), counts)

        return AggregateResult(v_tot, highest_conc, counts.s1_extinct,
                               counts.s2_extinct, counts.both_extinct,
                               counts.samples, duration)

    def __repr__(self):
        return (f"AntibioticModel({self.policy!r}, initial_loads="
                f"({self.initial_load_1}, {self.initial_load_2}))")


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} = {value!r}, expected: >= 1.")


def _check_loads(initial_load_1, initial_load_2):
    for name, load in (("initial_load_1", initial_load_1),
                       ("initial_load_2", initial_load_2)):
        if (isinstance(load, bool) or not isinstance(load, int)
                or load < 0 or load > MAX_TOTAL_LOAD):
            raise ConfigurationError(
                f"{name} = {load!r}, expected: [0, {MAX_TOTAL_LOAD}].")
    if initial_load_1 + initial_load_2 > MAX_TOTAL_LOAD:
        raise ConfigurationError(
            f"initial_load_1 + initial_load_2 = "
            f"{initial_load_1 + initial_load_2}, expected: [0, {MAX_TOTAL_LOAD}].")
