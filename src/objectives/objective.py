"""
Objectives computed from the aggregated statistics of one evaluation.
"""

import math

from bacteria.config import MATLAB_REF_W1, MATLAB_REF_W2
from bacteria.exceptions import ConfigurationError
from treatment.model import weighted_fitness


class Objective:
    """
    A named pure function from an ``AggregateResult`` to a float.

    Attributes:
        name (str): Name used in logs and reports
        func (callable): The function computing the value
    """

    def __init__(self, name, func):
        if not callable(func):
            raise ConfigurationError(f"objective {name!r} is not callable.")
        self.name = name
        self.func = func

    def compute(self, result):
        """
        Compute the objective value.

        Args:
            result (AggregateResult): Statistics of one evaluation

        Returns:
            float: Objective value
        """
        return float(self.func(result))

    def __call__(self, result):
        return self.compute(result)

    def __repr__(self):
        return f"Objective({self.name})"


def _uncured(result):
    if result.samples == 0:
        return math.nan
    return 1.0 - result.both_extinct / result.samples


# Shared instance, so problems can recognise it among their objectives
UNCURED_PROPORTION = Objective("uncured_proportion", _uncured)


def uncured_proportion():
    """Proportion of runs that did not eradicate both strains."""
    return UNCURED_PROPORTION


def overdose_amount(limit):
    """Amount by which the peak concentration exceeds ``limit``, or 0."""
    return Objective(f"overdose_amount({limit})",
                     lambda result: max(0.0, result.peak_concentration - limit))


def maximum_concentration():
    """Peak concentration reached during treatment."""
    return Objective("maximum_concentration",
                     lambda result: result.peak_concentration)


def treatment_duration():
    """Index (1-based) of the last non-zero dose, or 0."""
    return Objective("treatment_duration", lambda result: result.duration)


def total_antibiotic():
    """Sum of all doses."""
    return Objective("total_antibiotic", lambda result: result.total_dosage)


def weighting(w1=MATLAB_REF_W1, w2=MATLAB_REF_W2):
    """
    Weighted extinction penalty and dosage, matching the MATLAB reference.

    Returns the fixed penalty values for schedules over the dosage cap or the
    concentration ceiling.
    """
    return Objective(f"weighting({w1}, {w2})",
                     lambda result: weighted_fitness(result, w1, w2))


# -----------------------
# Combinators
# -----------------------

def sum_of(*objectives):
    """Sum of several objectives."""
    objectives = _check_objectives(objectives)
    names = " + ".join(objective.name for objective in objectives)
    return Objective(f"({names})",
                     lambda result: sum(o.compute(result) for o in objectives))


def multiply(objective, factor):
    """One objective scaled by ``factor``."""
    (objective,) = _check_objectives((objective,))
    return Objective(f"{factor} * {objective.name}",
                     lambda result: objective.compute(result) * factor)


def conditional_add(initial, predicate, to_add):
    """
    Add ``to_add`` to ``initial`` only when ``predicate`` holds for the
    value of ``initial``.

    Args:
        initial (Objective): Base objective
        predicate (callable): Test applied to the base value
        to_add (Objective): Objective added when the test passes

    Returns:
        Objective: The combined objective
    """
    initial, to_add = _check_objectives((initial, to_add))
    if not callable(predicate):
        raise ConfigurationError("predicate is not callable.")

    def compute(result):
        value = initial.compute(result)
        if predicate(value):
            return value + to_add.compute(result)
        return value

    return Objective(f"{initial.name} +? {to_add.name}", compute)


def _check_objectives(objectives):
    for i, objective in enumerate(objectives):
        if not isinstance(objective, Objective):
            raise ConfigurationError(
                f"objectives[{i}] = {objective!r}, expected an Objective.")
    return tuple(objectives)
