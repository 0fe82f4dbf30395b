"""
AntibioticProblem: binds a model and a list of objectives into the fitness
function called by external search algorithms.
"""

import logging
import math
import numbers
from collections import namedtuple

from bacteria.config import MAX_LENGTH, PROBLEM_DEFAULTS
from bacteria.exceptions import ConfigurationError
from treatment.model import AntibioticModel
from treatment.schedule import pad_schedule, validate_schedule
from .objective import UNCURED_PROPORTION, Objective

logger = logging.getLogger(__name__)


Evaluation = namedtuple("Evaluation", [
    "objectives",            # one value per configured objective, in order
    "samples",               # stochastic runs actually executed
    "constraint_violation",  # min(max_failure_rate - failure_rate, 0), or None
    "violated_constraints",  # 0 or 1, or None
])


class AntibioticProblem:
    """
    Multi-objective problem over integer dosing schedules.

    A failure-rate constraint is active only when ``max_failure_rate`` is
    below 1.0.

    Attributes:
        model (AntibioticModel): Model evaluating schedules
        objectives (tuple): Objectives forming the fitness vector
        treatment_length (int): Number of decision variables, 1 to 10
        max_individual_dosage (int): Upper bound of every dose
        min_initial_dosage (int): Lower bound of the first dose
        max_failure_rate (float): Highest acceptable uncured proportion
    """

    def __init__(self, model, objectives,
                 treatment_length=PROBLEM_DEFAULTS["treatment_length"],
                 max_individual_dosage=PROBLEM_DEFAULTS["max_individual_dosage"],
                 min_initial_dosage=PROBLEM_DEFAULTS["min_initial_dosage"],
                 max_failure_rate=PROBLEM_DEFAULTS["max_failure_rate"]):
        if not isinstance(model, AntibioticModel):
            raise ConfigurationError(f"model = {model!r}, expected an AntibioticModel.")
        for name, value in (('treatment_length', treatment_length),
                            ('max_individual_dosage', max_individual_dosage),
                            ('min_initial_dosage', min_initial_dosage)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} = {value!r}, expected an int.")
        if isinstance(max_failure_rate, bool) or not isinstance(max_failure_rate, numbers.Real):
            raise ConfigurationError(
                f"max_failure_rate = {max_failure_rate!r}, expected a real number.")
        if max_individual_dosage < 1:
            raise ConfigurationError(
                f"max_individual_dosage = {max_individual_dosage}, expected >= 1.")
        if min_initial_dosage < 0 or min_initial_dosage > max_individual_dosage:
            raise ConfigurationError(
                f"min_initial_dosage = {min_initial_dosage}, "
                f"expected 0 to max_individual_dosage.")
        if treatment_length < 1 or treatment_length > MAX_LENGTH:
            raise ConfigurationError(
                f"treatment_length = {treatment_length}, expected 1 to {MAX_LENGTH}.")
        if (not math.isfinite(max_failure_rate)
                or max_failure_rate < 0 or max_failure_rate > 1):
            raise ConfigurationError(
                f"max_failure_rate = {max_failure_rate}, expected 0.0 to 1.0.")

        objectives = tuple(objectives)
        if not objectives:
            raise ConfigurationError("at least one objective is required.")
        for i, objective in enumerate(objectives):
            if not isinstance(objective, Objective):
                raise ConfigurationError(
                    f"objectives[{i}] = {objective!r}, expected an Objective.")

        self.model = model
        self.objectives = objectives
        self.treatment_length = treatment_length
        self.max_individual_dosage = max_individual_dosage
        self.min_initial_dosage = min_initial_dosage
        self.max_failure_rate = max_failure_rate

        # Reuse the uncured proportion objective for the constraint if present
        self._failure_rate_index = -1
        for i, objective in enumerate(objectives):
            if objective is UNCURED_PROPORTION:
                self._failure_rate_index = i
                break

    @property
    def name(self):
        return type(self).__name__

    @property
    def number_of_variables(self):
        return self.treatment_length

    @property
    def number_of_objectives(self):
        return len(self.objectives)

    @property
    def number_of_constraints(self):
        return 1 if self.max_failure_rate < 1.0 else 0

    def lower_bound(self, index):
        """Lower bound of variable ``index``: the minimum initial dose for day 1."""
        self._check_index(index)
        return self.min_initial_dosage if index == 0 else 0

    def upper_bound(self, index):
        """Upper bound of variable ``index``."""
        self._check_index(index)
        return self.max_individual_dosage

    def evaluate(self, solution):
        """
        Evaluate a schedule.

        Args:
            solution (sequence): ``treatment_length`` non-negative ints

        Returns:
            Evaluation: Fitness vector, samples taken, and constraint values
            (None when no constraint is configured)
        """
        result = self._aggregate(solution)
        values = tuple(objective.compute(result) for objective in self.objectives)

        violation = violated = None
        if self.number_of_constraints:
            violation, violated = self.evaluate_constraints(solution, values)

        logger.debug("Schedule %s -> %s (samples=%d)",
                     solution, values, result.samples)
        return Evaluation(values, result.samples, violation, violated)

    def evaluate_objectives(self, solution):
        """Fitness vector of a schedule, one value per objective."""
        result = self._aggregate(solution)
        return tuple(objective.compute(result) for objective in self.objectives)

    def evaluate_first_objective(self, solution):
        """Value of the first objective only."""
        return self.objectives[0].compute(self._aggregate(solution))

    def evaluate_constraints(self, solution, objectives=None):
        """
        Failure-rate constraint of a schedule.

        The uncured proportion is taken from ``objectives`` when it is one of
        the configured objectives and holds a valid rate; otherwise an
        independent evaluation is run to obtain it.

        Args:
            solution (sequence): ``treatment_length`` non-negative ints
            objectives (sequence): Already computed fitness vector, optional

        Returns:
            tuple: (constraint violation, number of violated constraints)
        """
        if not self.number_of_constraints:
            return 0.0, 0

        failure_rate = math.nan
        if self._failure_rate_index != -1 and objectives is not None:
            failure_rate = objectives[self._failure_rate_index]

        if not math.isfinite(failure_rate) or failure_rate < 0.0 or failure_rate > 1.0:
            failure_rate = UNCURED_PROPORTION.compute(self._aggregate(solution))

        violation = min(self.max_failure_rate - failure_rate, 0.0)
        violated = 1 if failure_rate > self.max_failure_rate else 0
        return violation, violated

    def _aggregate(self, solution):
        doses = validate_schedule(solution, self.treatment_length)
        return self.model.aggregate(pad_schedule(doses, MAX_LENGTH))

    def _check_index(self, index):
        if index < 0 or index >= self.treatment_length:
            raise IndexError(
                f"index = {index}, expected 0 to {self.treatment_length - 1}.")

    def __repr__(self):
        names = ", ".join(objective.name for objective in self.objectives)
        return (f"AntibioticProblem(objectives=[{names}], "
                f"length={self.treatment_length}, "
                f"max_failure_rate={self.max_failure_rate})")
