"""
Instrumentation of problem evaluations.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class EvaluationTracker:
    """
    Wrap an ``AntibioticProblem`` and track its evaluations.

    Counts evaluations and the stochastic samples they consumed, and logs
    progress against an expected evaluation budget.
    """

    def __init__(self, problem, expected_limit, verbose=False, log=None):
        """
        Initialize tracker.

        Args:
            problem (AntibioticProblem): Problem to instrument
            expected_limit (int): Evaluation budget, used in progress messages
            verbose (bool): Also log variables, objectives and constraints
            log (logging.Logger or Logger): Destination, module logger by default
        """
        self.problem = problem
        self.expected_limit = expected_limit
        self.verbose = verbose
        self.log = log if log is not None else logger
        self.reset()

    def reset(self):
        """Reset all counters."""
        self.evaluations = 0
        self.total_samples = 0
        self.samples = []

    def evaluate(self, solution):
        """
        Evaluate a schedule through the wrapped problem.

        Args:
            solution (sequence): Candidate schedule

        Returns:
            Evaluation: The wrapped problem's result
        """
        evaluation = self.problem.evaluate(solution)

        self.evaluations += 1
        self.total_samples += evaluation.samples
        self.samples.append(evaluation.samples)

        if self.verbose:
            self.log.info(f"Variables : {list(solution)}")
        self.log.info(f"evaluation #{self.evaluations} of {self.expected_limit}"
                      f"\t samples so far : {self.total_samples}")
        if self.verbose:
            self.log.info(f"Objectives : {list(evaluation.objectives)}")
            if evaluation.constraint_violation is not None:
                self.log.info(f"OverallConstraintViolation : {evaluation.constraint_violation}")
                self.log.info(f"NumberOfViolatedConstraints : {evaluation.violated_constraints}")

        return evaluation

    def get_statistics(self, window=None):
        """
        Summary of samples per evaluation.

        Args:
            window (int): Only consider the most recent evaluations

        Returns:
            dict: Statistics dictionary
        """
        recent = self.samples[-window:] if window else self.samples
        return {
            'evaluations': self.evaluations,
            'total_samples': self.total_samples,
            'mean_samples': float(np.mean(recent)) if recent else 0.0,
            'std_samples': float(np.std(recent)) if recent else 0.0,
            'min_samples': int(np.min(recent)) if recent else 0,
            'max_samples': int(np.max(recent)) if recent else 0,
        }

    def __getattr__(self, name):
        # Bounds, counts and the other problem API pass through
        if name == 'problem':
            raise AttributeError(name)
        return getattr(self.problem, name)

    def __repr__(self):
        return f"EvaluationTracker({self.problem!r}, evaluations={self.evaluations})"
