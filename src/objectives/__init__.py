"""
Objectives module turning simulation statistics into fitness values.

This module contains the objective functions, their combinators, and the
problem adapter that external optimizers call once per candidate schedule.
"""

from .objective import (
    Objective, UNCURED_PROPORTION, uncured_proportion, overdose_amount,
    maximum_concentration, treatment_duration, total_antibiotic, weighting,
    sum_of, multiply, conditional_add,
)
from .problem import AntibioticProblem, Evaluation

__all__ = [
    "Objective", "UNCURED_PROPORTION", "uncured_proportion", "overdose_amount",
    "maximum_concentration", "treatment_duration", "total_antibiotic",
    "weighting", "sum_of", "multiply", "conditional_add",
    "AntibioticProblem", "Evaluation",
]
