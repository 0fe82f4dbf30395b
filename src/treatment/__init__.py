"""
Treatment module for dosing schedules and their evaluation.

This module validates candidate dosing schedules, computes the deterministic
concentration trace used by the feasibility pre-check, and provides the
model that evaluates schedules by repeated stochastic simulation.
"""

from .schedule import validate_schedule, pad_schedule, total_dosage, treatment_duration
from .concentration import concentration_trace, peak_concentration, is_feasible
from .model import AggregateResult, AntibioticModel, weighted_fitness

__all__ = [
    "validate_schedule", "pad_schedule", "total_dosage", "treatment_duration",
    "concentration_trace", "peak_concentration", "is_feasible",
    "AggregateResult", "AntibioticModel", "weighted_fitness",
]
