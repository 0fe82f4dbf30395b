"""
Bacteria module for stochastic treatment simulation.

This module contains the two-strain birth-death model and the sampling
policies that repeat it.
"""

from .exceptions import (
    AntibioticModelError, ConfigurationError, InputValidationError,
    NumericDegeneracyError,
)
from .rates import event_rates, hill_kill_rate
from .simulation import RunResult, simulate_run
from .sampling import DynamicSampling, ExtinctionCounts, FixedSampling

__all__ = [
    "AntibioticModelError", "ConfigurationError", "InputValidationError",
    "NumericDegeneracyError", "event_rates", "hill_kill_rate", "RunResult",
    "simulate_run", "DynamicSampling", "ExtinctionCounts", "FixedSampling",
]
