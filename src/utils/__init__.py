"""
Utility modules for logging and evaluation metrics.
"""

from .logger import Logger
from .metrics import EvaluationTracker

__all__ = ["Logger", "EvaluationTracker"]
