"""
Deterministic antibiotic concentration over the dosing window.
"""

import math

import numpy as np

from bacteria.config import BIOLOGICAL_PARAMS, MATLAB_REF_MAX_CONC, MATLAB_REF_V_MAX
from .schedule import total_dosage


def concentration_trace(doses, decay=BIOLOGICAL_PARAMS["a"]):
    """
    Day-by-day concentration with exponential decay between doses.

    ``conc[0] = 0`` and ``conc[i] = doses[i - 1] + conc[i - 1] * exp(-decay)``.

    Args:
        doses (sequence): Padded dosing schedule
        decay (float): Degradation rate of the antibiotic

    Returns:
        np.ndarray: Concentrations, length ``len(doses) + 1``
    """
    retained = math.exp(-decay)
    conc = np.zeros(len(doses) + 1)
    for i in range(1, len(doses) + 1):
        conc[i] = doses[i - 1] + conc[i - 1] * retained
    return conc


def peak_concentration(doses, decay=BIOLOGICAL_PARAMS["a"]):
    """Highest concentration reached on any dosing day."""
    conc = concentration_trace(doses, decay)
    if len(conc) < 2:
        return 0.0
    return float(np.max(conc[1:]))


def is_feasible(doses, max_conc=MATLAB_REF_MAX_CONC, max_total=MATLAB_REF_V_MAX):
    """
    Check the schedule against the concentration ceiling and dosage cap.

    Args:
        doses (sequence): Padded dosing schedule
        max_conc (float): Safety ceiling on concentration
        max_total (float): Global cap on total dosage

    Returns:
        bool: True if neither limit is exceeded
    """
    return (peak_concentration(doses) <= max_conc
            and total_dosage(doses) <= max_total)
