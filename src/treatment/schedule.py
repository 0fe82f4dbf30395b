"""
Dosing schedule validation and summaries.
"""

import numbers

from bacteria.config import MAX_LENGTH
from bacteria.exceptions import InputValidationError


def validate_schedule(solution, length=MAX_LENGTH):
    """
    Validate a candidate schedule and return a defensive copy.

    Args:
        solution (sequence): Candidate doses, one per treatment day
        length (int): Expected number of slots

    Returns:
        tuple: The validated doses as ints

    Raises:
        InputValidationError: If the schedule is missing, has the wrong
            length, or holds a negative or non-integer dose
    """
    if solution is None:
        raise InputValidationError("solution is None.")
    doses = tuple(solution)
    if len(doses) != length:
        raise InputValidationError(
            f"solution length = {len(doses)}, expected: {length}.")
    for i, dose in enumerate(doses):
        if isinstance(dose, bool) or not isinstance(dose, numbers.Integral):
            raise InputValidationError(
                f"solution[{i}] = {dose!r}, expected an integer.")
        if dose < 0:
            raise InputValidationError(
                f"solution[{i}] = {dose}, expected: >= 0.")
    return tuple(int(dose) for dose in doses)


def pad_schedule(doses, width=MAX_LENGTH):
    """Pad a validated schedule with trailing zero doses up to ``width``."""
    return tuple(doses) + (0,) * (width - len(doses))


def total_dosage(doses):
    """Sum of all doses."""
    return sum(doses)


def treatment_duration(doses):
    """
    Duration of the treatment in days.

    Returns:
        int: 1-based index of the last non-zero dose, or 0 if all are zero
    """
    last_non_zero = -1
    for i, dose in enumerate(doses):
        if dose != 0:
            last_non_zero = i
    return last_non_zero + 1
