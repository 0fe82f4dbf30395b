"""
Errors raised by the antibiotic treatment model.
"""


class AntibioticModelError(Exception):
    """Base class for all model errors."""
    pass


class ConfigurationError(AntibioticModelError, ValueError):
    """Raised when model or problem parameters are invalid."""
    pass


class InputValidationError(AntibioticModelError, ValueError):
    """Raised when a candidate dosing schedule is rejected."""
    pass


class NumericDegeneracyError(AntibioticModelError, RuntimeError):
    """Raised when a run reaches a state the rate model cannot advance from."""
    pass
