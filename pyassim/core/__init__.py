"""
Core infrastructure for pyassim.

This module provides shared abstractions and numeric infrastructure used
by the Gaussian types in pyassim.gaussian.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, SPD linear algebra, random fixtures
"""

from pyassim.core.exceptions import (
    PyAssimError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyAssimError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
