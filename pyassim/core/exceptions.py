"""
Exception hierarchy for pyassim.

All exceptions inherit from PyAssimError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyAssimError(Exception):
    """Base exception for all pyassim errors."""
    pass


class ValidationError(PyAssimError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or when
    multiple arrays have inconsistent shapes: a non-square covariance,
    a center whose length disagrees with the covariance, two Gaussians
    of different size being fused, or a projection whose row count
    disagrees with the projected Gaussian.

    Always raised before any numerical work is done.
    """
    pass


class NumericalError(PyAssimError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or not positive definite.

    Raised when a covariance or precision matrix has to be inverted or
    solved against but is not positive definite to working precision.
    This indicates a degenerate model state (a zero-variance direction,
    a projection onto a larger space) or accumulated numerical error.
    Regularization is left to the caller.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, when the matrix
            factorized but was judged singular
        expected_rank: Expected rank (the matrix dimension)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.expected_rank = expected_rank
