"""
Input validation utilities for pyassim.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyassim.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a fresh float64 array, so the
    result never aliases the caller's storage. Rejects inputs that result
    in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, owned by the caller of this function

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a square matrix.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D or not square
    """
    check_2d(array, name)
    if array.shape[0] != array.shape[1]:
        raise DimensionError(
            f"{name}: matrix is not square, got shape {array.shape}"
        )


def check_matching_size(
    vector: NDArray[np.floating[Any]],
    matrix: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify a vector's length equals the order of a square matrix.

    Args:
        vector: 1D array
        matrix: Square 2D array
        names: (vector name, matrix name) for error messages

    Raises:
        DimensionError: If the sizes are inconsistent
    """
    vector_name, matrix_name = names
    if vector.shape[0] != matrix.shape[0]:
        raise DimensionError(
            f"Sizes of {matrix_name} and {vector_name} are inconsistent: "
            f"{matrix_name} is {matrix.shape[0]}x{matrix.shape[1]}, "
            f"{vector_name} has length {vector.shape[0]}"
        )


def check_min_size(array: NDArray[np.floating[Any]], min_size: int, name: str) -> None:
    """
    Verify array has at least the minimum length along its first axis.

    Args:
        array: Array to check
        min_size: Minimum required length (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array is shorter than min_size
    """
    n = array.shape[0]
    if n < min_size:
        raise ValidationError(
            f"{name}: requires at least {min_size} dimension(s), got {n}"
        )
