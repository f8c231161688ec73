"""
Random fixtures for Gaussians.

Used by the random constructors of the Gaussian types and by the test
suite to generate arbitrary well-posed inputs. Not part of any numeric
algorithm.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


RandomState = int | np.random.Generator | None


def as_generator(rng: RandomState) -> np.random.Generator:
    """Generator for a seed, an existing Generator, or fresh entropy."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_vector(n: int, rng: RandomState = None) -> NDArray[np.floating[Any]]:
    """
    Vector of n standard normal entries.

    Args:
        n: Length
        rng: Seed or Generator; None draws fresh entropy
    """
    return as_generator(rng).standard_normal(n)


def random_spd(n: int, rng: RandomState = None) -> NDArray[np.floating[Any]]:
    """
    Random symmetric positive definite n x n matrix.

    Built as A A' / n + I with A standard normal, so the smallest
    eigenvalue is at least 1 and the condition number stays moderate
    for the dimensions used in state estimation.

    Args:
        n: Order of the matrix
        rng: Seed or Generator; None draws fresh entropy
    """
    A = as_generator(rng).standard_normal((n, n))
    M = A @ A.T / max(n, 1) + np.eye(n)
    return 0.5 * (M + M.T)
