"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def center():
    """Mean of the reference 2D Gaussian."""
    return np.array([1.0, 0.0])


@pytest.fixture
def cov():
    """Covariance of the reference 2D Gaussian."""
    return np.eye(2)


@pytest.fixture
def spd_3x3():
    """Well-conditioned 3x3 SPD matrix with known inverse."""
    return np.array([
        [4.0, 1.0, 0.0],
        [1.0, 3.0, 1.0],
        [0.0, 1.0, 2.0],
    ])
