"""
Shared compute infrastructure for pyassim.

Submodules:
    tolerances: Numerical tolerance tiers and conditioning thresholds
    linalg: SPD linear algebra kernels
    random: Random vectors and SPD matrices for fixtures
"""

from pyassim.core.compute.linalg import (
    SPDFactor,
    cholesky_spd,
    invert_spd,
    solve_spd,
)
from pyassim.core.compute.random import random_spd, random_vector

__all__ = [
    # SPD kernels
    "SPDFactor",
    "cholesky_spd",
    "invert_spd",
    "solve_spd",
    # Random fixtures
    "random_spd",
    "random_vector",
]
