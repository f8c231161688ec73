"""
Linear algebra kernels for pyassim.

All functions follow these conventions:
    - CPU only, NumPy/SciPy (LAPACK under the hood)
    - Errors are raised immediately with clear messages
    - Failure to factorize is always SingularMatrixError

Submodules:
    spd: Cholesky factorization, inversion and solves for SPD matrices
"""

from pyassim.core.compute.linalg.spd import (
    SPDFactor,
    cholesky_spd,
    invert_spd,
    solve_spd,
)

__all__ = [
    "SPDFactor",
    "cholesky_spd",
    "invert_spd",
    "solve_spd",
]
