"""
Symmetric positive definite (SPD) kernels.

Provides Cholesky factorization, inversion, and linear solves for the
covariance and precision matrices of Gaussians. Every failure to
factorize is reported as SingularMatrixError; no regularization is
attempted.

Conditioning is estimated with LAPACK ?pocon from the Cholesky factor and
the 1-norm of the input, an O(n^2) step after the O(n^3) factorization.
A rank-deficient matrix can factorize with a tiny positive last pivot,
so a successful factorization alone does not imply nonsingularity.
"""

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
import scipy.linalg as sla
from numpy.typing import NDArray

from pyassim.core.exceptions import DimensionError, SingularMatrixError
from pyassim.core.validation import check_square
from pyassim.core.compute.tolerances import WARN_RCOND, singular_rcond


@dataclass(frozen=True)
class SPDFactor:
    """
    Cholesky factorization of an SPD matrix.

    Attributes:
        L: Lower triangular factor with A = L L'
        rcond: Estimated reciprocal 1-norm condition number
    """
    L: NDArray[np.floating[Any]]
    rcond: float

    @property
    def size(self) -> int:
        """Order of the factorized matrix."""
        return self.L.shape[0]

    @property
    def condition_number(self) -> float:
        """Estimated 1-norm condition number."""
        return 1.0 / self.rcond

    def solve(self, b: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Solve A x = b using the factorization."""
        if b.shape[0] != self.size:
            raise DimensionError(
                f"Right-hand side has length {b.shape[0]}, "
                f"expected {self.size} to match the factorized matrix"
            )
        return sla.cho_solve((self.L, True), b, check_finite=False)

    def inverse(self) -> NDArray[np.floating[Any]]:
        """A⁻¹, symmetrized to remove rounding asymmetry."""
        inv = self.solve(np.eye(self.size))
        return 0.5 * (inv + inv.T)


def _estimate_rcond(
    A: NDArray[np.floating[Any]],
    L: NDArray[np.floating[Any]],
) -> float:
    """Reciprocal 1-norm condition number of A from its lower Cholesky factor."""
    # A is read through its lower triangle, like the factorization
    symmetric = np.tril(A) + np.tril(A, -1).T
    anorm = float(np.abs(symmetric).sum(axis=0).max())
    if not anorm > 0.0:
        return 0.0

    pocon, = sla.get_lapack_funcs(('pocon',), (L,))
    rcond, info = pocon(L, anorm, uplo='L')
    if info < 0:
        raise ValueError(f"illegal value in argument {-info} of LAPACK pocon")
    return float(rcond)


def cholesky_spd(A: NDArray[np.floating[Any]], name: str = 'matrix') -> SPDFactor:
    """
    Cholesky factorization with singularity and conditioning checks.

    Only the lower triangle of A is read.

    Args:
        A: Symmetric positive definite matrix (n x n)
        name: Matrix name for error messages

    Returns:
        SPDFactor

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If A is not positive definite to working
            precision

    Warns:
        RuntimeWarning: If A is ill-conditioned but still factorizable
    """
    check_square(A, name)
    n = A.shape[0]

    try:
        L = sla.cholesky(A, lower=True, check_finite=False)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"{name} is not positive definite ({e})",
            matrix_name=name,
            expected_rank=n,
        ) from e

    rcond = _estimate_rcond(A, L) if n > 0 else 1.0

    if not rcond > singular_rcond(n, A.dtype):
        condition_number = np.inf if rcond == 0.0 else 1.0 / rcond
        raise SingularMatrixError(
            f"{name} is singular to working precision "
            f"(estimated condition number {condition_number:.3g})",
            matrix_name=name,
            condition_number=condition_number,
            expected_rank=n,
        )

    if rcond < WARN_RCOND:
        warnings.warn(
            f"{name} is ill-conditioned (estimated condition number "
            f"{1.0 / rcond:.3g}); results may be inaccurate",
            RuntimeWarning,
            stacklevel=2,
        )

    return SPDFactor(L=L, rcond=rcond)


def invert_spd(A: NDArray[np.floating[Any]], name: str = 'matrix') -> NDArray[np.floating[Any]]:
    """
    Invert an SPD matrix via its Cholesky factor.

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If A is not positive definite
    """
    return cholesky_spd(A, name).inverse()


def solve_spd(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b for SPD A without forming A⁻¹.

    Raises:
        DimensionError: If A is not square or b has the wrong length
        SingularMatrixError: If A is not positive definite
    """
    if A.ndim == 2 and b.shape[0] != A.shape[0]:
        raise DimensionError(
            f"Right-hand side has length {b.shape[0]}, "
            f"expected {A.shape[0]} to match {name}"
        )
    return cholesky_spd(A, name).solve(b)
