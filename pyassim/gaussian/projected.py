"""
ProjectedGaussian: a Gaussian observed through a linear map.

Pairs a Gaussian over an n-dimensional space with a projection matrix J
of shape (n, k) and produces the Gaussian induced over the k-dimensional
column space by the congruence transform of the natural parameters:
    information vector:  J' h
    precision:           J' P J

Only k <= n is meaningful. For k > n the reduced precision has rank at
most n < k and cannot be inverted; this is not rejected up front, but
any moment query on the reduced Gaussian raises SingularMatrixError.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyassim.core.exceptions import DimensionError
from pyassim.core.validation import check_array, check_2d, check_finite
from pyassim.gaussian.gaussian import Gaussian


class ProjectedGaussian:
    """
    Gaussian together with a projection onto a reduced coordinate space.

    Construction:
        ProjectedGaussian(projection, gaussian)

    Immutable after construction; the projection and the Gaussian are
    private copies.

    Attributes:
        projection: J, shape (gaussian.size, k)
        gaussian: The held Gaussian
        size: k, the dimensionality of the reduced space
    """

    def __init__(self, projection: ArrayLike, gaussian: Gaussian):
        J = check_array(projection, 'projection')
        check_2d(J, 'projection')
        check_finite(J, 'projection')

        if J.shape[0] != gaussian.size:
            raise DimensionError(
                f"projection has {J.shape[0]} rows but the Gaussian has size "
                f"{gaussian.size}; they must match"
            )

        J.setflags(write=False)
        self._projection = J
        self._gaussian = gaussian.copy()

    @property
    def projection(self) -> NDArray[np.floating[Any]]:
        """Projection matrix J (n x k)."""
        return self._projection

    @property
    def gaussian(self) -> Gaussian:
        """Copy of the held Gaussian."""
        return self._gaussian.copy()

    @property
    def size(self) -> int:
        """Dimensionality k of the reduced space (columns of J)."""
        return self._projection.shape[1]

    def reduce(self) -> Gaussian:
        """
        Gaussian induced over the reduced space, in natural form.

        Returns:
            Gaussian of size k with information vector J' h and
            precision J' P J

        Raises:
            SingularMatrixError: If the held Gaussian is stored in moment
                form and its covariance is not positive definite
        """
        natural = self._gaussian.to_natural()
        J = self._projection
        return Gaussian.from_natural(
            J.T @ natural.information_vector,
            J.T @ natural.precision @ J,
        )

    def __repr__(self) -> str:
        n, k = self._projection.shape
        return f"ProjectedGaussian({n} -> {k})"
