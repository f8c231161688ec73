"""
Moment and natural parameter forms of a Gaussian.

MomentForm holds (center, covariance), the parameterization humans read.
NaturalForm holds (information_vector, precision) with
    precision = covariance⁻¹
    information_vector = precision @ center
the natural parameters of the Gaussian as an exponential family member.
Either form fully determines the other; each conversion costs one SPD
inversion and one matrix-vector product.

Both forms are immutable after construction. Their arrays are private
float64 copies flagged read-only, so no two forms ever share storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyassim.core.exceptions import DimensionError
from pyassim.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_square,
    check_matching_size,
    check_min_size,
)
from pyassim.core.compute.linalg import invert_spd, solve_spd
from pyassim.core.compute.random import RandomState, as_generator, random_spd, random_vector


def _build_pair(
    vector: ArrayLike,
    matrix: ArrayLike,
    names: tuple[str, str],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Validate a (vector, square matrix) pair and freeze private copies."""
    vector_name, matrix_name = names

    v = check_array(vector, vector_name)
    M = check_array(matrix, matrix_name)

    check_1d(v, vector_name)
    check_square(M, matrix_name)
    check_matching_size(v, M, names)
    check_min_size(v, 1, vector_name)
    check_finite(v, vector_name)
    check_finite(M, matrix_name)

    v.setflags(write=False)
    M.setflags(write=False)
    return v, M


@dataclass(frozen=True, eq=False)
class MomentForm:
    """
    Gaussian given by its mean and covariance.

    Construction:
        MomentForm.from_arrays(center, covariance)
        MomentForm.random(n, rng=None)

    The covariance must be positive definite for to_natural() to
    succeed; construction only checks shapes and finiteness.
    """
    _center: NDArray[np.floating[Any]]
    _covariance: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(cls, center: ArrayLike, covariance: ArrayLike) -> MomentForm:
        """
        Build MomentForm from array-likes.

        Raises:
            ValidationError: Non-numeric or non-finite input, or n == 0
            DimensionError: covariance not square, or its order differs
                from len(center)
        """
        c, S = _build_pair(center, covariance, ('center', 'covariance'))
        return cls(_center=c, _covariance=S)

    @classmethod
    def random(cls, n: int, rng: RandomState = None) -> MomentForm:
        """Random center with a random SPD covariance."""
        gen = as_generator(rng)
        return cls.from_arrays(random_vector(n, gen), random_spd(n, gen))

    @property
    def center(self) -> NDArray[np.floating[Any]]:
        """Mean vector (n,)."""
        return self._center

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Covariance matrix (n x n)."""
        return self._covariance

    @property
    def size(self) -> int:
        """Dimensionality n."""
        return self._center.shape[0]

    def to_natural(self) -> NaturalForm:
        """
        Convert to natural parameters.

        Raises:
            SingularMatrixError: If the covariance is not positive definite
        """
        precision = invert_spd(self._covariance, 'covariance')
        return NaturalForm.from_arrays(precision @ self._center, precision)

    def to_moment(self) -> MomentForm:
        """Copy of this form."""
        return MomentForm.from_arrays(self._center, self._covariance)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'center': self._center.tolist(),
            'covariance': self._covariance.tolist(),
        }

    def __repr__(self) -> str:
        return f"MomentForm(size={self.size})"


@dataclass(frozen=True, eq=False)
class NaturalForm:
    """
    Gaussian given by its natural parameters.

    Construction:
        NaturalForm.from_arrays(information_vector, precision)
        NaturalForm.random(n, rng=None)

    The product of two Gaussian densities is, up to normalization, the
    Gaussian whose natural parameters are the sums of the factors'
    natural parameters (see product()).
    """
    _information_vector: NDArray[np.floating[Any]]
    _precision: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(cls, information_vector: ArrayLike, precision: ArrayLike) -> NaturalForm:
        """
        Build NaturalForm from array-likes.

        Raises:
            ValidationError: Non-numeric or non-finite input, or n == 0
            DimensionError: precision not square, or its order differs
                from len(information_vector)
        """
        ab, P = _build_pair(information_vector, precision, ('information_vector', 'precision'))
        return cls(_information_vector=ab, _precision=P)

    @classmethod
    def random(cls, n: int, rng: RandomState = None) -> NaturalForm:
        """Random information vector with a random SPD precision."""
        gen = as_generator(rng)
        return cls.from_arrays(random_vector(n, gen), random_spd(n, gen))

    @property
    def information_vector(self) -> NDArray[np.floating[Any]]:
        """Precision-weighted mean (n,)."""
        return self._information_vector

    @property
    def precision(self) -> NDArray[np.floating[Any]]:
        """Precision matrix, the inverse covariance (n x n)."""
        return self._precision

    @property
    def size(self) -> int:
        """Dimensionality n."""
        return self._information_vector.shape[0]

    def solve_center(self) -> NDArray[np.floating[Any]]:
        """
        Mean vector via an SPD solve, without forming the covariance.

        Raises:
            SingularMatrixError: If the precision is not positive definite
        """
        return solve_spd(self._precision, self._information_vector, 'precision')

    def to_moment(self) -> MomentForm:
        """
        Convert to moment parameters.

        Raises:
            SingularMatrixError: If the precision is not positive definite
        """
        covariance = invert_spd(self._precision, 'precision')
        return MomentForm.from_arrays(covariance @ self._information_vector, covariance)

    def to_natural(self) -> NaturalForm:
        """Copy of this form."""
        return NaturalForm.from_arrays(self._information_vector, self._precision)

    def product(self, other: NaturalForm) -> NaturalForm:
        """
        Natural parameters of the (unnormalized) product of two densities.

        Raises:
            DimensionError: If the sizes differ
        """
        if self.size != other.size:
            raise DimensionError(
                f"Cannot fuse Gaussians of different size: {self.size} and {other.size}"
            )
        return NaturalForm.from_arrays(
            self._information_vector + other._information_vector,
            self._precision + other._precision,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'information_vector': self._information_vector.tolist(),
            'precision': self._precision.tolist(),
        }

    def __repr__(self) -> str:
        return f"NaturalForm(size={self.size})"
