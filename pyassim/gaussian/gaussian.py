"""
Gaussian: a normal distribution held in either moment or natural form.

A Gaussian stores exactly one of MomentForm / NaturalForm and converts
only when an operation needs the other one:
    - center, covariance: moment quantities, computed on demand from the
      natural form (never cached)
    - fuse, fuse_into: natural-parameter addition

Which form is stored is a performance characteristic only; no public
accessor depends on it.

Fusion of two independent Gaussian beliefs about the same state is the
(unnormalized) product of their densities, which is Gaussian with
    precision          = P_a + P_b
    information vector = h_a + h_b
In moment form the same update is the nonlinear Kalman-style combination;
in natural form it is a sum.
"""

from __future__ import annotations

from typing import Any
from numpy.typing import ArrayLike, NDArray
import numpy as np

from pyassim.core.exceptions import DimensionError
from pyassim.core.compute.linalg import invert_spd
from pyassim.core.compute.random import RandomState
from pyassim.gaussian.forms import MomentForm, NaturalForm


class Gaussian:
    """
    Normal distribution over an n-dimensional state.

    Construction:
        Gaussian.from_moment(center, covariance)
        Gaussian.from_natural(information_vector, precision)
        Gaussian(form)                        # MomentForm or NaturalForm
        Gaussian.random(n, rng=None)

    Fusion:
        fuse(a, b)  or  a * b                 # new Gaussian
        fuse_into(a, b)  or  a *= b           # updates a in place

    A Gaussian owns its parameter arrays; no two instances share storage.
    """

    def __init__(self, form: MomentForm | NaturalForm):
        if isinstance(form, MomentForm):
            self._form = form.to_moment()
        elif isinstance(form, NaturalForm):
            self._form = form.to_natural()
        else:
            raise TypeError(
                f"Gaussian requires a MomentForm or NaturalForm, got {type(form).__name__}"
            )

    @classmethod
    def _from_form(cls, form: MomentForm | NaturalForm) -> Gaussian:
        """Wrap a freshly built form without copying it again."""
        g = cls.__new__(cls)
        g._form = form
        return g

    @classmethod
    def from_moment(cls, center: ArrayLike, covariance: ArrayLike) -> Gaussian:
        """
        Gaussian from mean and covariance. No conversion is performed.

        Raises:
            ValidationError: Non-numeric or non-finite input
            DimensionError: Inconsistent shapes
        """
        return cls._from_form(MomentForm.from_arrays(center, covariance))

    @classmethod
    def from_natural(cls, information_vector: ArrayLike, precision: ArrayLike) -> Gaussian:
        """
        Gaussian from information vector and precision. No conversion is performed.

        Raises:
            ValidationError: Non-numeric or non-finite input
            DimensionError: Inconsistent shapes
        """
        return cls._from_form(NaturalForm.from_arrays(information_vector, precision))

    @classmethod
    def random(cls, n: int, rng: RandomState = None) -> Gaussian:
        """Random Gaussian with SPD covariance, in moment form."""
        return cls._from_form(MomentForm.random(n, rng))

    @property
    def size(self) -> int:
        """Dimensionality n."""
        return self._form.size

    @property
    def center(self) -> NDArray[np.floating[Any]]:
        """
        Mean vector (n,).

        Computed by an SPD solve when the natural form is stored.

        Raises:
            SingularMatrixError: If the stored precision is not positive definite
        """
        if isinstance(self._form, MomentForm):
            return self._form.center.copy()
        return self._form.solve_center()

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """
        Covariance matrix (n x n).

        Computed by an SPD inversion when the natural form is stored.

        Raises:
            SingularMatrixError: If the stored precision is not positive definite
        """
        if isinstance(self._form, MomentForm):
            return self._form.covariance.copy()
        return invert_spd(self._form.precision, 'precision')

    def to_moment(self) -> MomentForm:
        """Moment parameters as a new MomentForm."""
        return self._form.to_moment()

    def to_natural(self) -> NaturalForm:
        """Natural parameters as a new NaturalForm."""
        return self._form.to_natural()

    def as_moment(self) -> Gaussian:
        """Store the moment form from now on. Returns self."""
        if isinstance(self._form, NaturalForm):
            self._form = self._form.to_moment()
        return self

    def as_natural(self) -> Gaussian:
        """Store the natural form from now on. Returns self."""
        if isinstance(self._form, MomentForm):
            self._form = self._form.to_natural()
        return self

    def copy(self) -> Gaussian:
        """Independent Gaussian with the same parameters and stored form."""
        return Gaussian(self._form)

    def _natural_view(self) -> NaturalForm:
        # stored forms are read-only
        if isinstance(self._form, NaturalForm):
            return self._form
        return self._form.to_natural()

    def __mul__(self, other: Gaussian) -> Gaussian:
        if not isinstance(other, Gaussian):
            return NotImplemented
        return fuse(self, other)

    def __imul__(self, other: Gaussian) -> Gaussian:
        if not isinstance(other, Gaussian):
            return NotImplemented
        return fuse_into(self, other)

    def to_dict(self) -> dict[str, Any]:
        """Moment parameters as a dictionary for serialization."""
        return self.to_moment().to_dict()

    def __repr__(self) -> str:
        return f"Gaussian(size={self.size})"


def _check_same_size(a: Gaussian, b: Gaussian) -> None:
    if a.size != b.size:
        raise DimensionError(
            f"Cannot fuse Gaussians of different size: {a.size} and {b.size}"
        )


def fuse(a: Gaussian, b: Gaussian) -> Gaussian:
    """
    Fuse two independent Gaussian beliefs about the same state.

    The result is the Gaussian proportional to the product of the two
    densities, stored in natural form. Neither operand is modified.

    Args:
        a: First Gaussian
        b: Second Gaussian, same size as a

    Returns:
        New Gaussian with summed natural parameters

    Raises:
        DimensionError: If a.size != b.size (checked before any conversion)
        SingularMatrixError: If an operand stored in moment form has a
            covariance that is not positive definite
    """
    _check_same_size(a, b)
    return Gaussian._from_form(a._natural_view().product(b._natural_view()))


def fuse_into(a: Gaussian, b: Gaussian) -> Gaussian:
    """
    In-place fuse: replace a with fuse(a, b).

    The new parameters are computed completely before a is touched, so a
    is unchanged if any step raises.

    Returns:
        a

    Raises:
        DimensionError: If a.size != b.size
        SingularMatrixError: As for fuse()
    """
    _check_same_size(a, b)
    fused = a._natural_view().product(b._natural_view())
    a._form = fused
    return a
