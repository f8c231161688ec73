"""
Tests for the SPD linear algebra kernels.

Validates:
    - Inversion and solves agree with NumPy reference results
    - Non-positive-definite and singular inputs raise SingularMatrixError
    - Ill-conditioned inputs warn but succeed
    - Shape errors raise DimensionError before factorization
"""

import warnings

import numpy as np
import pytest

from pyassim.core.exceptions import DimensionError, SingularMatrixError
from pyassim.core.compute.linalg import (
    SPDFactor,
    cholesky_spd,
    invert_spd,
    solve_spd,
)


class TestCholeskySPD:
    """cholesky_spd factorizes and estimates conditioning."""

    def test_factor_reconstructs_matrix(self, spd_3x3):
        factor = cholesky_spd(spd_3x3)
        assert isinstance(factor, SPDFactor)
        np.testing.assert_allclose(factor.L @ factor.L.T, spd_3x3, atol=1e-12)

    def test_factor_is_lower_triangular(self, spd_3x3):
        factor = cholesky_spd(spd_3x3)
        np.testing.assert_array_equal(np.triu(factor.L, k=1), 0.0)

    def test_condition_number_of_diagonal(self):
        factor = cholesky_spd(np.diag([4.0, 1.0]))
        assert factor.size == 2
        assert factor.rcond == pytest.approx(0.25)
        assert factor.condition_number == pytest.approx(4.0)

    def test_condition_number_matches_numpy(self, spd_3x3):
        factor = cholesky_spd(spd_3x3)
        exact = np.linalg.cond(spd_3x3, 1)
        assert exact / 3 <= factor.condition_number <= exact * (1 + 1e-10)

    def test_identity_is_perfectly_conditioned(self):
        factor = cholesky_spd(np.eye(5))
        assert factor.rcond == pytest.approx(1.0)

    def test_reads_lower_triangle_only(self):
        symmetric = np.array([[4.0, 1.0], [1.0, 3.0]])
        lower_only = np.array([[4.0, 999.0], [1.0, 3.0]])
        np.testing.assert_allclose(
            invert_spd(lower_only), invert_spd(symmetric), atol=1e-14
        )


class TestInvertSPD:
    """invert_spd returns a symmetric inverse."""

    def test_matches_numpy_inverse(self, spd_3x3):
        np.testing.assert_allclose(
            invert_spd(spd_3x3), np.linalg.inv(spd_3x3), rtol=1e-12, atol=1e-14
        )

    def test_inverse_is_exactly_symmetric(self, spd_3x3):
        inv = invert_spd(spd_3x3)
        np.testing.assert_array_equal(inv, inv.T)

    def test_identity(self):
        np.testing.assert_allclose(invert_spd(np.eye(4)), np.eye(4))

    def test_1x1(self):
        np.testing.assert_allclose(invert_spd(np.array([[4.0]])), [[0.25]])

    def test_input_not_modified(self, spd_3x3):
        before = spd_3x3.copy()
        invert_spd(spd_3x3)
        np.testing.assert_array_equal(spd_3x3, before)


class TestSolveSPD:
    """solve_spd solves A x = b without forming A⁻¹."""

    def test_matches_numpy_solve(self, spd_3x3):
        b = np.array([1.0, -2.0, 0.5])
        np.testing.assert_allclose(
            solve_spd(spd_3x3, b), np.linalg.solve(spd_3x3, b), rtol=1e-12
        )

    def test_matrix_right_hand_side(self, spd_3x3):
        B = np.arange(6.0).reshape(3, 2)
        np.testing.assert_allclose(
            solve_spd(spd_3x3, B), np.linalg.solve(spd_3x3, B), rtol=1e-12, atol=1e-14
        )

    def test_rhs_length_mismatch(self, spd_3x3):
        with pytest.raises(DimensionError, match="length 2"):
            solve_spd(spd_3x3, np.ones(2))


class TestSingularInputs:
    """Non-PD and singular matrices raise SingularMatrixError."""

    def test_negative_definite(self):
        with pytest.raises(SingularMatrixError, match="not positive definite"):
            invert_spd(-np.eye(2), name="covariance")

    def test_indefinite(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            invert_spd(A, name="precision")
        assert exc_info.value.matrix_name == "precision"
        assert exc_info.value.expected_rank == 2

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            invert_spd(np.zeros((3, 3)))

    def test_rank_deficient_psd(self):
        with pytest.raises(SingularMatrixError):
            invert_spd(np.diag([1.0, 1.0, 0.0]))

    def test_numerically_singular(self):
        """Factorizable in floating point, but below the singularity threshold."""
        with pytest.raises(SingularMatrixError, match="singular to working precision") as exc_info:
            solve_spd(np.diag([1.0, 1e-20]), np.ones(2), name="precision")
        assert exc_info.value.condition_number == pytest.approx(1e20)

    @pytest.mark.parametrize("n, rank", [(3, 2), (5, 3), (8, 5)])
    def test_dense_rank_deficient(self, n, rank):
        """B B' with B of rank < n never factorizes as nonsingular."""
        rng = np.random.default_rng(n)
        missed = []
        for trial in range(200):
            B = rng.standard_normal((n, rank))
            try:
                invert_spd(B @ B.T, name="precision")
            except SingularMatrixError:
                continue
            missed.append(trial)
        assert missed == []

    def test_low_level_error_is_chained(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            invert_spd(-np.eye(2))
        assert isinstance(exc_info.value.__cause__, np.linalg.LinAlgError)


class TestConditioningWarning:
    """Ill-conditioned but factorizable matrices warn."""

    def test_ill_conditioned_warns(self):
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            inv = invert_spd(np.diag([1.0, 1e-13]), name="covariance")
        np.testing.assert_allclose(inv, np.diag([1.0, 1e13]))

    def test_well_conditioned_does_not_warn(self, spd_3x3):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            invert_spd(spd_3x3)


class TestShapeErrors:
    """Shape problems are reported as DimensionError."""

    def test_non_square(self):
        with pytest.raises(DimensionError, match="not square"):
            invert_spd(np.ones((2, 3)))

    def test_vector(self):
        with pytest.raises(DimensionError):
            cholesky_spd(np.ones(3))
