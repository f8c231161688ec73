"""
Randomized stability tests.

Round trips and the fusion identity on random SPD matrices of dimension
1 to 20, with tolerances scaled by the condition number.
"""

import numpy as np
import pytest

from pyassim import Gaussian, MomentForm, NaturalForm, fuse
from pyassim.core.compute.tolerances import ROUND_TRIP


SEEDS = range(60)


def _dimension(seed: int) -> int:
    return 1 + seed % 20


@pytest.mark.parametrize("seed", SEEDS)
def test_moment_round_trip(seed):
    m = MomentForm.random(_dimension(seed), rng=seed)
    tol = ROUND_TRIP.scaled(np.linalg.cond(m.covariance))
    back = m.to_natural().to_moment()
    np.testing.assert_allclose(back.center, m.center, rtol=tol.rtol, atol=tol.atol)
    np.testing.assert_allclose(back.covariance, m.covariance, rtol=tol.rtol, atol=tol.atol)


@pytest.mark.parametrize("seed", SEEDS)
def test_natural_round_trip(seed):
    e = NaturalForm.random(_dimension(seed), rng=seed)
    tol = ROUND_TRIP.scaled(np.linalg.cond(e.precision))
    back = e.to_moment().to_natural()
    np.testing.assert_allclose(
        back.information_vector, e.information_vector, rtol=tol.rtol, atol=tol.atol
    )
    np.testing.assert_allclose(back.precision, e.precision, rtol=tol.rtol, atol=tol.atol)


@pytest.mark.parametrize("seed", SEEDS)
def test_fusion_identity(seed):
    g = Gaussian.random(_dimension(seed), rng=seed)
    tol = ROUND_TRIP.scaled(np.linalg.cond(g.covariance))
    fused = fuse(g, g)
    np.testing.assert_allclose(fused.center, g.center, rtol=tol.rtol, atol=tol.atol)
    np.testing.assert_allclose(
        fused.covariance, 0.5 * g.covariance, rtol=tol.rtol, atol=tol.atol
    )
