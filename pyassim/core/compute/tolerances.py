"""
Tolerance tiers and conditioning thresholds.

Defines the singularity and ill-conditioning thresholds of the SPD kernel
and the precision expected when comparing Gaussians that went through a
moment -> natural -> moment round trip.

Used by the SPD kernel and by the test suite.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def scaled(self, condition_number: float) -> 'ToleranceTier':
        """Widen the tier linearly in the condition number (never narrower)."""
        factor = max(1.0, float(condition_number))
        return ToleranceTier(
            rtol=self.rtol * factor,
            atol=self.atol * factor,
            name=f'{self.name}_scaled',
            description=f'{self.description} (scaled by cond={factor:.3g})',
        )


# Two O(n^3) inversions between the compared values
ROUND_TRIP = ToleranceTier(
    rtol=1e-7,
    atol=1e-7,
    name='round_trip',
    description='Moment/natural round trip in double precision',
)

# Reciprocal condition number below which the SPD kernel warns.
# At rcond = 1e-12 roughly four significant digits survive an inversion.
WARN_RCOND = 1e-12


def singular_rcond(n: int, dtype=np.float64) -> float:
    """
    Reciprocal condition number at or below which an SPD matrix is singular.

    A rank-deficient matrix assembled in floating point has a smallest
    eigenvalue of order n * eps * ||A||, so its estimated rcond is a
    small multiple of n * eps. The threshold sits two orders of magnitude
    above eps and grows with n.
    """
    return 100.0 * max(n, 1) * float(np.finfo(dtype).eps)
