"""
Gaussian distributions in moment and natural form.

Public API:
    Gaussian.from_moment(center, covariance) -> Gaussian
    Gaussian.from_natural(information_vector, precision) -> Gaussian
    fuse(a, b) -> Gaussian
    fuse_into(a, b) -> Gaussian
    ProjectedGaussian(projection, gaussian).reduce() -> Gaussian
"""

from pyassim.gaussian.forms import MomentForm, NaturalForm
from pyassim.gaussian.gaussian import Gaussian, fuse, fuse_into
from pyassim.gaussian.projected import ProjectedGaussian

__all__ = [
    "Gaussian",
    "MomentForm",
    "NaturalForm",
    "ProjectedGaussian",
    "fuse",
    "fuse_into",
]
