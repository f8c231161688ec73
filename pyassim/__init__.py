"""
pyassim: Gaussian building blocks for data assimilation.

Gaussians as exponential family members, with lossless conversion
between moment (mean, covariance) and natural (information vector,
precision) parameters, fusion of independent estimates, and projection
through linear observation operators.

Submodules:
    gaussian: Gaussian, MomentForm, NaturalForm, ProjectedGaussian, fusion
    core: Exceptions, validation, SPD kernels
"""

__version__ = "0.1.0"

from pyassim.gaussian import (
    Gaussian,
    MomentForm,
    NaturalForm,
    ProjectedGaussian,
    fuse,
    fuse_into,
)

__all__ = [
    "__version__",
    "Gaussian",
    "MomentForm",
    "NaturalForm",
    "ProjectedGaussian",
    "fuse",
    "fuse_into",
]
