"""Chord-length parametrization and B-spline smoothing of sampled trajectories."""

from .smoothing import (
    DataQualityWarning,
    InvalidArgument,
    NumericalFailure,
    SmoothingConfig,
    boxcar_filter,
    fit_bspline,
    parametrize,
    smooth_trajectory,
)

__version__ = "0.1.0"

__all__ = [
    "DataQualityWarning",
    "InvalidArgument",
    "NumericalFailure",
    "SmoothingConfig",
    "boxcar_filter",
    "fit_bspline",
    "parametrize",
    "smooth_trajectory",
]
