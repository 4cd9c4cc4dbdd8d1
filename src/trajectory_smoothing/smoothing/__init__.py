from .boxcar import boxcar_filter, filter_channel
from .config import DEGENERACY_OFFSET, SmoothingConfig
from .errors import DataQualityWarning, InvalidArgument, NumericalFailure
from .parametrize import cumulative_distance, parametrize
from .pipeline import SmoothedTrajectory, smooth_trajectory
from .spline_fit import FittedCurve, SplineFitter, fit_bspline

__all__ = [
    "boxcar_filter",
    "filter_channel",
    "DEGENERACY_OFFSET",
    "SmoothingConfig",
    "DataQualityWarning",
    "InvalidArgument",
    "NumericalFailure",
    "cumulative_distance",
    "parametrize",
    "SmoothedTrajectory",
    "smooth_trajectory",
    "FittedCurve",
    "SplineFitter",
    "fit_bspline",
]
