"""Tunables for the smoothing pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Empirically chosen for motion-capture data; not derived.
DEFAULT_COEFFICIENT_COUNT = 45
DEFAULT_NOISE_SIGMA = 0.1
DEGENERACY_OFFSET = 40.0
DEFAULT_BOXCAR_ORDER = 5

SPLINE_DEGREE = 3  # cubic, i.e. order 4


@dataclass
class SmoothingConfig:
    """Configuration for parametrization and B-spline smoothing."""

    # Size of the cubic B-spline basis (resolution of the fit)
    coefficient_count: int = DEFAULT_COEFFICIENT_COUNT

    # Points on the resampled output grid; None -> one per input point
    sample_count: Optional[int] = None

    # Std-dev of the injected regularization noise, also used as sample weight
    noise_sigma: float = DEFAULT_NOISE_SIGMA

    # Boxcar pre-filter window applied to every channel; None or 1 disables it
    boxcar_order: Optional[int] = None

    # Added to a parameter value that would repeat its predecessor
    degeneracy_offset: float = DEGENERACY_OFFSET

    # Seed for the noise source; None draws fresh entropy
    seed: Optional[int] = None

    # Per-dimension fits run in a thread pool when > 1
    workers: int = 1
