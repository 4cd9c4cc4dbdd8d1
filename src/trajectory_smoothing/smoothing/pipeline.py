"""Trajectory smoothing: parametrize once, fit every dimension, recombine."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .boxcar import filter_channel
from .config import SmoothingConfig
from .errors import InvalidArgument
from .parametrize import as_point_array, parametrize
from .spline_fit import FittedCurve, SplineFitter

logger = logging.getLogger(__name__)


@dataclass
class SmoothedTrajectory:
    """Smoothed n-dimensional trajectory on a shared evaluation grid."""

    t: np.ndarray           # (k,) evaluation grid
    points: np.ndarray      # (k, n) smoothed coordinates
    parameters: np.ndarray  # (m,) chord-length parameter of the input points
    curves: list[FittedCurve]

    @property
    def dimensions(self) -> int:
        return self.points.shape[1]

    def __len__(self) -> int:
        return len(self.points)


def channel_rngs(seed: Optional[int], count: int) -> list[np.random.Generator]:
    """Independent random streams, one per channel, derived from ``seed``."""
    children = np.random.SeedSequence(seed).spawn(count)
    return [np.random.default_rng(child) for child in children]


def prefilter(points: np.ndarray, order: Optional[int]) -> np.ndarray:
    """Apply the boxcar filter to every column; ``None`` or 1 leaves points as-is."""
    if order is None or order == 1:
        return points
    return np.column_stack([filter_channel(points[:, d], order) for d in range(points.shape[1])])


def smooth_trajectory(points, config: Optional[SmoothingConfig] = None) -> SmoothedTrajectory:
    """Smooth an ordered (m, n) point sequence into k points per dimension.

    Any failing dimension aborts the call; the exception propagates unchanged.

    Args:
        points: Ordered n-dimensional samples. Not modified.
        config: Smoothing settings (defaults when omitted).

    Returns:
        SmoothedTrajectory with ``config.sample_count`` rows (m when unset).
    """
    config = config or SmoothingConfig()
    if config.workers is None or config.workers < 1:
        raise InvalidArgument(f"workers must be at least 1, got {config.workers!r}")

    arr = as_point_array(points)
    m, n = arr.shape
    logger.info("Smoothing %d points in %d dimensions", m, n)

    arr = prefilter(arr, config.boxcar_order)
    parameters = parametrize(arr, offset=config.degeneracy_offset)

    fitters = [SplineFitter.from_config(config, rng=rng) for rng in channel_rngs(config.seed, n)]
    channels = [arr[:, d] for d in range(n)]

    if config.workers > 1 and n > 1:
        with ThreadPoolExecutor(max_workers=min(config.workers, n)) as pool:
            futures = [pool.submit(f.fit, parameters, ch) for f, ch in zip(fitters, channels)]
            curves = [future.result() for future in futures]
    else:
        curves = [f.fit(parameters, ch) for f, ch in zip(fitters, channels)]

    smoothed = np.column_stack([curve.values for curve in curves])
    logger.info("Smoothed trajectory: %d points, parameter range [0, %.3f]", len(smoothed), parameters[-1])

    return SmoothedTrajectory(
        t=curves[0].t,
        points=smoothed,
        parameters=parameters,
        curves=curves,
    )
