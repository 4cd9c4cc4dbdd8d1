"""Chord-length parametrization of n-dimensional point sequences.

A spline needs strictly increasing abscissae, which a trajectory x(t), y(t),
z(t), ... does not provide directly. Each point is assigned the cumulative
Euclidean distance travelled so far:

    t_0     = 0
    t_{i+1} = t_i + ||p_{i+1} - p_i||

and every dimension is then fitted independently against that shared axis.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Sequence

import numpy as np

from .config import DEGENERACY_OFFSET
from .errors import DataQualityWarning, InvalidArgument

logger = logging.getLogger(__name__)


def as_point_array(points) -> np.ndarray:
    """Validate a point sequence and return it as an (m, n) float array."""
    if points is None:
        raise InvalidArgument("Point sequence cannot be None")
    try:
        arr = np.asarray(points, dtype=float)
    except ValueError as exc:
        # ragged rows cannot be stacked
        raise InvalidArgument(f"Points must all have the same dimensionality: {exc}") from exc

    if arr.ndim == 1 and arr.size > 0:
        arr = arr[:, np.newaxis]
    if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidArgument(f"Expected a non-empty (points, dimensions) table, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument("Point sequence contains NaN or infinite values")
    return arr


def cumulative_distance(t_prev: float, point_prev: Sequence[float], point_next: Sequence[float]) -> float:
    """Advance ``t_prev`` by the Euclidean distance between two n-tuples."""
    if len(point_prev) != len(point_next):
        raise InvalidArgument(
            f"Dimension mismatch: {len(point_prev)} vs {len(point_next)} components"
        )
    squared = sum((b - a) ** 2 for a, b in zip(point_prev, point_next))
    return t_prev + math.sqrt(squared)


def parametrize(points, offset: float = DEGENERACY_OFFSET) -> np.ndarray:
    """Compute the chord-length parameter for every point.

    When a step leaves ``t`` unchanged (coincident points), ``offset`` is added
    so the sequence keeps increasing, and a :class:`DataQualityWarning` is
    issued naming the index and both tuples. Later values accumulate on top of
    the corrected one.

    Args:
        points: Ordered (m, n) sequence of n-dimensional tuples. Never mutated.
        offset: Correction added to a repeated parameter value.

    Returns:
        Array of m parameter values starting at 0.

    Raises:
        InvalidArgument: On empty, ragged or non-finite input.
    """
    arr = as_point_array(points)
    m = arr.shape[0]

    t = np.zeros(m, dtype=float)
    for i in range(1, m):
        t[i] = cumulative_distance(t[i - 1], arr[i - 1], arr[i])

        if t[i] == t[i - 1]:
            t[i] += offset
            _report_duplicate(i - 1, t[i - 1], arr[i - 1], arr[i])

    return t


def _report_duplicate(index: int, t_value: float, previous: np.ndarray, current: np.ndarray) -> None:
    prev_str = ", ".join(repr(float(v)) for v in previous)
    cur_str = ", ".join(repr(float(v)) for v in current)
    message = (
        f"[{index}] duplicate parameter t[{index}] = t[{index + 1}] = {t_value!r}; "
        f"input[{index}] = ({prev_str}), input[{index + 1}] = ({cur_str}). "
        "Offsetting the later point to keep the parametrization monotonic."
    )
    logger.warning("Malformed or duplicate data? %s", message)
    warnings.warn(
        DataQualityWarning(message, index=index + 1, previous=tuple(previous), current=tuple(current)),
        stacklevel=3,
    )
