"""Boxcar (moving-average FIR) pre-filter for scalar time series."""

from __future__ import annotations

import logging

import numpy as np

from .config import DEFAULT_BOXCAR_ORDER
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


def boxcar_filter(series, order: int = DEFAULT_BOXCAR_ORDER) -> np.ndarray:
    """Smooth a ``(time, value)`` series with a uniform sliding window.

    Output sample ``n`` is the mean of the ``order`` values starting at ``n``.
    Towards the tail fewer values remain, so the window shrinks one sample at a
    time down to a single value. Times are copied through unchanged.

    Args:
        series: Sequence of ``(time, value)`` pairs, or an (m, 2) array.
        order: Window size, at least 1. ``order=1`` returns the input values.

    Returns:
        (m, 2) float array of ``(time, averaged_value)`` rows.

    Raises:
        InvalidArgument: If ``series`` or ``order`` is missing, or ``order`` < 1.
    """
    if series is None:
        raise InvalidArgument("Input series cannot be None")
    if order is None:
        raise InvalidArgument("Filter order cannot be None")
    if int(order) != order or order < 1:
        raise InvalidArgument(f"Filter order must be a positive integer, got {order!r}")
    order = int(order)

    data = np.asarray(series, dtype=float)
    if data.size == 0:
        return np.empty((0, 2), dtype=float)
    if data.ndim != 2 or data.shape[1] != 2:
        raise InvalidArgument(f"Expected (time, value) pairs, got array of shape {data.shape}")

    times = data[:, 0]
    averaged = _window_means(data[:, 1], order)

    logger.debug("Boxcar order %d over %d samples", order, len(averaged))
    return np.column_stack([times, averaged])


def filter_channel(values, order: int = DEFAULT_BOXCAR_ORDER) -> np.ndarray:
    """Boxcar a bare channel, using sample indices as times."""
    if values is None:
        raise InvalidArgument("Input channel cannot be None")
    values = np.asarray(values, dtype=float)
    series = np.column_stack([np.arange(len(values), dtype=float), values])
    return boxcar_filter(series, order)[:, 1]


def _window_means(values: np.ndarray, order: int) -> np.ndarray:
    """Mean of ``values[n:n + order]`` for every n, clipped at the tail."""
    return np.array([np.mean(values[n:n + order]) for n in range(len(values))])
