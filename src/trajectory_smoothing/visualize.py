"""Matplotlib diagnostics comparing raw samples with the smoothed trajectory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .smoothing.pipeline import SmoothedTrajectory

logger = logging.getLogger(__name__)

DEFAULT_LABELS = ("x", "y", "z")


def _labels(n: int, labels: Optional[Sequence[str]]) -> list[str]:
    if labels is not None:
        return list(labels)
    return [DEFAULT_LABELS[d] if d < len(DEFAULT_LABELS) else f"d{d}" for d in range(n)]


def plot_channels(
    points,
    result: SmoothedTrajectory,
    labels: Optional[Sequence[str]] = None,
    output_path: Optional[str | Path] = None,
    show: bool = False,
):
    """Plot every dimension against the chord-length parameter.

    Raw samples are scattered at their parameter values, the fitted channel is
    drawn on the evaluation grid with a one-sigma band from the fit variance.
    A spatial view of the first two dimensions is added when n >= 2.

    Returns:
        The matplotlib Figure.
    """
    raw = np.asarray(points, dtype=float)
    n = result.dimensions
    names = _labels(n, labels)

    n_axes = n + (1 if n >= 2 else 0)
    fig, axes = plt.subplots(n_axes, 1, figsize=(10, 3 * n_axes), squeeze=False)
    axes = axes[:, 0]

    for d, curve in enumerate(result.curves):
        ax = axes[d]
        band = np.sqrt(np.clip(curve.variance, 0.0, None))
        ax.scatter(result.parameters, raw[:, d], c='black', s=8, zorder=5, label='data')
        ax.plot(curve.t, curve.values, label='B-spline', alpha=0.8)
        ax.fill_between(curve.t, curve.values - band, curve.values + band, alpha=0.2)
        ax.set_xlabel('t')
        ax.set_ylabel(names[d])
        ax.set_title(f'{names[d]} vs t')

    if n >= 2:
        ax = axes[-1]
        ax.scatter(raw[:, 0], raw[:, 1], c='black', s=8, zorder=5, label='data')
        ax.plot(result.points[:, 0], result.points[:, 1], label='smoothed', alpha=0.8)
        ax.set_xlabel(names[0])
        ax.set_ylabel(names[1])
        ax.set_title('Spatial Path')
        ax.set_aspect('equal', adjustable='datalim')

    axes[0].legend()
    fig.tight_layout()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150)
        logger.info("Saved plot to %s", output_path)
    if show:
        plt.show()
    return fig
