"""Regularized weighted least-squares cubic B-spline fitting.

One channel y(t) is fitted against the shared chord-length parameter. The
observations are jittered with Gaussian noise of std ``noise_sigma`` and each
sample carries weight ``noise_sigma``; this turns what would otherwise be a
near-interpolation into a smoothing fit. The fitted spline is then resampled
on a uniform grid over ``[0, max(t)]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.interpolate import BSpline

from .config import DEFAULT_COEFFICIENT_COUNT, DEFAULT_NOISE_SIGMA, SPLINE_DEGREE, SmoothingConfig
from .errors import InvalidArgument, NumericalFailure

logger = logging.getLogger(__name__)

MIN_COEFFICIENTS = SPLINE_DEGREE + 1


@dataclass
class FittedCurve:
    """Result of fitting one channel."""

    t: np.ndarray            # evaluation grid
    values: np.ndarray       # fitted value at each grid point
    variance: np.ndarray     # estimated variance of each fitted value
    coefficients: np.ndarray
    covariance: np.ndarray
    knots: np.ndarray
    chisq: float

    def as_pairs(self) -> np.ndarray:
        """Return the curve as an (k, 2) array of ``(t, value)`` rows."""
        return np.column_stack([self.t, self.values])

    def spline(self) -> BSpline:
        """The fitted spline as a callable scipy object."""
        return BSpline(self.knots, self.coefficients, SPLINE_DEGREE)


def uniform_knots(t_max: float, coefficient_count: int) -> np.ndarray:
    """Clamped cubic knot vector with ``coefficient_count - 2`` uniform breakpoints on [0, t_max]."""
    breakpoints = np.linspace(0.0, t_max, coefficient_count - 2)
    return np.concatenate((
        np.zeros(SPLINE_DEGREE),
        breakpoints,
        np.full(SPLINE_DEGREE, t_max),
    ))


class SplineFitter:
    """Fits a smoothing cubic B-spline to one channel at a time.

    Each call builds and discards its own basis, so one fitter per thread (each
    with its own ``rng``) can be used concurrently.
    """

    def __init__(
        self,
        coefficient_count: int = DEFAULT_COEFFICIENT_COUNT,
        sample_count: Optional[int] = None,
        noise_sigma: float = DEFAULT_NOISE_SIGMA,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if coefficient_count is None or coefficient_count < MIN_COEFFICIENTS:
            raise InvalidArgument(
                f"coefficient_count must be at least {MIN_COEFFICIENTS}, got {coefficient_count!r}"
            )
        if sample_count is not None and sample_count < 1:
            raise InvalidArgument(f"sample_count must be at least 1, got {sample_count!r}")
        if noise_sigma is None or noise_sigma < 0:
            raise InvalidArgument(f"noise_sigma must be non-negative, got {noise_sigma!r}")

        self.coefficient_count = int(coefficient_count)
        self.sample_count = sample_count
        self.noise_sigma = float(noise_sigma)
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_config(cls, config: SmoothingConfig, rng: Optional[np.random.Generator] = None) -> "SplineFitter":
        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(
            coefficient_count=config.coefficient_count,
            sample_count=config.sample_count,
            noise_sigma=config.noise_sigma,
            rng=rng,
        )

    def fit(self, parameters, values) -> FittedCurve:
        """Fit ``values`` against ``parameters`` and resample the result.

        Args:
            parameters: Non-negative parameter value per sample (length m).
            values: Observed channel value per sample (length m).

        Returns:
            FittedCurve with ``sample_count`` points (m when unset).

        Raises:
            InvalidArgument: Mismatched lengths, or a basis size that is not
                smaller than the number of samples.
            NumericalFailure: The design matrix is rank deficient.
        """
        x, y = self._validate(parameters, values)
        m = len(x)
        p = self.coefficient_count
        t_max = float(x.max())

        knots = uniform_knots(t_max, p)

        y_obs = y + self.rng.normal(0.0, self.noise_sigma, size=m)
        # zero sigma would zero every weight; fall back to an unweighted fit
        sigma = self.noise_sigma if self.noise_sigma > 0 else 1.0
        weights = np.full(m, sigma)

        design = BSpline.design_matrix(x, knots, SPLINE_DEGREE).toarray()
        coefficients, covariance, chisq, rank = _weighted_lstsq(design, weights, y_obs)
        logger.debug("B-spline fit: %d samples, %d coefficients, rank %d, chisq %.6g", m, p, rank, chisq)

        n_samples = self.sample_count if self.sample_count is not None else m
        t_eval = np.linspace(0.0, t_max, n_samples)
        basis = BSpline.design_matrix(t_eval, knots, SPLINE_DEGREE).toarray()
        fitted = basis @ coefficients
        variance = np.einsum("ij,jk,ik->i", basis, covariance, basis)

        return FittedCurve(
            t=t_eval,
            values=fitted,
            variance=variance,
            coefficients=coefficients,
            covariance=covariance,
            knots=knots,
            chisq=chisq,
        )

    def _validate(self, parameters, values) -> tuple[np.ndarray, np.ndarray]:
        if parameters is None or values is None:
            raise InvalidArgument("Parameters and values are required")
        x = np.asarray(parameters, dtype=float).ravel()
        y = np.asarray(values, dtype=float).ravel()
        if len(x) != len(y):
            raise InvalidArgument(f"Got {len(x)} parameters but {len(y)} values")
        if self.coefficient_count >= len(x):
            raise InvalidArgument(
                f"coefficient_count ({self.coefficient_count}) must be smaller than "
                f"the number of samples ({len(x)})"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise InvalidArgument("Parameters and values must be finite")
        if x.min() < 0.0:
            raise InvalidArgument(f"Parameters must be non-negative, got minimum {x.min()!r}")
        if x.max() <= 0.0:
            raise InvalidArgument("Parameters must span a non-empty range [0, max(t)]")
        return x, y


def fit_bspline(
    parameters,
    values,
    config: Optional[SmoothingConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> FittedCurve:
    """Fit one channel using the settings in ``config``."""
    config = config or SmoothingConfig()
    return SplineFitter.from_config(config, rng=rng).fit(parameters, values)


def _weighted_lstsq(design: np.ndarray, weights: np.ndarray, y: np.ndarray):
    """Minimize sum w_i (y_i - X_i c)^2 via SVD.

    Returns ``(c, cov, chisq, rank)`` with ``cov = (X^T W X)^-1``.
    """
    sw = np.sqrt(weights)
    a = design * sw[:, np.newaxis]
    b = y * sw

    try:
        u, s, vt = np.linalg.svd(a, full_matrices=False)
    except np.linalg.LinAlgError as exc:
        raise NumericalFailure(f"SVD of the design matrix did not converge: {exc}") from exc

    tol = s.max(initial=0.0) * max(a.shape) * np.finfo(float).eps
    rank = int(np.sum(s > tol))
    if rank < a.shape[1]:
        raise NumericalFailure(
            f"Design matrix is rank deficient (rank {rank} < {a.shape[1]} coefficients); "
            "the parameters do not cover every spline interval"
        )

    coefficients = vt.T @ ((u.T @ b) / s)
    covariance = (vt.T / s ** 2) @ vt
    if not np.all(np.isfinite(coefficients)):
        raise NumericalFailure("Least-squares solve produced non-finite coefficients")

    residual = b - a @ coefficients
    chisq = float(residual @ residual)
    return coefficients, covariance, chisq, rank
