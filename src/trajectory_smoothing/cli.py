"""Command-line entry point: point table in, smoothed point table out."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .data import load_points, save_points
from .smoothing import InvalidArgument, NumericalFailure, SmoothingConfig, smooth_trajectory
from .smoothing.config import DEFAULT_COEFFICIENT_COUNT, DEFAULT_NOISE_SIGMA, DEGENERACY_OFFSET

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trajectory-smooth",
        description="Smooth a sampled n-dimensional trajectory with chord-length "
                    "parametrized cubic B-splines.",
    )
    parser.add_argument("input", type=str, help="Whitespace-delimited point table, one sample per line")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Output path (default: <input_stem>_smoothed.gpdata)")
    parser.add_argument("--coefficients", "-c", type=int, default=DEFAULT_COEFFICIENT_COUNT,
                        help=f"B-spline basis size (default: {DEFAULT_COEFFICIENT_COUNT})")
    parser.add_argument("--samples", "-n", type=int, default=None,
                        help="Output points per dimension (default: number of input points)")
    parser.add_argument("--noise-sigma", type=float, default=DEFAULT_NOISE_SIGMA,
                        help=f"Regularization noise magnitude (default: {DEFAULT_NOISE_SIGMA})")
    parser.add_argument("--boxcar", "-b", type=int, default=None, metavar="ORDER",
                        help="Boxcar pre-filter each channel with this window size")
    parser.add_argument("--offset", type=float, default=DEGENERACY_OFFSET,
                        help=f"Parameter offset for duplicate points (default: {DEGENERACY_OFFSET})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the noise source")
    parser.add_argument("--workers", "-w", type=int, default=1,
                        help="Fit dimensions in parallel with this many threads")
    parser.add_argument("--plot", "-p", type=str, default=None,
                        help="Save a raw vs. smoothed comparison plot to this path")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for trajectory smoothing."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    input_path = Path(args.input)
    output_path = Path(args.output) if args.output else input_path.with_name(f"{input_path.stem}_smoothed.gpdata")

    config = SmoothingConfig(
        coefficient_count=args.coefficients,
        sample_count=args.samples,
        noise_sigma=args.noise_sigma,
        boxcar_order=args.boxcar,
        degeneracy_offset=args.offset,
        seed=args.seed,
        workers=args.workers,
    )

    try:
        points = load_points(input_path)
        result = smooth_trajectory(points, config)
        save_points(result.points, output_path)
    except (InvalidArgument, NumericalFailure, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if args.plot:
        from .visualize import plot_channels
        plot_channels(points, result, output_path=args.plot)

    print(f"Smoothed trajectory written to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
