"""Whitespace-delimited point tables (gnuplot-style ``.gpdata`` files).

Each line holds one sample, one column per dimension::

    554.2572093389093 -338.6062325459966 -561.6394251506157
    714.7077358417557 -286.02874244378114 -386.06759886106306
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from ..smoothing.errors import InvalidArgument

logger = logging.getLogger(__name__)


def clean(lines: Iterable[str]) -> list[str]:
    """Strip surrounding whitespace and drop blank and ``#`` comment lines."""
    cleaned = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            cleaned.append(line)
    return cleaned


def extract_rows(lines: Iterable[str]) -> np.ndarray:
    """Parse cleaned lines into an (m, n) array, one row per line."""
    rows = []
    for lineno, line in enumerate(lines):
        try:
            rows.append([float(item) for item in line.split()])
        except ValueError as exc:
            raise InvalidArgument(f"Line {lineno}: cannot parse {line!r} as numbers") from exc

    if not rows:
        return np.empty((0, 0), dtype=float)

    width = len(rows[0])
    for lineno, row in enumerate(rows):
        if len(row) != width:
            raise InvalidArgument(f"Line {lineno}: expected {width} columns, got {len(row)}")
    return np.array(rows, dtype=float)


def extract_columns(lines: Iterable[str]) -> np.ndarray:
    """Parse cleaned lines into an (n, m) array, one row per dimension."""
    return extract_rows(lines).T


def load_points(path: str | Path) -> np.ndarray:
    """Read a point table from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidArgument: If the file holds no samples or rows are malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {path}")

    with open(path, "r") as f:
        points = extract_rows(clean(f))

    if points.size == 0:
        raise InvalidArgument(f"No samples found in {path}")
    logger.info("Loaded %d points (%d dimensions) from %s", points.shape[0], points.shape[1], path)
    return points


def save_points(points, path: str | Path, delimiter: str = ", ") -> None:
    """Write points one row per line, values joined by ``delimiter``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    arr = np.atleast_2d(np.asarray(points, dtype=float))
    with open(path, "w") as f:
        for row in arr:
            f.write(delimiter.join(repr(float(v)) for v in row) + "\n")

    logger.info("Points saved to %s (%d rows)", path, len(arr))
