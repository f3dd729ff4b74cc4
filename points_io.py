"""
Reading point sets from text.

The format is an integer count N followed by N pairs of integer
coordinates, all separated by whitespace:

    4
    10000 0
    0 10000
    3000 7000
    7000 3000
"""

import logging
from pathlib import Path

import numpy as np

from geometry import Point
from validation import PointSetError

logger = logging.getLogger(__name__)


class PointFileError(PointSetError):
    """Malformed point set text."""
    pass


def parse_points(text: str) -> list[Point]:
    tokens = text.split()
    if not tokens:
        raise PointFileError("Missing point count")
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as e:
        raise PointFileError(f"Non-integer value in point data: {e}") from e

    n = int(values[0])
    if n < 0:
        raise PointFileError(f"Point count should be non-negative, but it is: {n}")
    coords = values[1:]
    if len(coords) != 2 * n:
        raise PointFileError(f"Expected {2 * n} coordinates for {n} points, got {len(coords)}")

    points = [Point(x, y) for x, y in coords.reshape(n, 2)]
    logger.debug(f"Parsed {len(points)} points")
    return points


def read_points(path: str | Path) -> list[Point]:
    path = Path(path)
    logger.info(f"Reading points from {path}")
    return parse_points(path.read_text())
