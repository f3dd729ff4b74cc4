"""
Input validation for point sets.

Both detectors run the same precondition checks before doing any work:
the point sequence must exist, contain no absent entries and no two
value-equal points. All failures are raised immediately.
"""

import logging
from typing import Any, Sequence

logger = logging.getLogger(__name__)


class PointSetError(ValueError):
    """Base class for invalid point input."""
    pass


class InvalidInputError(PointSetError):
    """The point sequence (or a required argument) is absent."""
    pass


class NullPointError(PointSetError):
    """An entry of the point sequence is absent."""

    def __init__(self, index: int):
        super().__init__(f"Null point in array at index: {index}")
        self.index = index


class DuplicatePointError(PointSetError):
    """Two value-equal points are present in the set."""

    def __init__(self, point: Any):
        super().__init__(f"Same point: {point}")
        self.point = point


class CoordinateRangeError(PointSetError):
    """A coordinate lies outside the accepted range."""
    pass


def check_not_null(points: Sequence | None) -> None:
    """
    Check that the sequence exists and has no absent entries.

    Raises:
        InvalidInputError: if `points` is None
        NullPointError: for the first None entry
    """
    if points is None:
        raise InvalidInputError("Invalid argument.")
    for i, p in enumerate(points):
        if p is None:
            raise NullPointError(i)


def check_points(points: Sequence | None) -> None:
    """
    Full validation of an unsorted point sequence.
    Duplicates are searched among all pairs, O(n^2).
    """
    check_not_null(points)
    for i, p in enumerate(points):
        for q in points[i + 1:]:
            if p == q:
                raise DuplicatePointError(p)
    logger.debug(f"Validated {len(points)} points")


def check_sorted_distinct(points: Sequence) -> None:
    """
    Duplicate check for a sequence already sorted in natural order,
    where equal points are necessarily adjacent.
    """
    for p, q in zip(points, points[1:]):
        if p == q:
            raise DuplicatePointError(p)
