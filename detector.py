import logging

from typing import Sequence

from geometry import Point, Segment, natural_key
from settings import MIN_RUN_LENGTH
from validation import check_not_null, check_points, check_sorted_distinct

logger = logging.getLogger(__name__)


class CollinearDetector:
    """
    Finds every maximal run of MIN_RUN_LENGTH or more collinear points
    and stores it as a segment between the run's extreme points.

    Construction either completes with the final segment set or raises;
    the input sequence is never modified.
    """

    def __init__(self, points: Sequence[Point] | None):
        if points is None or len(points) < MIN_RUN_LENGTH:
            check_points(points)
            self._segments: tuple[Segment, ...] = ()
            return

        check_not_null(points)
        sorted_points = sorted(points, key=natural_key)
        check_sorted_distinct(sorted_points)

        self._segments = tuple(self._detect(sorted_points))
        logger.debug(
            f"{type(self).__name__}: {len(self._segments)} segments among {len(sorted_points)} points"
        )

    def _detect(self, points: list[Point]) -> list[Segment]:
        """
        Find segments in a list of distinct points sorted in natural order.
        """
        raise NotImplementedError

    def number_of_segments(self) -> int:
        return len(self._segments)

    def segments(self) -> list[Segment]:
        return list(self._segments)
