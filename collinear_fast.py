import logging

from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from detector import CollinearDetector
from geometry import Point, Segment
from settings import DEFAULT_WORKERS, MIN_RUN_LENGTH

logger = logging.getLogger(__name__)


class FastDetector(CollinearDetector):
    """
    For each origin point p, sorts the other points by the slope they make
    with p and scans the result for runs of equal slope.
    Time complexity: O(n^2*log(n)).
    """

    def __init__(self, points: Sequence[Point] | None, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError(f"workers should be positive, but it is: {workers}")
        self.workers = workers
        super().__init__(points)

    @staticmethod
    def segment_of(group: list[Point]) -> Segment | None:
        """
        Segment for a candidate group [p, q1, ..., qk] of points sharing
        a slope from p, or None if the group is too short or p is not
        the smallest point of the run. Each run is thus reported only once,
        from its own smallest point.
        """
        if len(group) < MIN_RUN_LENGTH:
            return None
        first, last = group[0], group[-1]
        for p in group[1:]:
            if not first < p:
                return None
        for p in group[:-1]:
            if not p < last:
                return None
        return Segment(first, last)

    @classmethod
    def scan_origin(cls, points: list[Point], p: Point) -> list[Segment]:
        """
        Find all segments starting at p.
        Assuming points are sorted in natural order, so the stable sort
        by slope keeps each run in natural order as well.
        """
        by_slope = sorted(points, key=p.slope_order())

        segments = []
        group = [p]
        slope = None
        # by_slope[0] is p itself
        for q in by_slope[1:]:
            q_slope = p.slope_to(q)
            if slope is None or q_slope == slope:
                group.append(q)
            else:
                segment = cls.segment_of(group)
                if segment is not None:
                    segments.append(segment)
                group = [p, q]
            slope = q_slope

        segment = cls.segment_of(group)
        if segment is not None:
            segments.append(segment)
        if segments:
            logger.debug(f"Segments from origin {p}: {len(segments)}")
        return segments

    def _detect(self, points: list[Point]) -> list[Segment]:
        if self.workers == 1:
            per_origin = [self.scan_origin(points, p) for p in points]
        else:
            # origins share only the read-only sorted list
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                per_origin = list(pool.map(lambda p: self.scan_origin(points, p), points))

        return [segment for found in per_origin for segment in found]
