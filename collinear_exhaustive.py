import logging

from detector import CollinearDetector
from geometry import Point, Segment, collinear, natural_key

logger = logging.getLogger(__name__)


class ExhaustiveDetector(CollinearDetector):
    """
    Examines 4 points at a time and checks whether they lie on one line,
    comparing the slopes from the first point to the other three.
    Time complexity: O(n^4). Used as a reference for FastDetector.
    """

    @staticmethod
    def is_maximal(points: list[Point], start: Point, end: Point) -> bool:
        """
        Checks that no point of the set extends the line through
        `start` and `end` beyond either endpoint.
        """
        k = start.slope_to(end)
        for t in points:
            if (t < start or end < t) and start.slope_to(t) == k:
                return False
        return True

    def _detect(self, points: list[Point]) -> list[Segment]:
        n = len(points)
        # a run of k points holds several quadruples sharing its extremes
        found: dict[Segment, None] = {}
        for i in range(n):
            p = points[i]
            for j in range(i + 1, n):
                q = points[j]
                pq = p.slope_to(q)
                for k in range(j + 1, n):
                    r = points[k]
                    if pq != p.slope_to(r):
                        continue
                    for m in range(k + 1, n):
                        s = points[m]
                        if not collinear(p, q, r, s):
                            continue
                        quadruple = sorted((p, q, r, s), key=natural_key)
                        start, end = quadruple[0], quadruple[-1]
                        if not self.is_maximal(points, start, end):
                            continue
                        segment = Segment(start, end)
                        if segment not in found:
                            logger.debug(f"Collinear quadruple {p} {q} {r} {s}: {segment}")
                            found[segment] = None
        return list(found)
