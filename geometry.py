import math
import numbers

from dataclasses import dataclass
from typing import Callable

from settings import COORDINATE_MAX, COORDINATE_MIN
from validation import CoordinateRangeError, InvalidInputError


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        for name in ('x', 'y'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name.upper()} should be an integer, but it is: {value!r}")
            if not COORDINATE_MIN <= value <= COORDINATE_MAX:
                raise CoordinateRangeError(
                    f"{name.upper()} should be between {COORDINATE_MIN} and {COORDINATE_MAX}, "
                    f"but it is: {value}"
                )
            # numpy integer scalars are stored as plain ints
            object.__setattr__(self, name, int(value))

    def __lt__(self, other):
        """
        Natural order: by y, ties broken by x.
        """
        if not isinstance(other, Point):
            return NotImplemented
        return self.y < other.y or self.y == other.y and self.x < other.x

    def __str__(self):
        return f"({self.x}, {self.y})"

    def slope_to(self, other: 'Point') -> float:
        """
        Slope of the line through this point and `other`.
        Identical points give -inf, horizontal lines +0.0
        and vertical lines +inf.
        """
        if other is None:
            raise InvalidInputError("Cannot compute slope to a null point.")
        if self.x == other.x and self.y == other.y:
            return -math.inf
        if self.y == other.y:
            return 0.0
        if self.x == other.x:
            return math.inf
        return (other.y - self.y) / (other.x - self.x)

    def slope_order(self) -> Callable[['Point'], float]:
        return slope_order(self)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    def __post_init__(self):
        if self.start is None or self.end is None:
            raise InvalidInputError("Segment endpoints must not be null.")

    def __str__(self):
        return f"{self.start} - {self.end}"


def natural_key(p: Point) -> tuple[int, int]:
    """
    Sort key equivalent to the natural order of points.
    """
    return p.y, p.x


def slope_order(origin: Point) -> Callable[[Point], float]:
    """
    Sort key ordering points by the slope they make with `origin`.
    The origin itself sorts first since its slope to itself is -inf.
    """
    if origin is None:
        raise InvalidInputError("Slope order needs an origin point.")

    def key(p: Point) -> float:
        if p is None:
            raise InvalidInputError("Cannot order a null point by slope.")
        return origin.slope_to(p)

    return key

def collinear(p: Point, q: Point, r: Point, s: Point) -> bool:
    """
    Collinearity check for four points: slopes pq, pr and ps are equal.
    """
    pq = p.slope_to(q)
    return pq == p.slope_to(r) and pq == p.slope_to(s)
