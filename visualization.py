import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point, Segment
from settings import DRAW_SCALE, POINT_COLOR, POINT_SIZE, SEGMENT_COLOR


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        ax = plt.gca()
    ax.scatter(x, y, c=POINT_COLOR, s=POINT_SIZE)


def plot_segments(segments: list[Segment], ax: Axes | None = None):
    if ax is None:
        ax = plt.gca()
    for segment in segments:
        ax.plot(
            [segment.start.x, segment.end.x],
            [segment.start.y, segment.end.y],
            c=SEGMENT_COLOR,
        )


def plot_detection(points: list[Point], segments: list[Segment], ax: Axes | None = None) -> Axes:
    """
    Draw points and the segments found among them on the full coordinate range.
    """
    if ax is None:
        _, ax = plt.subplots()
    ax.set_xlim(*DRAW_SCALE)
    ax.set_ylim(*DRAW_SCALE)
    plot_points(points, ax)
    plot_segments(segments, ax)
    return ax
