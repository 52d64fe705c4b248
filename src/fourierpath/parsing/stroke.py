"""Turn a free-hand stroke into a closed composite path."""

from typing import Sequence

from fourierpath import PathConstructionError
from fourierpath.geometry.path import CompositePath
from fourierpath.geometry.segments import CubicBezierSegment, LinearSegment
from fourierpath.models import Point


def path_from_stroke(points: Sequence[Point]) -> CompositePath:
    """Convert captured stroke points into cubic segments.

    Points are consumed four at a time (start, control1, control2, end),
    each end doubling as the next start. Leftover points are dropped and a
    straight line from the last captured point back to the first closes the
    curve.

    Args:
        points: Stroke points in capture order

    Returns:
        CompositePath: Closed path following the stroke

    Raises:
        PathConstructionError: If the stroke has no points
    """
    if not points:
        raise PathConstructionError("Cannot build a path from an empty stroke")

    segments = []
    for i in range(1, len(points) - 2, 3):
        segments.append(
            CubicBezierSegment(points[i - 1], points[i], points[i + 1], points[i + 2])
        )
    segments.append(LinearSegment(points[-1], points[0]))

    return CompositePath(segments)
