"""Parametric curve segments.

Every segment maps a local parameter t in [0, 1] to a surface point and
reproduces its start point at t=0 and its end point at t=1 exactly. Values of
t outside [0, 1] simply extrapolate the defining polynomial.
"""

from dataclasses import dataclass
from typing import Union

from fourierpath.models import Point


@dataclass(frozen=True)
class LinearSegment:
    """Straight line from start to end."""

    start: Point
    end: Point

    def position_at(self, t: float) -> Point:
        # start + t * (end - start) in blend form; t=1 yields end exactly.
        return (1 - t) * self.start + t * self.end


@dataclass(frozen=True)
class QuadraticBezierSegment:
    """Quadratic Bézier curve with a single control point."""

    start: Point
    control: Point
    end: Point

    def position_at(self, t: float) -> Point:
        a = (1 - t) ** 2
        b = 2 * (1 - t) * t
        c = t**2
        return a * self.start + b * self.control + c * self.end


@dataclass(frozen=True)
class CubicBezierSegment:
    """Cubic Bézier curve with two control points."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    def position_at(self, t: float) -> Point:
        a = (1 - t) ** 3
        b = 3 * (1 - t) ** 2 * t
        c = 3 * (1 - t) * t**2
        d = t**3
        return a * self.start + b * self.control1 + c * self.control2 + d * self.end


Segment = Union[LinearSegment, QuadraticBezierSegment, CubicBezierSegment]
