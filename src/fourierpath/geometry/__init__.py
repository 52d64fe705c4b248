"""Curve geometry: segments, composite paths and coordinate mapping."""

from fourierpath.geometry.mapping import CoordinateMapping
from fourierpath.geometry.path import CompositePath, default_path
from fourierpath.geometry.segments import (
    CubicBezierSegment,
    LinearSegment,
    QuadraticBezierSegment,
    Segment,
)

__all__ = [
    "CoordinateMapping",
    "CompositePath",
    "default_path",
    "LinearSegment",
    "QuadraticBezierSegment",
    "CubicBezierSegment",
    "Segment",
]
