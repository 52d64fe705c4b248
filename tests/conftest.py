"""Pytest configuration and fixtures."""

import pytest

from fourierpath.config import reset_config
from fourierpath.geometry import (
    CompositePath,
    CoordinateMapping,
    CubicBezierSegment,
    LinearSegment,
)
from fourierpath.models import Point

# Control point distance for a quarter circle drawn with one cubic.
KAPPA = 0.5522847498


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def line_path():
    """Single segment from (0, 0) to (100, 0)."""
    return CompositePath([LinearSegment(Point(0, 0), Point(100, 0))])


@pytest.fixture
def square_path():
    """Closed square of side 100 drawn with four lines."""
    corners = [Point(50, 50), Point(150, 50), Point(150, 150), Point(50, 150)]
    return CompositePath(
        [LinearSegment(corners[i], corners[(i + 1) % 4]) for i in range(4)]
    )


@pytest.fixture
def circle_path():
    """Circle of radius 50 around (100, 100), four cubic quarters."""
    cx, cy, r = 100.0, 100.0, 50.0
    k = KAPPA * r
    return CompositePath(
        [
            CubicBezierSegment(
                Point(cx + r, cy), Point(cx + r, cy + k), Point(cx + k, cy + r), Point(cx, cy + r)
            ),
            CubicBezierSegment(
                Point(cx, cy + r), Point(cx - k, cy + r), Point(cx - r, cy + k), Point(cx - r, cy)
            ),
            CubicBezierSegment(
                Point(cx - r, cy), Point(cx - r, cy - k), Point(cx - k, cy - r), Point(cx, cy - r)
            ),
            CubicBezierSegment(
                Point(cx, cy - r), Point(cx + k, cy - r), Point(cx + r, cy - k), Point(cx + r, cy)
            ),
        ]
    )


@pytest.fixture
def square_mapping():
    """200 x 200 surface, 5 units per width."""
    return CoordinateMapping(width=200, height=200, unit_factor=5)
