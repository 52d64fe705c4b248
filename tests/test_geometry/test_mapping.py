"""Tests for CoordinateMapping."""

import pytest
from pydantic import ValidationError

from fourierpath import ConfigurationError
from fourierpath.geometry import CoordinateMapping
from fourierpath.models import Point


class TestCoordinateMapping:
    """Tests for surface <-> complex conversion."""

    def test_center_maps_to_origin(self):
        mapping = CoordinateMapping(width=800, height=600, unit_factor=5)
        assert mapping.to_abstract(Point(400, 300)) == 0j

    def test_axes_normalized_by_width(self):
        mapping = CoordinateMapping(width=800, height=600, unit_factor=4)
        # 100 pixels is 0.5 units on both axes; y points up in the plane.
        assert mapping.to_abstract(Point(500, 200)) == pytest.approx(0.5 + 0.5j)

    def test_to_surface(self):
        mapping = CoordinateMapping(width=200, height=100, unit_factor=5)
        p = mapping.to_surface(1 - 1j)
        assert p.x == pytest.approx(140)
        assert p.y == pytest.approx(90)

    @pytest.mark.parametrize(
        "width,height,unit_factor",
        [(200, 200, 5), (1920, 1080, 3.7), (1, 1000, 0.01), (333.3, 12.5, 250)],
    )
    @pytest.mark.parametrize(
        "point",
        [Point(0, 0), Point(-50.5, 1200.25), Point(199.9, 0.001), Point(1e4, -1e4)],
    )
    def test_round_trip(self, width, height, unit_factor, point):
        mapping = CoordinateMapping(width=width, height=height, unit_factor=unit_factor)
        back = mapping.to_surface(mapping.to_abstract(point))
        assert back.x == pytest.approx(point.x, abs=1e-9)
        assert back.y == pytest.approx(point.y, abs=1e-9)

    def test_non_numeric_size_rejected(self):
        with pytest.raises(ValidationError):
            CoordinateMapping(width="wide", height=100, unit_factor=5)

    def test_with_unit_factor_revalidates(self):
        mapping = CoordinateMapping(width=200, height=200, unit_factor=5)
        with pytest.raises(ConfigurationError, match="unit_factor must be positive"):
            mapping.with_unit_factor(0)

    def test_scale_to_surface_length(self):
        mapping = CoordinateMapping(width=200, height=200, unit_factor=5)
        assert mapping.scale_to_surface_length(1.25) == pytest.approx(50)

    def test_with_surface_creates_new_mapping(self):
        mapping = CoordinateMapping(width=200, height=200, unit_factor=5)
        resized = mapping.with_surface(400, 300)
        assert resized == CoordinateMapping(400, 300, 5)
        assert mapping.width == 200

    @pytest.mark.parametrize(
        "width,height,unit_factor",
        [(0, 100, 5), (100, -1, 5), (100, 100, 0), (100, 100, float("nan"))],
    )
    def test_rejects_non_positive(self, width, height, unit_factor):
        with pytest.raises(ConfigurationError, match="must be positive"):
            CoordinateMapping(width=width, height=height, unit_factor=unit_factor)
