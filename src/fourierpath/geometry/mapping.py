"""Conversion between surface coordinates and the complex plane."""

from dataclasses import replace

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from fourierpath import ConfigurationError
from fourierpath.models import Point


@dataclass(frozen=True)
class CoordinateMapping:
    """Map surface points to complex numbers and back.

    The surface origin is its top-left corner with y pointing down; the
    complex plane is centered on the surface with the imaginary axis pointing
    up. Both axes are normalized by the surface width so that the horizontal
    scale is stable across resizes.

    Attributes:
        width: Surface width
        height: Surface height
        unit_factor: Abstract units per surface width
    """

    width: float
    height: float
    unit_factor: float

    @field_validator("width", "height", "unit_factor")
    @classmethod
    def validate_positive(cls, v: float, info) -> float:
        """Reject zero, negative and NaN sizes."""
        if not v > 0:
            raise ConfigurationError(f"{info.field_name} must be positive, got {v}")
        return v

    @property
    def pixels_per_unit(self) -> float:
        return self.width / self.unit_factor

    def to_abstract(self, point: Point) -> complex:
        """Convert a surface point to a complex number."""
        re = (point.x - self.width / 2) * self.unit_factor / self.width
        im = (self.height / 2 - point.y) * self.unit_factor / self.width
        return complex(re, im)

    def to_surface(self, value: complex) -> Point:
        """Convert a complex number back to a surface point."""
        x = self.width / 2 + value.real * self.pixels_per_unit
        y = self.height / 2 - value.imag * self.pixels_per_unit
        return Point(x, y)

    def scale_to_surface_length(self, length: float) -> float:
        """Convert an abstract length (e.g. a coefficient magnitude)."""
        return length * self.pixels_per_unit

    def with_surface(self, width: float, height: float) -> "CoordinateMapping":
        return replace(self, width=width, height=height)

    def with_unit_factor(self, unit_factor: float) -> "CoordinateMapping":
        return replace(self, unit_factor=unit_factor)
