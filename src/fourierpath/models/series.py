"""Value types produced by Fourier series reconstruction."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class SeriesTerm:
    """Contribution of one harmonic at a given time.

    Attributes:
        index: Harmonic index (rotational frequency, may be negative)
        coefficient: Estimated complex coefficient c_n
        value: c_n * exp(2*pi*i*n*t) for the requested t
    """

    index: int
    coefficient: complex
    value: complex


@dataclass(frozen=True)
class Epicycle:
    """One rotating vector chained onto the previous partial sum.

    Attributes:
        index: Harmonic index of the term
        center: Partial sum before this term
        radius: Magnitude of the coefficient
        point: Partial sum after this term
    """

    index: int
    center: complex
    radius: float
    point: complex


@dataclass(frozen=True)
class CoefficientRecord:
    """Flattened coefficient for tabular output."""

    index: int
    real: float
    imag: float

    @property
    def magnitude(self) -> float:
        """Absolute value of the coefficient."""
        return math.hypot(self.real, self.imag)

    @property
    def phase(self) -> float:
        """Argument of the coefficient in radians."""
        return math.atan2(self.imag, self.real)

    @classmethod
    def from_complex(cls, index: int, coefficient: complex) -> "CoefficientRecord":
        return cls(index=index, real=coefficient.real, imag=coefficient.imag)
