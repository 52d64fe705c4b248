"""fourierpath - Approximate closed curves with epicycles.

Samples a composite parametric curve, estimates a truncated complex Fourier
series and reconstructs the curve term by term for animation.
"""

__version__ = "0.1.0"


class FourierPathError(Exception):
    """Base exception for all fourierpath errors."""

    pass


class ConfigurationError(FourierPathError):
    """Raised when configuration or mapping parameters are invalid."""

    pass


class PathConstructionError(FourierPathError):
    """Raised when a curve description cannot be turned into a path."""

    pass


class SeriesNotComputedError(FourierPathError):
    """Raised when series terms are requested before any estimation."""

    pass
