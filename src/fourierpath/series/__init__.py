"""Fourier series estimation and reconstruction."""

from fourierpath.series.fourier import FourierSeries, harmonic_indices

__all__ = ["FourierSeries", "harmonic_indices"]
