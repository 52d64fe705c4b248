"""Fourier series estimation and reconstruction for closed curves.

A closed curve z(t), t in [0, 1), is approximated by

    z(t) ~ sum_n c_n * exp(2*pi*i*n*t)

over the harmonics n = 0, 1, -1, 2, -2, ... The coefficients are estimated
from uniform samples of the curve with a direct discrete sum, and the series
is evaluated term by term so callers can chain the terms as epicycles.
"""

import logging
from typing import Optional

import numpy as np

from fourierpath import ConfigurationError, SeriesNotComputedError
from fourierpath.geometry.mapping import CoordinateMapping
from fourierpath.geometry.path import CompositePath
from fourierpath.models import Epicycle, SeriesTerm

logger = logging.getLogger(__name__)


def harmonic_indices(series_size: int) -> tuple[int, ...]:
    """Enumerate harmonics as 0, 1, -1, 2, -2, ..., S-1, -(S-1).

    Args:
        series_size: Number of harmonics on each side of zero (S)

    Returns:
        tuple[int, ...]: 2*S - 1 indices in rendering order
    """
    indices = [0]
    for i in range(1, series_size):
        indices.append(i)
        indices.append(-i)
    return tuple(indices)


class FourierSeries:
    """Truncated complex Fourier series of a composite path.

    The series starts unconfigured. Each call to compute_coefficients
    replaces the whole coefficient set; nothing is updated incrementally.
    """

    def __init__(self, series_size: int, n_samples: int):
        """Initialize an empty series.

        Args:
            series_size: Number of harmonics on each side of zero
            n_samples: Number of curve samples used per estimation

        Raises:
            ConfigurationError: If either size is not positive
        """
        if series_size < 1:
            raise ConfigurationError(f"series_size must be >= 1, got {series_size}")
        if n_samples < 1:
            raise ConfigurationError(f"n_samples must be >= 1, got {n_samples}")

        self.series_size = series_size
        self.n_samples = n_samples
        self.indices = harmonic_indices(series_size)
        self.coefficients: Optional[list[complex]] = None
        self.generation = 0

    @property
    def is_configured(self) -> bool:
        return self.coefficients is not None

    def compute_coefficients(self, path: CompositePath, mapping: CoordinateMapping) -> list[complex]:
        """Estimate the coefficients of a path.

        Samples the path at t_k = k/M, maps each sample into the complex
        plane and computes c_n = (1/M) * sum_k z_k * exp(-2*pi*i*n*k/M) for
        every harmonic. Samples the path cannot evaluate are skipped; the
        others keep their own k.

        Args:
            path: Curve to approximate
            mapping: Surface to complex plane conversion

        Returns:
            list[complex]: Coefficients aligned with self.indices
        """
        m = self.n_samples
        sample_numbers = []
        samples = []
        for k in range(m):
            point = path.position_at(k / m)
            if point is None:
                continue
            sample_numbers.append(k)
            samples.append(mapping.to_abstract(point))

        if not samples:
            logger.warning("No usable samples out of %d; coefficients are all zero", m)
        elif len(samples) < m:
            logger.debug("Skipped %d of %d samples", m - len(samples), m)

        k = np.asarray(sample_numbers, dtype=np.float64)
        z = np.asarray(samples, dtype=np.complex128)

        coefficients = []
        for n in self.indices:
            kernel = np.exp(-2j * np.pi * n * k / m)
            coefficients.append(complex(np.sum(z * kernel)) / m)

        self.coefficients = coefficients
        self.generation += 1
        logger.debug(
            "Computed %d coefficients from %d samples (generation %d)",
            len(coefficients),
            len(samples),
            self.generation,
        )
        return list(coefficients)

    def _require_coefficients(self) -> list[complex]:
        if self.coefficients is None:
            raise SeriesNotComputedError("Must compute coefficients first")
        return self.coefficients

    def enumerate(self) -> list[tuple[int, complex]]:
        """Pair every harmonic index with its coefficient."""
        return list(zip(self.indices, self._require_coefficients()))

    def get_series_terms(self, t: float) -> list[SeriesTerm]:
        """Evaluate every term of the series at time t.

        Args:
            t: Time value; one period spans t in [0, 1)

        Returns:
            list[SeriesTerm]: One term per harmonic, in enumeration order

        Raises:
            SeriesNotComputedError: If no coefficients were computed yet
        """
        coefficients = self._require_coefficients()
        terms = []
        for n, c in zip(self.indices, coefficients):
            value = complex(c * np.exp(2j * np.pi * n * t))
            terms.append(SeriesTerm(index=n, coefficient=c, value=value))
        return terms

    def partial_sums(self, t: float) -> list[complex]:
        """Running totals of the term values, in enumeration order."""
        sums = []
        total = 0j
        for term in self.get_series_terms(t):
            total += term.value
            sums.append(total)
        return sums

    def reconstruct(self, t: float, n_terms: Optional[int] = None) -> complex:
        """Reconstruct the curve point at time t.

        Args:
            t: Time value
            n_terms: Number of leading terms to use (default: all)

        Returns:
            complex: Sum of the selected term values
        """
        terms = self.get_series_terms(t)
        if n_terms is not None:
            terms = terms[:n_terms]

        result = 0j
        for term in terms:
            result += term.value
        return result

    def get_epicycles(self, t: float, n_terms: Optional[int] = None) -> list[Epicycle]:
        """Get epicycle positions for visualization.

        Args:
            t: Time value
            n_terms: Number of epicycles (default: all)

        Returns:
            list[Epicycle]: Chained circles, each centered on the previous tip
        """
        terms = self.get_series_terms(t)
        if n_terms is not None:
            terms = terms[:n_terms]

        epicycles = []
        center = 0j
        for term in terms:
            point = center + term.value
            epicycles.append(
                Epicycle(
                    index=term.index,
                    center=center,
                    radius=abs(term.coefficient),
                    point=point,
                )
            )
            center = point

        return epicycles
