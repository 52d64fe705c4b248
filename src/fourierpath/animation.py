"""Epicycle animation driver.

Keeps a path, a coordinate mapping and a Fourier series consistent with the
animation parameters and produces per-frame epicycle geometry in surface
coordinates. Drawing is left to the caller.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import ValidationError

from fourierpath import ConfigurationError
from fourierpath.geometry.mapping import CoordinateMapping
from fourierpath.geometry.path import CompositePath, default_path
from fourierpath.models import AnimationParams, Point
from fourierpath.series.fourier import FourierSeries

# Wall-clock milliseconds per unit of series time at speed 1.
MS_PER_PERIOD = 100000


@dataclass(frozen=True)
class SurfaceEpicycle:
    """An epicycle expressed in surface coordinates."""

    index: int
    center: Point
    radius: float
    tip: Point


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one animation frame.

    Attributes:
        t: Series time of the frame
        epicycles: Chained circles in enumeration order
        tip: End of the last epicycle (the reconstructed point)
        trail: Recent tip positions, oldest first
    """

    t: float
    epicycles: list[SurfaceEpicycle]
    tip: Point
    trail: list[Point]


class FourierAnimator:
    """Drive an epicycle animation for a single curve.

    Any change to the path, the series parameters or the surface rebuilds
    the affected objects and recomputes all coefficients.
    """

    def __init__(
        self,
        width: float,
        height: float,
        params: Optional[AnimationParams] = None,
        path: Optional[CompositePath] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the animator and compute the first coefficient set.

        Args:
            width: Surface width
            height: Surface height
            params: Animation parameters (defaults if None)
            path: Curve to animate (demo curve if None)
            clock: Monotonic clock returning seconds
        """
        self.params = params or AnimationParams()
        self.mapping = CoordinateMapping(width, height, self.params.unit_factor)
        self.series = FourierSeries(self.params.series_size, self.params.n_samples)
        self.path = path or default_path()
        self._clock = clock
        self.trail: deque[Point] = deque(maxlen=self.params.trail_capacity)
        self.start_ms = 0.0

        self.recompute()
        self.reset()

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def recompute(self) -> None:
        """Recompute the coefficients from the current path and mapping."""
        self.series.compute_coefficients(self.path, self.mapping)

    def reset(self) -> None:
        """Restart the clock and wipe the trail."""
        self.start_ms = self._now_ms()
        self.trail.clear()

    def set_path(self, path: CompositePath) -> None:
        """Replace the animated curve."""
        self.path = path
        self.recompute()
        self.reset()

    def update_params(self, **changes) -> AnimationParams:
        """Apply new animation parameters.

        Args:
            **changes: AnimationParams fields to change

        Returns:
            AnimationParams: The parameters now in effect

        Raises:
            ConfigurationError: If the new parameters are invalid
        """
        try:
            params = AnimationParams.model_validate({**self.params.model_dump(), **changes})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid animation parameters: {e}") from e

        self.params = params
        self.mapping = self.mapping.with_unit_factor(params.unit_factor)
        self.series = FourierSeries(params.series_size, params.n_samples)
        self.trail = deque(maxlen=params.trail_capacity)
        self.recompute()
        self.reset()
        return params

    def resize(self, width: float, height: float) -> None:
        """Adapt to a new surface size."""
        self.mapping = self.mapping.with_surface(width, height)
        self.recompute()
        self.reset()

    def time_at(self, elapsed_ms: float) -> float:
        """Convert elapsed wall-clock milliseconds to series time."""
        return elapsed_ms / MS_PER_PERIOD * self.params.speed

    def frame(self, t: float) -> Frame:
        """Build the frame at series time t and extend the trail.

        Args:
            t: Series time

        Returns:
            Frame: Epicycles, tip and trail in surface coordinates
        """
        epicycles = [
            SurfaceEpicycle(
                index=e.index,
                center=self.mapping.to_surface(e.center),
                radius=self.mapping.scale_to_surface_length(e.radius),
                tip=self.mapping.to_surface(e.point),
            )
            for e in self.series.get_epicycles(t)
        ]
        tip = epicycles[-1].tip
        self.trail.append(tip)
        return Frame(t=t, epicycles=epicycles, tip=tip, trail=list(self.trail))

    def tick(self, now_ms: Optional[float] = None) -> Frame:
        """Build the frame for the current wall-clock time."""
        if now_ms is None:
            now_ms = self._now_ms()
        return self.frame(self.time_at(now_ms - self.start_ms))
