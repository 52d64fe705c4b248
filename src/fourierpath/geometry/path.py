"""Composite paths made of chained segments."""

import logging
import math
from typing import Iterable, Iterator, Optional

from fourierpath import PathConstructionError
from fourierpath.geometry.segments import CubicBezierSegment, LinearSegment, Segment
from fourierpath.models import Point

logger = logging.getLogger(__name__)


class CompositePath:
    """An ordered, non-empty chain of segments with one global parameter.

    The global parameter t in [0, 1] is split into N equal shares, one per
    segment, whatever the geometric length of each segment. Consecutive
    segments are expected to share end points but this is not checked.
    """

    def __init__(self, segments: Iterable[Segment]):
        """Build a path from its segments.

        Args:
            segments: Segments in drawing order

        Raises:
            PathConstructionError: If no segment is given
        """
        self._segments: tuple[Segment, ...] = tuple(segments)
        if not self._segments:
            raise PathConstructionError("A path needs at least one segment")
        logger.debug("Built path with %d segments", len(self._segments))

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositePath):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"CompositePath({len(self._segments)} segments)"

    @property
    def start(self) -> Point:
        return self._segments[0].start

    @property
    def end(self) -> Point:
        return self._segments[-1].end

    def is_closed(self, tolerance: float = 1e-9) -> bool:
        """Check whether the path ends where it starts.

        Args:
            tolerance: Maximum allowed distance between start and end

        Returns:
            bool: True if the curve loops back onto its start
        """
        return self.start.distance_to(self.end) <= tolerance

    def position_at(self, t: float) -> Optional[Point]:
        """Evaluate the path at global parameter t.

        Args:
            t: Global parameter, normally in [0, 1]

        Returns:
            Optional[Point]: The point on the owning segment, or None when
            t is not a finite number
        """
        n = len(self._segments)
        u = t * n
        if not math.isfinite(u):
            return None
        i = max(0, min(n - 1, math.floor(u)))
        # t == 1 lands on the end of the last segment; other values wrap.
        local = 1.0 if u == n else u % 1
        return self._segments[i].position_at(local)

    def sample(self, n_samples: int) -> list[Point]:
        """Evaluate the path at t = k / n_samples for k in [0, n_samples)."""
        points = (self.position_at(k / n_samples) for k in range(n_samples))
        return [p for p in points if p is not None]


def default_path() -> CompositePath:
    """Demo curve: a cubic arc closed by a straight line."""
    return CompositePath(
        [
            CubicBezierSegment(
                Point(100, 100),
                Point(150, 200),
                Point(200, 150),
                Point(200, 100),
            ),
            LinearSegment(Point(200, 100), Point(100, 100)),
        ]
    )
