"""SVG path import.

Parses SVG path data with svgpathtools and converts its segments into the
segment types understood by CompositePath. SVG user space already has y
pointing down, so coordinates are used as surface coordinates unchanged.
"""

import logging
import re
from pathlib import Path

from svgpathtools import CubicBezier, Line, QuadraticBezier, parse_path

from fourierpath import PathConstructionError
from fourierpath.geometry.path import CompositePath
from fourierpath.geometry.segments import (
    CubicBezierSegment,
    LinearSegment,
    QuadraticBezierSegment,
    Segment,
)
from fourierpath.models import Point

logger = logging.getLogger(__name__)

_PATH_D_RE = re.compile(
    r"""<path[^>]*\sd\s*=\s*(?:"(?P<dq>[^"]+)"|'(?P<sq>[^']+)')[^>]*/?\s*>""",
    re.IGNORECASE,
)


def _point(value: complex) -> Point:
    return Point(value.real, value.imag)


def _convert_segment(segment) -> Segment:
    if isinstance(segment, Line):
        return LinearSegment(_point(segment.start), _point(segment.end))
    if isinstance(segment, QuadraticBezier):
        return QuadraticBezierSegment(
            _point(segment.start),
            _point(segment.control),
            _point(segment.end),
        )
    if isinstance(segment, CubicBezier):
        return CubicBezierSegment(
            _point(segment.start),
            _point(segment.control1),
            _point(segment.control2),
            _point(segment.end),
        )
    raise PathConstructionError(f"Unsupported path segment type: {type(segment).__name__}")


def path_from_svg(path_data: str) -> CompositePath:
    """Build a composite path from SVG path data.

    Relative commands and shorthand forms (H, V, S, T) are resolved by
    svgpathtools; move commands only relocate the pen.

    Args:
        path_data: Content of an SVG path "d" attribute

    Returns:
        CompositePath: Path with one segment per drawing command

    Raises:
        PathConstructionError: If the data cannot be parsed, contains an
            unsupported command (arcs), or draws nothing
    """
    if not path_data.strip():
        raise PathConstructionError("Path data contains no drawable segments")

    try:
        parsed = parse_path(path_data)
    except Exception as e:
        raise PathConstructionError(f"Failed to parse path data: {e}") from e

    segments = [_convert_segment(segment) for segment in parsed]
    if not segments:
        raise PathConstructionError("Path data contains no drawable segments")

    logger.debug("Imported %d segments from SVG path data", len(segments))
    return CompositePath(segments)


def path_data_from_svg_file(svg_path: Path | str) -> str:
    """Read the "d" attribute of the first <path> element of an SVG file.

    Args:
        svg_path: Path to the .svg file

    Returns:
        str: Raw path data

    Raises:
        PathConstructionError: If the file is missing or holds no path
    """
    svg_path = Path(svg_path)

    if not svg_path.exists():
        raise PathConstructionError(f"SVG file not found: {svg_path}")

    svg_text = svg_path.read_text(encoding="utf-8")
    match = _PATH_D_RE.search(svg_text)
    if match is None:
        raise PathConstructionError(f"No <path> element found in {svg_path}")

    return match.group("dq") or match.group("sq")
