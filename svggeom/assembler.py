"""
Turns traced subpaths into the simplest geometry that describes them.
"""
from __future__ import annotations

import logging
from typing import Sequence

from svggeom.cursor import Subpath
from svggeom.errors import MalformedElement
from svggeom.geometry import Geometry, Line, LineString, Point, Polygon, close_ring

logger = logging.getLogger(__name__)

PATH = 'path'
POLYGON = 'polygon'
POLYLINE = 'polyline'
RECT = 'rect'
LINE = 'line'

KINDS = (PATH, POLYGON, POLYLINE, RECT, LINE)


def _polygon(rings: Sequence[Sequence]) -> Polygon:
    return Polygon(tuple(rings[0]), tuple(tuple(ring) for ring in rings[1:]))


def _single(kind: str, subpaths: Sequence[Subpath]) -> Subpath:
    if len(subpaths) != 1:
        raise MalformedElement(f"<{kind}> must describe a single run of points, got {len(subpaths)}")
    return subpaths[0]


def assemble(kind: str, subpaths: Sequence[Subpath], normalize: bool = True) -> Geometry:
    """
    Build one geometry from the subpaths of an element of the given kind.

    Path rings keep the order they were drawn in; only ``<polygon>``
    points are re-oriented.

    Args:
        kind: Tag name of the element the subpaths come from
        subpaths: Output of trace_path, or a single point run
        normalize: Give ``<polygon>`` rings a clockwise orientation

    Returns:
        A Line, LineString, Point or Polygon
    """
    if not subpaths:
        raise MalformedElement("empty geometry")

    if kind == LINE:
        points = _single(kind, subpaths).points
        if len(points) != 2:
            raise MalformedElement(f"<line> needs exactly 2 points, got {len(points)}")
        geometry = Line(points[0], points[1])
    elif kind == RECT:
        points = _single(kind, subpaths).points
        if len(points) != 5:
            raise MalformedElement(f"<rect> ring needs 5 points, got {len(points)}")
        geometry = _polygon([points])
    elif kind == POLYLINE:
        points = _single(kind, subpaths).points
        if len(points) < 2:
            raise MalformedElement(f"<polyline> needs at least 2 points, got {len(points)}", attribute='points')
        geometry = LineString(points)
    elif kind == POLYGON:
        points = _single(kind, subpaths).points
        if len(points) < 3:
            raise MalformedElement(f"<polygon> needs at least 3 points, got {len(points)}", attribute='points')
        geometry = _polygon([close_ring(tuple(points))])
        if normalize:
            geometry = geometry.normalized()
    elif kind == PATH:
        geometry = _assemble_path(subpaths)
    else:
        raise ValueError(f"unknown element kind {kind!r}")

    logger.debug("assembled <%s> into %s", kind, type(geometry).__name__)
    return geometry


def _assemble_path(subpaths: Sequence[Subpath]) -> Geometry:
    if len(subpaths) == 1:
        subpath = subpaths[0]
        if subpath.is_ring:
            return _polygon([subpath.points])
        if len(subpath) >= 2:
            return LineString(subpath.points)
        return Point(*subpath.points[0])

    # the first subpath is the exterior whether or not it was closed
    for index, subpath in enumerate(subpaths[1:], start=1):
        if not subpath.is_ring:
            raise MalformedElement(f"subpath {index} is not a closed ring and cannot be a polygon hole",
                                   attribute='d')
    return _polygon([subpath.points for subpath in subpaths])


def assemble_rect(x: float, y: float, width: float, height: float) -> Polygon:
    """Clockwise polygon for ``<rect x y width height>``."""
    if width < 0 or height < 0:
        raise MalformedElement(f"<rect> has negative size {width!r} x {height!r}",
                               attribute='width' if width < 0 else 'height')
    ring = [(x, y), (x, y + height), (x + width, y + height), (x + width, y), (x, y)]
    return assemble(RECT, [Subpath(ring, closed=True)])
