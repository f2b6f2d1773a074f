"""
Writing geometries as SVG shape elements or bare path data.

Each geometry variant has a writer producing a list of lines, one line per
standalone shape; empty shapes produce no line. Collections and
multi-geometries concatenate the lines of their members.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Sequence, final

from svggeom.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
    Triangle,
)

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Shortest text that reads back as `value`; integral values get no decimal point."""
    value = float(value)
    if value.is_integer():
        return '%d' % value
    return repr(value)


def format_coordinate(coord: Coordinate) -> str:
    return f"{format_number(coord[0])} {format_number(coord[1])}"


def format_pair(coord: Coordinate) -> str:
    return f"{format_number(coord[0])},{format_number(coord[1])}"


def path_data(coords: Sequence[Coordinate]) -> str:
    """``Mx yLx y...`` for one run of coordinates."""
    if not coords:
        return ''
    return 'M' + 'L'.join(format_coordinate(c) for c in coords)


def points_data(coords: Iterable[Coordinate]) -> str:
    return ' '.join(format_pair(c) for c in coords)


class GeometryWriter(ABC):
    @abstractmethod
    def generate_elements(self) -> list[str]:
        pass

    @abstractmethod
    def generate_d_strings(self) -> list[str]:
        pass


@final
class PointWriter(GeometryWriter):
    def __init__(self, point: Point):
        self.point = point

    def generate_elements(self) -> list[str]:
        return ['<path d="%s"/>' % path_data([self.point.coord])]

    def generate_d_strings(self) -> list[str]:
        return [path_data([self.point.coord])]


@final
class LineWriter(GeometryWriter):
    def __init__(self, line: Line):
        self.line = line

    def generate_elements(self) -> list[str]:
        (x1, y1), (x2, y2) = self.line.start, self.line.end
        return ['<line x1="%s" y1="%s" x2="%s" y2="%s"/>' % (
            format_number(x1), format_number(y1), format_number(x2), format_number(y2))]

    def generate_d_strings(self) -> list[str]:
        return [path_data([self.line.start, self.line.end])]


@final
class LineStringWriter(GeometryWriter):
    def __init__(self, line_string: LineString):
        self.line_string = line_string

    def generate_elements(self) -> list[str]:
        if not self.line_string.coords:
            return []
        return ['<polyline points="%s"/>' % points_data(self.line_string.coords)]

    def generate_d_strings(self) -> list[str]:
        if not self.line_string.coords:
            return []
        return [path_data(self.line_string.coords)]


@final
class PolygonWriter(GeometryWriter):
    def __init__(self, polygon: Polygon):
        self.polygon = polygon

    def generate_elements(self) -> list[str]:
        return ['<path d="%s"/>' % d for d in self.generate_d_strings()]

    def generate_d_strings(self) -> list[str]:
        if not self.polygon.exterior.coords:
            return []
        rings = (self.polygon.exterior,) + self.polygon.interiors
        # the repeated last point of each ring stands in for a close command
        return [''.join(path_data(ring.coords) for ring in rings)]


@final
class TriangleWriter(GeometryWriter):
    def __init__(self, triangle: Triangle):
        self.triangle = triangle

    def generate_elements(self) -> list[str]:
        t = self.triangle
        return ['<polygon points="%s"/>' % points_data([t.a, t.b, t.c])]

    def generate_d_strings(self) -> list[str]:
        return PolygonWriter(self.triangle.to_polygon()).generate_d_strings()


@final
class RectWriter(GeometryWriter):
    def __init__(self, rect: Rect):
        self.rect = rect

    def generate_elements(self) -> list[str]:
        r = self.rect
        return ['<rect x="%s" y="%s" width="%s" height="%s"/>' % (
            format_number(r.min[0]), format_number(r.min[1]), format_number(r.width), format_number(r.height))]

    def generate_d_strings(self) -> list[str]:
        return PolygonWriter(self.rect.to_polygon()).generate_d_strings()


@final
class MembersWriter(GeometryWriter):
    """Multi-geometries and collections: every member written standalone, in order."""

    def __init__(self, members: Iterable[Geometry]):
        self.members = tuple(members)

    def generate_elements(self) -> list[str]:
        factory = GeometryWriterFactory()
        lines = []
        for member in self.members:
            lines.extend(factory.writer(member).generate_elements())
        return lines

    def generate_d_strings(self) -> list[str]:
        factory = GeometryWriterFactory()
        lines = []
        for member in self.members:
            lines.extend(factory.writer(member).generate_d_strings())
        return lines


@final
class GeometryWriterFactory:
    def writer(self, geometry: Geometry) -> GeometryWriter:
        if isinstance(geometry, Point):
            return PointWriter(geometry)
        elif isinstance(geometry, Line):
            return LineWriter(geometry)
        elif isinstance(geometry, LineString):
            return LineStringWriter(geometry)
        elif isinstance(geometry, Polygon):
            return PolygonWriter(geometry)
        elif isinstance(geometry, Triangle):
            return TriangleWriter(geometry)
        elif isinstance(geometry, Rect):
            return RectWriter(geometry)
        elif isinstance(geometry, MultiPoint):
            return MembersWriter(geometry.points)
        elif isinstance(geometry, MultiLineString):
            return MembersWriter(geometry.line_strings)
        elif isinstance(geometry, MultiPolygon):
            return MembersWriter(geometry.polygons)
        elif isinstance(geometry, GeometryCollection):
            return MembersWriter(geometry.geometries)
        else:
            raise TypeError(f"cannot write {type(geometry).__name__} as SVG")


def geometry_to_svg_elements(geometry: Geometry) -> str:
    """SVG elements for `geometry`, one per line."""
    lines = GeometryWriterFactory().writer(geometry).generate_elements()
    logger.debug("wrote %s as %d elements", type(geometry).__name__, len(lines))
    return "\n".join(lines)


def geometry_to_svg_d_string(geometry: Geometry) -> str:
    """Path data for `geometry`, one line per standalone shape."""
    return "\n".join(GeometryWriterFactory().writer(geometry).generate_d_strings())


to_svg = geometry_to_svg_elements
to_svg_string = geometry_to_svg_d_string
