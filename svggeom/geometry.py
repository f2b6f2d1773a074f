from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

Coordinate = Tuple[float, float]


def coordinate(value) -> Coordinate:
    x, y = value
    return (float(x), float(y))


def coordinates(values: Iterable) -> Tuple[Coordinate, ...]:
    return tuple(coordinate(v) for v in values)


def close_ring(coords: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
    if coords and coords[0] != coords[-1]:
        return coords + (coords[0],)
    return coords


def signed_area(coords: Tuple[Coordinate, ...]) -> float:
    """Shoelace area of a closed ring; negative when the ring is clockwise."""
    area = 0.0
    for (x0, y0), (x1, y1) in zip(coords, coords[1:]):
        area += x0 * y1 - x1 * y0
    return area / 2.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @property
    def coord(self) -> Coordinate:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    start: Coordinate
    end: Coordinate

    def __post_init__(self):
        object.__setattr__(self, 'start', coordinate(self.start))
        object.__setattr__(self, 'end', coordinate(self.end))


@dataclass(frozen=True)
class LineString:
    coords: Tuple[Coordinate, ...]

    def __post_init__(self):
        object.__setattr__(self, 'coords', coordinates(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self):
        return iter(self.coords)

    @property
    def is_closed(self) -> bool:
        return len(self.coords) > 1 and self.coords[0] == self.coords[-1]


@dataclass(frozen=True)
class Polygon:
    """Exterior ring plus ordered holes. Rings are closed on construction."""
    exterior: LineString
    interiors: Tuple[LineString, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'exterior', _ring(self.exterior))
        object.__setattr__(self, 'interiors', tuple(_ring(r) for r in self.interiors))

    def normalized(self) -> Polygon:
        """Clockwise exterior, counter-clockwise interiors."""
        exterior = self.exterior.coords
        if signed_area(exterior) > 0:
            exterior = exterior[::-1]
        interiors = []
        for ring in self.interiors:
            coords = ring.coords
            if signed_area(coords) < 0:
                coords = coords[::-1]
            interiors.append(LineString(coords))
        return Polygon(LineString(exterior), tuple(interiors))


def _ring(value) -> LineString:
    coords = value.coords if isinstance(value, LineString) else coordinates(value)
    return LineString(close_ring(coords))


@dataclass(frozen=True)
class Rect:
    min: Coordinate
    max: Coordinate

    def __post_init__(self):
        (x0, y0), (x1, y1) = coordinate(self.min), coordinate(self.max)
        object.__setattr__(self, 'min', (min(x0, x1), min(y0, y1)))
        object.__setattr__(self, 'max', (max(x0, x1), max(y0, y1)))

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]

    def to_polygon(self) -> Polygon:
        (x0, y0), (x1, y1) = self.min, self.max
        return Polygon(LineString([(x0, y0), (x0, y1), (x1, y1), (x1, y0), (x0, y0)]))


@dataclass(frozen=True)
class Triangle:
    a: Coordinate
    b: Coordinate
    c: Coordinate

    def __post_init__(self):
        for name in ('a', 'b', 'c'):
            object.__setattr__(self, name, coordinate(getattr(self, name)))

    def to_polygon(self) -> Polygon:
        return Polygon(LineString([self.a, self.b, self.c, self.a]))


@dataclass(frozen=True)
class MultiPoint:
    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))


@dataclass(frozen=True)
class MultiLineString:
    line_strings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'line_strings', tuple(self.line_strings))


@dataclass(frozen=True)
class MultiPolygon:
    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'polygons', tuple(self.polygons))


@dataclass(frozen=True)
class GeometryCollection:
    geometries: Tuple["Geometry", ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'geometries', tuple(self.geometries))

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self):
        return iter(self.geometries)


Geometry = Union[
    Point,
    Line,
    LineString,
    Polygon,
    Rect,
    Triangle,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]
