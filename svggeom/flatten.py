from __future__ import annotations

from typing import final

from svgelements import Arc, CubicBezier, PathSegment, QuadraticBezier

from svggeom.geometry import Coordinate


@final
class Flattener:
    """Replaces a curve segment by `samples` points on it.

    The segment is evaluated at t = i/samples for i = 1 .. samples-1 and the
    exact end point is appended, so the start point (already on the subpath)
    is never repeated.
    """

    def __init__(self, samples: int = 100):
        if samples < 1:
            raise ValueError(f"samples must be positive, got {samples!r}")
        self.samples = samples

    def cubic(self, start: Coordinate, control1: Coordinate, control2: Coordinate,
              end: Coordinate) -> list[Coordinate]:
        return self.flatten(CubicBezier(start, control1, control2, end), end)

    def quadratic(self, start: Coordinate, control: Coordinate, end: Coordinate) -> list[Coordinate]:
        return self.flatten(QuadraticBezier(start, control, end), end)

    def arc(self, start: Coordinate, rx: float, ry: float, rotation: float,
            large_arc: bool, sweep: bool, end: Coordinate) -> list[Coordinate]:
        # rotation is in degrees, as in path data
        return self.flatten(Arc(start, abs(rx), abs(ry), rotation, large_arc, sweep, end), end)

    def flatten(self, segment: PathSegment, end: Coordinate) -> list[Coordinate]:
        points = []
        for i in range(1, self.samples):
            p = segment.point(i / self.samples)
            points.append((float(p.x), float(p.y)))
        points.append((float(end[0]), float(end[1])))
        return points
