from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Union

from svggeom.commands import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    SmoothCubicCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)
from svggeom.flatten import Flattener
from svggeom.geometry import Coordinate

logger = logging.getLogger(__name__)

CUBIC = 'cubic'
QUADRATIC = 'quadratic'


@dataclass
class Subpath:
    points: list[Coordinate] = field(default_factory=list)
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_ring(self) -> bool:
        """Closed by a close path command or by returning to its first point."""
        if self.closed:
            return True
        return len(self.points) >= 4 and self.points[0] == self.points[-1]


class PathCursor:
    """Walks path commands and collects the subpaths they draw."""

    def __init__(self, flattener: Union[Flattener, None] = None):
        self.flattener = flattener if flattener is not None else Flattener()
        self.current_point: Coordinate = (0.0, 0.0)
        self.subpath_start: Coordinate = (0.0, 0.0)
        self.last_control_point: Union[Coordinate, None] = None
        # curve family of last_control_point, CUBIC or QUADRATIC
        self.last_curve: Union[str, None] = None
        self.subpath: Union[Subpath, None] = None
        self.subpaths: list[Subpath] = []

    def execute(self, command: PathCommand) -> None:
        if isinstance(command, MoveTo):
            self.move_to(command)
        elif isinstance(command, LineTo):
            self.line_to(self.resolve(command, 0))
        elif isinstance(command, HorizontalLineTo):
            x = command.operands[0]
            if command.relative:
                x += self.current_point[0]
            self.line_to((x, self.current_point[1]))
        elif isinstance(command, VerticalLineTo):
            y = command.operands[0]
            if command.relative:
                y += self.current_point[1]
            self.line_to((self.current_point[0], y))
        elif isinstance(command, CubicCurveTo):
            self.cubic_to(self.resolve(command, 0), self.resolve(command, 2), self.resolve(command, 4))
        elif isinstance(command, SmoothCubicCurveTo):
            self.cubic_to(self.reflected(CUBIC), self.resolve(command, 0), self.resolve(command, 2))
        elif isinstance(command, QuadraticCurveTo):
            self.quadratic_to(self.resolve(command, 0), self.resolve(command, 2))
        elif isinstance(command, SmoothQuadraticCurveTo):
            self.quadratic_to(self.reflected(QUADRATIC), self.resolve(command, 0))
        elif isinstance(command, ArcTo):
            self.arc_to(command)
        elif isinstance(command, ClosePath):
            self.close()
        else:
            raise TypeError(f"not a path command: {command!r}")

    def resolve(self, command: PathCommand, index: int) -> Coordinate:
        """Absolute coordinate of the operand pair starting at `index`."""
        x, y = command.operands[index], command.operands[index + 1]
        if command.relative:
            x += self.current_point[0]
            y += self.current_point[1]
        return (x, y)

    def reflected(self, family: str) -> Coordinate:
        if self.last_curve != family or self.last_control_point is None:
            return self.current_point
        cx, cy = self.last_control_point
        x, y = self.current_point
        return (2 * x - cx, 2 * y - cy)

    def move_to(self, command: MoveTo) -> None:
        self.flush()
        point = self.resolve(command, 0)
        self.current_point = point
        self.subpath_start = point
        self.subpath = Subpath([point])
        self.forget_control_point()

    def line_to(self, point: Coordinate) -> None:
        self.extend([point])
        self.forget_control_point()

    def cubic_to(self, control1: Coordinate, control2: Coordinate, end: Coordinate) -> None:
        self.extend(self.flattener.cubic(self.current_point, control1, control2, end))
        self.last_control_point = control2
        self.last_curve = CUBIC

    def quadratic_to(self, control: Coordinate, end: Coordinate) -> None:
        self.extend(self.flattener.quadratic(self.current_point, control, end))
        self.last_control_point = control
        self.last_curve = QUADRATIC

    def arc_to(self, command: ArcTo) -> None:
        rx, ry, rotation = command.operands[:3]
        end = self.resolve(command, 5)
        if end == self.current_point:
            # an arc to its own start point draws nothing
            self.forget_control_point()
            return
        if rx == 0 or ry == 0:
            self.line_to(end)
            return
        self.extend(self.flattener.arc(self.current_point, rx, ry, rotation,
                                       command.large_arc, command.sweep, end))
        self.forget_control_point()

    def close(self) -> None:
        self.forget_control_point()
        if self.subpath is None:
            return
        if self.subpath.points[-1] != self.subpath_start:
            self.subpath.points.append(self.subpath_start)
        self.subpath.closed = True
        self.flush()
        self.current_point = self.subpath_start

    def extend(self, points: Iterable[Coordinate]) -> None:
        if self.subpath is None:
            # drawing after a close path continues from the closed subpath's start
            self.subpath = Subpath([self.current_point])
        self.subpath.points.extend(points)
        self.current_point = self.subpath.points[-1]

    def forget_control_point(self) -> None:
        self.last_control_point = None
        self.last_curve = None

    def flush(self) -> None:
        if self.subpath is not None and self.subpath.points:
            self.subpaths.append(self.subpath)
        self.subpath = None

    def finish(self) -> list[Subpath]:
        self.flush()
        return self.subpaths


def trace_path(commands: Iterable[PathCommand], flattener: Union[Flattener, None] = None) -> list[Subpath]:
    """Run `commands` through a fresh cursor and return the subpaths drawn."""
    cursor = PathCursor(flattener)
    for command in commands:
        cursor.execute(command)
    subpaths = cursor.finish()
    logger.debug("traced %d subpaths", len(subpaths))
    return subpaths
