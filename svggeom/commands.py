from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple, Type

from svggeom.errors import TruncatedCommand


@dataclass(frozen=True)
class PathCommand:
    relative: bool
    operands: Tuple[float, ...] = ()

    letter: ClassVar[str] = ''
    arity: ClassVar[int] = 0

    def __post_init__(self):
        if len(self.operands) != self.arity:
            raise TruncatedCommand(self.text)

    @property
    def is_relative(self) -> bool:
        return self.relative

    @property
    def text(self) -> str:
        letter = self.letter.lower() if self.relative else self.letter
        return ' '.join([letter] + ['%r' % v for v in self.operands])


@dataclass(frozen=True)
class MoveTo(PathCommand):
    letter: ClassVar[str] = 'M'
    arity: ClassVar[int] = 2


@dataclass(frozen=True)
class LineTo(PathCommand):
    letter: ClassVar[str] = 'L'
    arity: ClassVar[int] = 2


@dataclass(frozen=True)
class HorizontalLineTo(PathCommand):
    letter: ClassVar[str] = 'H'
    arity: ClassVar[int] = 1


@dataclass(frozen=True)
class VerticalLineTo(PathCommand):
    letter: ClassVar[str] = 'V'
    arity: ClassVar[int] = 1


@dataclass(frozen=True)
class CubicCurveTo(PathCommand):
    letter: ClassVar[str] = 'C'
    arity: ClassVar[int] = 6


@dataclass(frozen=True)
class SmoothCubicCurveTo(PathCommand):
    letter: ClassVar[str] = 'S'
    arity: ClassVar[int] = 4


@dataclass(frozen=True)
class QuadraticCurveTo(PathCommand):
    letter: ClassVar[str] = 'Q'
    arity: ClassVar[int] = 4


@dataclass(frozen=True)
class SmoothQuadraticCurveTo(PathCommand):
    letter: ClassVar[str] = 'T'
    arity: ClassVar[int] = 2


@dataclass(frozen=True)
class ArcTo(PathCommand):
    """rx ry x-axis-rotation large-arc-flag sweep-flag x y"""
    letter: ClassVar[str] = 'A'
    arity: ClassVar[int] = 7

    @property
    def large_arc(self) -> bool:
        return bool(self.operands[3])

    @property
    def sweep(self) -> bool:
        return bool(self.operands[4])


@dataclass(frozen=True)
class ClosePath(PathCommand):
    letter: ClassVar[str] = 'Z'
    arity: ClassVar[int] = 0


COMMANDS: Dict[str, Type[PathCommand]] = {
    cls.letter: cls
    for cls in (
        MoveTo,
        LineTo,
        HorizontalLineTo,
        VerticalLineTo,
        CubicCurveTo,
        SmoothCubicCurveTo,
        QuadraticCurveTo,
        SmoothQuadraticCurveTo,
        ArcTo,
        ClosePath,
    )
}


def command_class(letter: str) -> Type[PathCommand]:
    """Command class for a letter of either case; KeyError when unknown."""
    return COMMANDS[letter.upper()]
