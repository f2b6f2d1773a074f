"""
Tokenizer for SVG path data and coordinate-pair attributes.

Path data is read left to right with a position index. A command letter
opens a command; operands are taken in groups of the command's arity and a
group without its own letter repeats the previous command (a repeated MoveTo
becomes a LineTo). Numbers need no separator when a sign, a second decimal
point or a letter ends them, so ``"10-5"``, ``".5.5"`` and ``"10 10L40 1"``
are all valid.
"""
from __future__ import annotations

import logging
import re
from typing import Type, Union

from svggeom.commands import COMMANDS, ArcTo, ClosePath, LineTo, MoveTo, PathCommand, command_class
from svggeom.errors import InvalidNumber, MalformedElement, MalformedPath, TruncatedCommand, UnsupportedCommand
from svggeom.geometry import Coordinate

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_FLAG_RE = re.compile(r"[01]")
_SEPARATORS_RE = re.compile(r"[\s,]*")

_COMMAND_LETTERS = frozenset(COMMANDS) | frozenset(letter.lower() for letter in COMMANDS)
_BAD_TOKEN_RE = re.compile(r"[^\s,%s]+" % ''.join(sorted(_COMMAND_LETTERS)))

# Operand positions of the two single-character arc flags
_ARC_FLAGS = (3, 4)


def parse_number(token: str) -> float:
    """Parse one SVG number, rejecting what float() accepts beyond the SVG grammar (inf, nan, 1_0)."""
    text = token.strip()
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidNumber(token) from e
    if _NUMBER_RE.fullmatch(text) is None:
        raise InvalidNumber(token)
    return value


def _skip_separators(text: str, pos: int) -> int:
    return _SEPARATORS_RE.match(text, pos).end()


def _read_number(text: str, pos: int, flag: bool = False) -> tuple[float, int]:
    match = (_FLAG_RE if flag else _NUMBER_RE).match(text, pos)
    if match is None:
        bad = _BAD_TOKEN_RE.match(text, pos)
        token = bad.group() if bad else text[pos]
        parse_number(token)
        # a well-formed number where a flag was expected
        raise InvalidNumber(token)
    if not flag and text[match.end():match.end() + 1] in ('e', 'E'):
        # exponent marker without digits, as in "1e" or "1e-"
        token = _BAD_TOKEN_RE.match(text, pos).group()
        parse_number(token)
        raise InvalidNumber(token)
    return parse_number(match.group()), match.end()


def _read_operands(d: str, pos: int, cls: Type[PathCommand], start: int) -> tuple[tuple[float, ...], int]:
    operands = []
    while len(operands) < cls.arity:
        pos = _skip_separators(d, pos)
        if pos >= len(d) or d[pos] in _COMMAND_LETTERS:
            raise TruncatedCommand(d[start:pos].strip())
        flag = cls is ArcTo and len(operands) in _ARC_FLAGS
        value, pos = _read_number(d, pos, flag)
        operands.append(value)
    return tuple(operands), pos


def scan_path(d: str) -> list[PathCommand]:
    """
    Split path data into commands.

    Args:
        d: Value of a ``d`` attribute

    Returns:
        The commands in document order, with operands as floats
    """
    commands = []
    current: Union[Type[PathCommand], None] = None
    relative = False
    pos = 0
    while True:
        pos = _skip_separators(d, pos)
        if pos >= len(d):
            break
        start = pos
        char = d[pos]
        if char in _COMMAND_LETTERS:
            current = command_class(char)
            relative = char.islower()
            pos += 1
            if current is ClosePath:
                commands.append(ClosePath(relative))
                continue
        elif char.isalpha():
            raise UnsupportedCommand(char)
        elif current is None:
            raise MalformedPath("path data must begin with a command", d[start:start + 16])
        elif current is ClosePath:
            raise MalformedPath("operands after a close path command", d[start:start + 16])

        operands, pos = _read_operands(d, pos, current, start)
        commands.append(current(relative, operands))
        if current is MoveTo:
            current = LineTo

    logger.debug("scanned %d path commands", len(commands))
    return commands


def parse_points(text: str) -> list[Coordinate]:
    """Coordinate pairs of a ``points`` attribute."""
    values = []
    pos = _skip_separators(text, 0)
    while pos < len(text):
        value, pos = _read_number(text, pos)
        values.append(value)
        pos = _skip_separators(text, pos)
    if len(values) % 2:
        raise MalformedElement(f"odd number of coordinates in {text!r}", attribute='points')
    return list(zip(values[0::2], values[1::2]))
