from __future__ import annotations

from typing import Union


class SvgGeomError(Exception):
    """Base class of every error raised while reading SVG shapes."""


class UnsupportedElement(SvgGeomError):
    def __init__(self, tag: str):
        super().__init__(f"unsupported SVG element <{tag}>")
        self.tag = tag


class MalformedElement(SvgGeomError):
    """A shape element (or its path data) cannot describe a geometry.

    `attribute` names the offending attribute when there is one.
    """

    def __init__(self, message: str, attribute: Union[str, None] = None):
        super().__init__(message)
        self.attribute = attribute


class MalformedPath(MalformedElement):
    def __init__(self, message: str, fragment: str):
        super().__init__(f"{message}: {fragment!r}", attribute='d')
        self.fragment = fragment


class UnsupportedCommand(MalformedPath):
    def __init__(self, command: str):
        super().__init__("unknown path command", command)
        self.command = command


class TruncatedCommand(MalformedPath):
    def __init__(self, fragment: str):
        super().__init__("path command is missing operands", fragment)


class InvalidNumber(MalformedPath):
    def __init__(self, token: str):
        super().__init__("not a number", token)
        self.token = token
