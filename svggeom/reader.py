"""
Reading SVG shape elements (and bare path data) into geometries.
"""
from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union, final
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree

from svggeom.assembler import LINE, PATH, POLYGON, POLYLINE, assemble, assemble_rect
from svggeom.config import resolve_config
from svggeom.cursor import Subpath, trace_path
from svggeom.errors import InvalidNumber, MalformedElement, UnsupportedElement
from svggeom.flatten import Flattener
from svggeom.geometry import Geometry, GeometryCollection
from svggeom.scanner import parse_number, parse_points, scan_path

logger = logging.getLogger(__name__)

_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")

# Synthetic root so that several sibling shapes parse as one document
_WRAPPER = 'svggeom'


def _strip_ns(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


class ShapeReader(ABC):
    def __init__(self, element: Element, settings: Dict[str, Any]):
        self._element = element
        self.settings = settings

    @abstractmethod
    def read(self) -> Geometry:
        pass

    @property
    def element(self) -> Element:
        return self._element

    @property
    def tag(self) -> str:
        return _strip_ns(self._element.tag)

    @property
    def normalize(self) -> bool:
        return self.settings['normalize_orientation']

    def attribute(self, name: str) -> str:
        value = self._element.get(name)
        if value is None:
            raise MalformedElement(f"<{self.tag}> is missing the {name!r} attribute", attribute=name)
        return value

    def number(self, name: str) -> float:
        try:
            return parse_number(self.attribute(name))
        except InvalidNumber as e:
            e.attribute = name
            raise


@final
class PathReader(ShapeReader):
    def read(self) -> Geometry:
        return read_path_data(self.attribute('d'), self.settings)


@final
class PolygonReader(ShapeReader):
    def read(self) -> Geometry:
        points = parse_points(self.attribute('points'))
        return assemble(POLYGON, [Subpath(points, closed=True)], self.normalize)


@final
class PolylineReader(ShapeReader):
    def read(self) -> Geometry:
        points = parse_points(self.attribute('points'))
        return assemble(POLYLINE, [Subpath(points)])


@final
class RectReader(ShapeReader):
    def read(self) -> Geometry:
        x, y = self.number('x'), self.number('y')
        width, height = self.number('width'), self.number('height')
        return assemble_rect(x, y, width, height)


@final
class LineReader(ShapeReader):
    def read(self) -> Geometry:
        start = (self.number('x1'), self.number('y1'))
        end = (self.number('x2'), self.number('y2'))
        return assemble(LINE, [Subpath([start, end])])


@final
class UnsupportedShapeReader(ShapeReader):
    def read(self) -> Geometry:
        raise UnsupportedElement(self.tag)


@final
class ShapeReaderFactory:
    def __init__(self, settings: Dict[str, Any]):
        self.settings = settings

    def reader(self, element: Element) -> ShapeReader:
        tag = _strip_ns(element.tag)
        if tag == PATH:
            return PathReader(element, self.settings)
        elif tag == POLYGON:
            return PolygonReader(element, self.settings)
        elif tag == POLYLINE:
            return PolylineReader(element, self.settings)
        elif tag == 'rect':
            return RectReader(element, self.settings)
        elif tag == LINE:
            return LineReader(element, self.settings)
        else:
            return UnsupportedShapeReader(element, self.settings)


def read_path_data(d_text: str, settings: Dict[str, Any]) -> Geometry:
    commands = scan_path(d_text)
    subpaths = trace_path(commands, Flattener(settings['curve_samples']))
    return assemble(PATH, subpaths)


def parse_elements(element_text: str) -> list[Element]:
    """
    Parse markup holding one or more sibling shape elements.

    Args:
        element_text: Element markup, optionally preceded by an XML declaration

    Returns:
        The top-level elements in document order
    """
    text = _XML_DECLARATION_RE.sub('', element_text, count=1)
    try:
        root = ElementTree.fromstring(
            f"<{_WRAPPER}>{text}</{_WRAPPER}>",
            forbid_dtd=True,
            forbid_entities=True,
            forbid_external=True,
        )
    except ParseError as e:
        raise MalformedElement(f"invalid shape markup: {e}") from e
    except DefusedXmlException as e:
        raise MalformedElement(f"forbidden construct in shape markup: {e}") from e

    elements = list(root)
    if not elements:
        raise MalformedElement("no shape element found")
    logger.debug("found %d shape elements: %s", len(elements), ', '.join(_strip_ns(e.tag) for e in elements))
    return elements


def parse_shape_to_geometry(element_text: str, config: Optional[Mapping[str, Any]] = None) -> Geometry:
    """Geometry of a single shape element such as ``<path d="..."/>``."""
    settings = resolve_config(config)
    elements = parse_elements(element_text)
    if len(elements) > 1:
        raise MalformedElement(f"expected one shape element, got {len(elements)}")
    return ShapeReaderFactory(settings).reader(elements[0]).read()


def parse_shape_to_geometry_collection(element_text: str,
                                       config: Optional[Mapping[str, Any]] = None) -> GeometryCollection:
    """
    Collection with one member per shape element in `element_text`.

    This reads back what geometry_to_svg_elements writes for collections
    and multi-geometries.
    """
    settings = resolve_config(config)
    factory = ShapeReaderFactory(settings)
    return GeometryCollection([factory.reader(e).read() for e in parse_elements(element_text)])


def parse_d_string_to_geometry(d_text: str, config: Optional[Mapping[str, Any]] = None) -> Geometry:
    return read_path_data(d_text, resolve_config(config))


def parse_d_string_to_geometry_collection(d_text: str,
                                          config: Optional[Mapping[str, Any]] = None) -> GeometryCollection:
    return GeometryCollection([parse_d_string_to_geometry(d_text, config)])


svg_to_geometry = parse_shape_to_geometry
svg_to_geometry_collection = parse_shape_to_geometry_collection
svg_d_path_to_geometry = parse_d_string_to_geometry
svg_d_path_to_geometry_collection = parse_d_string_to_geometry_collection


def read(element_text: str, d_string: bool = False,
         config: Optional[Mapping[str, Any]] = None) -> Union[Geometry, GeometryCollection]:
    """Geometry of markup or path data; several elements give a collection."""
    if d_string:
        return parse_d_string_to_geometry(element_text, config)
    collection = parse_shape_to_geometry_collection(element_text, config)
    if len(collection) == 1:
        return collection.geometries[0]
    return collection
