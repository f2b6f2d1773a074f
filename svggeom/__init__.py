"""
Bidirectional conversion between SVG shape elements and planar geometry.
"""
from svggeom.errors import (
    InvalidNumber,
    MalformedElement,
    MalformedPath,
    SvgGeomError,
    TruncatedCommand,
    UnsupportedCommand,
    UnsupportedElement,
)
from svggeom.geometry import (
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
from svggeom.reader import (
    parse_d_string_to_geometry,
    parse_d_string_to_geometry_collection,
    parse_shape_to_geometry,
    parse_shape_to_geometry_collection,
    svg_d_path_to_geometry,
    svg_d_path_to_geometry_collection,
    svg_to_geometry,
    svg_to_geometry_collection,
)
from svggeom.writer import geometry_to_svg_d_string, geometry_to_svg_elements, to_svg, to_svg_string

__version__ = "0.1.0"

__all__ = [
    "Geometry",
    "GeometryCollection",
    "InvalidNumber",
    "Line",
    "LineString",
    "MalformedElement",
    "MalformedPath",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Rect",
    "SvgGeomError",
    "Triangle",
    "TruncatedCommand",
    "UnsupportedCommand",
    "UnsupportedElement",
    "geometry_to_svg_d_string",
    "geometry_to_svg_elements",
    "parse_d_string_to_geometry",
    "parse_d_string_to_geometry_collection",
    "parse_shape_to_geometry",
    "parse_shape_to_geometry_collection",
    "svg_d_path_to_geometry",
    "svg_d_path_to_geometry_collection",
    "svg_to_geometry",
    "svg_to_geometry_collection",
    "to_svg",
    "to_svg_string",
]
