"""svgpathctx: incremental SVG path building with parallel intersectable geometry."""

from svgpathctx.config import PathConfig, Settings, configure_logging, settings
from svgpathctx.errors import (
    InvalidParameterRangeError,
    InvalidStrokeWidthError,
    NonFiniteCoordinateError,
    PathNotStartedError,
    SvgPathError,
)
from svgpathctx.geometry import CubicCurve, Intersectable, Point, Segment, bezier_curve_segment
from svgpathctx.models.path_element import PathElement
from svgpathctx.svg.path_context import SvgPathContext
from svgpathctx.svg.serializer import serialize_svg
from svgpathctx.svg.stroke import format_dasharray, get_stroke_dash_attributes
from svgpathctx.utils.precision import chop_precision, format_number

__version__ = "0.1.0"

__all__ = [
    # Geometry
    "Point",
    "Segment",
    "CubicCurve",
    "Intersectable",
    "bezier_curve_segment",
    # Path building
    "SvgPathContext",
    "chop_precision",
    "format_number",
    # Stroke
    "get_stroke_dash_attributes",
    "format_dasharray",
    # Output
    "PathElement",
    "serialize_svg",
    # Config
    "PathConfig",
    "Settings",
    "settings",
    "configure_logging",
    # Errors
    "SvgPathError",
    "InvalidParameterRangeError",
    "InvalidStrokeWidthError",
    "NonFiniteCoordinateError",
    "PathNotStartedError",
]
