"""Geometry primitives for path building and geometric queries."""

from svgpathctx.geometry.bezier import bezier_curve_segment, bezier_point
from svgpathctx.geometry.point import Point
from svgpathctx.geometry.shapes import CubicCurve, Intersectable, Segment

__all__ = [
    "Point",
    "Segment",
    "CubicCurve",
    "Intersectable",
    "bezier_curve_segment",
    "bezier_point",
]
