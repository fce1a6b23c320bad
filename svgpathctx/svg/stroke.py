"""Dash pattern sizing for stroked paths."""

from __future__ import annotations

import math

from svgpathctx.errors import InvalidStrokeWidthError
from svgpathctx.utils.precision import chop_precision, format_number


def get_stroke_dash_attributes(stroke_width: float, dash_gap_size: float) -> tuple[float, float]:
    """Return (dash_size, gap_size) for a dashed stroke.

    As the stroke width gets thicker, the gap shrinks relative to the dash.
    Raises InvalidStrokeWidthError when stroke_width is not finite or is at
    least 10.6 / 0.6, where the logarithm's argument stops being positive.
    """
    arg = -0.6 * stroke_width + 10.6
    if not math.isfinite(stroke_width) or arg <= 0:
        raise InvalidStrokeWidthError(stroke_width)
    scale = math.log10(arg) * 0.5 + 0.5
    scaled_dash_size = stroke_width * dash_gap_size
    scaled_gap_size = scale * scaled_dash_size
    return scaled_dash_size, scaled_gap_size


def format_dasharray(stroke_width: float, dash_gap_size: float) -> str:
    """stroke-dasharray attribute value, e.g. "3, 2.8842"."""
    dash, gap = get_stroke_dash_attributes(stroke_width, dash_gap_size)
    return f"{format_number(chop_precision(dash))}, {format_number(chop_precision(gap))}"
