"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgpathctx.geometry import CubicCurve, Point
from svgpathctx.svg.path_context import SvgPathContext

# Quarter-circle-ish arc from (0, 0) to (10, 10)
ARC_POINTS = (Point(0, 0), Point(5.5, 0), Point(10, 4.5), Point(10, 10))

# Symmetric S-curve
S_CURVE_POINTS = (Point(0, 0), Point(0, 10), Point(10, -10), Point(10, 0))


@pytest.fixture
def ctx() -> SvgPathContext:
    return SvgPathContext(Point(0, 0), 1, 1)


@pytest.fixture
def square_ctx() -> SvgPathContext:
    """Closed 10×10 square starting at the origin."""
    c = SvgPathContext(Point(0, 0), 1, 1)
    c.start_at(Point(0, 0))
    c.line_to(False, 10, 0)
    c.line_to(False, 10, 10)
    c.line_to(False, 0, 10)
    c.close()
    return c


@pytest.fixture
def arc() -> CubicCurve:
    return CubicCurve(ARC_POINTS)


@pytest.fixture
def s_curve() -> CubicCurve:
    return CubicCurve(S_CURVE_POINTS)
