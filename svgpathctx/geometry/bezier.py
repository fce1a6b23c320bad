"""Cubic Bezier sub-curve extraction (De Casteljau, closed form)."""

from __future__ import annotations

import math

from svgpathctx.errors import InvalidParameterRangeError
from svgpathctx.geometry.point import Point


def bezier_curve_segment(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    t0: float,
    t1: float,
) -> tuple[Point, Point, Point, Point]:
    """Control points of the piece of curve p1..p4 between t0 and t1.

    The returned curve traces exactly the original arc for t in [t0, t1].
    q1 and q4 lie on the original curve at t0 and t1; q2 and q3 are the
    blossom values B(t0, t0, t1) and B(t0, t1, t1).

    Raises InvalidParameterRangeError unless 0 <= t0 <= t1 <= 1. A zero-width
    range is allowed and collapses the result to a single point.

    Reference: https://stackoverflow.com/questions/11703283/cubic-bezier-curve-segment/11704152#11704152
    """
    if not (math.isfinite(t0) and math.isfinite(t1)) or not 0 <= t0 <= t1 <= 1:
        raise InvalidParameterRangeError(t0, t1)

    u0, u1 = 1 - t0, 1 - t1

    def blend(w1: float, w2: float, w3: float, w4: float) -> Point:
        return Point(
            w1 * p1.x + w2 * p2.x + w3 * p3.x + w4 * p4.x,
            w1 * p1.y + w2 * p2.y + w3 * p3.y + w4 * p4.y,
        )

    q1 = blend(u0 * u0 * u0, 3 * t0 * u0 * u0, 3 * t0 * t0 * u0, t0 * t0 * t0)
    q2 = blend(
        u0 * u0 * u1,
        2 * t0 * u0 * u1 + u0 * u0 * t1,
        t0 * t0 * u1 + 2 * u0 * t0 * t1,
        t0 * t0 * t1,
    )
    q3 = blend(
        u0 * u1 * u1,
        t0 * u1 * u1 + 2 * u0 * t1 * u1,
        2 * t0 * t1 * u1 + u0 * t1 * t1,
        t0 * t1 * t1,
    )
    q4 = blend(u1 * u1 * u1, 3 * t1 * u1 * u1, 3 * t1 * t1 * u1, t1 * t1 * t1)

    return q1, q2, q3, q4


def bezier_point(p1: Point, p2: Point, p3: Point, p4: Point, t: float) -> Point:
    """Evaluate the cubic at t (Bernstein form)."""
    u = 1 - t
    w1, w2, w3, w4 = u * u * u, 3 * t * u * u, 3 * t * t * u, t * t * t
    return Point(
        w1 * p1.x + w2 * p2.x + w3 * p3.x + w4 * p4.x,
        w1 * p1.y + w2 * p2.y + w3 * p3.y + w4 * p4.y,
    )
