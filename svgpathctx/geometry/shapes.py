"""Intersectable primitives: straight segments and cubic Bezier curves.

Thin immutable wrappers over svgpathtools.Line / svgpathtools.CubicBezier.
The wrappers own the coordinates; svgpathtools does the intersection and
bounding-box math.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, Line

from svgpathctx.geometry.bezier import bezier_curve_segment, bezier_point
from svgpathctx.geometry.point import Point


@dataclass(frozen=True)
class Segment:
    """A directed straight edge."""

    start: Point
    end: Point

    def to_svgpathtools(self) -> Line:
        return Line(self.start.as_complex(), self.end.as_complex())

    def point(self, t: float) -> Point:
        return Point(
            self.start.x + (self.end.x - self.start.x) * t,
            self.start.y + (self.end.y - self.start.y) * t,
        )

    def bbox(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax)"""
        return (
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            max(self.start.x, self.end.x),
            max(self.start.y, self.end.y),
        )

    def sample(self, n: int = 2) -> NDArray[np.float64]:
        ts = np.linspace(0.0, 1.0, max(n, 2))
        start = np.array([self.start.x, self.start.y])
        end = np.array([self.end.x, self.end.y])
        return start + np.outer(ts, end - start)

    def intersections(self, other: Intersectable) -> list[Point]:
        return _intersections(self, other)


@dataclass(frozen=True)
class CubicCurve:
    """A cubic Bezier arc given by exactly 4 control points."""

    points: tuple[Point, Point, Point, Point]

    def __post_init__(self) -> None:
        if len(self.points) != 4:
            raise ValueError(f"cubic curve needs 4 control points, got {len(self.points)}")
        # accept any sequence, store a tuple
        object.__setattr__(self, "points", tuple(self.points))

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[3]

    def to_svgpathtools(self) -> CubicBezier:
        return CubicBezier(*(p.as_complex() for p in self.points))

    def point(self, t: float) -> Point:
        return bezier_point(*self.points, t)

    def bbox(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax) of the curve itself, not its control hull."""
        xmin, xmax, ymin, ymax = self.to_svgpathtools().bbox()
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def sample(self, n: int = 12) -> NDArray[np.float64]:
        ts = np.linspace(0.0, 1.0, max(n, 2))[:, None]
        us = 1.0 - ts
        ctrl = np.array([[p.x, p.y] for p in self.points])
        return (
            us**3 * ctrl[0]
            + 3 * ts * us**2 * ctrl[1]
            + 3 * ts**2 * us * ctrl[2]
            + ts**3 * ctrl[3]
        )

    def subsegment(self, t0: float, t1: float) -> CubicCurve:
        """The part of this curve between t0 and t1, as a new curve."""
        return CubicCurve(bezier_curve_segment(*self.points, t0, t1))

    def intersections(self, other: Intersectable) -> list[Point]:
        return _intersections(self, other)


Intersectable = Union[Segment, CubicCurve]


def _is_degenerate(shape: Intersectable) -> bool:
    return isinstance(shape, Segment) and shape.start == shape.end


def _intersections(a: Intersectable, b: Intersectable) -> list[Point]:
    """Points where a crosses b, ordered along a."""
    # svgpathtools asserts on zero-length lines and on identical segments
    if a == b or _is_degenerate(a) or _is_degenerate(b):
        return []
    pairs = a.to_svgpathtools().intersect(b.to_svgpathtools())
    return [a.point(float(ta)) for ta, _ in sorted(pairs)]
