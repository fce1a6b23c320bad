"""SvgPathContext: incremental SVG path data plus a parallel shape list.

Each drawing command appends one token to `commands` and, except for the
leading move, one intersectable primitive to `path`. The primitives describe
the same outline as the emitted path data and serve later geometric queries
(bounding box, intersections, hit-testing).

Coordinates given to the drawing commands are logical: absolute ones are
offsets from `top_left`, relative ones are offsets from the pen. Both are
scaled by (scale_x, scale_y) and chopped before they are stored.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import MultiPolygon, Polygon

from svgpathctx.config import PathConfig
from svgpathctx.errors import NonFiniteCoordinateError, PathNotStartedError
from svgpathctx.geometry.point import Point
from svgpathctx.geometry.shapes import CubicCurve, Intersectable, Segment
from svgpathctx.utils.precision import chop_precision, format_number

logger = logging.getLogger(__name__)


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise NonFiniteCoordinateError(name, value)


class SvgPathContext:
    """Builds one path. Not reused across unrelated paths, not thread-safe."""

    def __init__(
        self,
        top_left: Point,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        config: PathConfig | None = None,
    ) -> None:
        _require_finite(top_left_x=top_left.x, top_left_y=top_left.y, scale_x=scale_x, scale_y=scale_y)
        self.path: list[Intersectable] = []
        self.commands: list[str] = []
        # index into path where each subpath begins
        self._subpath_starts: list[int] = []
        self.start: Point | None = None
        self.current: Point | None = None
        self.top_left = Point(top_left.x, top_left.y)
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.config = config or PathConfig()
        logger.debug(
            "New path context at (%s, %s) scale %s×%s",
            top_left.x, top_left.y, scale_x, scale_y,
        )

    # --- Coordinate resolution ---

    def relative(self, base: Point, dx: float, dy: float) -> Point:
        _require_finite(dx=dx, dy=dy)
        return Point(
            chop_precision(base.x + self.scale_x * dx),
            chop_precision(base.y + self.scale_y * dy),
        )

    def absolute(self, x: float, y: float) -> Point:
        _require_finite(x=x, y=y)
        return self.relative(self.top_left, x, y)

    def _resolve(self, relative: bool, x: float, y: float) -> Point:
        if relative:
            return self.relative(self._pen(), x, y)
        return self.absolute(x, y)

    def _pen(self, command: str = "draw") -> Point:
        if self.current is None:
            raise PathNotStartedError(command)
        return self.current

    # --- Drawing commands ---

    def start_at(self, p: Point) -> None:
        """Begin a subpath at p (M). Draws nothing."""
        _require_finite(x=p.x, y=p.y)
        p = Point(chop_precision(p.x), chop_precision(p.y))
        self._subpath_starts.append(len(self.path))
        self.start = p
        self.commands.append(f"M {format_number(p.x)} {format_number(p.y)}")
        self.current = p
        logger.debug("Subpath started at (%s, %s)", p.x, p.y)

    def close(self) -> None:
        """Close the subpath (Z): straight edge back to the subpath start."""
        current = self._pen("close")
        self.path.append(Segment(current, self.start))
        self.commands.append("Z")
        self.current = self.start

    def line_to(self, relative: bool, x: float, y: float) -> None:
        start = self._pen("line_to")
        end = self._resolve(relative, x, y)
        self.path.append(Segment(start, end))
        self.commands.append(f"L {format_number(end.x)} {format_number(end.y)}")
        self.current = end

    def curve_to(
        self,
        relative: bool,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> None:
        # every relative control point is offset from the pen, not chained
        start = self._pen("curve_to")
        p1 = self._resolve(relative, x1, y1)
        p2 = self._resolve(relative, x2, y2)
        p3 = self._resolve(relative, x3, y3)
        self.path.append(CubicCurve((start, p1, p2, p3)))
        self.commands.append(
            "C " + " ".join(format_number(v) for v in (p1.x, p1.y, p2.x, p2.y, p3.x, p3.y))
        )
        self.current = p3

    def horizontal_to(self, relative: bool, x: float) -> None:
        start = self._pen("horizontal_to")
        end = self._resolve(relative, x, 0)
        if not relative:
            end = Point(end.x, start.y)
        self.path.append(Segment(start, end))
        self.commands.append(f"H {format_number(end.x)}")
        self.current = end

    def vertical_to(self, relative: bool, y: float) -> None:
        start = self._pen("vertical_to")
        end = self._resolve(relative, 0, y)
        if not relative:
            end = Point(start.x, end.y)
        self.path.append(Segment(start, end))
        self.commands.append(f"V {format_number(end.y)}")
        self.current = end

    def path_data(self) -> str:
        """The complete `d` attribute value."""
        return " ".join(self.commands)

    # --- Geometric queries ---

    def bbox(self) -> tuple[float, float, float, float] | None:
        """(xmin, ymin, xmax, ymax) over every drawn primitive, None if nothing is drawn."""
        if not self.path:
            return None
        boxes = np.array([shape.bbox() for shape in self.path])
        return (
            float(np.min(boxes[:, 0])),
            float(np.min(boxes[:, 1])),
            float(np.max(boxes[:, 2])),
            float(np.max(boxes[:, 3])),
        )

    def intersections(self, shape: Intersectable) -> list[Point]:
        """Every point where shape crosses the path, in drawing order."""
        hits: list[Point] = []
        for primitive in self.path:
            hits.extend(primitive.intersections(shape))
        return hits

    def subpaths(self) -> list[list[Intersectable]]:
        """Primitives grouped by subpath (one group per start_at), empty groups dropped."""
        bounds = self._subpath_starts + [len(self.path)]
        groups = [self.path[lo:hi] for lo, hi in zip(bounds, bounds[1:])]
        return [group for group in groups if group]

    def outlines(self) -> list[np.ndarray]:
        """Sampled outline of each subpath as an Nx2 array. Curves use config.samples_per_curve."""
        result = []
        for group in self.subpaths():
            chunks = []
            for shape in group:
                if isinstance(shape, CubicCurve):
                    pts = shape.sample(self.config.samples_per_curve)
                else:
                    pts = shape.sample(2)
                # within a subpath each start repeats the previous end
                chunks.append(pts if not chunks else pts[1:])
            result.append(np.vstack(chunks))
        return result

    def to_polygon(self) -> Polygon | MultiPolygon | None:
        """Even-odd area of all subpaths, None when no subpath encloses anything.

        Subpaths with fewer than 3 distinct points are skipped. Overlapping
        subpaths cancel out, so an inner subpath cuts a hole in an outer one.
        """
        area: Polygon | MultiPolygon | None = None
        for pts in self.outlines():
            if len(np.unique(pts, axis=0)) < 3:
                continue
            poly = Polygon(pts)
            if not poly.is_valid:
                poly = poly.buffer(0)
            area = poly if area is None else area.symmetric_difference(poly)
        return area

    def contains(self, p: Point) -> bool:
        """Hit-test: True if p is inside the path's even-odd area or on its boundary."""
        area = self.to_polygon()
        if area is None or area.is_empty:
            return False
        return bool(area.covers(ShapelyPoint(p.x, p.y)))
