"""Named error kinds for out-of-domain inputs. No engine imports."""

from __future__ import annotations

# -0.6*w + 10.6 <= 0  <=>  w >= 10.6 / 0.6
MAX_DASH_STROKE_WIDTH = 10.6 / 0.6


class SvgPathError(ValueError):
    """Base class for all svgpathctx input errors."""


class InvalidParameterRangeError(SvgPathError):
    """Bezier parameter range outside 0 <= t0 <= t1 <= 1."""

    def __init__(self, t0: float, t1: float) -> None:
        super().__init__(f"invalid parameter range [{t0}, {t1}]: need 0 <= t0 <= t1 <= 1")
        self.t0 = t0
        self.t1 = t1


class InvalidStrokeWidthError(SvgPathError):
    """Stroke width that drives the dash heuristic's logarithm non-positive."""

    def __init__(self, stroke_width: float) -> None:
        super().__init__(
            f"stroke width {stroke_width} is outside the dash heuristic's domain "
            f"(must be finite and below {MAX_DASH_STROKE_WIDTH:.4f})"
        )
        self.stroke_width = stroke_width


class NonFiniteCoordinateError(SvgPathError):
    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"{name} must be finite, got {value!r}")
        self.name = name
        self.value = value


class PathNotStartedError(SvgPathError):
    """Drawing command issued before the first start_at()."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}() called before start_at()")
        self.command = command
