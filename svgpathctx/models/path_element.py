"""<path> element model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgpathctx.svg.path_context import SvgPathContext
from svgpathctx.svg.stroke import format_dasharray
from svgpathctx.utils.precision import format_number


class PathElement(BaseModel):
    d: str
    fill: str = "none"
    stroke: str = "currentColor"
    stroke_width: float = Field(default=2.0, ge=0)
    dashed: bool = False
    dash_gap_size: float = 1.5
    attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: SvgPathContext, **kwargs) -> PathElement:
        kwargs.setdefault("dash_gap_size", ctx.config.dash_gap_size)
        return cls(d=ctx.path_data(), **kwargs)

    def to_svg_dict(self) -> dict[str, str]:
        """Element dict in the shape serialize_svg() expects."""
        elem = {
            "tag": "path",
            "d": self.d,
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke-width": format_number(self.stroke_width),
        }
        if self.dashed:
            elem["stroke-dasharray"] = format_dasharray(self.stroke_width, self.dash_gap_size)
        elem.update(self.attributes)
        return elem
