"""Write a standalone SVG document from element dicts."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
) -> str:
    """Generate SVG markup. Each element dict has a "tag" plus attributes."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
