"""Stroke width bookkeeping for baked shapes."""

from __future__ import annotations

from shapebake.svg.document import Element
from shapebake.svg.values import Length

# SVG initial value of 'stroke-width'
DEFAULT_STROKE_WIDTH = Length(1.0)


def resolve_stroke_width(el: Element) -> Length:
    """Effective stroke width: own value, else nearest ancestor's, else the SVG default."""
    for node in (el, *el.ancestors()):
        value = node.get("stroke-width")
        if isinstance(value, Length):
            return value
    return DEFAULT_STROKE_WIDTH


def recalc_stroke_width(el: Element, scale_factor: float) -> None:
    """Write the element's stroke width multiplied by ``scale_factor``.

    Used after a scaled transform has been folded into raw coordinates, so the
    rendered stroke keeps its thickness. An inherited value becomes explicit on
    the element.
    """
    el.set("stroke-width", resolve_stroke_width(el).scaled(scale_factor))
