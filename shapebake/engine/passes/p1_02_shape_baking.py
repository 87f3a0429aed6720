"""B1.02 — Shape Baking.

Fold the transform of every rect/circle/ellipse/line into its own coordinate
attributes, then drop the transform. Positions are mapped through the full
matrix; sizes are multiplied by the uniform scale factor; stroke width is
scaled to keep the rendered thickness. Runs after group hoisting so it also
picks up transforms pushed down from groups.
"""

from __future__ import annotations

import logging

from shapebake.engine.context import BakeContext
from shapebake.engine.passes.shapes import SHAPE_GEOMETRY, ShapeGeometry
from shapebake.engine.passes.validity import is_bakeable
from shapebake.engine.registry import task
from shapebake.svg.document import Element
from shapebake.svg.transform import Transform
from shapebake.svg.values import Length
from shapebake.utils.stroke import recalc_stroke_width

logger = logging.getLogger(__name__)


@task(
    id="B1.02",
    dependencies=["B1.01"],
    description="Bake shape transforms into coordinates",
)
def shape_baking(ctx: BakeContext) -> None:
    eps = ctx.tolerance
    shapes = [
        el for el in ctx.document.descendants()
        if el.kind in SHAPE_GEOMETRY and el.has_attribute("transform")
    ]

    for el in shapes:
        if bake_shape(el, eps):
            ctx.stats.shapes_baked += 1
        else:
            ctx.stats.shapes_skipped += 1


def bake_shape(el: Element, eps: float) -> bool:
    """Apply ``el``'s transform to its geometry. Returns False (and changes nothing) if unsafe."""
    geometry = SHAPE_GEOMETRY.get(el.kind)
    if geometry is None or not is_bakeable(el, eps):
        logger.debug("Skip <%s>: not bakeable", el.tag)
        return False

    ts = el.transform()
    if ts is None:
        return False
    ts = ts.with_tolerance(eps)

    if ts.has_rotate() and not geometry.rotation_invariant:
        logger.debug("Skip <%s>: rotation cannot be expressed by its attributes", el.tag)
        return False

    _apply_geometry(el, geometry, ts)
    el.remove("transform")

    if ts.has_scale():
        sx, _ = ts.get_scale()
        recalc_stroke_width(el, sx)

    logger.debug("Baked <%s> transform %s", el.tag, ts)
    return True


def _apply_geometry(el: Element, geometry: ShapeGeometry, ts: Transform) -> None:
    for aid_x, aid_y in geometry.positions:
        _map_position(el, aid_x, aid_y, ts)

    if ts.has_scale():
        sx, _ = ts.get_scale()
        for aid in geometry.sizes:
            _scale_size(el, aid, sx)


def _map_position(el: Element, aid_x: str, aid_y: str, ts: Transform) -> None:
    x = el.length_or_default(aid_x)
    y = el.length_or_default(aid_y)
    nx, ny = ts.apply(x.num, y.num)
    el.set(aid_x, Length(nx))
    el.set(aid_y, Length(ny))


def _scale_size(el: Element, aid: str, scale_factor: float) -> None:
    # Absent sizes keep their implicit value (auto rx/ry, zero width...)
    value = el.get(aid)
    if isinstance(value, Length):
        el.set(aid, value.scaled(scale_factor))
