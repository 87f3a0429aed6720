"""B1.01 — Group Hoisting.

If a group has a transform and contains only bakeable shapes, push the
group's transform down onto each child so the shape baker can fold it into
coordinates. All-or-nothing per group: one ineligible child leaves the group
and every child exactly as found. The emptied-out group element stays in the
tree; removing it is an ungroup pass's job.
"""

from __future__ import annotations

import logging

from shapebake.engine.context import BakeContext
from shapebake.engine.passes.shapes import is_shape
from shapebake.engine.passes.validity import is_bakeable, is_valid_attrs, is_valid_transform
from shapebake.engine.registry import task
from shapebake.svg.document import Element, ElementKind
from shapebake.svg.values import TransformValue

logger = logging.getLogger(__name__)


@task(
    id="B1.01",
    description="Push group transforms down onto shape children",
)
def group_hoisting(ctx: BakeContext) -> None:
    eps = ctx.tolerance
    # Materialize candidates before touching any attribute
    groups = [
        el for el in ctx.document.descendants()
        if el.kind is ElementKind.GROUP and el.has_attribute("transform")
    ]

    for group in groups:
        if hoist_group_transform(group, eps):
            ctx.stats.groups_hoisted += 1
        else:
            ctx.stats.groups_skipped += 1


def hoist_group_transform(group: Element, eps: float) -> bool:
    """Move ``group``'s transform onto its children. Returns False if nothing changed."""
    if not is_valid_transform(group, eps) or not is_valid_attrs(group):
        logger.debug("Skip <g>: own transform or attributes not bakeable")
        return False

    children = group.element_children()
    for child in children:
        if not is_shape(child.kind) or not is_bakeable(child, eps):
            logger.debug("Skip <g>: child <%s> not bakeable", child.tag)
            return False

    ts = group.transform()
    if ts is None:
        return False

    for child in children:
        child_ts = child.transform()
        if child_ts is not None:
            # Group applies after the child's own transform
            child.set("transform", TransformValue(ts.append(child_ts)))
        else:
            child.set("transform", TransformValue(ts))

    group.remove("transform")
    return True
