"""Validity gate shared by group hoisting and shape baking.

Three pure predicates; an element is only touched when all of them pass.
None of them mutates anything.
"""

from __future__ import annotations

from shapebake.engine.passes.shapes import SHAPE_GEOMETRY
from shapebake.svg.document import Element
from shapebake.svg.values import FuncLink, Length, TransformValue
from shapebake.utils.math_helpers import DEFAULT_EPSILON

# Paint servers and filters live in their own coordinate space, which would
# need transforming too.
_LINKABLE_ATTRS = ("fill", "stroke", "filter")
_FORBIDDEN_ATTRS = ("mask", "clip-path")


def is_valid_transform(el: Element, eps: float = DEFAULT_EPSILON) -> bool:
    """Only proportional, unskewed transforms can be folded into size attributes."""
    value = el.get("transform")
    if value is None:
        return True
    if not isinstance(value, TransformValue):
        return False

    ts = value.transform.with_tolerance(eps)
    if ts.has_scale() and not ts.has_proportional_scale():
        return False
    if ts.has_skew():
        return False
    return True


def is_valid_attrs(el: Element) -> bool:
    """The element must not link to other elements that would also need transforming."""
    for name in _LINKABLE_ATTRS:
        if isinstance(el.get(name), FuncLink):
            return False
    return not any(el.has_attribute(name) for name in _FORBIDDEN_ATTRS)


def is_valid_coords(el: Element) -> bool:
    """We can process only coordinates without units."""
    geometry = SHAPE_GEOMETRY.get(el.kind)
    if geometry is None:
        return False
    for name in geometry.coordinate_attrs:
        value = el.get(name)
        if value is None:
            continue
        # Unparseable values ("auto", "1e") are never guessed at
        if not isinstance(value, Length) or not value.is_bare:
            return False
    return True


def is_bakeable(el: Element, eps: float = DEFAULT_EPSILON) -> bool:
    return is_valid_transform(el, eps) and is_valid_attrs(el) and is_valid_coords(el)
