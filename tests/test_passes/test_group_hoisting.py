"""Tests for B1.01 group hoisting."""

from tests.conftest import GROUP_SVG, KEEP_GROUPS_SVG, attrs_of

from shapebake.engine.context import BakeContext
from shapebake.engine.passes.p1_01_group_hoisting import group_hoisting, hoist_group_transform
from shapebake.svg.parser import parse_svg
from shapebake.svg.transform import Transform
from shapebake.utils.math_helpers import DEFAULT_EPSILON


def _hoist(svg: str) -> BakeContext:
    ctx = BakeContext(document=parse_svg(svg))
    group_hoisting(ctx)
    return ctx


def test_group_transform_pushed_to_children():
    ctx = _hoist(GROUP_SVG)
    group = ctx.document.root.children[0]
    assert not group.has_attribute("transform")
    assert ctx.stats.groups_hoisted == 1

    first, second, third = group.children
    # Child's own transform applies first, then the group's
    assert first.transform() == Transform.parse("translate(10 20) scale(2) scale(2)")
    assert second.transform() == Transform.parse("translate(10 20) scale(2)")
    assert third.transform() == Transform.parse("translate(10 20) scale(2)")
    # Geometry itself is untouched by hoisting
    assert attrs_of(second)["x"] == "10"


def test_composition_order_with_rotation():
    ctx = _hoist(
        "<svg><g transform='translate(100 0)'>"
        "<circle cx='0' cy='0' r='1' transform='rotate(90) translate(10 0)'/>"
        "</g></svg>"
    )
    circle = ctx.document.root.children[0].children[0]
    x, y = circle.transform().apply(0, 0)
    assert abs(x - 100.0) < 1e-9
    assert abs(y - 10.0) < 1e-9


def test_group_left_in_tree():
    ctx = _hoist(GROUP_SVG)
    assert ctx.document.root.children[0].tag == "g"
    assert len(ctx.document.root.children[0].children) == 3


def test_non_proportional_group_untouched():
    ctx = _hoist(KEEP_GROUPS_SVG)
    first_group = ctx.document.root.children[0]
    assert attrs_of(first_group)["transform"] == "scale(2 3)"
    assert not first_group.children[0].has_attribute("transform")


def test_masked_group_untouched():
    ctx = _hoist(KEEP_GROUPS_SVG)
    masked = ctx.document.root.children[2]
    assert attrs_of(masked) == {"mask": "url(#m)", "transform": "scale(2)"}
    assert not masked.children[0].has_attribute("transform")
    assert ctx.stats.groups_hoisted == 0
    assert ctx.stats.groups_skipped == 2


def test_one_bad_child_blocks_whole_group():
    ctx = _hoist(
        "<svg><g transform='scale(2)'>"
        "<rect x='1' y='1' width='1' height='1'/>"
        "<rect x='1' y='1' width='1' height='1' fill='url(#g)'/>"
        "<circle cx='1' cy='1' r='1' transform='translate(3 3)'/>"
        "</g></svg>"
    )
    group = ctx.document.root.children[0]
    assert group.has_attribute("transform")
    first, second, third = group.children
    assert not first.has_attribute("transform")
    assert not second.has_attribute("transform")
    assert third.transform() == Transform.translate(3, 3)


def test_child_kinds_must_be_shapes():
    for child in ("<path d='M0 0L1 1'/>", "<g/>", "<text>hi</text>"):
        ctx = _hoist(f"<svg><g transform='scale(2)'><rect/>{child}</g></svg>")
        assert ctx.document.root.children[0].has_attribute("transform")


def test_child_with_skew_blocks_group():
    ctx = _hoist("<svg><g transform='scale(2)'><rect transform='skewX(20)'/></g></svg>")
    assert ctx.document.root.children[0].has_attribute("transform")


def test_child_with_units_blocks_group():
    ctx = _hoist("<svg><g transform='scale(2)'><circle cx='5mm' r='1'/></g></svg>")
    assert ctx.document.root.children[0].has_attribute("transform")


def test_empty_group_transform_dropped():
    doc = parse_svg("<svg><g transform='scale(2)'/></svg>")
    group = doc.root.children[0]
    assert hoist_group_transform(group, DEFAULT_EPSILON)
    assert not group.has_attribute("transform")


def test_empty_group_counted_as_hoisted():
    ctx = _hoist("<svg><g transform='translate(3 4)'>\n</g></svg>")
    assert not ctx.document.root.children[0].has_attribute("transform")
    assert ctx.stats.groups_hoisted == 1


def test_nested_groups_only_inner_hoisted():
    ctx = _hoist(
        "<svg><g transform='translate(5 5)'>"
        "<g transform='scale(2)'><rect x='1' y='1'/></g>"
        "</g></svg>"
    )
    outer = ctx.document.root.children[0]
    inner = outer.children[0]
    assert outer.has_attribute("transform")
    assert not inner.has_attribute("transform")
    assert inner.children[0].transform() == Transform.scale(2)
