"""Tests for SVG parser."""

import pytest

from tests.conftest import GROUP_SVG, KEEP_GROUPS_SVG, NO_TRANSFORM_SVG

from shapebake.svg.document import ElementKind
from shapebake.svg.parser import SvgParseError, parse_length, parse_style, parse_svg
from shapebake.svg.transform import Transform
from shapebake.svg.values import Color, FuncLink, Length, Opaque, TransformValue, Unit


def test_parse_group_tree():
    doc = parse_svg(GROUP_SVG)
    assert doc.root.tag == "svg"
    group = doc.root.children[0]
    assert group.kind is ElementKind.GROUP
    assert [c.kind for c in group.children] == [ElementKind.RECT] * 3
    assert all(c.parent is group for c in group.children)


def test_namespace_is_stripped_from_tags():
    doc = parse_svg(GROUP_SVG)
    assert doc.namespaces == {"": "http://www.w3.org/2000/svg"}
    assert [el.tag for el in doc.descendants()] == ["svg", "g", "rect", "rect", "rect"]


def test_typed_lengths():
    doc = parse_svg('<svg><rect x="10" y="2.5px" width="50%" height="1e1"/></svg>')
    rect = doc.root.children[0]
    assert rect.get("x") == Length(10.0)
    assert rect.get("y") == Length(2.5, Unit.PX)
    assert rect.get("width") == Length(50.0, Unit.PERCENT)
    assert rect.get("height") == Length(10.0)


def test_unparseable_length_is_opaque():
    doc = parse_svg('<svg><rect x="auto" width="10"/></svg>')
    assert doc.root.children[0].get("x") == Opaque("auto")


def test_transform_is_typed():
    doc = parse_svg(GROUP_SVG)
    value = doc.root.children[0].get("transform")
    assert isinstance(value, TransformValue)
    assert value.transform == Transform.parse("translate(10 20) scale(2)")


def test_bad_transform_is_opaque():
    doc = parse_svg('<svg><rect transform="translate(10"/></svg>')
    rect = doc.root.children[0]
    assert rect.get("transform") == Opaque("translate(10")
    assert rect.transform() is None


def test_func_links_and_colors():
    doc = parse_svg(KEEP_GROUPS_SVG)
    masked = doc.root.children[2]
    assert masked.get("mask") == FuncLink("m")

    doc = parse_svg("<svg><rect fill=\"url('#grad') red\" stroke=\"#000\"/></svg>")
    rect = doc.root.children[0]
    assert rect.get("fill") == FuncLink("grad", "red")
    assert rect.get("stroke") == Color("#000")


def test_style_declarations_become_attributes():
    doc = parse_svg('<svg><rect fill="red" style="fill: url(#g); stroke-width:3"/></svg>')
    rect = doc.root.children[0]
    assert not rect.has_attribute("style")
    assert rect.get("fill") == FuncLink("g")
    assert rect.get("stroke-width") == Length(3.0)


def test_parse_style():
    assert parse_style("a:1; b : two ;;c:") == {"a": "1", "b": "two"}


def test_parse_length():
    assert parse_length(" -4.5mm ") == Length(-4.5, Unit.MM)
    assert parse_length(".5") == Length(0.5)
    assert parse_length("1 2") is None
    assert parse_length("10 px") is None


def test_xlink_prefix_kept():
    doc = parse_svg(
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
        '<use xlink:href="#a"/></svg>'
    )
    use = doc.root.children[0]
    assert use.kind is ElementKind.OTHER
    assert use.get("xlink:href") == Opaque("#a")
    assert doc.namespaces["xlink"] == "http://www.w3.org/1999/xlink"


def test_character_data_kept():
    doc = parse_svg(NO_TRANSFORM_SVG)
    assert doc.root.text.strip() == ""
    assert doc.root.children[0].tail is not None


def test_malformed_xml():
    with pytest.raises(SvgParseError):
        parse_svg("<svg><rect></svg>")


def test_root_must_be_svg():
    with pytest.raises(SvgParseError):
        parse_svg("<not-svg/>")
