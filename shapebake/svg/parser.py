"""SVG parser — facade over xml.etree.

Converts raw SVG string → Document with every attribute resolved to a typed
value (lengths, transforms, ``url(#id)`` links, colors). ``style``
declarations are split into presentation attributes first, so later passes
only ever look at one place.
"""

from __future__ import annotations

import io
import logging
import re
import xml.etree.ElementTree as ET

from shapebake.svg.document import Document, Element
from shapebake.svg.transform import Transform, TransformParseError
from shapebake.svg.values import AttributeValue, Color, FuncLink, Length, Opaque, TransformValue, Unit

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XML_NS = "http://www.w3.org/XML/1998/namespace"


class SvgParseError(ValueError):
    """Raised for malformed XML or a document whose root is not ``<svg>``."""


LENGTH_ATTRS = frozenset({
    "x", "y", "width", "height",
    "cx", "cy", "r", "rx", "ry",
    "x1", "y1", "x2", "y2",
    "stroke-width",
})

COLOR_ATTRS = frozenset({"fill", "stroke", "color", "stop-color", "flood-color", "lighting-color"})

# Presentation attributes that can carry a url(#id) reference
LINK_ATTRS = frozenset({"fill", "stroke", "filter", "mask", "clip-path", "marker-start", "marker-mid", "marker-end"})

_LENGTH_RE = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(px|in|cm|mm|pt|pc|em|ex|%)?\s*$"
)
_FUNC_LINK_RE = re.compile(r"""^\s*url\(\s*['"]?#([^'")\s]+)['"]?\s*\)(?:\s*(\S.*?))?\s*$""")


def parse_svg(svg_text: str) -> Document:
    """Parse raw SVG text into a typed Document."""
    namespaces = _collect_namespaces(svg_text)
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    prefixes = {uri: prefix for prefix, uri in namespaces.items()}
    prefixes.setdefault(XML_NS, "xml")
    doc_root = _convert(root, prefixes)
    if doc_root.tag != "svg":
        raise SvgParseError(f"Root element is <{doc_root.tag}>, expected <svg>")

    doc = Document(root=doc_root, namespaces=namespaces)
    logger.info("Parsed SVG: %d elements", sum(1 for _ in doc.descendants()))
    return doc


def resolve_attribute(name: str, raw: str) -> AttributeValue:
    """Resolve a raw attribute string into its typed value."""
    if name == "transform":
        try:
            return TransformValue(Transform.parse(raw))
        except TransformParseError as e:
            logger.warning("Unparseable transform %r: %s", raw, e)
            return Opaque(raw)

    if name in LINK_ATTRS:
        link = _FUNC_LINK_RE.match(raw)
        if link:
            return FuncLink(link.group(1), link.group(2) or "")

    if name in LENGTH_ATTRS:
        length = parse_length(raw)
        if length is not None:
            return length
        return Opaque(raw)

    if name in COLOR_ATTRS:
        return Color(raw.strip())

    return Opaque(raw)


def parse_length(raw: str) -> Length | None:
    match = _LENGTH_RE.match(raw)
    if match is None:
        return None
    return Length(float(match.group(1)), Unit(match.group(2) or ""))


def parse_style(style: str) -> dict[str, str]:
    """Split ``"fill:red; stroke-width: 2"`` into a dict. Empty declarations are ignored."""
    decls: dict[str, str] = {}
    for chunk in style.split(";"):
        if ":" not in chunk:
            continue
        key, value = chunk.split(":", 1)
        key, value = key.strip(), value.strip()
        if key and value:
            decls[key] = value
    return decls


def _collect_namespaces(svg_text: str) -> dict[str, str]:
    namespaces: dict[str, str] = {}
    try:
        for _, (prefix, uri) in ET.iterparse(io.StringIO(svg_text), events=("start-ns",)):
            namespaces.setdefault(prefix, uri)
    except ET.ParseError:
        # Reported with a proper message by ET.fromstring
        pass
    return namespaces


def _qualify(name: str, prefixes: dict[str, str]) -> str:
    """'{uri}local' → 'prefix:local' (or 'local' for the SVG/default namespace)."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    if uri == SVG_NS:
        return local
    prefix = prefixes.get(uri, "")
    return f"{prefix}:{local}" if prefix else local


def _convert(node: ET.Element, prefixes: dict[str, str]) -> Element:
    raw_attrs = {_qualify(k, prefixes): v for k, v in node.attrib.items()}
    style = raw_attrs.pop("style", None)
    if style is not None:
        # Style declarations take precedence over presentation attributes
        raw_attrs.update(parse_style(style))

    el = Element(
        tag=_qualify(node.tag, prefixes),
        attributes={name: resolve_attribute(name, value) for name, value in raw_attrs.items()},
        text=node.text,
        tail=node.tail,
    )
    for child in node:
        if not isinstance(child.tag, str):
            continue
        el.append(_convert(child, prefixes))
    return el
