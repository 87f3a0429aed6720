"""Write SVG markup back out from a typed Document."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from shapebake.svg.document import Document, Element


def serialize_svg(doc: Document, precision: int = 8, xml_declaration: bool = False) -> str:
    """Generate SVG markup. Attribute order is preserved; numbers are trimmed ("20", "12.5")."""
    parts: list[str] = []
    if xml_declaration:
        parts.append('<?xml version="1.0" encoding="UTF-8"?>\n')

    ns_attrs = [
        ("xmlns" if not prefix else f"xmlns:{prefix}", uri)
        for prefix, uri in doc.namespaces.items()
    ]
    _write_element(doc.root, parts, precision, ns_attrs)
    return "".join(parts)


def _write_element(
    el: Element,
    parts: list[str],
    precision: int,
    extra_attrs: list[tuple[str, str]] | None = None,
) -> None:
    attrs = list(extra_attrs or [])
    for name, value in el.attributes.items():
        text = value.to_svg(precision)
        # An identity transform serializes to ""; drop it rather than write transform=""
        if name == "transform" and text == "":
            continue
        attrs.append((name, text))

    attr_str = "".join(f" {name}={quoteattr(text)}" for name, text in attrs)

    if not el.children and not el.text:
        parts.append(f"<{el.tag}{attr_str}/>")
    else:
        parts.append(f"<{el.tag}{attr_str}>")
        if el.text:
            parts.append(escape(el.text))
        for child in el.children:
            _write_element(child, parts, precision)
        parts.append(f"</{el.tag}>")

    if el.tail:
        parts.append(escape(el.tail))
