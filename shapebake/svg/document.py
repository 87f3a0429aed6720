"""In-memory SVG document tree with typed attributes."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from shapebake.svg.transform import Transform
from shapebake.svg.values import AttributeValue, Length, TransformValue


class ElementKind(enum.Enum):
    GROUP = "g"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> ElementKind:
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


@dataclass(eq=False)
class Element:
    """A single SVG element. Identity-compared: two nodes are never "equal"."""

    tag: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    parent: Element | None = None
    # Character data, kept only so serialization round-trips
    text: str | None = None
    tail: str | None = None

    @property
    def kind(self) -> ElementKind:
        return ElementKind.from_tag(self.tag)

    # ── attributes ────────────────────────────────────────────────────────

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get(self, name: str) -> AttributeValue | None:
        return self.attributes.get(name)

    def set(self, name: str, value: AttributeValue) -> None:
        self.attributes[name] = value

    def remove(self, name: str) -> None:
        self.attributes.pop(name, None)

    def length_or_default(self, name: str, default: Length | None = None) -> Length:
        """Return the attribute as a ``Length``, or ``default`` (zero) when absent or not a length."""
        value = self.attributes.get(name)
        if isinstance(value, Length):
            return value
        return default if default is not None else Length.zero()

    def transform(self) -> Transform | None:
        value = self.attributes.get("transform")
        if isinstance(value, TransformValue):
            return value.transform
        return None

    # ── tree ──────────────────────────────────────────────────────────────

    def append(self, child: Element) -> Element:
        child.parent = self
        self.children.append(child)
        return child

    def element_children(self) -> list[Element]:
        return list(self.children)

    def ancestors(self) -> Iterator[Element]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self) -> Iterator[Element]:
        """Yield this element and every element below it, in document order."""
        stack: list[Element] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"<Element {self.tag} {len(self.attributes)} attrs, {len(self.children)} children>"


@dataclass
class Document:
    """Parsed SVG document: the ``<svg>`` root plus namespace declarations."""

    root: Element
    namespaces: dict[str, str] = field(default_factory=dict)

    def descendants(self) -> Iterator[Element]:
        return self.root.descendants()

    def has_transforms(self) -> bool:
        return any(el.has_attribute("transform") for el in self.descendants())
