"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shapebake.svg.document import Element


# Sample SVGs, one element kind per line so attribute order is easy to read

TRANSLATED_RECT_SVG = (
    "<svg>"
    "<rect height='10' width='10' x='10' y='10' transform='translate(10 20)'/>"
    "</svg>"
)

SCALED_RECT_SVG = (
    "<svg>"
    "<rect height='10' rx='2' ry='2' width='10' x='10' y='10' transform='translate(10 20) scale(2)'/>"
    "</svg>"
)

SCALED_CIRCLE_SVG = (
    "<svg>"
    "<circle cx='10' cy='10' r='15' transform='translate(10 20) scale(2)'/>"
    "</svg>"
)

SCALED_ELLIPSE_SVG = (
    "<svg>"
    "<ellipse cx='10' cy='10' rx='15' ry='15' transform='translate(10 20) scale(2)'/>"
    "</svg>"
)

SCALED_LINE_SVG = (
    "<svg>"
    "<line x1='10' x2='10' y1='15' y2='15' transform='translate(10 20) scale(2)'/>"
    "</svg>"
)

GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <g transform="translate(10 20) scale(2)">
    <rect height="10" width="10" x="10" y="10" transform="scale(2)"/>
    <rect height="10" width="10" x="10" y="10"/>
    <rect height="10" width="10" x="10" y="10"/>
  </g>
</svg>'''

KEEP_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <g transform="scale(2 3)">
    <rect height="10" width="10" x="10" y="10"/>
  </g>
  <mask id="m"/>
  <g mask="url(#m)" transform="scale(2)">
    <rect height="10" width="10" x="10" y="10"/>
  </g>
</svg>'''

MIXED_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <g id="plain" transform="scale(2)">
    <rect height="10" width="10" x="10" y="10"/>
  </g>
  <mask id="m"/>
  <g id="masked" mask="url(#m)" transform="scale(2)">
    <rect height="10" width="10" x="10" y="10"/>
  </g>
</svg>'''

NO_TRANSFORM_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" stroke-width="2">
  <circle cx="12" cy="12" r="10"/>
  <line x1="18" x2="18" y1="20" y2="10"/>
</svg>'''


def attrs_of(el: Element) -> dict[str, str]:
    """Attribute values as they would be written out."""
    return {name: value.to_svg() for name, value in el.attributes.items()}


@pytest.fixture
def group_svg() -> str:
    return GROUP_SVG


@pytest.fixture
def keep_groups_svg() -> str:
    return KEEP_GROUPS_SVG


@pytest.fixture
def mixed_groups_svg() -> str:
    return MIXED_GROUPS_SVG
