"""Per-kind geometry table for the shapes whose transforms can be baked."""

from __future__ import annotations

from dataclasses import dataclass

from shapebake.svg.document import ElementKind


@dataclass(frozen=True)
class ShapeGeometry:
    # (x, y) attribute pairs mapped through the full transform
    positions: tuple[tuple[str, str], ...]
    # Attributes scaled by the uniform scale factor
    sizes: tuple[str, ...] = ()
    # Axis-aligned primitives cannot absorb a rotation
    rotation_invariant: bool = False

    @property
    def coordinate_attrs(self) -> tuple[str, ...]:
        return tuple(name for pair in self.positions for name in pair) + self.sizes


SHAPE_GEOMETRY: dict[ElementKind, ShapeGeometry] = {
    ElementKind.RECT: ShapeGeometry(
        positions=(("x", "y"),),
        sizes=("width", "height", "rx", "ry"),
    ),
    ElementKind.CIRCLE: ShapeGeometry(
        positions=(("cx", "cy"),),
        sizes=("r",),
        rotation_invariant=True,
    ),
    ElementKind.ELLIPSE: ShapeGeometry(
        positions=(("cx", "cy"),),
        sizes=("rx", "ry"),
    ),
    ElementKind.LINE: ShapeGeometry(
        positions=(("x1", "y1"), ("x2", "y2")),
        rotation_invariant=True,
    ),
}


def is_shape(kind: ElementKind) -> bool:
    return kind in SHAPE_GEOMETRY
