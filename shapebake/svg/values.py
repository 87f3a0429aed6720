"""Typed attribute values.

A closed set of variants: ``Length``, ``TransformValue``, ``FuncLink``,
``Color`` and ``Opaque``. Read sites dispatch with ``isinstance`` and treat
any variant they do not expect as "not usable" rather than as a default.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from shapebake.svg.transform import Transform
from shapebake.utils.math_helpers import format_number


class Unit(str, enum.Enum):
    NONE = ""
    PX = "px"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PC = "pc"
    EM = "em"
    EX = "ex"
    PERCENT = "%"


@dataclass(frozen=True)
class Length:
    num: float
    unit: Unit = Unit.NONE

    @classmethod
    def zero(cls) -> Length:
        return cls(0.0, Unit.NONE)

    @property
    def is_bare(self) -> bool:
        return self.unit is Unit.NONE

    def scaled(self, factor: float) -> Length:
        return Length(self.num * factor, self.unit)

    def to_svg(self, precision: int = 8) -> str:
        return format_number(self.num, precision) + self.unit.value


@dataclass(frozen=True)
class TransformValue:
    transform: Transform

    def to_svg(self, precision: int = 8) -> str:
        return self.transform.to_svg(precision)


@dataclass(frozen=True)
class FuncLink:
    """A ``url(#id)`` reference to another element (paint server, filter, mask...).

    Paint values may carry a fallback after the reference, e.g. ``url(#g) red``.
    """

    target_id: str
    fallback: str = ""

    def to_svg(self, precision: int = 8) -> str:
        link = f"url(#{self.target_id})"
        return f"{link} {self.fallback}" if self.fallback else link


@dataclass(frozen=True)
class Color:
    text: str

    def to_svg(self, precision: int = 8) -> str:
        return self.text


@dataclass(frozen=True)
class Opaque:
    """Any value this engine does not interpret; written back verbatim."""

    text: str

    def to_svg(self, precision: int = 8) -> str:
        return self.text


AttributeValue = Union[Length, TransformValue, FuncLink, Color, Opaque]
