"""Affine transform type — a 2×3 SVG matrix backed by a numpy homogeneous array.

Matrix layout follows SVG's ``matrix(a b c d e f)``::

    | a c e |
    | b d f |
    | 0 0 1 |

Decomposition is ``M = translate · rotate(θ) · shear(k) · scale(sx, sy)``:

    sx = hypot(a, b)          θ = atan2(b, a)
    sy = det / sx             k = (a·c + b·d) / (sx · |sy|)

A reflection therefore shows up as a negative ``sy``.
"""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

from shapebake.utils.math_helpers import DEFAULT_EPSILON, format_number, fuzzy_eq, is_fuzzy_zero


class TransformParseError(ValueError):
    """Raised when an SVG transform list cannot be parsed."""


_TRANSFORM_ITEM_RE = re.compile(r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)\s*,?")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"\s*,?\s*")
_ARG_COUNTS = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


class Transform:
    """2D affine transform."""

    __slots__ = ("m", "eps")

    def __init__(self, m: NDArray[np.float64] | None = None, eps: float = DEFAULT_EPSILON) -> None:
        if m is None:
            self.m = np.eye(3, dtype=float)
        else:
            self.m = np.array(m, dtype=float).reshape(3, 3)
        self.eps = eps

    # ── constructors ──────────────────────────────────────────────────────

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def from_values(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> Transform:
        return cls(np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=float))

    @classmethod
    def translate(cls, tx: float, ty: float = 0.0) -> Transform:
        return cls.from_values(1.0, 0.0, 0.0, 1.0, tx, ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> Transform:
        if sy is None:
            sy = sx
        return cls.from_values(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @classmethod
    def rotate(cls, angle: float, cx: float = 0.0, cy: float = 0.0) -> Transform:
        a = math.radians(angle)
        cos_a, sin_a = math.cos(a), math.sin(a)
        rot = cls.from_values(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)
        if cx == 0.0 and cy == 0.0:
            return rot
        return cls.translate(cx, cy).append(rot).append(cls.translate(-cx, -cy))

    @classmethod
    def skew_x(cls, angle: float) -> Transform:
        return cls.from_values(1.0, 0.0, math.tan(math.radians(angle)), 1.0, 0.0, 0.0)

    @classmethod
    def skew_y(cls, angle: float) -> Transform:
        return cls.from_values(1.0, math.tan(math.radians(angle)), 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def parse(cls, text: str) -> Transform:
        """Parse an SVG transform list, e.g. ``"translate(10 20) scale(2)"``.

        Items are composed left to right, so the rightmost item is applied to
        points first. An empty string is the identity.
        """
        result = cls.identity()
        pos = 0
        text = text.strip()
        while pos < len(text):
            match = _TRANSFORM_ITEM_RE.match(text, pos)
            if match is None:
                raise TransformParseError(f"Invalid transform list at offset {pos}: {text!r}")
            name, raw_args = match.group(1), match.group(2)
            args = _parse_args(name, raw_args)
            if len(args) not in _ARG_COUNTS[name]:
                raise TransformParseError(f"{name}() takes {_ARG_COUNTS[name]} arguments, got {len(args)}")
            result = result.append(_item_transform(name, args))
            pos = match.end()
        return result

    # ── algebra ───────────────────────────────────────────────────────────

    def append(self, other: Transform) -> Transform:
        """Return ``self · other``: ``other`` is applied to points first, then ``self``."""
        return Transform(self.m @ other.m, eps=self.eps)

    def with_tolerance(self, eps: float) -> Transform:
        return Transform(self.m, eps=eps)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        res = self.m @ np.array([x, y, 1.0], dtype=float)
        return (float(res[0]), float(res[1]))

    @property
    def values(self) -> tuple[float, float, float, float, float, float]:
        m = self.m
        return (
            float(m[0, 0]), float(m[1, 0]),
            float(m[0, 1]), float(m[1, 1]),
            float(m[0, 2]), float(m[1, 2]),
        )

    # ── decomposition ─────────────────────────────────────────────────────

    def get_translate(self) -> tuple[float, float]:
        return (float(self.m[0, 2]), float(self.m[1, 2]))

    def get_scale(self) -> tuple[float, float]:
        a, b, c, d, _, _ = self.values
        sx = math.hypot(a, b)
        if is_fuzzy_zero(sx, self.eps):
            return (0.0, math.hypot(c, d))
        return (sx, (a * d - b * c) / sx)

    def get_rotate(self) -> float:
        """Rotation angle in degrees, in (-180, 180]."""
        a, b, _, _, _, _ = self.values
        return math.degrees(math.atan2(b, a))

    def get_skew(self) -> float:
        """Shear angle in degrees (0 for any similarity transform)."""
        a, b, c, d, _, _ = self.values
        sx, sy = self.get_scale()
        if is_fuzzy_zero(sx, self.eps) or is_fuzzy_zero(sy, self.eps):
            return 0.0
        shear = (a * c + b * d) / (sx * abs(sy))
        return math.degrees(math.atan(shear))

    def has_translate(self) -> bool:
        tx, ty = self.get_translate()
        return not (is_fuzzy_zero(tx, self.eps) and is_fuzzy_zero(ty, self.eps))

    def has_scale(self) -> bool:
        sx, sy = self.get_scale()
        return not (fuzzy_eq(sx, 1.0, self.eps) and fuzzy_eq(sy, 1.0, self.eps))

    def has_proportional_scale(self) -> bool:
        sx, sy = self.get_scale()
        return fuzzy_eq(sx, sy, self.eps)

    def has_skew(self) -> bool:
        return not is_fuzzy_zero(self.get_skew(), self.eps)

    def has_rotate(self) -> bool:
        return not is_fuzzy_zero(self.get_rotate(), self.eps)

    def is_default(self) -> bool:
        return bool(np.allclose(self.m, np.eye(3), rtol=0.0, atol=self.eps))

    # ── output ────────────────────────────────────────────────────────────

    def to_svg(self, precision: int = 8) -> str:
        a, b, c, d, e, f = self.values

        def fmt(v: float) -> str:
            return format_number(v, precision)

        if self.is_default():
            return ""
        linear_identity = fuzzy_eq(a, 1.0, self.eps) and fuzzy_eq(d, 1.0, self.eps)
        no_cross = is_fuzzy_zero(b, self.eps) and is_fuzzy_zero(c, self.eps)
        if no_cross and linear_identity:
            if is_fuzzy_zero(f, self.eps):
                return f"translate({fmt(e)})"
            return f"translate({fmt(e)} {fmt(f)})"
        if no_cross and not self.has_translate():
            if fuzzy_eq(a, d, self.eps):
                return f"scale({fmt(a)})"
            return f"scale({fmt(a)} {fmt(d)})"
        return "matrix(" + " ".join(fmt(v) for v in (a, b, c, d, e, f)) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.allclose(self.m, other.m, rtol=self.eps, atol=self.eps))

    def __hash__(self) -> int:
        return hash(tuple(round(v, 6) for v in self.values))

    def __repr__(self) -> str:
        return "Transform(" + ", ".join(format_number(v) for v in self.values) + ")"


def _item_transform(name: str, args: list[float]) -> Transform:
    if name == "matrix":
        return Transform.from_values(*args)
    if name == "translate":
        return Transform.translate(args[0], args[1] if len(args) == 2 else 0.0)
    if name == "scale":
        return Transform.scale(args[0], args[1] if len(args) == 2 else None)
    if name == "rotate":
        if len(args) == 3:
            return Transform.rotate(args[0], args[1], args[2])
        return Transform.rotate(args[0])
    if name == "skewX":
        return Transform.skew_x(args[0])
    return Transform.skew_y(args[0])


def _parse_args(name: str, raw_args: str) -> list[float]:
    """Read a comma/whitespace separated number list; any other text is an error."""
    args: list[float] = []
    text = raw_args.strip()
    pos = 0
    while pos < len(text):
        number = _NUMBER_RE.match(text, pos)
        if number is None:
            raise TransformParseError(f"Invalid {name}() arguments: {raw_args!r}")
        args.append(float(number.group()))
        pos = _SEPARATOR_RE.match(text, number.end()).end()
    if text.endswith(","):
        raise TransformParseError(f"Trailing comma in {name}() arguments: {raw_args!r}")
    return args
