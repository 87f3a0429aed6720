"""Fuzzy float comparison and number formatting. No engine imports."""

from __future__ import annotations

import math

# Absolute and relative tolerance for float comparisons
DEFAULT_EPSILON = 1e-9


def fuzzy_eq(a: float, b: float, eps: float = DEFAULT_EPSILON) -> bool:
    """Equality within an absolute-or-relative tolerance."""
    return math.isclose(a, b, rel_tol=eps, abs_tol=eps)


def is_fuzzy_zero(value: float, eps: float = DEFAULT_EPSILON) -> bool:
    return abs(value) <= eps


def format_number(value: float, precision: int = 8) -> str:
    """Shortest decimal form: 20.0 → "20", 12.50 → "12.5", -0.0 → "0"."""
    rounded = round(value, precision)
    if rounded == 0:
        return "0"
    text = f"{rounded:.{precision}f}".rstrip("0").rstrip(".")
    return text
