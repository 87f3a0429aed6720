"""Bake configuration: tolerances and output precision."""

from __future__ import annotations

from dataclasses import dataclass

from shapebake.utils.math_helpers import DEFAULT_EPSILON


@dataclass
class BakeConfig:
    """Controls how transforms are judged and how results are written."""

    # Fuzzy comparison epsilon for scale/skew/rotation checks
    tolerance: float = DEFAULT_EPSILON

    # Digits kept when writing numbers back out
    precision: int = 8

    # Hoist group transforms onto their children before baking shapes
    hoist_groups: bool = True
