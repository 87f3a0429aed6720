"""BakeContext — the single mutable state object flowing through all tasks.

Per-element results are written straight into the Document tree.
Run-level bookkeeping (counters, errors) lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapebake.engine.config import BakeConfig
from shapebake.svg.document import Document


@dataclass
class BakeStats:
    groups_hoisted: int = 0
    groups_skipped: int = 0
    shapes_baked: int = 0
    shapes_skipped: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "groups_hoisted": self.groups_hoisted,
            "groups_skipped": self.groups_skipped,
            "shapes_baked": self.shapes_baked,
            "shapes_skipped": self.shapes_skipped,
        }


@dataclass
class BakeContext:
    """Shared state for one bake run over one document."""

    document: Document
    config: BakeConfig = field(default_factory=BakeConfig)
    stats: BakeStats = field(default_factory=BakeStats)

    # --- Pipeline metadata ---
    completed_tasks: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def tolerance(self) -> float:
        return self.config.tolerance
