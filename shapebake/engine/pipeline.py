"""Pipeline orchestrator — runs tasks in dependency order with adaptive gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from shapebake.engine.config import BakeConfig
from shapebake.engine.context import BakeContext
from shapebake.engine.registry import TaskRegistry, get_registry

logger = logging.getLogger(__name__)

_TASK_PACKAGES = ["shapebake.engine.passes"]


class Pipeline:
    """Orchestrates the bake passes."""

    def __init__(
        self,
        registry: TaskRegistry | None = None,
        config: BakeConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or BakeConfig()

    def run(self, ctx: BakeContext) -> BakeContext:
        """Run every registered task on the given context."""
        start = time.perf_counter()

        skip_ids = self._adaptive_gate(ctx)
        ordered = [s for s in self.registry.resolve_order() if s.id not in skip_ids]

        logger.info(
            "Pipeline: %d tasks queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        for spec in ordered:
            self._run_task(spec.id, spec.fn, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d tasks in %.1fms (%s)",
            len(ctx.completed_tasks),
            len(ordered),
            total,
            ", ".join(f"{k}={v}" for k, v in ctx.stats.as_dict().items()),
        )
        return ctx

    @staticmethod
    def _run_task(task_id: str, fn, ctx: BakeContext) -> None:
        t0 = time.perf_counter()
        try:
            fn(ctx)
            ctx.completed_tasks.add(task_id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", task_id, elapsed)
        except Exception as e:
            ctx.errors[task_id] = str(e)
            logger.warning("  %s FAILED: %s", task_id, e)

    def _adaptive_gate(self, ctx: BakeContext) -> set[str]:
        """Determine which tasks to skip based on document characteristics.

        - Documents without a single transform attribute skip every task
        - Group hoisting can be switched off in the config
        """
        skip: set[str] = set()

        if not ctx.document.has_transforms():
            skip.update(s.id for s in self.registry.resolve_order())

        if not ctx.config.hoist_groups:
            skip.add("B1.01")

        return skip


def register_tasks() -> None:
    """Import all pass modules so @task decorators fire."""
    for package_name in _TASK_PACKAGES:
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline(config: BakeConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance over the global registry."""
    register_tasks()
    return Pipeline(config=config)
