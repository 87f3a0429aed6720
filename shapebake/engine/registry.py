"""Task registry — each bake pass is a plain function registered with ``@task``.

Usage:
    @task(id="B1.02", dependencies=["B1.01"])
    def shape_baking(ctx: BakeContext) -> None:
        ...

Pass modules under ``shapebake.engine.passes`` register themselves on import.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from shapebake.engine.context import BakeContext

logger = logging.getLogger(__name__)

TaskFn = Callable[["BakeContext"], None]


@dataclass
class TaskSpec:
    id: str
    fn: TaskFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TaskRegistry:
    def __init__(self) -> None:
        self._tasks: dict[str, TaskSpec] = {}

    def register(self, spec: TaskSpec) -> None:
        if spec.id in self._tasks:
            raise ValueError(f"Duplicate task ID: {spec.id}")
        self._tasks[spec.id] = spec
        logger.debug("Registered task %s", spec.id)

    def get(self, task_id: str) -> TaskSpec:
        return self._tasks[task_id]

    def resolve_order(self) -> list[TaskSpec]:
        """Dependencies first; ties broken by task id.

        Unknown dependency ids are ignored. Raises ``ValueError`` on a cycle.
        """
        waiting = {
            tid: {dep for dep in spec.dependencies if dep in self._tasks}
            for tid, spec in self._tasks.items()
        }
        ready = [tid for tid, deps in waiting.items() if not deps]
        heapq.heapify(ready)

        ordered: list[TaskSpec] = []
        while ready:
            tid = heapq.heappop(ready)
            ordered.append(self._tasks[tid])
            for other_id, deps in waiting.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        heapq.heappush(ready, other_id)

        if len(ordered) != len(self._tasks):
            stuck = sorted(set(self._tasks) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._tasks)


_registry = TaskRegistry()


def get_registry() -> TaskRegistry:
    return _registry


def task(*, id: str, dependencies: list[str] | None = None, description: str = ""):
    """Register the decorated function as a bake pass on the global registry."""

    def decorator(fn: TaskFn) -> TaskFn:
        _registry.register(TaskSpec(id=id, fn=fn, dependencies=list(dependencies or []), description=description))
        return fn

    return decorator
