"""shapebake transform-baking engine."""

from __future__ import annotations

from shapebake.engine.config import BakeConfig
from shapebake.engine.context import BakeContext, BakeStats
from shapebake.engine.pipeline import Pipeline, create_pipeline
from shapebake.engine.registry import get_registry, task
from shapebake.svg.document import Document
from shapebake.svg.parser import parse_svg
from shapebake.svg.serializer import serialize_svg


def bake_document(doc: Document, config: BakeConfig | None = None) -> BakeContext:
    """Hoist group transforms and bake shape transforms, mutating ``doc`` in place."""
    pipeline = create_pipeline(config)
    ctx = BakeContext(document=doc, config=pipeline.config)
    return pipeline.run(ctx)


def bake_svg(svg_text: str, config: BakeConfig | None = None) -> str:
    """Parse, bake and serialize in one go."""
    ctx = bake_document(parse_svg(svg_text), config)
    return serialize_svg(ctx.document, precision=ctx.config.precision)


__all__ = [
    "task",
    "get_registry",
    "BakeConfig",
    "BakeContext",
    "BakeStats",
    "Pipeline",
    "create_pipeline",
    "bake_document",
    "bake_svg",
]
