"""POST /api/bake — hoist and bake transforms in an SVG document."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from shapebake.config import Settings
from shapebake.dependencies import get_settings
from shapebake.engine.config import BakeConfig
from shapebake.engine.context import BakeContext
from shapebake.engine.pipeline import create_pipeline
from shapebake.models.requests import BakeRequest
from shapebake.models.responses import BakeResponse
from shapebake.svg.parser import SvgParseError, parse_svg
from shapebake.svg.serializer import serialize_svg

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/bake", response_model=BakeResponse)
def bake(request: BakeRequest, settings: Settings = Depends(get_settings)) -> BakeResponse:
    start = time.perf_counter()

    try:
        doc = parse_svg(request.svg)
    except SvgParseError as e:
        logger.info("Rejected bake request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    precision = request.options.precision
    config = BakeConfig(
        precision=settings.default_precision if precision is None else precision,
        hoist_groups=request.options.hoist_groups,
    )
    pipeline = create_pipeline(config)
    ctx = pipeline.run(BakeContext(document=doc, config=config))

    elapsed = (time.perf_counter() - start) * 1000
    return BakeResponse(
        svg=serialize_svg(ctx.document, precision=config.precision),
        stats=ctx.stats.as_dict(),
        processing_time_ms=round(elapsed, 1),
        tasks_completed=len(ctx.completed_tasks),
        tasks_failed=len(ctx.errors),
        errors=ctx.errors,
    )
