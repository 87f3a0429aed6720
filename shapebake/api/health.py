"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from shapebake import __version__
from shapebake.engine.registry import get_registry
from shapebake.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        tasks_registered=get_registry().count,
    )
