"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    tasks_registered: int = 0


class BakeResponse(BaseModel):
    svg: str
    stats: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    tasks_completed: int = 0
    tasks_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
