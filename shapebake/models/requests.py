"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BakeOptions(BaseModel):
    hoist_groups: bool = Field(default=True, description="Push group transforms onto shape children first")
    precision: int | None = Field(default=None, ge=0, le=15, description="Digits kept in output numbers")


class BakeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    options: BakeOptions = Field(default_factory=BakeOptions)
