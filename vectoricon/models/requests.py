"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale_x: float = Field(default=1.0, description="Horizontal scale applied to coordinates")
    scale_y: float = Field(default=1.0, description="Vertical scale applied to coordinates")
    translate_x: float = Field(default=0.0, description="Horizontal offset for absolute coordinates")
    translate_y: float = Field(default=0.0, description="Vertical offset for absolute coordinates")
    group_traversal: Literal["all", "first"] | None = Field(
        default=None,
        description="'all' converts every group, 'first' keeps the legacy single-group walk",
    )
    strict: bool | None = Field(default=None, description="Fail instead of skipping broken shapes")
    skip_unfilled_paths: bool = Field(default=True, description="Drop <path fill=\"none\"> elements")
