"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    handlers_registered: int = 0


class DiagnosticModel(BaseModel):
    kind: str
    element: str
    message: str


class ConvertResponse(BaseModel):
    output: str
    lines: list[str] = Field(default_factory=list)
    canvas_width: float = 0.0
    shapes_converted: int = 0
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
