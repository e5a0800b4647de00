"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from vectoricon import __version__
from vectoricon.engine.registry import get_registry
from vectoricon.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        handlers_registered=get_registry().count,
    )
