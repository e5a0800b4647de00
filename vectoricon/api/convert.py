"""POST /api/convert — SVG document → vector icon command stream."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from vectoricon.config import Settings
from vectoricon.dependencies import get_settings
from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.errors import ConversionError
from vectoricon.engine.pipeline import create_converter
from vectoricon.models.requests import ConvertRequest
from vectoricon.models.responses import ConvertResponse, DiagnosticModel
from vectoricon.svg.serializer import serialize_lines

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    start = time.perf_counter()

    config = ConverterConfig(
        scale_x=req.scale_x,
        scale_y=req.scale_y,
        translate_x=req.translate_x,
        translate_y=req.translate_y,
        group_traversal=req.group_traversal or settings.vectoricon_group_traversal,
        strict=settings.vectoricon_strict if req.strict is None else req.strict,
        skip_unfilled_paths=req.skip_unfilled_paths,
    )

    try:
        ctx = create_converter(config).convert(req.svg)
    except ConversionError as e:
        logger.info("Conversion rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return ConvertResponse(
        output=ctx.text,
        lines=serialize_lines(ctx.lines),
        canvas_width=ctx.canvas_width,
        shapes_converted=ctx.num_converted,
        diagnostics=[
            DiagnosticModel(kind=d.kind.value, element=d.element, message=d.message)
            for d in ctx.diagnostics
        ],
        processing_time_ms=round(elapsed, 3),
    )
