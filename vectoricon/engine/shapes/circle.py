"""<circle> → CIRCLE, cx, cy, r."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.context import ConversionContext, OutputLine
from vectoricon.engine.registry import handler
from vectoricon.svg.parser import read_length
from vectoricon.utils.math_helpers import round_hundredths


@handler(tag="circle", description="Circle → CIRCLE (center transformed, radius kept)")
def circle(element: ET.Element, ctx: ConversionContext, config: ConverterConfig) -> list[OutputLine]:
    t = ctx.transform
    cx = read_length(element, "cx", 0.0) * t.scale_x + t.translate_x
    cy = read_length(element, "cy", 0.0) * t.scale_y + t.translate_y
    r = read_length(element, "r")
    # Rounded and typed like path arguments, so fractional values carry the f marker
    return [OutputLine("CIRCLE", (round_hundredths(cx), round_hundredths(cy), round_hundredths(r)))]
