"""<rect> → ROUND_RECT, x, y, width, height, rx."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.context import ConversionContext, OutputLine
from vectoricon.engine.registry import handler
from vectoricon.svg.parser import read_length
from vectoricon.utils.math_helpers import round_hundredths


@handler(tag="rect", description="Rect → ROUND_RECT (origin transformed, size and corner radius kept)")
def rect(element: ET.Element, ctx: ConversionContext, config: ConverterConfig) -> list[OutputLine]:
    t = ctx.transform
    x = read_length(element, "x", 0.0) * t.scale_x + t.translate_x
    y = read_length(element, "y", 0.0) * t.scale_y + t.translate_y
    width = read_length(element, "width")
    height = read_length(element, "height")
    rx = read_length(element, "rx", 0.0)
    # Every value is rounded and typed like a path argument; rx is numeric, not the raw attribute text
    args = (x, y, width, height, rx)
    return [OutputLine("ROUND_RECT", tuple(round_hundredths(v) for v in args))]
