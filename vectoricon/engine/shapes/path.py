"""<path> — path data through the tokenize/normalize/transform pipeline."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.context import ConversionContext, OutputLine
from vectoricon.engine.errors import DiagnosticKind, MissingAttribute
from vectoricon.engine.registry import handler
from vectoricon.svg.commands import is_known
from vectoricon.svg.pathdata import convert_commands
from vectoricon.svg.serializer import command_to_line

logger = logging.getLogger(__name__)


@handler(tag="path", description="Path data → MOVE_TO/LINE_TO/CUBIC_TO/... lines")
def path(element: ET.Element, ctx: ConversionContext, config: ConverterConfig) -> list[OutputLine]:
    # Paths like <path fill="none" d="M0 0h24v24H0z"/> only pad the canvas
    if config.skip_unfilled_paths and element.get("fill") == "none":
        logger.debug("Skipping unfilled path %s", ctx.current_element)
        return []

    d = element.get("d")
    if d is None:
        raise MissingAttribute("path", "d")

    commands = convert_commands(d, ctx.transform)
    for command in commands:
        if not is_known(command.letter):
            ctx.warn(
                DiagnosticKind.UNSUPPORTED_COMMAND,
                ctx.current_element,
                f"command {command.letter!r} at offset {command.offset}",
            )
    return [command_to_line(c) for c in commands]
