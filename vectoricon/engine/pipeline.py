"""Converter — walks the SVG tree and dispatches shapes to registered handlers."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.context import ConversionContext, OutputLine
from vectoricon.engine.errors import ConversionError, DiagnosticKind
from vectoricon.engine.registry import HandlerRegistry, load_handlers
from vectoricon.svg.parser import canvas_size, is_identity_transform, load_document, local_name

logger = logging.getLogger(__name__)

GROUP_TRANSFORM_WARNING = "<g> with a transform not handled"


class Converter:
    """Orchestrates one SVG document → command stream conversion."""

    def __init__(
        self,
        registry: HandlerRegistry | None = None,
        config: ConverterConfig | None = None,
    ) -> None:
        self.registry = registry or load_handlers()
        self.config = config or ConverterConfig()

    def convert(self, svg_text: str) -> ConversionContext:
        """Convert a full document. The first line is always CANVAS_DIMENSIONS."""
        start = time.perf_counter()
        root = load_document(svg_text)
        width, height = canvas_size(root)

        ctx = ConversionContext(
            transform=self.config.transform(),
            svg_raw=svg_text,
            canvas_width=width,
            canvas_height=height,
        )
        # Width is typed like any other numeric argument (fractional → f marker)
        ctx.lines.append(OutputLine("CANVAS_DIMENSIONS", (width,)))
        ctx.lines.extend(self.convert_node(root, ctx))

        logger.info(
            "Converted %d shapes (%d skipped, %d diagnostics) in %.1fms",
            ctx.num_converted,
            len(ctx.skipped),
            len(ctx.diagnostics),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def convert_node(self, node: ET.Element, ctx: ConversionContext) -> list[OutputLine]:
        """Output lines for the children of one container element."""
        output: list[OutputLine] = []
        # Bookkeeping at entry, restored when legacy traversal discards this level
        converted_before = dict(ctx.converted)
        diagnostics_before = len(ctx.diagnostics)

        for index, child in enumerate(node):
            tag = local_name(child.tag)

            if tag == "g":
                if not is_identity_transform(child.get("transform")):
                    label = self._label(child, tag, index)
                    logger.warning("Group %s has transform %r; subtree not converted", label, child.get("transform"))
                    ctx.warn(DiagnosticKind.UNSUPPORTED_TRANSFORM, label, child.get("transform", ""))
                    output.append(OutputLine(GROUP_TRANSFORM_WARNING, verbatim=True))
                    continue
                if self.config.group_traversal == "first":
                    ctx.converted = converted_before
                    del ctx.diagnostics[diagnostics_before:]
                    return self.convert_node(child, ctx)
                output.extend(self.convert_node(child, ctx))
                continue

            spec = self.registry.get(tag)
            if spec is None:
                logger.debug("No handler for <%s>, ignoring", tag)
                continue

            ctx.current_element = self._label(child, tag, index)
            try:
                lines = spec.fn(child, ctx, self.config)
            except ConversionError as e:
                if self.config.strict:
                    raise
                logger.warning("Skipping %s: %s", ctx.current_element, e)
                ctx.warn(DiagnosticKind.SKIPPED_SHAPE, ctx.current_element, str(e))
                continue
            if lines:
                ctx.count(tag)
            output.extend(lines)

        return output

    @staticmethod
    def _label(element: ET.Element, tag: str, index: int) -> str:
        element_id = element.get("id")
        return f"{tag}#{element_id}" if element_id else f"{tag}#{index}"


def create_converter(config: ConverterConfig | None = None) -> Converter:
    """Factory function for creating a converter instance."""
    return Converter(config=config)


def convert_svg(svg_text: str, config: ConverterConfig | None = None) -> ConversionContext:
    return create_converter(config).convert(svg_text)
