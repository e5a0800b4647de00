"""ConversionContext — the single mutable state object of one conversion run.

TransformContext → immutable scale/translate threaded through every handler
OutputLine → one emitted command line
ConversionContext → lines, diagnostics and bookkeeping for one document
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vectoricon.engine.errors import Diagnostic, DiagnosticKind

Arg = float | str


@dataclass(frozen=True)
class TransformContext:
    """Uniform scale + translate applied to coordinates."""

    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0


@dataclass(frozen=True)
class OutputLine:
    opcode: str
    args: tuple[Arg, ...] = ()
    # Emitted as-is, without argument list or trailing comma (warning lines)
    verbatim: bool = False


@dataclass
class ConversionContext:
    """Shared state flowing through the document walker."""

    transform: TransformContext = field(default_factory=TransformContext)
    # Raw SVG code
    svg_raw: str = ""
    # viewBox width, emitted as CANVAS_DIMENSIONS
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    lines: list[OutputLine] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    # Shapes converted, keyed by tag name
    converted: dict[str, int] = field(default_factory=dict)
    # Label of the element being dispatched (tag#index), set by the walker
    current_element: str = ""

    def warn(self, kind: DiagnosticKind, element: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(kind, element, message))

    def count(self, tag: str) -> None:
        self.converted[tag] = self.converted.get(tag, 0) + 1

    @property
    def num_converted(self) -> int:
        return sum(self.converted.values())

    @property
    def skipped(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is DiagnosticKind.SKIPPED_SHAPE]

    @property
    def text(self) -> str:
        from vectoricon.svg.serializer import serialize_document

        return serialize_document(self.lines)
