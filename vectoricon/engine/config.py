"""Converter configuration — controls transform and traversal behavior."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from vectoricon.engine.context import TransformContext

GroupTraversal = Literal["all", "first"]


@dataclass
class ConverterConfig:
    """Per-run options for the document walker."""

    # Coordinate transform
    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    # "all": accumulate every child group's output.
    # "first": legacy behavior, the first untransformed <g> among siblings
    # replaces that level's output and ends its traversal.
    group_traversal: GroupTraversal = "all"

    # Raise per-shape errors instead of skipping the shape
    strict: bool = False

    # <path fill="none"> is usually a padding/bounds rectangle
    skip_unfilled_paths: bool = True

    def transform(self) -> TransformContext:
        return TransformContext(
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            translate_x=self.translate_x,
            translate_y=self.translate_y,
        )
