"""Path-data pipeline: tokenize → normalize → transform → output lines."""

from __future__ import annotations

from vectoricon.engine.context import OutputLine, TransformContext
from vectoricon.svg.commands import Command
from vectoricon.svg.normalizer import normalize
from vectoricon.svg.serializer import command_to_line
from vectoricon.svg.tokenizer import prepare_path_data, tokenize
from vectoricon.svg.transformer import transform_commands


def parse_path_data(d: str) -> list[Command]:
    """Untransformed, fixed-arity commands for a `d` attribute (close appended if missing)."""
    return normalize(tokenize(prepare_path_data(d)))


def convert_commands(d: str, transform: TransformContext | None = None) -> list[Command]:
    return transform_commands(parse_path_data(d), transform or TransformContext())


def convert_path_data(d: str, transform: TransformContext | None = None) -> list[OutputLine]:
    return [command_to_line(c) for c in convert_commands(d, transform)]
