"""Write the line-oriented command stream."""

from __future__ import annotations

from collections.abc import Iterable

from vectoricon.engine.context import Arg, OutputLine
from vectoricon.svg.commands import Command
from vectoricon.utils.math_helpers import format_number, has_fraction

FRACTION_MARKER = "f"


def format_arg(arg: Arg) -> str:
    """Numbers in shortest form, suffixed with the marker when fractional. Strings verbatim."""
    if isinstance(arg, str):
        return arg
    text = format_number(arg)
    if has_fraction(arg):
        text += FRACTION_MARKER
    return text


def command_to_line(command: Command) -> OutputLine:
    return OutputLine(command.opcode, tuple(command.args))


def serialize_line(line: OutputLine) -> str:
    """`OPCODE, a1, a2,` — every argument followed by a comma."""
    if line.verbatim:
        return line.opcode
    parts = [line.opcode + ","]
    parts.extend(format_arg(arg) + "," for arg in line.args)
    return " ".join(parts)


def serialize_lines(lines: Iterable[OutputLine]) -> list[str]:
    return [serialize_line(line) for line in lines]


def serialize_document(lines: Iterable[OutputLine]) -> str:
    """Join lines; the last line of the whole document loses its trailing comma."""
    text = "\n".join(serialize_lines(lines))
    if text.endswith(","):
        text = text[:-1]
    return text
