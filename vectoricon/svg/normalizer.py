"""Command normalizer — tokens → fixed-arity Command list.

A small state machine keyed on the current command and how many arguments
it has collected:

- a letter opens a new command,
- a number fills the current command, opening an implicit repeat of the
  same letter once it is full,
- the relative shorthand ``s`` gets its first control point synthesized
  before its first explicit argument lands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vectoricon.engine.errors import MalformedPathData
from vectoricon.svg.commands import Command, is_cubic, is_known
from vectoricon.svg.tokenizer import LetterToken, Token
from vectoricon.utils.math_helpers import round_hundredths

logger = logging.getLogger(__name__)


def reflect_control_point(previous: Command | None) -> tuple[float, float]:
    """First control point of a relative shorthand curve.

    Reflection of the previous cubic's last control point about its end
    point, relative to that end point. Falls back to (0, 0), i.e. coincident
    with the current point, when the previous command is not a cubic.
    """
    if previous is None or not is_cubic(previous.letter) or len(previous.args) < 4:
        return (0.0, 0.0)
    args = previous.args
    return (
        round_hundredths(args[-2] - args[-4]),
        round_hundredths(args[-1] - args[-3]),
    )


def normalize(tokens: Iterable[Token]) -> list[Command]:
    commands: list[Command] = []

    for token in tokens:
        if isinstance(token, LetterToken):
            if not is_known(token.letter):
                logger.warning("Unsupported path command %r at offset %d", token.letter, token.offset)
            commands.append(Command(token.letter, offset=token.offset))
            continue

        if not commands:
            raise MalformedPathData("Number before any command", token.offset)

        current = commands[-1]
        if current.arity == 0:
            raise MalformedPathData(f"Number after zero-argument command {current.letter!r}", token.offset)
        if current.is_full:
            current = Command(current.letter, offset=token.offset)
            commands.append(current)

        if current.letter == "s" and not current.args:
            previous = commands[-2] if len(commands) > 1 else None
            current.args.extend(reflect_control_point(previous))

        current.args.append(token.value)

    return commands
