"""Coordinate transformer — scale/translate coordinate arguments in place."""

from __future__ import annotations

from vectoricon.engine.context import TransformContext
from vectoricon.svg.commands import ArgRole, Command, is_absolute, is_known, roles_for
from vectoricon.utils.math_helpers import round_hundredths


def transform_value(value: float, role: ArgRole, absolute: bool, transform: TransformContext) -> float:
    """Apply scale (and translate for absolute commands) to one argument, then round.

    Radii, angles and flags are rounded but never scaled or translated.
    Translation is not applied to relative deltas.
    """
    if role is ArgRole.X:
        value *= transform.scale_x
        if absolute:
            value += transform.translate_x
    elif role is ArgRole.Y:
        value *= transform.scale_y
        if absolute:
            value += transform.translate_y
    return round_hundredths(value)


def transform_commands(commands: list[Command], transform: TransformContext) -> list[Command]:
    for command in commands:
        if not is_known(command.letter):
            command.args[:] = [round_hundredths(v) for v in command.args]
            continue
        absolute = is_absolute(command.letter)
        roles = roles_for(command.letter)
        command.args[:] = [
            transform_value(value, role, absolute, transform)
            for value, role in zip(command.args, roles)
        ]
    return commands
