"""Path command model — arity, opcode and argument-role tables.

Every per-letter rule of the path mini-language lives here so the
normalizer, transformer and serializer consult one place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

UNKNOWN_OPCODE = "~UNKNOWN~"


class ArgRole(enum.Enum):
    X = "x"
    Y = "y"
    RADIUS = "radius"
    ANGLE = "angle"
    FLAG = "flag"


OPCODES: dict[str, str] = {
    "M": "MOVE_TO",
    "m": "R_MOVE_TO",
    "L": "LINE_TO",
    "l": "R_LINE_TO",
    "H": "H_LINE_TO",
    "h": "R_H_LINE_TO",
    "V": "V_LINE_TO",
    "v": "R_V_LINE_TO",
    "A": "ARC_TO",
    "a": "R_ARC_TO",
    "C": "CUBIC_TO",
    "S": "CUBIC_TO_SHORTHAND",
    "c": "R_CUBIC_TO",
    # The relative shorthand is emitted as a full relative cubic once its
    # first control point has been synthesized.
    "s": "R_CUBIC_TO",
    "Z": "CLOSE",
    "z": "CLOSE",
}

ARITY: dict[str, int] = {
    "C": 6,
    "c": 6,
    "s": 6,
    "S": 4,
    "L": 2,
    "l": 2,
    "H": 2,
    "h": 2,
    "V": 2,
    "v": 2,
    "A": 7,
    "a": 7,
    "M": 2,
    "m": 2,
    "Z": 0,
    "z": 0,
}

_ARC_ROLES = (
    ArgRole.RADIUS,
    ArgRole.RADIUS,
    ArgRole.ANGLE,
    ArgRole.FLAG,
    ArgRole.FLAG,
    ArgRole.X,
    ArgRole.Y,
)


def _build_roles() -> dict[str, tuple[ArgRole, ...]]:
    roles: dict[str, tuple[ArgRole, ...]] = {}
    for letter, arity in ARITY.items():
        if letter in "Aa":
            roles[letter] = _ARC_ROLES
        elif letter in "Hh":
            roles[letter] = (ArgRole.X,) * arity
        elif letter in "Vv":
            roles[letter] = (ArgRole.Y,) * arity
        else:
            roles[letter] = tuple(ArgRole.X if i % 2 == 0 else ArgRole.Y for i in range(arity))
    return roles


ARG_ROLES: dict[str, tuple[ArgRole, ...]] = _build_roles()


def opcode_for(letter: str) -> str:
    return OPCODES.get(letter, UNKNOWN_OPCODE)


def arity_for(letter: str) -> int | None:
    """Arguments per repetition, or None for letters with no known arity."""
    return ARITY.get(letter)


def roles_for(letter: str) -> tuple[ArgRole, ...]:
    return ARG_ROLES.get(letter, ())


def is_known(letter: str) -> bool:
    return letter in OPCODES


def is_absolute(letter: str) -> bool:
    return letter.isupper()


def is_cubic(letter: str) -> bool:
    """Any cubic variant, i.e. a command whose last control point can be reflected."""
    return "CUBIC_TO" in opcode_for(letter)


@dataclass
class Command:
    """One parsed path command with its fixed-arity argument list."""

    letter: str
    args: list[float] = field(default_factory=list)
    # Character offset of the command letter in the normalized path string
    offset: int = 0

    @property
    def opcode(self) -> str:
        return opcode_for(self.letter)

    @property
    def arity(self) -> int | None:
        return arity_for(self.letter)

    @property
    def is_full(self) -> bool:
        arity = self.arity
        return arity is not None and len(self.args) >= arity
