"""Tests for the per-letter command tables."""

from __future__ import annotations

from vectoricon.svg.commands import (
    ARG_ROLES,
    ARITY,
    OPCODES,
    UNKNOWN_OPCODE,
    ArgRole,
    Command,
    is_cubic,
    opcode_for,
    roles_for,
)


def test_every_letter_has_opcode_arity_and_roles():
    letters = set("MmLlHhVvAaCcSsZz")
    assert set(OPCODES) == letters
    assert set(ARITY) == letters
    assert set(ARG_ROLES) == letters
    for letter in letters:
        assert len(roles_for(letter)) == ARITY[letter]


def test_opcode_mapping():
    assert opcode_for("M") == "MOVE_TO"
    assert opcode_for("s") == "R_CUBIC_TO"
    assert opcode_for("c") == "R_CUBIC_TO"
    assert opcode_for("S") == "CUBIC_TO_SHORTHAND"
    assert opcode_for("Z") == opcode_for("z") == "CLOSE"
    assert opcode_for("Q") == UNKNOWN_OPCODE


def test_arc_roles():
    assert roles_for("a") == (
        ArgRole.RADIUS,
        ArgRole.RADIUS,
        ArgRole.ANGLE,
        ArgRole.FLAG,
        ArgRole.FLAG,
        ArgRole.X,
        ArgRole.Y,
    )


def test_single_axis_roles_ignore_parity():
    assert roles_for("H") == (ArgRole.X, ArgRole.X)
    assert roles_for("v") == (ArgRole.Y, ArgRole.Y)


def test_general_roles_alternate():
    assert roles_for("C") == (ArgRole.X, ArgRole.Y) * 3


def test_cubic_detection():
    assert all(is_cubic(letter) for letter in "CcSs")
    assert not any(is_cubic(letter) for letter in "MLlAz")


def test_command_fullness():
    command = Command("L", [1.0])
    assert not command.is_full
    command.args.append(2.0)
    assert command.is_full
    assert not Command("Q", [1.0] * 10).is_full
