"""Tests for command normalization: arity, implicit repetition, shorthand reflection."""

from __future__ import annotations

import pytest

from vectoricon.engine.errors import MalformedPathData
from vectoricon.svg.commands import ARITY, Command
from vectoricon.svg.normalizer import normalize, reflect_control_point
from vectoricon.svg.pathdata import parse_path_data


def _letters(commands: list[Command]) -> list[str]:
    return [c.letter for c in commands]


def test_simple_path():
    commands = parse_path_data("M0,0L10,10z")
    assert _letters(commands) == ["M", "L", "z"]
    assert commands[1].args == [10.0, 10.0]
    assert commands[2].args == []


def test_implicit_repetition_opens_same_letter():
    commands = parse_path_data("M0 0l1 2 3 4 5 6")
    assert _letters(commands) == ["M", "l", "l", "l", "z"]
    assert [c.args for c in commands[1:4]] == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]


def test_implicit_repetition_of_moveto():
    commands = parse_path_data("M1 2 3 4z")
    assert _letters(commands) == ["M", "M", "z"]


@pytest.mark.parametrize("letter", sorted(k for k, v in ARITY.items() if v > 0 and k != "s"))
def test_runs_consume_exact_multiples_of_arity(letter):
    arity = ARITY[letter]
    numbers = " ".join(str(i) for i in range(arity * 3))
    commands = parse_path_data(f"M0 0{letter}{numbers}")
    run = [c for c in commands if c.letter == letter and c is not commands[0]]
    assert len(run) == 3
    assert all(len(c.args) == arity for c in run)


def test_single_axis_lines_take_one_or_two_arguments():
    commands = parse_path_data("M0 0h24v24H0 2 4z")
    assert [c.args for c in commands[1:]] == [[24.0], [24.0], [0.0, 2.0], [4.0], []]


def test_short_final_repetition_is_kept():
    commands = parse_path_data("M0 0L1 2 3z")
    assert [c.args for c in commands[1:3]] == [[1.0, 2.0], [3.0]]


def test_number_before_command_is_malformed():
    with pytest.raises(MalformedPathData) as exc:
        parse_path_data("10 10 L1 1")
    assert exc.value.offset == 0


def test_number_after_close_is_malformed():
    with pytest.raises(MalformedPathData):
        parse_path_data("M0 0z 5 5")


def test_unknown_command_is_kept():
    commands = parse_path_data("M0 0Q1 1 2 2z")
    assert _letters(commands) == ["M", "Q", "z"]
    assert commands[1].args == [1.0, 1.0, 2.0, 2.0]
    assert commands[1].opcode == "~UNKNOWN~"


def test_shorthand_reflects_previous_relative_cubic():
    commands = parse_path_data("M0 0c1 1 2 2 3 3s4 4 5 5z")
    s = commands[2]
    assert s.letter == "s"
    # end (3, 3) minus second control point (2, 2)
    assert s.args == [1.0, 1.0, 4.0, 4.0, 5.0, 5.0]


def test_shorthand_reflects_absolute_cubic():
    commands = parse_path_data("M0 0C1 1 2 5 6 8s4 4 5 5z")
    assert commands[2].args[:2] == [4.0, 3.0]


def test_shorthand_chain_reflects_previous_shorthand():
    commands = parse_path_data("M0 0c0 0 1 0 2 2s1 3 4 4 2 1 3 3z")
    first, second = commands[2], commands[3]
    assert first.args == [1.0, 2.0, 1.0, 3.0, 4.0, 4.0]
    assert second.letter == "s"
    assert second.args == [3.0, 1.0, 2.0, 1.0, 3.0, 3.0]


def test_shorthand_without_cubic_predecessor_uses_current_point():
    commands = parse_path_data("M0 0l5 5s4 4 5 5z")
    assert commands[2].args[:2] == [0.0, 0.0]


def test_shorthand_as_first_command_uses_current_point():
    commands = parse_path_data("s4 4 5 5z")
    assert commands[0].args == [0.0, 0.0, 4.0, 4.0, 5.0, 5.0]


def test_absolute_shorthand_is_not_synthesized():
    commands = parse_path_data("M0 0C1 1 2 2 3 3S4 4 5 5z")
    assert commands[2].letter == "S"
    assert commands[2].args == [4.0, 4.0, 5.0, 5.0]
    assert commands[2].opcode == "CUBIC_TO_SHORTHAND"


def test_reflection_is_rounded():
    previous = Command("c", [0.0, 0.0, 0.333, 0.0, 1.0, 0.0])
    assert reflect_control_point(previous) == (0.67, 0.0)


def test_reflection_formula_matches_point_reflection():
    # Absolute control (cx, cy) and end (ex, ey): reflected point 2e - c,
    # expressed relative to e.
    cx, cy, ex, ey = 3.0, -2.0, 7.0, 4.0
    previous = Command("C", [0.0, 0.0, cx, cy, ex, ey])
    dx, dy = reflect_control_point(previous)
    assert (ex + dx, ey + dy) == (2 * ex - cx, 2 * ey - cy)


def test_normalize_empty_stream():
    assert normalize([]) == []
