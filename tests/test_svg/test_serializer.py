"""Tests for the command-stream serializer."""

from __future__ import annotations

from vectoricon.engine.context import OutputLine, TransformContext
from vectoricon.svg.pathdata import convert_path_data
from vectoricon.svg.serializer import format_arg, serialize_document, serialize_line, serialize_lines


def test_format_arg_marks_fractions():
    assert format_arg(10.0) == "10"
    assert format_arg(10.5) == "10.5f"
    assert format_arg(-0.25) == "-0.25f"
    assert format_arg("2") == "2"


def test_line_format():
    assert serialize_line(OutputLine("MOVE_TO", (0.0, 0.0))) == "MOVE_TO, 0, 0,"
    assert serialize_line(OutputLine("CLOSE")) == "CLOSE,"


def test_verbatim_line():
    assert serialize_line(OutputLine("<g> with a transform not handled", verbatim=True)) == (
        "<g> with a transform not handled"
    )


def test_simple_path_scenario():
    lines = serialize_lines(convert_path_data("M0,0L10,10z", TransformContext()))
    assert lines == ["MOVE_TO, 0, 0,", "LINE_TO, 10, 10,", "CLOSE,"]


def test_document_trims_final_comma_only():
    text = serialize_document(convert_path_data("M0,0L10,10z"))
    assert text == "MOVE_TO, 0, 0,\nLINE_TO, 10, 10,\nCLOSE"


def test_shorthand_scenario():
    lines = serialize_lines(convert_path_data("M0 0c1 1 2 2 3 3s4 4 5 5z"))
    assert lines == [
        "MOVE_TO, 0, 0,",
        "R_CUBIC_TO, 1, 1, 2, 2, 3, 3,",
        "R_CUBIC_TO, 1, 1, 4, 4, 5, 5,",
        "CLOSE,",
    ]


def test_fractional_coordinates_after_transform():
    t = TransformContext(scale_x=0.5, scale_y=0.5, translate_x=0.25)
    lines = serialize_lines(convert_path_data("M3 3H1 2", t))
    assert lines == ["MOVE_TO, 1.75f, 1.5f,", "H_LINE_TO, 0.75f, 1.25f,", "CLOSE,"]


def test_unknown_opcode_line():
    lines = serialize_lines(convert_path_data("M0 0Q1 1 2 2"))
    assert lines[1] == "~UNKNOWN~, 1, 1, 2, 2,"


def test_empty_document():
    assert serialize_document([]) == ""
