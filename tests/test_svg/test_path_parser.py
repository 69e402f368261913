"""Tests for the path-data parser."""

import pytest

from iconlint.svg.path_parser import Command, MalformedPathError, Segment, parse_path


def test_parse_basic_commands():
    segs = parse_path("M0 0L10 10H5V2Z")
    assert [s.command for s in segs] == [
        Command.MOVE_ABS,
        Command.LINE_ABS,
        Command.HORIZ_ABS,
        Command.VERT_ABS,
        Command.CLOSE,
    ]
    assert segs[1].operands == (10.0, 10.0)
    assert segs[2].operands == (5.0,)
    assert segs[4].operands == ()


def test_relative_commands_are_case_sensitive():
    segs = parse_path("m1 2l3 4h5v6c1 2 3 4 5 6s1 2 3 4q1 2 3 4t1 2a1 1 0 0 1 2 2z")
    assert all(s.command.is_relative for s in segs[:-1])
    assert segs[-1].command is Command.CLOSE


def test_compact_numbers():
    segs = parse_path("M.5.5l-1-1 .25.75")
    assert segs[0].operands == (0.5, 0.5)
    assert segs[1].operands == (-1.0, -1.0)
    assert segs[2].operands == (0.25, 0.75)


def test_implicit_repetition_splits_segments():
    segs = parse_path("M0 0 1 1 2 2l1 1 2 2")
    assert [s.command.value for s in segs] == ["M", "L", "L", "l", "l"]
    assert segs[2].operands == (2.0, 2.0)


def test_relative_move_repeats_as_relative_line():
    segs = parse_path("m1 1 2 2")
    assert [s.command.value for s in segs] == ["m", "l"]


def test_arc_flags_without_separators():
    segs = parse_path("M0 0a1 1 0 011 1")
    assert segs[1].operands == (1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0)


def test_scientific_notation_is_lossless():
    segs = parse_path("M1e-3 2.5E2")
    assert segs[0].operands == (0.001, 250.0)


def test_lowercase_close_path():
    assert parse_path("M0 0L1 1z")[-1].command is Command.CLOSE


@pytest.mark.parametrize(
    "d",
    [
        "",
        "   ",
        "L0 0",
        "M0 0X1 1",
        "M0 0L1",
        "M0 0C1 2 3 4 5",
        "M0 0Z1",
        "M0 0;L1 1",
        "M0 0L1 -",
        "M0 0a1 1 0 2 1 1 1",
    ],
)
def test_malformed_paths(d):
    with pytest.raises(MalformedPathError):
        parse_path(d)


def test_malformed_error_names_fragment():
    with pytest.raises(MalformedPathError) as exc:
        parse_path("M0 0L1 2 3")
    assert exc.value.fragment == "L1 2 3"


def test_segment_rejects_wrong_arity():
    with pytest.raises(MalformedPathError):
        Segment(Command.LINE_ABS, (1.0,))


def test_segment_str_and_end():
    seg = parse_path("M0 0C1 2 3 4 5.5 6")[1]
    assert str(seg) == "C1 2 3 4 5.5 6"
    assert seg.end == (5.5, 6.0)
    assert parse_path("M0 0H3")[1].end is None
