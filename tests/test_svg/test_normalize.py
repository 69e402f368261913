"""Tests for the coordinate normalizer views."""

import pytest

from iconlint.svg.normalize import absolutize, arc_to_cubics, expand, unarc, unshorten, walk
from iconlint.svg.path_parser import Command, parse_path


def test_walk_tracks_cursor_and_close():
    steps = list(walk(parse_path("M1 1l2 0v3h-1zl1 1")))
    ends = [end for _seg, _start, end in steps]
    assert ends == [(1, 1), (3, 1), (3, 4), (2, 4), (1, 1), (2, 2)]
    # Each segment starts where the previous one ended
    starts = [start for _seg, start, _end in steps]
    assert starts[1:] == ends[:-1]


def test_absolutize_resolves_each_command_kind():
    segs = absolutize(parse_path("m1 1h2v3l-1 -1c1 1 2 2 3 3a1 1 0 0 1 1 1z"))
    assert [str(s) for s in segs] == [
        "M1 1",
        "H3",
        "V4",
        "L2 3",
        "C3 4 4 5 5 6",
        "A1 1 0 0 1 6 7",
        "Z",
    ]


def test_absolutize_leaves_absolute_commands_alone():
    segs = parse_path("M1 1L5 5H2V9")
    assert absolutize(segs) == segs


def test_relative_round_trip():
    d = "m2 3l4 -1h5v-6c1 1 2 2 3 3s1 2 4 4q1 0 2 2t3 3z"
    original = parse_path(d)
    absolute = absolutize(original)
    recovered = []
    for (seg, (x0, y0), _end), rel in zip(walk(absolute), original):
        ops = seg.operands
        if seg.command is Command.HORIZ_ABS:
            recovered.append((ops[0] - x0,))
        elif seg.command is Command.VERT_ABS:
            recovered.append((ops[0] - y0,))
        else:
            recovered.append(tuple(v - (x0 if i % 2 == 0 else y0) for i, v in enumerate(ops)))
    assert recovered == [s.operands for s in original]


def test_unshorten_reflects_previous_cubic_control():
    segs = unshorten(parse_path("M0 0C1 1 2 1 3 0S5 -1 6 0"))
    assert str(segs[2]) == "C4 -1 5 -1 6 0"


def test_unshorten_relative_smooth_cubic():
    segs = unshorten(parse_path("M0 0c1 1 2 1 3 0s2 -1 3 0"))
    assert segs[2].command is Command.CUBIC_REL
    assert segs[2].operands == (1.0, -1.0, 2.0, -1.0, 3.0, 0.0)


def test_unshorten_without_previous_curve_uses_current_point():
    segs = unshorten(parse_path("M2 2S4 4 6 2"))
    assert str(segs[1]) == "C2 2 4 4 6 2"


def test_unshorten_smooth_quadratic():
    segs = unshorten(parse_path("M0 0Q1 2 2 0T4 0"))
    assert str(segs[2]) == "Q3 -2 4 0"


def test_unarc_quarter_circle_is_one_cubic():
    segs = unarc(parse_path("M0 10A10 10 0 0 1 10 0"))
    assert [s.command for s in segs] == [Command.MOVE_ABS, Command.CUBIC_ABS]
    assert segs[1].end == (10.0, 0.0)


def test_unarc_half_circle_is_two_cubics():
    segs = arc_to_cubics((2, 12), (22, 12), 10, 10, 0, 0, 0)
    assert len(segs) == 2
    # The split point sits on the bottom of the circle (y grows downward)
    x, y = segs[0].end
    assert x == pytest.approx(12)
    assert y == pytest.approx(22)


def test_unarc_full_circle_via_large_arcs():
    segs = unarc(parse_path("M0 12a12 12 0 1 0 24 0a12 12 0 1 0-24 0"))
    assert sum(s.command is Command.CUBIC_ABS for s in segs) == 4


def test_unarc_three_quarter_arc():
    assert len(arc_to_cubics((0, 10), (10, 0), 10, 10, 0, 1, 0)) == 3


def test_unarc_degenerate_arcs():
    assert arc_to_cubics((1, 1), (1, 1), 5, 5, 0, 0, 1) == []
    line = arc_to_cubics((0, 0), (4, 0), 0, 5, 0, 0, 1)
    assert [str(s) for s in line] == ["L4 0"]


def test_unarc_scales_small_radii():
    segs = arc_to_cubics((0, 0), (10, 0), 1, 1, 0, 0, 1)
    assert len(segs) == 2
    assert segs[0].end == pytest.approx((5.0, -5.0))


def test_unarc_keeps_following_relative_commands_consistent():
    segs = unarc(parse_path("M0 0a5 5 0 0 1 10 0l1 1"))
    ends = [end for _seg, _start, end in walk(segs)]
    assert ends[-1] == pytest.approx((11.0, 1.0))


def test_expand_has_only_absolute_lines_and_curves():
    segs = expand(parse_path("m1 1s1 1 2 2t1 1a1 1 0 0 0 2 0h1v1z"))
    allowed = {"M", "L", "H", "V", "C", "Q", "Z"}
    assert {s.command.value for s in segs} <= allowed
