"""C1.03 — Ineffective Segments.

Flag segments that draw nothing new: zero-length moves, lines and
directions, and curves that collapse into a straight line or a point.

Absolute commands are compared with the previous resolved point. That point
comes from a backward scan over the absolute view because H and V only
carry one axis; the scan keeps going until both axes are known.
"""

from __future__ import annotations

from dataclasses import dataclass

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check
from iconlint.svg.path_parser import Command, Segment
from iconlint.utils.math_helpers import format_number, remove_leading_zeros

_CURVES = {Command.CUBIC_ABS, Command.CUBIC_REL, Command.SMOOTH_CUBIC_ABS, Command.SMOOTH_CUBIC_REL}


@dataclass
class _Lookback:
    x: float | None = None
    y: float | None = None

    @property
    def resolved(self) -> bool:
        return self.x is not None and self.y is not None

    def learn(self, x: float | None, y: float | None) -> None:
        if self.x is None:
            self.x = x
        if self.y is None:
            self.y = y


def previous_point(absolute: list[Segment], index: int) -> tuple[float | None, float | None]:
    """Absolute point reached just before ``absolute[index]``."""
    state = _Lookback()
    i = index - 1
    while i >= 0 and not state.resolved:
        seg = absolute[i]
        cmd = seg.command
        if cmd is Command.HORIZ_ABS:
            state.learn(seg.operands[0], None)
        elif cmd is Command.VERT_ABS:
            state.learn(None, seg.operands[0])
        elif cmd is Command.CLOSE:
            # Close path lands on its subpath's move; jump straight there.
            i -= 1
            while i > 0 and absolute[i].command is not Command.MOVE_ABS:
                i -= 1
            continue
        else:
            state.learn(*seg.end)
        i -= 1
    return state.x, state.y


def returns_to_start(seg: Segment, prev: tuple[float | None, float | None]) -> bool:
    """True when the segment's endpoint is the point it starts from."""
    end = seg.operands[-2:]
    return end == (0, 0) if seg.command.is_relative else end == prev


def is_ineffective(seg: Segment, prev: tuple[float | None, float | None]) -> bool:
    cmd = seg.command
    ops = seg.operands

    if cmd in (Command.HORIZ_REL, Command.VERT_REL):
        return ops[0] == 0
    if cmd in (Command.MOVE_REL, Command.LINE_REL):
        return ops[0] == 0 and ops[1] == 0
    # Curves are ineffective when they collapse into a straight line (control
    # points on the chord ends) or end where they start with the last control
    # point on that same spot.
    if cmd is Command.SMOOTH_CUBIC_REL:
        return ops[:2] == (0, 0) or returns_to_start(seg, prev)
    if cmd is Command.CUBIC_REL:
        return ops[:4] == (0, 0, 0, 0) or (returns_to_start(seg, prev) and ops[2:4] == (0, 0))

    x_prev, y_prev = prev
    if cmd is Command.HORIZ_ABS:
        return ops[0] == x_prev
    if cmd is Command.VERT_ABS:
        return ops[0] == y_prev
    if cmd in (Command.MOVE_ABS, Command.LINE_ABS):
        return ops == (x_prev, y_prev)
    if cmd is Command.SMOOTH_CUBIC_ABS:
        return ops[2:] == (x_prev, y_prev) and ops[:2] == ops[2:]
    if cmd is Command.CUBIC_ABS:
        if ops[2:4] != ops[4:]:
            return False
        return ops[:2] == (x_prev, y_prev) or returns_to_start(seg, prev)
    return False


def find_ineffective_segments(segments: list[Segment], absolute: list[Segment]) -> list[Segment]:
    return [seg for seg, prev in _with_previous(segments, absolute) if is_ineffective(seg, prev)]


def _with_previous(segments: list[Segment], absolute: list[Segment]):
    for index, seg in enumerate(segments):
        yield seg, previous_point(absolute, index) if index else (None, None)


def describe(seg: Segment, prev: tuple[float | None, float | None] = (None, None)) -> str:
    """'c0 0, 0 0, 5 5' style text plus a resolution tip."""
    cmd = seg.command
    ops = seg.operands
    text = cmd.value + " ".join(format_number(n) for n in ops[:2])
    tip = "should be removed"

    if cmd in _CURVES:
        text += ", " + " ".join(format_number(n) for n in ops[2:4])
        if len(ops) == 6:
            text += ", " + " ".join(format_number(n) for n in ops[4:])
        # A curve that comes back to its start draws nothing; otherwise it is a line
        if not returns_to_start(seg, prev):
            x, y = ops[-2], ops[-1]
            line = Command.LINE_REL if cmd.is_relative else Command.LINE_ABS
            tip = f'should be "{line.value}{remove_leading_zeros(x)} {remove_leading_zeros(y)}" or removed'

    return f'Ineffective segment "{text}" in path ({tip}).'


@check(
    id="C1.03",
    name="ineffective-segments",
    stage=Stage.PATH,
    description="No segment without visible effect",
)
def ineffective_segments(ctx: LintContext) -> None:
    for seg, prev in _with_previous(ctx.segments, ctx.absolute):
        if is_ineffective(seg, prev):
            ctx.report("ineffective-segments", describe(seg, prev))
