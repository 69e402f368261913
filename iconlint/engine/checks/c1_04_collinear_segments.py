"""C1.04 — Collinear Segments.

Consecutive straight commands form a polyline run. Any interior vertex that
lies exactly on the line through its neighbours can be dropped without
changing the outline.

Runs are built on the unshortened, arc-free view so curves (including former
arcs) cleanly end a run. Runs follow subpaths rather than plain command
adjacency. Every move after the first starts a fresh run. A run that starts
after a curve is seeded with the point it starts from. A close path adds its
straight closing edge before ending the run.
"""

from __future__ import annotations

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check
from iconlint.svg.normalize import Point, unarc, unshorten, walk
from iconlint.svg.path_parser import Command, Segment
from iconlint.utils.geometry import is_collinear
from iconlint.utils.math_helpers import format_number


def find_collinear_segments(segments: list[Segment]) -> list[Segment]:
    flagged: list[Segment] = []
    run: list[tuple[Point, Segment | None]] = []

    def flush() -> None:
        for i in range(1, len(run) - 1):
            if is_collinear(run[i - 1][0], run[i][0], run[i + 1][0]):
                flagged.append(run[i][1])
        run.clear()

    for seg, start, end in walk(unarc(unshorten(segments))):
        cmd = seg.command
        if cmd.absolute is Command.MOVE_ABS:
            flush()
            run.append((end, seg))
        elif cmd.is_straight:
            if not run:
                run.append((start, None))
            run.append((end, seg))
        elif cmd is Command.CLOSE:
            if run:
                run.append((end, seg))
            flush()
        else:
            flush()
    flush()
    return flagged


def describe(seg: Segment) -> str:
    text = seg.command.value + format_number(seg.operands[0])
    if seg.command.arity == 2:
        text += f" {format_number(seg.operands[1])}"
    return f'Collinear segment "{text}" in path (should be removed)'


@check(
    id="C1.04",
    name="collinear-segments",
    stage=Stage.PATH,
    description="No removable vertex on a straight run",
)
def collinear_segments(ctx: LintContext) -> None:
    for seg in find_collinear_segments(ctx.segments):
        ctx.report("collinear-segments", describe(seg))
