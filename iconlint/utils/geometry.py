"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

from svgpathtools import CubicBezier, Line, QuadraticBezier

from iconlint.svg.normalize import expand, walk
from iconlint.svg.path_parser import Command, Segment


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> tuple[float, float]:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, xmin: float, xmax: float, ymin: float, ymax: float) -> BoundingBox:
        return BoundingBox(
            min(self.min_x, xmin),
            min(self.min_y, ymin),
            max(self.max_x, xmax),
            max(self.max_y, ymax),
        )


def path_bbox(segments: list[Segment]) -> BoundingBox | None:
    """Tightest axis-aligned box around the rendered outline.

    Curve extrema come from svgpathtools (roots of the derivative on [0, 1]),
    so off-curve control points never widen the box.
    """
    box: BoundingBox | None = None
    for seg, start, end in walk(expand(segments)):
        cmd = seg.command
        p0, p1 = complex(*start), complex(*end)
        if cmd is Command.MOVE_ABS:
            bounds = (p1.real, p1.real, p1.imag, p1.imag)
        elif cmd is Command.CUBIC_ABS:
            ops = seg.operands
            bounds = CubicBezier(p0, complex(ops[0], ops[1]), complex(ops[2], ops[3]), p1).bbox()
        elif cmd is Command.QUAD_ABS:
            ops = seg.operands
            bounds = QuadraticBezier(p0, complex(ops[0], ops[1]), p1).bbox()
        else:
            bounds = Line(p0, p1).bbox()

        xmin, xmax, ymin, ymax = (float(v) for v in bounds)
        if box is None:
            box = BoundingBox(xmin, ymin, xmax, ymax)
        else:
            box = box.union(xmin, xmax, ymin, ymax)
    return box


def is_collinear(p1: tuple[float, float], p2: tuple[float, float], p3: tuple[float, float]) -> bool:
    """Exact zero-area test: x1(y2-y3) + x2(y3-y1) + x3(y1-y2) == 0."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    return x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2) == 0
