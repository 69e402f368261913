"""Coordinate normalizer — absolute, unshortened and arc-expanded views.

All views are new segment lists; the parsed path is never mutated.

    segments  → absolutize → every command in absolute form (H/V kept)
              → unshorten  → S/T rewritten as C/Q with explicit control points
              → unarc      → A rewritten as cubic curves, one per 90° span
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from iconlint.svg.path_parser import Command, Segment

Point = tuple[float, float]

# One cubic per started quarter turn; the epsilon keeps an exact 90° sweep
# in a single curve despite float noise in atan2.
_ARC_SPAN = np.pi / 2
_ARC_SPAN_EPS = 1e-9


@dataclass
class CursorState:
    """Current point and subpath start during a single walk."""

    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0

    @property
    def point(self) -> Point:
        return (self.x, self.y)

    def advance(self, seg: Segment) -> None:
        cmd = seg.command
        ops = seg.operands
        if cmd is Command.CLOSE:
            self.x, self.y = self.start_x, self.start_y
            return

        dx, dy = (self.x, self.y) if cmd.is_relative else (0.0, 0.0)
        if cmd.absolute is Command.HORIZ_ABS:
            self.x = ops[0] + dx
        elif cmd.absolute is Command.VERT_ABS:
            self.y = ops[0] + dy
        else:
            self.x, self.y = ops[-2] + dx, ops[-1] + dy

        if cmd.absolute is Command.MOVE_ABS:
            self.start_x, self.start_y = self.x, self.y


def walk(segments: list[Segment]) -> Iterator[tuple[Segment, Point, Point]]:
    """Yield ``(segment, start, end)`` with absolute start/end points."""
    cursor = CursorState()
    for seg in segments:
        start = cursor.point
        cursor.advance(seg)
        yield seg, start, cursor.point


def absolutize(segments: list[Segment]) -> list[Segment]:
    """Resolve relative commands against the running cursor."""
    out: list[Segment] = []
    for seg, (x0, y0), _end in walk(segments):
        cmd = seg.command
        if not cmd.is_relative:
            out.append(seg)
            continue

        ops = list(seg.operands)
        if cmd is Command.HORIZ_REL:
            ops[0] += x0
        elif cmd is Command.VERT_REL:
            ops[0] += y0
        elif cmd is Command.ARC_REL:
            ops[5] += x0
            ops[6] += y0
        else:
            for i in range(0, len(ops), 2):
                ops[i] += x0
                ops[i + 1] += y0
        out.append(Segment(cmd.absolute, tuple(ops)))
    return out


def unshorten(segments: list[Segment]) -> list[Segment]:
    """Expand S/s into C/c and T/t into Q/q, keeping the relative form."""
    out: list[Segment] = []
    prev_cubic: Point | None = None
    prev_quad: Point | None = None

    for seg, (x0, y0), _end in walk(segments):
        cmd = seg.command
        ops = seg.operands
        dx, dy = (x0, y0) if cmd.is_relative else (0.0, 0.0)
        kind = cmd.absolute
        if kind is Command.SMOOTH_CUBIC_ABS:
            c1 = _reflect(prev_cubic, x0, y0, cmd.is_relative)
            seg = Segment(Command.CUBIC_REL if cmd.is_relative else Command.CUBIC_ABS, c1 + ops)
        elif kind is Command.SMOOTH_QUAD_ABS:
            c1 = _reflect(prev_quad, x0, y0, cmd.is_relative)
            seg = Segment(Command.QUAD_REL if cmd.is_relative else Command.QUAD_ABS, c1 + ops)

        kind = seg.command.absolute
        ops = seg.operands
        prev_cubic = (ops[2] + dx, ops[3] + dy) if kind is Command.CUBIC_ABS else None
        prev_quad = (ops[0] + dx, ops[1] + dy) if kind is Command.QUAD_ABS else None
        out.append(seg)
    return out


def _reflect(control: Point | None, x0: float, y0: float, relative: bool) -> Point:
    if control is None:
        return (0.0, 0.0) if relative else (x0, y0)
    if relative:
        return (x0 - control[0], y0 - control[1])
    return (2 * x0 - control[0], 2 * y0 - control[1])


def unarc(segments: list[Segment]) -> list[Segment]:
    """Replace elliptical arcs with absolute cubic curves."""
    out: list[Segment] = []
    for seg, start, end in walk(segments):
        if seg.command.absolute is Command.ARC_ABS:
            out.extend(arc_to_cubics(start, end, *seg.operands[:5]))
        else:
            out.append(seg)
    return out


def expand(segments: list[Segment]) -> list[Segment]:
    """Absolute, unshortened, arc-free view for pure line/curve geometry."""
    return unarc(unshorten(absolutize(segments)))


def arc_to_cubics(
    start: Point,
    end: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: float,
    sweep: float,
) -> list[Segment]:
    """Endpoint-parameterised arc → cubic Béziers (SVG 1.1 appendix F.6).

    Coincident endpoints draw nothing; a zero radius draws a straight line.
    """
    x1, y1 = start
    x2, y2 = end
    if (x1, y1) == (x2, y2):
        return []
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0:
        return [Segment(Command.LINE_ABS, (x2, y2))]

    phi = np.radians(rotation % 360)
    cos_phi, sin_phi = np.cos(phi), np.sin(phi)

    # F.6.5.1: midpoint in the rotated frame
    hx, hy = (x1 - x2) / 2, (y1 - y2) / 2
    x1p = cos_phi * hx + sin_phi * hy
    y1p = -sin_phi * hx + cos_phi * hy

    # F.6.6: scale radii up until the ellipse reaches both endpoints
    lam = (x1p / rx) ** 2 + (y1p / ry) ** 2
    if lam > 1:
        rx, ry = rx * np.sqrt(lam), ry * np.sqrt(lam)

    # F.6.5.2: center in the rotated frame
    num = rx**2 * ry**2 - rx**2 * y1p**2 - ry**2 * x1p**2
    den = rx**2 * y1p**2 + ry**2 * x1p**2
    coef = np.sqrt(max(num, 0.0) / den)
    if bool(large_arc) == bool(sweep):
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    # F.6.5.3: center in user space
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    # F.6.5.5-6: start angle and sweep
    theta1 = _angle(1.0, 0.0, (x1p - cxp) / rx, (y1p - cyp) / ry)
    dtheta = _angle((x1p - cxp) / rx, (y1p - cyp) / ry, (-x1p - cxp) / rx, (-y1p - cyp) / ry)
    if not sweep and dtheta > 0:
        dtheta -= 2 * np.pi
    elif sweep and dtheta < 0:
        dtheta += 2 * np.pi

    count = max(int(np.ceil(abs(dtheta) / _ARC_SPAN - _ARC_SPAN_EPS)), 1)
    delta = dtheta / count
    handle = 4 / 3 * np.tan(delta / 4)

    # Unit-circle control points for every span, then one affine map.
    angles = theta1 + delta * np.arange(count + 1)
    cos_t, sin_t = np.cos(angles), np.sin(angles)
    unit = np.empty((count, 3, 2))
    unit[:, 0] = np.column_stack([cos_t[:-1] - handle * sin_t[:-1], sin_t[:-1] + handle * cos_t[:-1]])
    unit[:, 1] = np.column_stack([cos_t[1:] + handle * sin_t[1:], sin_t[1:] - handle * cos_t[1:]])
    unit[:, 2] = np.column_stack([cos_t[1:], sin_t[1:]])

    xs = cx + rx * cos_phi * unit[..., 0] - ry * sin_phi * unit[..., 1]
    ys = cy + rx * sin_phi * unit[..., 0] + ry * cos_phi * unit[..., 1]
    xs[-1, 2], ys[-1, 2] = x2, y2

    return [
        Segment(
            Command.CUBIC_ABS,
            tuple(float(v) for pair in zip(xs[i], ys[i]) for v in pair),
        )
        for i in range(count)
    ]


def _angle(ux: float, uy: float, vx: float, vy: float) -> float:
    return float(np.arctan2(ux * vy - uy * vx, ux * vx + uy * vy))
