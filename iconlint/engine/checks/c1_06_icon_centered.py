"""C1.06 — Icon Centered.

Bounding-box center, rounded to float_precision, must sit on the canvas
center within tolerance on both axes.
"""

from __future__ import annotations

from iconlint.engine.config import LintConfig
from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check
from iconlint.utils.geometry import BoundingBox
from iconlint.utils.math_helpers import format_number, to_fixed


def rounded_center(box: BoundingBox, config: LintConfig) -> tuple[float, float]:
    cx, cy = box.center
    return (to_fixed(cx, config.float_precision), to_fixed(cy, config.float_precision))


def is_centered(box: BoundingBox, config: LintConfig) -> bool:
    cx, cy = rounded_center(box, config)
    return abs(cx - config.center) <= config.tolerance and abs(cy - config.center) <= config.tolerance


@check(
    id="C1.06",
    name="icon-centered",
    stage=Stage.PATH,
    description="Path is centered on the canvas",
)
def icon_centered(ctx: LintContext) -> None:
    box = ctx.bbox
    cfg = ctx.config
    if box is None or is_centered(box, cfg):
        return
    target = format_number(cfg.center)
    cx, cy = rounded_center(box, cfg)
    ctx.report(
        "icon-centered",
        f"<path> must be centered at ({target}, {target}); "
        f"the center is currently ({format_number(cx)}, {format_number(cy)})",
    )
