"""C1.01 — Icon Size.

The path's bounding box must span the full canvas in at least one dimension.
"""

from __future__ import annotations

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check
from iconlint.utils.math_helpers import format_number, to_fixed


@check(
    id="C1.01",
    name="icon-size",
    stage=Stage.PATH,
    description="Bounding box is exactly icon_size wide or tall",
)
def icon_size(ctx: LintContext) -> None:
    cfg = ctx.config
    box = ctx.bbox
    width = to_fixed(box.width, cfg.float_precision) if box else 0.0
    height = to_fixed(box.height, cfg.float_precision) if box else 0.0

    if width == 0 and height == 0:
        ctx.report("icon-size", "Path bounds were reported as 0 x 0; check if the path is valid")
    elif width != cfg.icon_size and height != cfg.icon_size:
        ctx.report(
            "icon-size",
            f"Size of <path> must be exactly {cfg.icon_size} in one dimension; "
            f"the size is currently {format_number(width)} x {format_number(height)}",
        )
