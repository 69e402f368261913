"""C1.02 — Icon Precision.

No operand may carry more than max_float_precision decimals.
"""

from __future__ import annotations

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check
from iconlint.svg.path_parser import Segment
from iconlint.utils.math_helpers import decimal_places


def max_precision(segments: list[Segment]) -> int:
    """Largest decimal-place count over every operand (0 for no operands)."""
    return max((decimal_places(n) for seg in segments for n in seg.operands), default=0)


@check(
    id="C1.02",
    name="icon-precision",
    stage=Stage.PATH,
    description="Operands use at most max_float_precision decimals",
)
def icon_precision(ctx: LintContext) -> None:
    limit = ctx.config.max_float_precision
    precision = max_precision(ctx.segments)
    if precision > limit:
        ctx.report(
            "icon-precision",
            f"Maximum precision should not be greater than {limit}; it is currently {precision}",
        )
