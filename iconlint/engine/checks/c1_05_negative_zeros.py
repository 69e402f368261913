"""C1.05 — Negative Zeros.

"-0" as a whole number is noise; "-0.5" is fine. Scans the raw text since
the parser folds -0 into 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check

_NEGATIVE_ZERO_RE = re.compile(r"-0(?![\d.])")


@dataclass(frozen=True)
class NegativeZero:
    index: int
    replacement: str


def scan_negative_zeros(path: str) -> list[NegativeZero]:
    """Each "-0" with its index in ``path`` and the text that should replace it.

    After a digit the zero needs a separator, otherwise it would merge into
    the previous number.
    """
    found = []
    for match in _NEGATIVE_ZERO_RE.finditer(path):
        i = match.start()
        previous = path[i - 1] if i else ""
        found.append(NegativeZero(i, " 0" if previous.isdigit() else "0"))
    return found


@check(
    id="C1.05",
    name="negative-zeros",
    stage=Stage.PATH,
    description='No "-0" number tokens',
)
def negative_zeros(ctx: LintContext) -> None:
    offset = ctx.path_offset or 0
    for zero in scan_negative_zeros(ctx.path):
        ctx.report(
            "negative-zeros",
            f'Found "-0" at index {zero.index + offset} (should be "{zero.replacement}")',
        )
