"""C0.02 — Extraneous Markup.

The file must be exactly one <svg> with three attributes, a <title> and a
single <path d>, with no whitespace between tags.
"""

from __future__ import annotations

import re

from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check

_SVG_RE = re.compile(r'^<svg( [^\s]*=".*"){3}><title>.*</title><path d=".*"/></svg>\r?\n?$')


@check(
    id="C0.02",
    name="extraneous",
    stage=Stage.MARKUP,
    description="No markup beyond svg > title + path",
    suppressible=False,
)
def extraneous(ctx: LintContext) -> None:
    if not ctx.svg_raw:
        return
    if not _SVG_RE.match(ctx.svg_raw):
        ctx.report(
            "extraneous",
            "Unexpected character(s), most likely extraneous whitespace, detected in SVG markup",
        )
