"""C0.01 — Icon Title.

<title> must read "[ICON_NAME] icon" and, when a catalog is loaded, name a
known icon.
"""

from __future__ import annotations

from iconlint.engine.catalog import icon_name_from_title
from iconlint.engine.context import LintContext
from iconlint.engine.registry import Stage, check


@check(
    id="C0.01",
    name="icon-title",
    stage=Stage.MARKUP,
    description="Title follows '[ICON_NAME] icon' and names a catalog icon",
    suppressible=False,
)
def icon_title(ctx: LintContext) -> None:
    if not ctx.title and not ctx.svg_raw:
        return
    name = icon_name_from_title(ctx.title)
    if name is None:
        ctx.report("icon-title", '<title> should follow the format "[ICON_NAME] icon"')
    elif ctx.catalog is not None and name not in ctx.catalog:
        ctx.report("icon-title", f'No icon with title "{name}" found in simple-icons.json')
