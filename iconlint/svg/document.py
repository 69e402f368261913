"""Icon SVG reader — pulls <title> text and the path data out of raw markup.

Converts raw SVG string → LintContext. Geometry parsing happens later, in
the linter, so a bad path becomes a finding instead of an exception here.
"""

from __future__ import annotations

import logging
import re

from iconlint.engine.config import LintConfig
from iconlint.engine.context import LintContext

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg[\s>]", re.IGNORECASE)
_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)
_PATH_D_RE = re.compile(r'<path[^>]*?\sd\s*=\s*"([^"]*)"', re.IGNORECASE)


class SvgDocumentError(ValueError):
    """Markup that is not a single-path icon document."""


def parse_icon_svg(
    svg_text: str,
    source: str = "",
    config: LintConfig | None = None,
) -> LintContext:
    """Parse raw icon markup into a LintContext."""
    if not _SVG_TAG_RE.search(svg_text):
        raise SvgDocumentError(f"No <svg> element found in {source or 'input'}")

    path_match = _PATH_D_RE.search(svg_text)
    if path_match is None:
        raise SvgDocumentError(f"No <path d> found in {source or 'input'}")
    title_match = _TITLE_RE.search(svg_text)

    ctx = LintContext(
        path=path_match.group(1),
        title=title_match.group(1) if title_match else "",
        svg_raw=svg_text,
        path_offset=path_match.start(1),
        source=source,
        config=config or LintConfig(),
    )
    logger.debug("Read %s: title=%r, %d path chars", source or "<svg>", ctx.title, len(ctx.path))
    return ctx


def path_context(
    path: str,
    title: str = "",
    source: str = "",
    config: LintConfig | None = None,
) -> LintContext:
    """LintContext for bare path data (no markup checks apply)."""
    return LintContext(path=path, title=title, source=source, config=config or LintConfig())
