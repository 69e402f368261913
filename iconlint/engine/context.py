"""LintContext — per-icon state flowing through all checks.

The path is parsed once; derived views are computed lazily and cached so
every check reads the same immutable segment lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from iconlint.engine.catalog import IconCatalog
from iconlint.engine.config import LintConfig
from iconlint.svg.normalize import absolutize
from iconlint.svg.path_parser import Segment, parse_path
from iconlint.utils.geometry import BoundingBox, path_bbox


@dataclass(frozen=True)
class Issue:
    """One finding. ``path`` is the exact path data, used as the suppression key."""

    check: str
    message: str
    path: str = ""


@dataclass
class LintContext:
    """Everything known about one icon during a lint run."""

    # Path data (`d` attribute)
    path: str = ""
    # <title> text, e.g. "Python icon"
    title: str = ""
    # Raw SVG markup; empty when linting bare path data
    svg_raw: str = ""
    # Index of the path data inside svg_raw, if known
    path_offset: int | None = None
    # Display label for reports (usually the file name)
    source: str = ""
    config: LintConfig = field(default_factory=LintConfig)
    catalog: IconCatalog | None = None

    # --- Results ---
    issues: list[Issue] = field(default_factory=list)
    # Checks skipped because the ignore registry lists this path
    suppressed_checks: set[str] = field(default_factory=set)
    # (check, path, icon name) entries collected in learning mode
    learned: list[tuple[str, str, str]] = field(default_factory=list)
    # Set when the path data could not be parsed
    parse_error: str = ""
    completed_checks: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @cached_property
    def segments(self) -> list[Segment]:
        """Parsed path. Raises MalformedPathError on the first access."""
        return parse_path(self.path)

    @cached_property
    def absolute(self) -> list[Segment]:
        return absolutize(self.segments)

    @cached_property
    def bbox(self) -> BoundingBox | None:
        return path_bbox(self.segments)

    def report(self, check: str, message: str) -> None:
        self.issues.append(Issue(check, message, self.path))

    @property
    def failed(self) -> bool:
        return bool(self.issues or self.errors)
