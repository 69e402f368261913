"""iconlint check engine."""

from iconlint.engine.registry import check, Stage, get_registry
from iconlint.engine.context import LintContext, Issue
from iconlint.engine.pipeline import Linter, create_linter

__all__ = [
    "check",
    "Stage",
    "get_registry",
    "LintContext",
    "Issue",
    "Linter",
    "create_linter",
]
