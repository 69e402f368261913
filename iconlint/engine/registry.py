"""Check registry — lint rules are plain functions registered by decorator.

Usage:
    @check(id="C1.02", name="icon-precision", stage=Stage.PATH)
    def icon_precision(ctx: LintContext) -> None:
        if max_precision(ctx.segments) > ctx.config.max_float_precision:
            ctx.report("icon-precision", "...")

New rules live in iconlint/engine/checks/ and are picked up by register_checks().
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from iconlint.engine.context import LintContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    # Needs the SVG markup (title, raw document)
    MARKUP = 0
    # Needs parsed path data
    PATH = 1


@dataclass
class CheckSpec:
    id: str
    name: str
    stage: Stage
    fn: Callable[["LintContext"], None]
    description: str = ""
    # Findings keyed on the path string may be ignored via the ignore registry
    suppressible: bool = True


class CheckRegistry:
    """Singleton registry of all checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckSpec] = {}

    def register(self, spec: CheckSpec) -> None:
        if spec.id in self._checks:
            raise ValueError(f"Duplicate check ID: {spec.id}")
        if any(s.name == spec.name for s in self._checks.values()):
            raise ValueError(f"Duplicate check name: {spec.name}")
        self._checks[spec.id] = spec
        logger.debug("Registered check %s %s (%s)", spec.id, spec.name, spec.stage.name)

    def by_name(self, name: str) -> CheckSpec:
        for spec in self._checks.values():
            if spec.name == name:
                return spec
        raise KeyError(name)

    def get_stage(self, stage: Stage) -> list[CheckSpec]:
        specs = [s for s in self._checks.values() if s.stage == stage]
        return sorted(specs, key=lambda s: s.id)

    def all(self) -> list[CheckSpec]:
        return sorted(self._checks.values(), key=lambda s: (s.stage, s.id))

    @property
    def count(self) -> int:
        return len(self._checks)


# Module-level singleton
_registry = CheckRegistry()


def get_registry() -> CheckRegistry:
    return _registry


def check(
    *,
    id: str,
    name: str,
    stage: Stage,
    description: str = "",
    suppressible: bool = True,
):
    """Decorator to register a check function."""

    def decorator(fn: Callable[["LintContext"], None]):
        spec = CheckSpec(
            id=id,
            name=name,
            stage=stage,
            fn=fn,
            description=description,
            suppressible=suppressible,
        )
        _registry.register(spec)
        return fn

    return decorator
