"""Linter orchestrator — runs checks in stage order with ignore-registry filtering."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from iconlint.engine.catalog import IconCatalog, icon_name_from_title
from iconlint.engine.context import LintContext
from iconlint.engine.ignore import IgnoreRegistry
from iconlint.engine.registry import CheckRegistry, Stage, get_registry
from iconlint.svg.path_parser import MalformedPathError

logger = logging.getLogger(__name__)

MALFORMED_PATH = "malformed-path"


class Linter:
    """Runs every registered check against one icon at a time.

    ``run`` only touches the context it is given, so a single Linter can be
    shared by worker threads. Learned ignore entries land on the context and
    are merged by the caller.
    """

    def __init__(
        self,
        registry: CheckRegistry | None = None,
        ignore: IgnoreRegistry | None = None,
        catalog: IconCatalog | None = None,
        learn: bool = False,
    ) -> None:
        self.registry = registry or get_registry()
        self.ignore = ignore or IgnoreRegistry()
        self.catalog = catalog
        self.learn = learn

    def run(self, ctx: LintContext) -> LintContext:
        start = time.perf_counter()

        path_ok = self._parse(ctx)
        for spec in self.registry.all():
            if spec.stage == Stage.PATH and not path_ok:
                continue
            if spec.suppressible and not self.learn and self.ignore.is_ignored(spec.name, ctx.path):
                ctx.suppressed_checks.add(spec.name)
                continue

            t0 = time.perf_counter()
            before = len(ctx.issues)
            try:
                spec.fn(ctx)
                ctx.completed_checks.add(spec.name)
                logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)
            except Exception as e:
                ctx.errors[spec.name] = str(e)
                logger.warning("  %s FAILED on %s: %s", spec.name, ctx.source or ctx.title, e)

            if self.learn and spec.suppressible and len(ctx.issues) > before:
                del ctx.issues[before:]
                ctx.learned.append((spec.name, ctx.path, self._icon_name(ctx)))

        logger.info(
            "Linted %s: %d issue(s), %d suppressed check(s) in %.1fms",
            ctx.source or ctx.title or "<path>",
            len(ctx.issues),
            len(ctx.suppressed_checks),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def run_many(self, contexts: Iterable[LintContext], jobs: int = 1) -> list[LintContext]:
        """Lint icons independently; results keep input order."""
        contexts = list(contexts)
        if jobs <= 1:
            return [self.run(ctx) for ctx in contexts]
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            return list(pool.map(self.run, contexts))

    def _parse(self, ctx: LintContext) -> bool:
        ctx.catalog = self.catalog
        try:
            _ = ctx.segments
        except MalformedPathError as e:
            logger.warning("Malformed path in %s: %s", ctx.source or ctx.title or "<path>", e)
            ctx.parse_error = str(e)
            ctx.report(MALFORMED_PATH, f"Malformed path data: {e}")
            return False
        return True

    @staticmethod
    def _icon_name(ctx: LintContext) -> str:
        return icon_name_from_title(ctx.title) or ctx.title or ctx.source


def learned_registry(ignore: IgnoreRegistry, contexts: Iterable[LintContext]) -> IgnoreRegistry:
    """Fold every context's learned entries into a new registry (single writer)."""
    return ignore.with_entries(entry for ctx in contexts for entry in ctx.learned)


def register_checks() -> None:
    """Import all check modules so @check decorators fire."""
    package = importlib.import_module("iconlint.engine.checks")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


def create_linter(
    ignore: IgnoreRegistry | None = None,
    catalog: IconCatalog | None = None,
    learn: bool = False,
) -> Linter:
    """Factory function for creating a linter with every check registered."""
    register_checks()
    return Linter(ignore=ignore, catalog=catalog, learn=learn)
