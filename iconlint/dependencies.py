"""FastAPI dependency injection."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from iconlint.config import settings
from iconlint.engine.catalog import IconCatalog
from iconlint.engine.ignore import IgnoreRegistry
from iconlint.engine.pipeline import Linter, create_linter

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_linter() -> Linter:
    """Shared read-only linter; the API never runs in learning mode."""
    ignore = IgnoreRegistry.load(Path(settings.iconlint_ignore_file))
    catalog = None
    if settings.iconlint_catalog_file:
        catalog = IconCatalog.load(Path(settings.iconlint_catalog_file))
    logger.info("API linter ready (%d ignore entries, catalog=%s)", len(ignore), catalog is not None)
    return create_linter(ignore=ignore, catalog=catalog)
