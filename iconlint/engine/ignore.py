"""Ignore registry — per-check suppression keyed on the exact path string.

Stored as ``{check: {path: icon name}}``. Values are treated as immutable:
learning returns a new registry so concurrent workers never share a writer.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class IgnoreRegistry:
    def __init__(self, entries: dict[str, dict[str, str]] | None = None) -> None:
        self._entries = {check: dict(paths) for check, paths in (entries or {}).items()}

    @classmethod
    def load(cls, path: Path) -> IgnoreRegistry:
        """Read a registry file; a missing file is an empty registry."""
        if not path.exists():
            logger.info("No ignore file at %s", path)
            return cls()
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise ValueError(f"Ignore file {path} must map check names to {{path: name}} objects")
        registry = cls(data)
        logger.info("Loaded %d ignore entries from %s", len(registry), path)
        return registry

    def is_ignored(self, check: str, path: str) -> bool:
        return path in self._entries.get(check, {})

    def with_entries(self, entries: Iterable[tuple[str, str, str]]) -> IgnoreRegistry:
        """Return a copy with ``(check, path, icon name)`` entries added."""
        merged = IgnoreRegistry(self._entries)
        for check, path, name in entries:
            merged._entries.setdefault(check, {})[path] = name
        return merged

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Checks sorted by name; entries sorted by icon name, then path."""
        return {
            check: dict(sorted(self._entries[check].items(), key=lambda kv: (kv[1], kv[0])))
            for check in sorted(self._entries)
        }

    def dumps(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def save(self, path: Path) -> None:
        path.write_text(self.dumps(), encoding="utf-8")
        logger.info("Wrote %d ignore entries to %s", len(self), path)

    def __len__(self) -> int:
        return sum(len(paths) for paths in self._entries.values())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IgnoreRegistry) and self.to_dict() == other.to_dict()
