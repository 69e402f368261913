"""Icon catalog — known icon titles plus the data-file lints.

The catalog file looks like ``{"icons": [{"title": "Python", ...}, ...]}``.
"""

from __future__ import annotations

import difflib
import html
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_TITLE_RE = re.compile(r"^(.+) icon$")


def html_friendly_to_title(text: str) -> str:
    """Decode entities used in <title> text: '&amp;' → '&', '&#39;' → "'"."""
    return html.unescape(text)


def icon_name_from_title(title: str) -> str | None:
    """'AT&amp;T icon' → 'AT&T'. None if the title lacks the ' icon' suffix."""
    match = _TITLE_RE.match(title)
    if match is None:
        return None
    return html_friendly_to_title(match.group(1))


class IconCatalog:
    def __init__(self, titles: list[str]) -> None:
        self.titles = list(titles)
        self._known = set(titles)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> IconCatalog:
        return cls([icon["title"] for icon in data.get("icons", [])])

    @classmethod
    def load(cls, path: Path) -> IconCatalog:
        with open(path, encoding="utf-8") as f:
            catalog = cls.from_data(json.load(f))
        logger.info("Loaded %d catalog titles from %s", len(catalog.titles), path)
        return catalog

    def __contains__(self, title: str) -> bool:
        return title in self._known


def lint_alphabetical(data: dict[str, Any]) -> str | None:
    """Titles must be in case-insensitive alphabetical order."""
    titles = [icon["title"] for icon in data.get("icons", [])]
    invalid = [
        title for prev, title in zip(titles, titles[1:]) if title.casefold() < prev.casefold()
    ]
    if invalid:
        return f"Some icons aren't in alphabetical order:\n        {', '.join(invalid)}"
    return None


def lint_prettified(text: str) -> str | None:
    """The data file must equal its own 4-space-indented dump plus a newline."""
    text = text.replace("\r\n", "\n")
    pretty = json.dumps(json.loads(text), indent=4, ensure_ascii=False) + "\n"
    if text == pretty:
        return None
    diff = difflib.unified_diff(text.split("\n"), pretty.split("\n"), lineterm="", n=0)
    return "Data file is not prettified:\n\n" + "\n".join(diff)
