"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconlint.engine.pipeline import register_checks

# Sample icons in the exact single-line layout the markup check expects

SQUARE_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    "<title>Square icon</title>"
    '<path d="M0 0h24v24H0z"/></svg>\n'
)

DIAMOND_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    "<title>AT&amp;T icon</title>"
    '<path d="M12 0L24 12 12 24 0 12z"/></svg>\n'
)

# Off-center, redundant vertex and a negative zero
MESSY_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
    "<title>Messy icon</title>"
    '<path d="M0 0H12H24V20H-0Z"/></svg>\n'
)

# Whitespace between tags
SPACED_SVG = (
    '<svg role="img" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">\n'
    "  <title>Square icon</title>\n"
    '  <path d="M0 0h24v24H0z"/>\n'
    "</svg>\n"
)

# Circle of radius 12 drawn with two relative arcs
CIRCLE_PATH = "M0 12a12 12 0 1 0 24 0a12 12 0 1 0-24 0"

CATALOG_DATA = {
    "icons": [
        {"title": "AT&T", "hex": "00A8E0", "source": "https://att.com"},
        {"title": "Python", "hex": "3776AB", "source": "https://python.org"},
        {"title": "Square", "hex": "000000", "source": "https://example.com"},
    ]
}


@pytest.fixture(scope="session", autouse=True)
def _checks_registered() -> None:
    register_checks()


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def messy_svg() -> str:
    return MESSY_SVG
