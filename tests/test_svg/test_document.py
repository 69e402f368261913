"""Tests for the icon SVG reader."""

import pytest

from iconlint.svg.document import SvgDocumentError, parse_icon_svg, path_context
from tests.conftest import DIAMOND_SVG, SQUARE_SVG


def test_parse_icon_svg():
    ctx = parse_icon_svg(SQUARE_SVG, source="square.svg")
    assert ctx.path == "M0 0h24v24H0z"
    assert ctx.title == "Square icon"
    assert ctx.source == "square.svg"
    assert SQUARE_SVG[ctx.path_offset : ctx.path_offset + len(ctx.path)] == ctx.path


def test_title_keeps_entities():
    assert parse_icon_svg(DIAMOND_SVG).title == "AT&amp;T icon"


def test_missing_title_is_empty():
    ctx = parse_icon_svg('<svg><path d="M0 0"/></svg>')
    assert ctx.title == ""


@pytest.mark.parametrize("text", ["<not-svg>", "<svg><title>x icon</title></svg>"])
def test_not_an_icon(text):
    with pytest.raises(SvgDocumentError):
        parse_icon_svg(text)


def test_path_context():
    ctx = path_context("M1 1", title="One icon")
    assert ctx.svg_raw == ""
    assert ctx.path_offset is None
    assert ctx.config.icon_size == 24
