"""Tests for the markup-level checks."""

from iconlint.engine.catalog import IconCatalog
from iconlint.engine.pipeline import create_linter
from iconlint.svg.document import parse_icon_svg, path_context
from tests.conftest import CATALOG_DATA, DIAMOND_SVG, SPACED_SVG, SQUARE_SVG


def _checks(ctx) -> list[str]:
    return [i.check for i in ctx.issues]


def test_clean_icon_passes():
    ctx = create_linter().run(parse_icon_svg(SQUARE_SVG))
    assert ctx.issues == []
    assert not ctx.failed


def test_title_format():
    svg = SQUARE_SVG.replace("<title>Square icon</title>", "<title>Square</title>")
    ctx = create_linter().run(parse_icon_svg(svg))
    assert [i.message for i in ctx.issues] == ['<title> should follow the format "[ICON_NAME] icon"']


def test_title_lookup_in_catalog():
    catalog = IconCatalog.from_data(CATALOG_DATA)
    linter = create_linter(catalog=catalog)
    assert linter.run(parse_icon_svg(DIAMOND_SVG)).issues == []

    svg = DIAMOND_SVG.replace("AT&amp;T", "Unknown")
    assert [i.message for i in linter.run(parse_icon_svg(svg)).issues] == [
        'No icon with title "Unknown" found in simple-icons.json'
    ]


def test_title_skipped_for_bare_path_without_title():
    ctx = create_linter().run(path_context("M0 0h24v24H0z"))
    assert "icon-title" in ctx.completed_checks
    assert ctx.issues == []


def test_extraneous_whitespace():
    ctx = create_linter().run(parse_icon_svg(SPACED_SVG))
    assert _checks(ctx) == ["extraneous"]
    assert ctx.issues[0].message == (
        "Unexpected character(s), most likely extraneous whitespace, detected in SVG markup"
    )


def test_extraneous_requires_three_svg_attributes():
    svg = SQUARE_SVG.replace(' role="img"', "")
    assert _checks(create_linter().run(parse_icon_svg(svg))) == ["extraneous"]
