"""
iconlint command line.

Usage:
  iconlint lint icons/                        # lint every .svg in a folder
  iconlint lint a.svg b.svg --jobs 4          # lint files on 4 worker threads
  iconlint lint icons/ --update-ignore        # rewrite the ignore file from this run
  iconlint data _data/simple-icons.json       # alphabetical + prettified data checks
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from iconlint.config import settings
from iconlint.engine.catalog import IconCatalog, lint_alphabetical, lint_prettified
from iconlint.engine.context import LintContext
from iconlint.engine.ignore import IgnoreRegistry
from iconlint.engine.pipeline import create_linter, learned_registry
from iconlint.svg.document import SvgDocumentError, parse_icon_svg

logger = logging.getLogger(__name__)

MALFORMED_SVG = "malformed-svg"


def collect_svgs(paths: list[str]) -> list[Path]:
    """Expand folders into their .svg files, sorted for stable output."""
    files: list[Path] = []
    for p in map(Path, paths):
        if p.is_dir():
            files.extend(sorted(p.glob("*.svg")))
        else:
            files.append(p)
    return files


def load_icon(path: Path) -> LintContext:
    try:
        svg_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        ctx = LintContext(source=str(path))
        ctx.report(MALFORMED_SVG, f"File is not valid UTF-8: {e}")
        return ctx
    try:
        return parse_icon_svg(svg_text, source=str(path))
    except SvgDocumentError as e:
        ctx = LintContext(source=str(path), svg_raw=svg_text)
        ctx.report(MALFORMED_SVG, str(e))
        return ctx


def run_lint(args: argparse.Namespace) -> int:
    learn = args.update_ignore or settings.si_update_ignore
    ignore_file = Path(args.ignore_file or settings.iconlint_ignore_file)
    # Learning rebuilds the file from scratch, so nothing is suppressed.
    ignore = IgnoreRegistry() if learn else IgnoreRegistry.load(ignore_file)

    catalog_file = args.catalog or settings.iconlint_catalog_file
    catalog = IconCatalog.load(Path(catalog_file)) if catalog_file else None

    files = collect_svgs(args.paths)
    if not files:
        logger.error("No SVG files found in %s", ", ".join(args.paths))
        return 2

    linter = create_linter(ignore=ignore, catalog=catalog, learn=learn)
    contexts = [load_icon(f) for f in files]
    # Parse failures from load_icon have no path checks to run.
    results = linter.run_many([c for c in contexts if not c.issues], jobs=args.jobs)
    results += [c for c in contexts if c.issues]
    results.sort(key=lambda c: c.source)

    failed = 0
    for ctx in results:
        for issue in ctx.issues:
            print(f"{ctx.source}: [{issue.check}] {issue.message}")
        for name, err in ctx.errors.items():
            print(f"{ctx.source}: [{name}] check crashed: {err}")
        failed += ctx.failed

    if learn:
        learned_registry(ignore, results).save(ignore_file)

    logger.info("%d file(s) linted, %d with issues", len(results), failed)
    return 1 if failed else 0


def run_data(args: argparse.Namespace) -> int:
    text = Path(args.catalog).read_text(encoding="utf-8")
    data = json.loads(text)
    errors = [e for e in (lint_alphabetical(data), lint_prettified(text)) if e]
    for error in errors:
        print(f"\u001b[31m{error}\u001b[0m", file=sys.stderr)
    return 1 if errors else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconlint", description="Lint 24x24 icon SVG path data")
    parser.add_argument("--log-level", default=settings.iconlint_log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    lint = sub.add_parser("lint", help="Lint icon SVG files")
    lint.add_argument("paths", nargs="+", help="SVG files or folders")
    lint.add_argument("--ignore-file", help="Ignore registry JSON (default from settings)")
    lint.add_argument("--update-ignore", action="store_true", help="Record findings into the ignore file")
    lint.add_argument("--catalog", help="Icon catalog JSON for title lookups")
    lint.add_argument("-j", "--jobs", type=int, default=1, help="Worker threads")
    lint.set_defaults(func=run_lint)

    data = sub.add_parser("data", help="Lint the icon catalog data file")
    data.add_argument("catalog", help="Catalog JSON file")
    data.set_defaults(func=run_data)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
