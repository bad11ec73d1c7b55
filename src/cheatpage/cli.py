"""Command line interface for cheatpage."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cheatpage.config import CHEATPAGE_LOG_LEVEL, CHEATPAGE_TOC_MAX_LEVEL
from cheatpage.exceptions import CheatpageError
from cheatpage.loader import STDIO_PATH
from cheatpage.pipeline import RenderOptions, render_file

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, CHEATPAGE_LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cheatpage",
        description="Render a markdown cheatsheet page (with YAML front matter) to HTML.",
    )
    parser.add_argument("--input", "-i", default=STDIO_PATH, help="Markdown file to render ('-' for stdin)")
    parser.add_argument("--output", "-o", default=STDIO_PATH, help="HTML file to write ('-' for stdout)")
    parser.add_argument("--full-page", action="store_true", help="Emit a standalone HTML document")
    parser.add_argument("--no-toc", action="store_true", help="Drop the table of contents at TOC markers")
    parser.add_argument(
        "--toc-max-level",
        type=int,
        default=CHEATPAGE_TOC_MAX_LEVEL,
        choices=range(1, 7),
        metavar="N",
        help="Deepest heading level listed in the TOC (1-6)",
    )
    parser.add_argument(
        "--strict-anchors",
        action="store_true",
        help="Fail on duplicate heading anchors instead of adding numeric suffixes",
    )
    parser.add_argument("--summary", action="store_true", help="Print a page summary to stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    options = RenderOptions(
        include_toc=not args.no_toc,
        full_page=args.full_page,
        disambiguate_anchors=not args.strict_anchors,
        toc_max_level=args.toc_max_level,
    )

    try:
        result = render_file(args.input, args.output, options)
    except CheatpageError as exc:
        logger.debug("Rendering failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(result.summary, file=sys.stderr)
    return 0
