"""
Command line entry point: lay out a document and report or export the pages.

Usage:
    ebook-paginate book.md --image cover.png --output layout.json
    ebook-paginate notes.txt --no-cover --page-height 600 -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .controller import BuildError, build_from_file
from .core.utils.serialization import write_layout_json
from .layout import LayoutConfig, LayoutConfigError

logger = logging.getLogger("ebook_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    defaults = LayoutConfig()
    parser = argparse.ArgumentParser(
        prog="ebook-paginate",
        description="Flow a text, markdown or PDF document onto fixed-size ebook pages",
    )
    parser.add_argument("input", type=Path, help="Document to lay out (.txt, .md, .pdf)")
    parser.add_argument(
        "--image", "-i", dest="images", action="append", default=[],
        help="Image reference to place after the text (repeatable)",
    )
    parser.add_argument("--output", "-o", type=Path, help="Write the layout as JSON to this path")
    parser.add_argument(
        "--no-cover", dest="cover", action="store_false",
        help="Do not prepend a cover page with the document title",
    )
    parser.add_argument("--page-width", type=float, default=defaults.page_width)
    parser.add_argument("--page-height", type=float, default=defaults.page_height)
    parser.add_argument(
        "--margin", type=float,
        help="Use the same margin on all four sides (default: editor margins)",
    )
    parser.add_argument("--chars-per-line", type=int, default=defaults.chars_per_line)
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every page decision")
    return parser


def config_from_args(args: argparse.Namespace) -> LayoutConfig:
    """Build a LayoutConfig from parsed arguments."""
    overrides = {
        "page_width": args.page_width,
        "page_height": args.page_height,
        "chars_per_line": args.chars_per_line,
    }
    if args.margin is not None:
        overrides.update(
            margin_top=args.margin,
            margin_bottom=args.margin,
            margin_left=args.margin,
            margin_right=args.margin,
        )
    return LayoutConfig(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = config_from_args(args)
        result = build_from_file(args.input, args.images, config, with_cover=args.cover)
    except (BuildError, LayoutConfigError) as e:
        logger.error(f"Error: {e}")
        return 1

    if args.output:
        try:
            write_layout_json(result.layout, args.output)
        except OSError as e:
            logger.error(f"Error: could not write {args.output}: {e}")
            return 1
        logger.info(f"Wrote layout to {args.output}")
    else:
        for page in result.pages:
            kinds = ", ".join(element.kind.value for element in page.elements)
            print(f"{page.id}: {page.element_count} elements ({kinds})")

    if result.warnings:
        logger.warning(f"Layout finished with {len(result.warnings)} warnings")

    return 0


if __name__ == "__main__":
    sys.exit(main())
