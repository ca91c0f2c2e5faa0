"""Command-line entry point.

Reads all of standard input as BBCode, renders it and writes the result
to standard output.

Usage:
    bbtree < post.bbcode > post.html
    bbtree --text < post.bbcode
    python -m bbtree --max-nesting 8 < post.bbcode

Exit status is 0 on success and 1 when reading input, writing output or
enforcing ``--max-length`` fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from bbtree import __version__, parse, render_to
from bbtree.bridge import decode_input
from bbtree.config import DEFAULT_MAX_NESTING, ParseConfig
from bbtree.errors import SourceTooLargeError
from bbtree.renderers import HtmlRenderer, TextRenderer
from bbtree.utils.logger import get_logger

logger = get_logger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bbtree",
        description="Convert BBCode on stdin to HTML on stdout",
    )
    parser.add_argument("--text", action="store_true", help="Write visible text instead of HTML")
    parser.add_argument(
        "--max-nesting",
        type=_non_negative_int,
        default=DEFAULT_MAX_NESTING,
        metavar="N",
        help=f"Deepest tag nesting to recognize (default: {DEFAULT_MAX_NESTING})",
    )
    parser.add_argument(
        "--max-length",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Refuse input longer than N characters",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ParseConfig(max_nesting=args.max_nesting, max_source_length=args.max_length)

    try:
        source = decode_input(sys.stdin.buffer.read())
    except OSError as e:
        logger.error("failed to read input: %s", e)
        return 1

    try:
        segments = parse(source, config=config)
    except SourceTooLargeError as e:
        logger.error("%s", e)
        return 1

    renderer = TextRenderer if args.text else HtmlRenderer
    try:
        render_to(segments, sys.stdout, renderer=renderer)
        sys.stdout.flush()
    except OSError as e:
        logger.error("failed to write output: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
