"""
Command-line entry point: parse, lint and pretty-print a pattern file.

    crochet path/to/pattern.crochet [--verbose]

Exit status is 0 when the pattern parses without lint findings, 1 on a
parse error or lint findings, and 2 when the file cannot be read.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from crochet.checker.lint import lint_rounds
from crochet.diagnostics import format_snippet
from crochet.parser.errors import ParseError
from crochet.parser.parser import parse_rounds
from crochet.writer.writer import pretty_format

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crochet",
        description="Check stitch counts in a crochet pattern and print it round by round.",
    )
    parser.add_argument("path", type=Path, help="Pattern file, one round per line.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = args.path.read_text()
    except OSError as exc:
        print(f"Can't read `{args.path}`: {exc}", file=sys.stderr)
        return 2

    logger.debug("read %d characters from %s", len(source), args.path)

    try:
        rounds = parse_rounds(source)
    except ParseError as exc:
        print(f"Parse error at {exc.line}:{exc.col}: {exc.reason}", file=sys.stderr)
        print(format_snippet(source, exc.line, exc.col), file=sys.stderr)
        return 1

    lints = lint_rounds(rounds)
    if lints:
        for lint in lints:
            print(f"Lint: {lint}")
        return 1

    print(pretty_format(rounds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
