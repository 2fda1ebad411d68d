from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .demo import run_demo
from .errors import ReformatError
from .reformat import Reformatter
from .rules import FIELD_DELIMITER
from .template import available_template_engines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-reformatter",
        description="Reformat comma-separated lines read from stdin through a row template.",
    )
    parser.add_argument("--demo", action="store_true", help="reformat the bundled job listings and exit")
    parser.add_argument("--columns", help='comma-separated column names, e.g. "name,species"')
    parser.add_argument("--template", help='row template, e.g. "{name} is a {species}."')
    parser.add_argument("--header", help="line printed before the rows")
    parser.add_argument("--sort-by", dest="sort_by", help="column to sort rows by")
    parser.add_argument(
        "--engine",
        default="basic",
        choices=available_template_engines(),
        help="template engine (default: basic)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.demo:
            output = run_demo()
        else:
            reformatter = Reformatter(engine=args.engine)
            if args.columns:
                reformatter.set_input_columns(FIELD_DELIMITER.split(args.columns.strip()))
            if args.template is not None:
                reformatter.set_row_template(args.template)
            reformatter.set_header(args.header)
            reformatter.set_sort_by(args.sort_by)
            output = reformatter.reformat((stdin or sys.stdin).read())
    except ReformatError as e:
        logger.debug("reformat failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0
