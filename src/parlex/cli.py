"""Command-line driver: lex standard input and print each result.

Usage:
    parlex < program.sx
    python -m parlex --verbose < program.sx

Each result is printed on its own line using its repr. Exit status is 0
when the input is read to the end, whether or not it held lexical errors.
"""

from __future__ import annotations

import argparse
import logging
import sys

from parlex import __version__
from parlex.lexer import Lexer
from parlex.utils.logger import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="parlex",
        description="Lex standard input and print one result per line",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )

    logger.debug("reading standard input")
    for result in Lexer(sys.stdin, source_file="<stdin>"):
        print(repr(result), flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
