"""Command-line entry point: read a matrix, print it, reduce it, print it again."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .config import EPSILON, FIELD_WIDTH, Settings
from .console import TokenReader, print_welcome_banner, read_dimension, read_matrix
from .formatter import print_matrix
from .reduce import gauss_jordan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaussjordan",
        description="Reduce a matrix to reduced row-echelon form using Gauss-Jordan elimination.",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=EPSILON,
        help="absolute tolerance below which an element counts as zero (default: %(default)s)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=FIELD_WIDTH,
        help="width of a printed matrix cell (default: %(default)s)",
    )
    parser.add_argument("--progress", action="store_true", help="show a progress bar while reducing")
    parser.add_argument("--no-banner", action="store_true", help="skip the welcome banner")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log reduction steps to stderr (-v for a summary, -vv for every pivot)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s: %(message)s")


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(args.verbose)

    source = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    reader = TokenReader(source)

    if not args.no_banner:
        print_welcome_banner(out)
    try:
        rows = read_dimension("rows", reader, out)
        cols = read_dimension("columns", reader, out)
        matrix = read_matrix(rows, cols, reader, out)
    except EOFError:
        print(file=out)
        print("Input ended before the matrix was complete.", file=sys.stderr)
        return 1

    print("The original matrix: ", file=out)
    print_matrix(matrix, out, settings.field_width)

    gauss_jordan(matrix, epsilon=settings.epsilon, progress=settings.progress)

    print("The row reduced matrix: ", file=out)
    print_matrix(matrix, out, settings.field_width)
    return 0


if __name__ == "__main__":
    sys.exit(main())
