"""Text rendering of matrices as bordered fixed-width grids."""

from __future__ import annotations

import re
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional, TextIO

from .config import EMPTY_NOTICE, FIELD_WIDTH, PRECISION
from .linalg import Matrix

# Wide enough for the integer part of the largest finite double plus the fraction.
_DECIMAL_DIGITS = 400

_NEGATIVE_ZERO = re.compile(r"^-(?=0(\.0*)?$)")


def format_number(value: float, precision: int = PRECISION) -> str:
    """Render ``value`` with ``precision`` fractional digits.

    Rounding is half-up on the exact binary value of the double and the
    integer part carries thousands separators.  A result that reads as a
    negative zero loses its sign, so ``-1e-20`` prints as ``0.0000000000``.
    """

    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_DIGITS
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    text = format(rounded, f",.{precision}f")
    return _NEGATIVE_ZERO.sub("", text)


def render_matrix(matrix: Matrix, width: int = FIELD_WIDTH, precision: int = PRECISION) -> List[str]:
    """Return the printable lines of ``matrix``, one per row.

    An empty matrix renders as a single notice line.  Single-column matrices
    border every cell; wider ones border only the outer edges of each line
    and leave a trailing space after every value.
    """

    if matrix.is_empty:
        return [EMPTY_NOTICE]
    lines = []
    last = matrix.cols - 1
    for r in range(matrix.rows):
        if matrix.cols == 1:
            lines.append("|" + format_number(matrix.get(r, 0), precision).ljust(width) + "|")
            continue
        cells = []
        for c in range(matrix.cols):
            cell = (format_number(matrix.get(r, c), precision) + " ").ljust(width)
            if c == 0:
                cell = "|" + cell
            if c == last:
                cell = cell + "|"
            cells.append(cell)
        lines.append("".join(cells))
    return lines


def print_matrix(
    matrix: Matrix,
    file: Optional[TextIO] = None,
    width: int = FIELD_WIDTH,
    precision: int = PRECISION,
) -> None:
    out = file if file is not None else sys.stdout
    print(file=out)
    for line in render_matrix(matrix, width, precision):
        print(line, file=out)
    print(file=out)
