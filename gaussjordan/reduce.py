"""Gauss-Jordan elimination over a flat :class:`~gaussjordan.linalg.Matrix`.

The reduction is driven one row at a time.  Each call searches the given row
for its leading non-zero entry, normalises that entry to one and clears the
rest of its column.  Because every call restarts the column scan at zero,
columns pivoted by earlier calls are already zero in the current row and are
skipped, so repeated per-row calls build the reduced row-echelon form without
tracking which columns are used.

No rows are ever swapped.  A leading entry that is tiny but above the
tolerance is used as the pivot as-is, which can amplify rounding error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from .config import EPSILON
from .linalg import Matrix, is_one, is_zero


@dataclass(frozen=True)
class PivotPosition:
    """Location of a leading one created during a single reduction step."""

    row: int
    column: int


@dataclass
class ReductionResult:
    """Result container returned by :func:`gauss_jordan`."""

    matrix: Matrix
    pivots: List[PivotPosition] = field(default_factory=list)

    @property
    def rank(self) -> int:
        return len(self.pivots)

    @property
    def pivot_columns(self) -> Tuple[int, ...]:
        return tuple(p.column for p in self.pivots)

    @property
    def zero_rows(self) -> Tuple[int, ...]:
        pivot_rows = {p.row for p in self.pivots}
        return tuple(r for r in range(self.matrix.rows) if r not in pivot_rows)


def _find_pivot(matrix: Matrix, row: int, start_col: int, epsilon: float) -> Optional[PivotPosition]:
    column = start_col
    while column < matrix.cols:
        leading = matrix.get(row, column)
        if is_zero(leading, epsilon):
            column += 1
            continue
        if not is_one(leading, epsilon):
            matrix.scale_row(row, leading)
        return PivotPosition(row, column)
    return None


def _eliminate_column(matrix: Matrix, pivot: PivotPosition, epsilon: float) -> None:
    others = list(range(0, pivot.row)) + list(range(pivot.row + 1, matrix.rows))
    for r in others:
        multiple = matrix.get(r, pivot.column)
        if is_zero(multiple, epsilon):
            continue
        matrix.subtract_row_multiple(r, pivot.row, multiple)


def reduce_row_and_column(
    start_row: int,
    start_col: int,
    matrix: Matrix,
    epsilon: float = EPSILON,
) -> Optional[PivotPosition]:
    """Create a leading one in ``start_row`` and clear its column.

    The row is scanned rightwards from ``start_col``.  The first entry whose
    magnitude exceeds ``epsilon`` becomes the pivot: the row is divided by it
    unless it is already within ``epsilon`` of one.  Every other row then has
    the matching multiple of the pivot row subtracted, first the rows above,
    then the rows below.

    Returns the pivot position, or ``None`` when the row is effectively zero
    from ``start_col`` onward or the matrix has no elements.  The matrix is
    modified in place.
    """

    if matrix.is_empty:
        return None
    pivot = _find_pivot(matrix, start_row, start_col, epsilon)
    if pivot is None:
        logging.debug("row %d has no pivot from column %d", start_row, start_col)
        return None
    logging.debug("pivot at row %d, column %d", pivot.row, pivot.column)
    _eliminate_column(matrix, pivot, epsilon)
    return pivot


def gauss_jordan(matrix: Matrix, epsilon: float = EPSILON, progress: bool = False) -> ReductionResult:
    """Reduce ``matrix`` in place to reduced row-echelon form.

    Runs :func:`reduce_row_and_column` once for every row, always starting
    the scan at column zero.  ``progress`` shows a :mod:`tqdm` bar over the
    rows.
    """

    result = ReductionResult(matrix)
    if matrix.is_empty:
        logging.info("matrix %dx%d is empty, nothing to reduce", matrix.rows, matrix.cols)
        return result
    for r in tqdm(range(matrix.rows), desc="Row reduction", disable=not progress, leave=False):
        pivot = reduce_row_and_column(r, 0, matrix, epsilon)
        if pivot is not None:
            result.pivots.append(pivot)
    logging.info(
        "reduced %dx%d matrix: rank %d, pivot columns %s",
        matrix.rows,
        matrix.cols,
        result.rank,
        list(result.pivot_columns),
    )
    return result
