"""Flat row-major matrix storage used by the reducer and the formatter.

The matrix lives in a single Python ``list`` of ``float`` values; element
``(r, c)`` sits at offset ``r * cols + c``.  Keeping one contiguous sequence
instead of a list of rows avoids a per-row indirection and keeps the addressing
explicit, which makes the elimination code straightforward to unit test.

:class:`Matrix` remains compatible with :mod:`numpy` arrays: ``from_rows``
accepts any nested iterable of numbers and ``to_array`` hands the buffer back
as an ``ndarray``.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import EPSILON


Row = Tuple[float, ...]


def is_zero(value: float, epsilon: float = EPSILON) -> bool:
    return abs(value) <= epsilon


def is_one(value: float, epsilon: float = EPSILON) -> bool:
    return abs(value - 1.0) <= epsilon


def _as_finite(value: float) -> float:
    converted = float(value)
    if not math.isfinite(converted):
        raise ValueError(f"matrix elements must be finite, got {value!r}")
    return converted


class Matrix:
    """Mutable ``rows x cols`` grid of doubles with fixed dimensions."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self._rows = int(rows)
        self._cols = int(cols)
        self._data: List[float] = [0.0] * (self._rows * self._cols)

    # ------------------------------------------------------------------
    # Construction ------------------------------------------------------
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]], cols: Optional[int] = None) -> "Matrix":
        """Build a matrix from nested iterables.

        All rows must share one width.  ``cols`` is only required when the
        width cannot be inferred, i.e. for a matrix without rows; when given
        it must agree with every row.
        """

        converted: List[Row] = [tuple(_as_finite(v) for v in row) for row in rows]
        if cols is None:
            cols = len(converted[0]) if converted else 0
        for row in converted:
            if len(row) != cols:
                raise ValueError("inconsistent row width")
        matrix = cls(len(converted), cols)
        matrix._data = [v for row in converted for v in row]
        return matrix

    @classmethod
    def from_flat(cls, rows: int, cols: int, values: Sequence[float]) -> "Matrix":
        matrix = cls(rows, cols)
        if len(values) != rows * cols:
            raise ValueError(f"expected {rows * cols} values, got {len(values)}")
        matrix._data = [_as_finite(v) for v in values]
        return matrix

    def copy(self) -> "Matrix":
        clone = Matrix(self._rows, self._cols)
        clone._data = list(self._data)
        return clone

    # ------------------------------------------------------------------
    # Dimensions --------------------------------------------------------
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def is_empty(self) -> bool:
        return self._rows == 0 or self._cols == 0

    # ------------------------------------------------------------------
    # Element access ----------------------------------------------------
    # ------------------------------------------------------------------
    def index(self, r: int, c: int) -> int:
        if not 0 <= r < self._rows:
            raise IndexError(f"row {r} out of range for {self._rows} rows")
        if not 0 <= c < self._cols:
            raise IndexError(f"column {c} out of range for {self._cols} columns")
        return r * self._cols + c

    def get(self, r: int, c: int) -> float:
        return self._data[self.index(r, c)]

    def set(self, r: int, c: int, value: float) -> None:
        self._data[self.index(r, c)] = float(value)

    def row(self, r: int) -> Row:
        if not 0 <= r < self._rows:
            raise IndexError(f"row {r} out of range for {self._rows} rows")
        start = r * self._cols
        return tuple(self._data[start:start + self._cols])

    def to_rows(self) -> Tuple[Row, ...]:
        return tuple(self.row(r) for r in range(self._rows))

    def to_array(self) -> np.ndarray:
        return np.asarray(self._data, dtype=float).reshape(self._rows, self._cols)

    # ------------------------------------------------------------------
    # Elementary row operations ----------------------------------------
    # ------------------------------------------------------------------
    def scale_row(self, r: int, divisor: float) -> None:
        """Divide every element of row ``r`` by ``divisor``."""

        start = self.index(r, 0)
        data = self._data
        for offset in range(start, start + self._cols):
            data[offset] /= divisor

    def subtract_row_multiple(self, target: int, source: int, multiple: float) -> None:
        """Replace row ``target`` with ``row[target] - multiple * row[source]``."""

        dst = self.index(target, 0)
        src = self.index(source, 0)
        data = self._data
        for c in range(self._cols):
            data[dst + c] -= data[src + c] * multiple

    # ------------------------------------------------------------------
    # Dunder helpers ----------------------------------------------------
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self.to_rows()})"
