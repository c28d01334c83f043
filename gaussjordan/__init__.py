"""Gauss-Jordan elimination calculator.

Reduces a dense matrix of doubles to reduced row-echelon form in place and
renders it as a bordered fixed-width grid.
"""

from .config import EPSILON, Settings
from .linalg import Matrix
from .reduce import PivotPosition, ReductionResult, gauss_jordan, reduce_row_and_column
from .formatter import format_number, print_matrix, render_matrix

__all__ = [
    "EPSILON",
    "Settings",
    "Matrix",
    "PivotPosition",
    "ReductionResult",
    "gauss_jordan",
    "reduce_row_and_column",
    "format_number",
    "print_matrix",
    "render_matrix",
]
