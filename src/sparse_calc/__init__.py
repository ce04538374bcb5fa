"""
Sparse integer matrices with a plain-text file format.

Load matrices from rows=/cols= text files, add, subtract or multiply them, and write the result back out.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .matrix_io import load_matrix, save_matrix, parse_matrix_lines
from .matrix_errors import (
    SparseCalcError,
    MatrixNotFoundError,
    MatrixFormatError,
    DimensionMismatchError,
    InvalidSelectionError,
    MatrixWriteError,
)
from .config import CalculatorConfig, MatrixOperation
from .calculator import MatrixCalculator

__all__ = [
    "SparseMatrix",
    "load_matrix",
    "save_matrix",
    "parse_matrix_lines",
    "SparseCalcError",
    "MatrixNotFoundError",
    "MatrixFormatError",
    "DimensionMismatchError",
    "InvalidSelectionError",
    "MatrixWriteError",
    "CalculatorConfig",
    "MatrixOperation",
    "MatrixCalculator",
]
