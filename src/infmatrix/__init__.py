"""
Sparse infinite vectors and matrices.

Containers that store only the cells whose value differs from a configured
default, with ordered row-major iteration over the occupied cells.
"""

__version__ = "0.1.0"

from .sparse_vector import SparseVector, CellAccessor
from .sparse_matrix import SparseMatrix, MatrixRow
from .matrix_iterator import MatrixIterator, Cell
from .ordered_map import OrderedIntMap
from .config import SparseConfig
from .errors import (
    SparseConfigError,
    SparseRuntimeError,
    InvalidPruneModeError,
    UnsupportedDefaultError,
    InvalidIndexError,
    PastTheEndError,
)

__all__ = [
    "SparseVector",
    "CellAccessor",
    "SparseMatrix",
    "MatrixRow",
    "MatrixIterator",
    "Cell",
    "OrderedIntMap",
    "SparseConfig",
    "SparseConfigError",
    "SparseRuntimeError",
    "InvalidPruneModeError",
    "UnsupportedDefaultError",
    "InvalidIndexError",
    "PastTheEndError",
]
