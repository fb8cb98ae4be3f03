import logging
import numpy as np
from typing import Any, Iterator, Optional

from .config import SparseConfig
from .errors import InvalidIndexError
from .matrix_iterator import Cell, MatrixIterator
from .ordered_map import OrderedIntMap
from .sparse_vector import CellAccessor, SparseVector, as_index


logger = logging.getLogger(__name__)


class MatrixRow:
    """
    View of one row of a SparseMatrix.

    Returned by ``matrix[i]`` so that ``matrix[i][j]`` can be read or written.
    Reads never create the row; writes go through SparseMatrix.set, which
    creates the row only when a non-default value is stored.
    """

    __slots__ = ('_matrix', '_row')

    def __init__(self, matrix: 'SparseMatrix', row: int):
        self._matrix = matrix
        self._row = row

    @property
    def index(self) -> int:
        return self._row

    @property
    def vector(self) -> Optional[SparseVector]:
        """The stored row vector, or None if the row has no entry."""
        return self._matrix.data_store.get(self._row)

    def get(self, col) -> Any:
        return self._matrix.get(self._row, col)

    def set(self, col, value: Any) -> Any:
        return self._matrix.set(self._row, col, value)

    def erase(self, col) -> int:
        return self._matrix.erase(self._row, col)

    def at(self, col) -> CellAccessor:
        """Returns a deferred read/write handle on cell (row, col)."""
        return CellAccessor(self, as_index(col))

    def __getitem__(self, col) -> Any:
        return self.get(col)

    def __setitem__(self, col, value: Any) -> None:
        self.set(col, value)

    def __delitem__(self, col) -> None:
        self.erase(col)

    def __contains__(self, col) -> bool:
        vector = self.vector
        return vector is not None and col in vector

    def size(self) -> int:
        vector = self.vector
        return 0 if vector is None else vector.size()

    __len__ = size

    def empty(self) -> bool:
        return self.size() == 0

    def __iter__(self) -> Iterator[int]:
        vector = self.vector
        return iter(()) if vector is None else iter(vector)

    def items(self) -> Iterator[tuple[int, Any]]:
        vector = self.vector
        if vector is not None:
            yield from vector.items()

    def __repr__(self) -> str:
        items_str = ", ".join(f"{k}: {v!r}" for k, v in self.items())
        return f"MatrixRow({self._row}, {{{items_str}}})"


class SparseMatrix:
    """
    Conceptually infinite 2D matrix that stores only non-default cells.

    Rows are SparseVector instances kept in ascending row order. Any integer,
    negative values included, is a valid row or column index.
    """

    def __init__(self, default: Any = 0, prune: str = 'immediate', config: Optional[SparseConfig] = None):
        """
        Args:
            default: Value of unoccupied cells. Ignored when config is given.
            prune: Row pruning policy, 'immediate' or 'lazy'. Ignored when config is given.
            config: Configuration shared with every row vector.
        """
        if config is None:
            config = SparseConfig(default=default, prune=prune)
        config.validate()
        self._config = config
        self.data_store = OrderedIntMap()

    @property
    def config(self) -> SparseConfig:
        return self._config

    @property
    def default(self) -> Any:
        """The value of unoccupied cells. Fixed at construction."""
        return self._config.default

    @property
    def prune(self) -> str:
        """The row pruning policy. Fixed at construction."""
        return self._config.prune

    @staticmethod
    def _split_key(key) -> tuple[int, int]:
        if isinstance(key, tuple) and len(key) == 2:
            return as_index(key[0], "row"), as_index(key[1], "column")
        raise InvalidIndexError(key, "SparseMatrix cell keys must be a tuple of length 2")

    def get(self, row, col) -> Any:
        """Get the value at position (row, col). Never creates a row."""
        vector = self.data_store.get(as_index(row, "row"))
        if vector is None:
            return self.default
        return vector.get(col)

    def set(self, row, col, value: Any) -> Any:
        """Write value at position (row, col) and return it.

        The row vector is created on the first non-default write. Writing the
        default erases the cell; under the 'immediate' prune policy a row left
        empty by that erase is dropped at once.
        """
        row = as_index(row, "row")
        col = as_index(col, "column")
        vector = self.data_store.get(row)
        if value == self.default:
            if vector is not None:
                vector.erase(col)
                self._prune_row(row, vector)
            return value

        if vector is None:
            vector = SparseVector(config=self.config)
            self.data_store[row] = vector
            logger.debug("created row %d", row)
        vector.set(col, value)
        return value

    def erase(self, row, col) -> int:
        """Remove the cell at (row, col).

        Returns:
            1 if an entry was removed, 0 if the cell was not occupied.
        """
        row = as_index(row, "row")
        vector = self.data_store.get(row)
        if vector is None:
            return 0
        removed = vector.erase(col)
        self._prune_row(row, vector)
        return removed

    def _prune_row(self, row: int, vector: SparseVector) -> None:
        if self.prune == 'immediate' and vector.empty():
            del self.data_store[row]
            logger.debug("pruned empty row %d", row)

    def erase_row(self, row) -> int:
        """Remove a whole row.

        Returns:
            The number of occupied cells removed.
        """
        vector = self.data_store.pop(as_index(row, "row"), None)
        return 0 if vector is None else vector.size()

    def row(self, i) -> MatrixRow:
        return MatrixRow(self, as_index(i, "row"))

    def at(self, row, col) -> CellAccessor:
        """Returns a deferred read/write handle on cell (row, col)."""
        return self.row(row).at(col)

    def __getitem__(self, key):
        """Returns a row view for ``m[i]``, or the cell value for ``m[i, j]``."""
        if isinstance(key, tuple):
            return self.get(*self._split_key(key))
        return self.row(key)

    def __setitem__(self, key, value: Any) -> None:
        self.set(*self._split_key(key), value)

    def __delitem__(self, key) -> None:
        if isinstance(key, tuple):
            self.erase(*self._split_key(key))
        else:
            self.erase_row(key)

    def __contains__(self, key) -> bool:
        """Checks if cell (row, col) is occupied."""
        try:
            row, col = self._split_key(key)
        except InvalidIndexError:
            return False
        vector = self.data_store.get(row)
        return vector is not None and col in vector

    def size(self) -> int:
        """Returns the number of occupied cells across all rows."""
        return sum(vector.size() for vector in self.data_store.values())

    __len__ = size

    def nrows(self) -> int:
        """Returns the number of stored row entries.

        Under the 'lazy' prune policy this may include emptied rows until the
        next compact() or iteration.
        """
        return len(self.data_store)

    def empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        """Removes all rows from the matrix."""
        self.data_store.clear()

    def compact(self) -> int:
        """Remove every row entry whose vector is empty.

        Returns:
            The number of rows removed.
        """
        empty_rows = [row for row, vector in self.data_store.items() if vector.empty()]
        for row in empty_rows:
            del self.data_store[row]
        if empty_rows:
            logger.debug("compact removed %d empty rows", len(empty_rows))
        return len(empty_rows)

    pack = compact

    def begin(self) -> MatrixIterator:
        """Compact, then return an iterator on the first occupied cell."""
        self.compact()
        return MatrixIterator.begin(self.data_store)

    def end(self) -> MatrixIterator:
        return MatrixIterator.end(self.data_store)

    def __iter__(self) -> MatrixIterator:
        return self.begin()

    def cells(self) -> Iterator[Cell]:
        """Lazily yields Cell(row, col, value) records in row-major order."""
        yield from self.begin()

    def rows(self) -> Iterator[tuple[int, SparseVector]]:
        """Yields (row index, row vector) pairs for non-empty rows in ascending order."""
        for row, vector in self.data_store.items():
            if not vector.empty():
                yield row, vector

    def block(self, row_start: int, row_stop: int, col_start: int, col_stop: int, dtype=None) -> np.ndarray:
        """Returns a dense copy of the half-open block [row_start, row_stop) x [col_start, col_stop).

        Args:
            row_start: First row of the block.
            row_stop: Row one past the end of the block.
            col_start: First column of the block.
            col_stop: Column one past the end of the block.
            dtype: Optional numpy dtype, inferred from the values if None.

        Returns:
            Array of shape (row_stop - row_start, col_stop - col_start), with
            unoccupied cells holding the default value.
        """
        row_start, row_stop = as_index(row_start, "row"), as_index(row_stop, "row")
        col_start, col_stop = as_index(col_start, "column"), as_index(col_stop, "column")
        n_rows = max(row_stop - row_start, 0)
        n_cols = max(col_stop - col_start, 0)

        dense = [[self.default] * n_cols for _ in range(n_rows)]
        for row, vector in self.rows():
            if row < row_start or row >= row_stop:
                continue
            for col, value in vector.items():
                if col_start <= col < col_stop:
                    dense[row - row_start][col - col_start] = value
        shape = (n_rows, n_cols)
        try:
            out = np.array(dense, dtype=dtype)
        except ValueError:
            out = None
        if out is not None and out.size == 0 and n_rows * n_cols == 0:
            return out.reshape(shape)
        if out is None or out.shape != shape:
            # sequence values would add dimensions, keep one object per cell
            out = np.empty(shape, dtype=dtype or object)
            for r, line in enumerate(dense):
                for c, value in enumerate(line):
                    out[r, c] = value
        return out

    @classmethod
    def from_dense(cls, array, default: Any = 0, prune: str = 'immediate',
                   row_offset: int = 0, col_offset: int = 0) -> 'SparseMatrix':
        """Build a matrix from a 2D array, skipping cells equal to the default.

        Args:
            array: Anything np.asarray accepts that yields a 2D array.
            default: The default value of the new matrix.
            prune: Row pruning policy of the new matrix.
            row_offset: Row index assigned to array row 0.
            col_offset: Column index assigned to array column 0.
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"from_dense expects a 2D array, got shape {arr.shape}")

        matrix = cls(default=default, prune=prune)
        values = arr.tolist()
        rows, cols = np.nonzero(arr != default)
        for r, c in zip(rows.tolist(), cols.tolist()):
            matrix.set(r + row_offset, c + col_offset, values[r][c])
        return matrix

    def copy(self) -> 'SparseMatrix':
        """Returns a deep copy of the matrix sharing the same configuration."""
        result = SparseMatrix(config=self.config)
        for row, vector in self.data_store.items():
            result.data_store[row] = vector.copy()
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.default == other.default and list(self.rows()) == list(other.rows())

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of the matrix."""
        items_str = ", ".join(
            f"({row}, {col}): {value!r}"
            for row, vector in self.rows()
            for col, value in vector.items()
        )
        return f"SparseMatrix({{{items_str}}}, default={self.default!r})"
