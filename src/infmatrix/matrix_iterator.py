from typing import Any, NamedTuple, Optional

from .errors import PastTheEndError
from .ordered_map import OrderedIntMap


class Cell(NamedTuple):
    """An occupied matrix cell as produced by iteration."""
    row: int
    col: int
    value: Any


class MatrixIterator:
    """
    Forward, single-pass cursor over the occupied cells of a SparseMatrix.

    The cursor is a (row, col) pair plus a reference to the matrix's row
    storage. (None, None) marks the past-the-end position, which is terminal.
    Cells are visited in row-major order: rows ascending, and columns
    ascending within each row. Rows that are present but empty are skipped.
    """

    END = (None, None)

    def __init__(self, rows: OrderedIntMap, row: Optional[int] = None, col: Optional[int] = None):
        self._rows = rows
        self._row = row
        self._col = col

    @classmethod
    def begin(cls, rows: OrderedIntMap) -> 'MatrixIterator':
        """Returns an iterator positioned on the first occupied cell, or at end."""
        it = cls(rows)
        row = rows.first_key()
        while row is not None:
            vector = rows[row]
            if not vector.empty():
                it._row, it._col = row, vector.first_index()
                break
            row = rows.successor(row)
        return it

    @classmethod
    def end(cls, rows: OrderedIntMap) -> 'MatrixIterator':
        return cls(rows)

    @property
    def at_end(self) -> bool:
        return self._row is None

    @property
    def position(self) -> tuple[Optional[int], Optional[int]]:
        return self._row, self._col

    def current(self) -> Cell:
        """Dereference the cursor.

        Raises:
            PastTheEndError: If the iterator is positioned past the end.
        """
        if self.at_end:
            raise PastTheEndError("MatrixIterator.current")
        return Cell(self._row, self._col, self._rows[self._row].get(self._col))

    def advance(self) -> 'MatrixIterator':
        """Move to the next occupied cell, or to end if there is none."""
        if self.at_end:
            return self

        vector = self._rows.get(self._row)
        if vector is not None:
            next_col = vector.successor(self._col)
            if next_col is not None:
                self._col = next_col
                return self

        # try the next rows
        row = self._rows.successor(self._row)
        while row is not None:
            vector = self._rows[row]
            if not vector.empty():
                self._row, self._col = row, vector.first_index()
                return self
            row = self._rows.successor(row)

        self._row, self._col = self.END
        return self

    def __iter__(self) -> 'MatrixIterator':
        return self

    def __next__(self) -> Cell:
        if self.at_end:
            raise StopIteration
        cell = self.current()
        self.advance()
        return cell

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatrixIterator):
            return NotImplemented
        return self._rows is other._rows and self.position == other.position

    __hash__ = None

    def __repr__(self) -> str:
        if self.at_end:
            return "MatrixIterator(end)"
        return f"MatrixIterator(row={self._row}, col={self._col})"
