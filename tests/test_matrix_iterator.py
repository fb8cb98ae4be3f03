import pytest
import os
import sys

# Add the src directory to Python path to import local infmatrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from infmatrix import SparseMatrix, MatrixIterator, Cell, PastTheEndError
from test_utils import fill_diagonals


@pytest.fixture
def sm() -> SparseMatrix:
    return fill_diagonals(SparseMatrix(default=0))


class TestIteratorStates:
    """begin/end positioning and the advance transitions."""

    def test_empty_matrix_begin_is_end(self):
        m = SparseMatrix()
        assert m.begin() == m.end()
        assert m.begin().at_end
        assert list(m) == []

    def test_begin_position(self, sm):
        it = sm.begin()
        assert it.position == (0, 9)
        assert it.current() == Cell(0, 9, 9)

    def test_advance_within_row_then_next_row(self, sm):
        it = sm.begin()
        it.advance()
        assert it.position == (1, 1)
        it.advance()
        assert it.position == (1, 8)
        it.advance()
        assert it.position == (2, 2)

    def test_end_is_terminal(self):
        m = SparseMatrix()
        m[3][4] = 1
        it = m.begin()
        it.advance()
        assert it.at_end
        assert it.position == (None, None)
        it.advance()
        assert it == m.end()

    def test_dereference_end_fails(self, sm):
        with pytest.raises(PastTheEndError):
            sm.end().current()
        with pytest.raises(IndexError):
            sm.end().current()

    def test_next_at_end_stops(self, sm):
        it = sm.end()
        with pytest.raises(StopIteration):
            next(it)


class TestIteratorEquality:
    """Equality is pointwise on position and on the underlying storage."""

    def test_same_position_same_matrix(self, sm):
        assert sm.begin() == sm.begin()
        assert sm.end() == sm.end()

    def test_different_position(self, sm):
        a = sm.begin()
        b = sm.begin()
        b.advance()
        assert a != b

    def test_different_matrix(self, sm):
        other = sm.copy()
        assert sm.begin() != other.begin()
        assert sm.end() != other.end()

    def test_repr(self, sm):
        assert repr(sm.begin()) == "MatrixIterator(row=0, col=9)"
        assert repr(sm.end()) == "MatrixIterator(end)"


class TestIterationCompleteness:
    """Full traversals."""

    def test_count_matches_size(self, sm):
        cells = list(sm)
        assert len(cells) == sm.size()
        for row, col, value in cells:
            assert sm[row][col] == value

    def test_row_major_order(self, sm):
        positions = [(c.row, c.col) for c in sm.cells()]
        assert positions == sorted(positions)

    def test_restartable(self, sm):
        assert list(sm.cells()) == list(sm.cells())
        assert list(iter(sm)) == list(sm)

    def test_manual_loop(self, sm):
        seen = []
        it, end = sm.begin(), sm.end()
        while it != end:
            seen.append(it.current())
            it.advance()
        assert seen == list(sm)

    def test_skips_empty_rows_without_compact(self):
        m = SparseMatrix(prune='lazy')
        m[1][1] = 1
        m[2][2] = 2
        m[3][3] = 3
        it = MatrixIterator.begin(m.data_store)
        m[2][2] = 0
        assert m.nrows() == 3
        assert list(it) == [(1, 1, 1), (3, 3, 3)]

    def test_skips_leading_empty_rows(self):
        m = SparseMatrix(prune='lazy')
        m[0][0] = 1
        m[5][5] = 5
        m[0][0] = 0
        it = MatrixIterator.begin(m.data_store)
        assert it.position == (5, 5)

    def test_unpack(self):
        m = SparseMatrix(default=-1)
        m[100][100] = 314
        for c in m:
            x, y, v = c
            assert (x, y, v) == (100, 100, 314)
            assert str(x) + str(y) + str(v) == "100100314"
