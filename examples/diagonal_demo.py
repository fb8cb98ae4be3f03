import os
import sys

# Add the src directory to Python path to import local infmatrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from infmatrix import SparseMatrix



def fill_diagonals(matrix: SparseMatrix, n: int = 10) -> SparseMatrix:
    """Main diagonal gets 0..n-1, the anti-diagonal gets n-1..0."""
    for i in range(n):
        matrix[i][i] = i
        matrix[i][n - 1 - i] = n - 1 - i
    return matrix


def format_block(matrix: SparseMatrix, rows: range, cols: range) -> list[str]:
    """Render rows x cols of the matrix, space separated, one line per row."""
    block = matrix.block(rows.start, rows.stop, cols.start, cols.stop)
    return [" ".join(str(v) for v in line) for line in block.tolist()]


def main() -> list[str]:
    matrix = fill_diagonals(SparseMatrix(default=0))

    lines = format_block(matrix, range(1, 9), range(1, 9))
    lines.append(str(matrix.size()))
    for row, col, value in matrix:
        lines.append(f"{row} {col} {value}")

    for line in lines:
        print(line)
    return lines


if __name__ == "__main__":
    main()
