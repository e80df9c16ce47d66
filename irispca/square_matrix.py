"""Square matrices with a Jacobi eigen-decomposition."""

from __future__ import annotations

import math

from irispca.matrix import Matrix, MatrixShapeError, _fmt

MAX_ITERATIONS = 1000
TOLERANCE = 1e-10


class SquareMatrix(Matrix):
    """A square matrix that can compute and hold its eigenvalues and eigenvectors."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size)
        self.eigenvalues: list[float] = [0.0] * size
        self.eigenvectors = Matrix(size, size)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "SquareMatrix":
        rows, cols = matrix.shape
        if rows != cols:
            raise MatrixShapeError(f"matrix of shape {rows}x{cols} is not square")
        result = cls(rows)
        for index in range(rows):
            result.set_row(index, matrix.row(index))
        return result

    def eig(self) -> list[float]:
        """Compute eigenpairs of the (symmetric) matrix by Jacobi rotations.

        The results are sorted by descending eigenvalue and stored on the
        instance; the eigenvalues are also returned.
        """
        n = self.shape[0]
        a = self.tolist()
        v = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]

        for _ in range(MAX_ITERATIONS):
            p, q, largest = 0, 1, 0.0
            for i in range(n):
                for j in range(i + 1, n):
                    if abs(a[i][j]) > abs(largest):
                        largest, p, q = a[i][j], i, j
            if abs(largest) < TOLERANCE:
                break

            theta = 0.5 * math.atan2(2 * a[p][q], a[q][q] - a[p][p])
            c, s = math.cos(theta), math.sin(theta)
            app = c * c * a[p][p] + s * s * a[q][q] - 2 * s * c * a[p][q]
            aqq = s * s * a[p][p] + c * c * a[q][q] + 2 * s * c * a[p][q]
            a[p][q] = a[q][p] = 0.0
            for i in range(n):
                if i not in (p, q):
                    aip = c * a[i][p] - s * a[i][q]
                    aiq = s * a[i][p] + c * a[i][q]
                    a[i][p] = a[p][i] = aip
                    a[i][q] = a[q][i] = aiq
            a[p][p] = app
            a[q][q] = aqq

            for row in v:
                vip = c * row[p] - s * row[q]
                viq = s * row[p] + c * row[q]
                row[p], row[q] = vip, viq

        self.eigenvalues = [a[i][i] for i in range(n)]
        self.eigenvectors = Matrix.from_rows(v) if n else Matrix(0, 0)
        self.sort_eigen()
        return list(self.eigenvalues)

    def sort_eigen(self) -> None:
        """Order eigenvalues, and their eigenvector columns, from largest to smallest."""
        pairs = sorted(
            ((value, self.eigenvectors.col(i)) for i, value in enumerate(self.eigenvalues)),
            key=lambda pair: pair[0],
            reverse=True,
        )
        self.eigenvalues = [value for value, _ in pairs]
        for index, (_, vector) in enumerate(pairs):
            self.eigenvectors.set_col(index, vector)

    def eig_report(self) -> str:
        """Text listing of the eigenvalues followed by the eigenvector matrix."""
        values = "".join(f"{_fmt(v)}\t" for v in self.eigenvalues)
        return f"Eigenvalues:\n{values}\nEigenvectors:\n{self.eigenvectors}\n"

    def extract_pcs(self, num_pcs: int) -> Matrix:
        """Return the first ``num_pcs`` eigenvectors as the columns of a matrix."""
        size = self.shape[0]
        if not 0 <= num_pcs <= size:
            raise MatrixShapeError(f"cannot extract {num_pcs} components from size {size}")
        result = Matrix(size, num_pcs)
        for index in range(num_pcs):
            result.set_col(index, self.eigenvectors.col(index))
        return result