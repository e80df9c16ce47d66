"""A small dense matrix of floats with the operations PCA needs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from numbers import Real


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions do not fit an operation."""


def _fmt(value: float) -> str:
    """Format a number the way a default C-style stream does (6 significant digits)."""
    return format(value, "g")


class Matrix:
    """A rows x cols matrix of floats stored as a list of rows."""

    def __init__(self, rows: int, cols: int, initial: float = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise MatrixShapeError(f"invalid matrix size {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._values = [[float(initial)] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(v) for v in row] for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise MatrixShapeError("rows have different lengths")
        result = Matrix(len(data), width)
        result._values = data
        return result

    @property
    def shape(self) -> tuple[int, int]:
        """The (rows, cols) pair."""
        return self._rows, self._cols

    def tolist(self) -> list[list[float]]:
        """A copy of the values as nested lists."""
        return [list(row) for row in self._values]

    def transpose(self) -> "Matrix":
        return Matrix.from_rows(zip(*self._values)) if self._rows else Matrix(self._cols, 0)

    def _scaled(self, scalar: float) -> "Matrix":
        return Matrix.from_rows([v * scalar for v in row] for row in self._values) \
            if self._rows else Matrix(0, self._cols)

    def __mul__(self, other: object) -> "Matrix":
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise MatrixShapeError(
                    f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}"
                )
            result = Matrix(self._rows, other._cols)
            other_cols = list(zip(*other._values)) if other._rows else [()] * other._cols
            result._values = [
                [sum(a * b for a, b in zip(row, col)) for col in other_cols]
                for row in self._values
            ]
            return result
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._scaled(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Matrix":
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._scaled(float(other))
        return NotImplemented

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise MatrixShapeError(f"cannot add {self.shape} and {other.shape}")
        result = Matrix(self._rows, self._cols)
        result._values = [
            [a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._values, other._values)
        ]
        return result

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self + other * -1.0

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        row, col = index
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"index {index} out of bounds for {self._rows}x{self._cols} matrix")
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return self._values[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        self._values[row][col] = float(value)

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_fmt(v)}\t" for v in row) + "\n" for row in self._values
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._values!r})"

    def row(self, index: int) -> list[float]:
        if not 0 <= index < self._rows:
            raise IndexError(f"row index {index} out of bounds")
        return list(self._values[index])

    def col(self, index: int) -> list[float]:
        if not 0 <= index < self._cols:
            raise IndexError(f"column index {index} out of bounds")
        return [row[index] for row in self._values]

    def set_row(self, index: int, values: Sequence[float]) -> None:
        if not 0 <= index < self._rows:
            raise IndexError(f"row index {index} out of bounds")
        if len(values) != self._cols:
            raise MatrixShapeError("row size does not match matrix columns")
        self._values[index] = [float(v) for v in values]

    def set_col(self, index: int, values: Sequence[float]) -> None:
        if not 0 <= index < self._cols:
            raise IndexError(f"column index {index} out of bounds")
        if len(values) != self._rows:
            raise MatrixShapeError("column size does not match matrix rows")
        for row, value in zip(self._values, values):
            row[index] = float(value)

    def centered(self) -> "Matrix":
        """Return a copy with each column's mean subtracted."""
        if self._rows == 0:
            return Matrix(0, self._cols)
        means = [sum(col) / self._rows for col in zip(*self._values)]
        return Matrix.from_rows([v - m for v, m in zip(row, means)] for row in self._values)

    def to_vtk(self, labels: Iterable[int]) -> str:
        """Render the rows as points of a legacy ASCII VTK polydata file."""
        lines = [
            "# vtk DataFile Version 3.0",
            "PCA output",
            "ASCII",
            "DATASET POLYDATA",
            f"POINTS {self._rows} float",
        ]
        padding = "0.0 " * max(0, 3 - self._cols)
        for row in self._values:
            lines.append("".join(f"{_fmt(v)} " for v in row) + padding)
        lines.append("")
        lines.append(f"POINT_DATA {self._rows}")
        lines.append("SCALARS label int")
        lines.append("LOOKUP_TABLE default")
        lines.extend(str(int(label)) for label in labels)
        return "\n".join(lines) + "\n"

    def write_vtk(self, labels: Iterable[int], path) -> None:
        """Write the VTK rendering to ``path``."""
        with open(path, "w", encoding="ascii") as handle:
            handle.write(self.to_vtk(labels))