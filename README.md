# irispca

Principal component analysis (PCA) of the Iris flower dataset in plain Python,
with no third-party dependencies. It centres the data, builds the covariance
matrix, finds its eigenpairs with Jacobi's rotation method, projects the
samples onto the leading 2 or 3 principal components and writes the result as
a legacy ASCII VTK file, which ParaView can open.

## Installation

```
pip install .
```

## Command line

```
irispca <dataset.json> <num_samples> <num_features> <num_PC>
```

- `dataset.json`: a JSON array of records with the keys `sepalLength`,
  `sepalWidth`, `petalLength`, `petalWidth` and `species`.
- `num_samples`: how many records to read, from the start of the array (150
  for the full Iris set). The file must hold at least that many.
- `num_features`: the number of fields per record including the species, which
  must be 5. The four measurements are the features.
- `num_PC`: the number of principal components to keep, 2 or 3.

Example:

```
irispca iris.json 150 5 2
```

The projected points are written to `output_pca.vtk` in the current
directory. Each point carries an integer label: `1` for *setosa* and `0` for
every other species. For 2 components the third coordinate is padded with
`0.0`.

The command returns 0 on success. It prints a usage line and returns 1 when
the arguments are wrong, and returns 1 with a message on standard error when
the dataset cannot be read or the output file cannot be written.

## Library use

```python
from irispca.dataset import load_iris
from irispca.cli import run_pca

data, labels = load_iris("iris.json", 150)
scores = run_pca(data, 2)
scores.write_vtk(labels, "output_pca.vtk")
```

- `irispca.dataset.load_iris(path, num_samples)` returns the feature matrix and
  the list of labels. It raises `DatasetError` when the file cannot be opened,
  is not valid JSON, is not an array, has too few records, or a record lacks a
  field or has a field of the wrong type.
- `irispca.cli.run_pca(data, num_components)` centres the data and returns it
  projected onto the leading `num_components` principal components.
- `irispca.matrix.Matrix(rows, cols, initial=0.0)` is a dense matrix of floats,
  also built with `Matrix.from_rows(rows)`. It supports `*` for matrix and
  scalar products, `+`, `-`, `transpose()`, `centered()`, `m[i, j]` element
  access, `row()`, `col()`, `set_row()`, `set_col()`, `shape` and `tolist()`.
  `str(m)` gives tab-separated rows. `to_vtk(labels)` returns the VTK text and
  `write_vtk(labels, path)` writes it to a file.
- `irispca.square_matrix.SquareMatrix(size)` is a square matrix, also built
  from a square `Matrix` with `SquareMatrix.from_matrix(matrix)`. Its `eig()`
  method runs the Jacobi method (up to 1000 rotations, tolerance 1e-10),
  stores `eigenvalues` and `eigenvectors` sorted by descending eigenvalue and
  returns the eigenvalues. `extract_pcs(k)` returns the first `k` eigenvectors
  as columns, and `eig_report()` gives a text listing of the eigenpairs.

`MatrixShapeError` (a `ValueError`) is raised when operand shapes do not
agree, and `IndexError` when an index is out of bounds.