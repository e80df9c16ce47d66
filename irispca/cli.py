"""Command line entry point: PCA of the iris dataset, written as a VTK file."""

from __future__ import annotations

import sys

from irispca.dataset import FEATURES, DatasetError, load_iris
from irispca.matrix import Matrix
from irispca.square_matrix import SquareMatrix

OUTPUT_FILE = "output_pca.vtk"
BANNER = "=" * 56
USAGE = (
    "Usage: irispca <dataset.json = iris.json> <num_samples = 150> "
    "<num_features = 5> <num_PC = 2, 3>"
)


def run_pca(data: Matrix, num_components: int) -> Matrix:
    """Project centered data onto its leading ``num_components`` principal components."""
    centered = data.centered()
    covariance = SquareMatrix.from_matrix(centered.transpose() * centered)
    covariance.eig()
    return centered * covariance.extract_pcs(num_components)


def _announce(message: str) -> None:
    print(BANNER)
    print(message)
    print(BANNER)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 4:
            raise ValueError
        filename = args[0]
        num_samples, num_features, num_pc = (int(a) for a in args[1:])
        if num_pc not in (2, 3):
            raise ValueError
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1

    if num_features - 1 != len(FEATURES):
        print(f"Error: the dataset has {len(FEATURES) + 1} fields per sample", file=sys.stderr)
        return 1

    try:
        data, labels = load_iris(filename, num_samples)
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _announce("Data imported successfully!")

    _announce("Performing PCA on the dataset...")
    projected = run_pca(data, num_pc)

    try:
        projected.write_vtk(labels, OUTPUT_FILE)
    except OSError as exc:
        print(f"Could not open file for writing: {OUTPUT_FILE} ({exc})", file=sys.stderr)
        return 1
    _announce(f"VTK file written to {OUTPUT_FILE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())