"""Loading the iris dataset from a JSON file."""

from __future__ import annotations

import json
import os

from irispca.matrix import Matrix

FEATURES = ("sepalLength", "sepalWidth", "petalLength", "petalWidth")


class DatasetError(Exception):
    """Raised when the dataset cannot be read or is malformed."""


def load_iris(path: str | os.PathLike, num_samples: int) -> tuple[Matrix, list[int]]:
    """Read ``num_samples`` records; return the feature matrix and labels.

    The label is 1 for the setosa species and 0 for every other species.
    """
    if num_samples < 0:
        raise DatasetError("number of samples must not be negative")
    try:
        with open(path, encoding="utf-8") as handle:
            records = json.load(handle)
    except OSError as exc:
        raise DatasetError(f"cannot open JSON file {os.fspath(path)!r}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"invalid JSON in {os.fspath(path)!r}: {exc}") from exc

    if not isinstance(records, list):
        raise DatasetError("dataset must be a JSON array of records")
    if len(records) < num_samples:
        raise DatasetError(f"dataset holds {len(records)} records, {num_samples} requested")

    rows: list[list[float]] = []
    labels: list[int] = []
    for position, record in enumerate(records[:num_samples]):
        try:
            values = [record[key] for key in FEATURES]
            species = record["species"]
        except (KeyError, TypeError) as exc:
            raise DatasetError(f"record {position} is missing field {exc}") from exc
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in values):
            raise DatasetError(f"record {position} has a non-numeric feature")
        if not isinstance(species, str):
            raise DatasetError(f"record {position} has a non-string species")
        rows.append([float(v) for v in values])
        labels.append(1 if species == "setosa" else 0)

    matrix = Matrix.from_rows(rows) if rows else Matrix(0, len(FEATURES))
    return matrix, labels