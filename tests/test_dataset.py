import json

import pytest

from irispca.dataset import DatasetError, load_iris

RECORDS = [
    {"sepalLength": 5.1, "sepalWidth": 3.5, "petalLength": 1.4, "petalWidth": 0.2, "species": "setosa"},
    {"sepalLength": 7.0, "sepalWidth": 3.2, "petalLength": 4.7, "petalWidth": 1.4, "species": "versicolor"},
    {"sepalLength": 6.3, "sepalWidth": 3.3, "petalLength": 6.0, "petalWidth": 2.5, "species": "virginica"},
]


def write(tmp_path, data):
    path = tmp_path / "iris.json"
    path.write_text(json.dumps(data))
    return path


def test_loads_requested_samples(tmp_path):
    matrix, labels = load_iris(write(tmp_path, RECORDS), 2)
    assert matrix.shape == (2, 4)
    assert matrix.row(0) == [5.1, 3.5, 1.4, 0.2]
    assert matrix.row(1) == [7.0, 3.2, 4.7, 1.4]
    assert labels == [1, 0]


def test_setosa_only_is_positive(tmp_path):
    _, labels = load_iris(write(tmp_path, RECORDS), 3)
    assert labels == [1, 0, 0]


def test_missing_file(tmp_path):
    with pytest.raises(DatasetError):
        load_iris(tmp_path / "absent.json", 1)


def test_too_few_records(tmp_path):
    with pytest.raises(DatasetError):
        load_iris(write(tmp_path, RECORDS), 4)


def test_missing_field(tmp_path):
    bad = [{"sepalLength": 1.0, "species": "setosa"}]
    with pytest.raises(DatasetError):
        load_iris(write(tmp_path, bad), 1)


def test_non_numeric_feature(tmp_path):
    bad = [dict(RECORDS[0], sepalWidth="wide")]
    with pytest.raises(DatasetError):
        load_iris(write(tmp_path, bad), 1)


def test_invalid_json(tmp_path):
    path = tmp_path / "iris.json"
    path.write_text("{not json")
    with pytest.raises(DatasetError):
        load_iris(path, 1)