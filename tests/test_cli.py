import json

import pytest

from irispca.cli import main, run_pca
from irispca.matrix import Matrix

RECORDS = [
    {"sepalLength": 5.1, "sepalWidth": 3.5, "petalLength": 1.4, "petalWidth": 0.2, "species": "setosa"},
    {"sepalLength": 4.9, "sepalWidth": 3.0, "petalLength": 1.4, "petalWidth": 0.2, "species": "setosa"},
    {"sepalLength": 7.0, "sepalWidth": 3.2, "petalLength": 4.7, "petalWidth": 1.4, "species": "versicolor"},
    {"sepalLength": 6.4, "sepalWidth": 3.2, "petalLength": 4.5, "petalWidth": 1.5, "species": "versicolor"},
    {"sepalLength": 6.3, "sepalWidth": 3.3, "petalLength": 6.0, "petalWidth": 2.5, "species": "virginica"},
    {"sepalLength": 5.8, "sepalWidth": 2.7, "petalLength": 5.1, "petalWidth": 1.9, "species": "virginica"},
]


def data_matrix():
    keys = ("sepalLength", "sepalWidth", "petalLength", "petalWidth")
    return Matrix.from_rows([[r[k] for k in keys] for r in RECORDS])


def test_run_pca_shape_and_zero_mean():
    t = run_pca(data_matrix(), 2)
    assert t.shape == (6, 2)
    for j in range(2):
        assert sum(t.col(j)) == pytest.approx(0.0, abs=1e-9)


def test_full_projection_preserves_variance():
    x = data_matrix()
    centered = x.centered()
    t = run_pca(x, 4)
    total = sum(v * v for row in centered.tolist() for v in row)
    assert sum(v * v for row in t.tolist() for v in row) == pytest.approx(total)


def test_first_component_has_largest_variance():
    t = run_pca(data_matrix(), 3)
    variances = [sum(v * v for v in t.col(j)) for j in range(3)]
    assert variances == sorted(variances, reverse=True)


@pytest.mark.parametrize(
    "argv",
    [[], ["iris.json", "6", "5"], ["iris.json", "6", "5", "4"], ["iris.json", "x", "5", "2"]],
)
def test_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert "Usage:" in capsys.readouterr().err


def test_missing_dataset(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.json", "6", "5", "2"]) == 1
    assert not (tmp_path / "output_pca.vtk").exists()


def test_writes_vtk_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "iris.json").write_text(json.dumps(RECORDS))
    assert main(["iris.json", "6", "5", "2"]) == 0
    lines = (tmp_path / "output_pca.vtk").read_text().splitlines()
    assert lines[4] == "POINTS 6 float"
    assert all(line.endswith("0.0 ") for line in lines[5:11])
    assert lines[-6:] == ["1", "1", "0", "0", "0", "0"]
    assert "VTK file written to output_pca.vtk" in capsys.readouterr().out


def test_three_components_have_no_padding(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "iris.json").write_text(json.dumps(RECORDS))
    assert main(["iris.json", "6", "5", "3"]) == 0
    point_lines = (tmp_path / "output_pca.vtk").read_text().splitlines()[5:11]
    assert all(len(line.split()) == 3 for line in point_lines)