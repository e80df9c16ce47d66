[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irispca"
version = "0.1.0"
description = "Principal component analysis of the Iris dataset with a small pure-Python matrix toolkit and VTK export"
requires-python = ">=3.10"
dependencies = []
keywords = ["pca", "principal component analysis", "iris", "jacobi", "eigenvalues", "vtk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irispca = "irispca.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["irispca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
