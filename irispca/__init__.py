"""Principal component analysis of the Iris dataset with VTK export."""

__version__ = "0.1.0"