"""Convert SEGUL benchmark logs into a tabular CSV dataset."""

__version__ = "0.1.0"
