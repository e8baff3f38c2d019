"""Check QMaZda input folders and write batch files that run MzGenerator feature extraction."""

__version__ = "0.1.0"