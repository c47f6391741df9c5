"""External sorting of exam score records by balanced merging over tape files."""

__version__ = "0.1.0"
__all__ = ["records", "balanced_merge", "cli", "datasets"]