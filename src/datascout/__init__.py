"""Datascout: profiling, cleaning suggestions, and question answering for CSV datasets."""

__version__ = "0.1.0"
