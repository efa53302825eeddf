"""Cleaning suggestion generation and the cleaning transformer."""

from datascout.cleaning.suggestions import generate_suggestions
from datascout.cleaning.transformer import DatasetCleaner, clean_dataset

__all__ = ["generate_suggestions", "DatasetCleaner", "clean_dataset"]
