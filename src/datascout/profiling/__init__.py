"""Type inference, column/dataset profiling, and column categorisation."""

from datascout.profiling.categorize import ColumnCategories, aggregate_measure, categorize_columns
from datascout.profiling.profiler import (
    canonical_row_key,
    count_duplicate_rows,
    profile_column,
    profile_dataset,
)
from datascout.profiling.type_inference import classify_value, infer_column_type

__all__ = [
    "infer_column_type",
    "classify_value",
    "profile_column",
    "profile_dataset",
    "canonical_row_key",
    "count_duplicate_rows",
    "categorize_columns",
    "aggregate_measure",
    "ColumnCategories",
]
