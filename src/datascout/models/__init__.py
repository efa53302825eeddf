"""Pydantic data models shared across all datascout components.

All models are re-exported here for convenient imports:
    from datascout.models import Dataset, DatasetProfile, CleaningSuggestion
"""

from datascout.models.cleaning import CleaningSuggestion, FixAction, IssueKind
from datascout.models.dataset import (
    Dataset,
    Scalar,
    format_value,
    is_missing,
    is_number,
    value_key,
)
from datascout.models.profiling import (
    ColumnProfile,
    ColumnType,
    DatasetProfile,
    ValueDistribution,
)

__all__ = [
    # dataset
    "Dataset",
    "Scalar",
    "format_value",
    "is_missing",
    "is_number",
    "value_key",
    # profiling
    "ColumnType",
    "ColumnProfile",
    "DatasetProfile",
    "ValueDistribution",
    # cleaning
    "IssueKind",
    "CleaningSuggestion",
    "FixAction",
]
