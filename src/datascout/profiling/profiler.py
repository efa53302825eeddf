"""Dataset profiler.

Produces per-column statistics (null counts, cardinality, numeric summary,
category frequencies) and dataset-level totals for missing cells and
duplicate rows. Profiling is a pure function of one Dataset: the same
input always yields an identical profile.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from loguru import logger

from datascout.models.dataset import (
    Dataset,
    Scalar,
    format_value,
    is_missing,
    is_number,
    value_key,
)
from datascout.models.profiling import ColumnProfile, ColumnType, DatasetProfile
from datascout.profiling.type_inference import infer_column_type

RowKey = tuple[tuple[str, Scalar], ...]


def percentage(part: int, whole: int) -> float:
    """``part / whole * 100``, or 0.0 when ``whole`` is zero."""
    if whole <= 0:
        return 0.0
    return part / whole * 100


def to_float(value: int | float) -> float:
    """Float form of a number; ints beyond the float range become signed infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Median of a non-empty sequence (mean of the middle pair for even sizes)."""
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def canonical_row_key(row: Mapping[str, Scalar], fields: Sequence[str]) -> RowKey:
    """Value-equality key for a row, read in field order (absent -> None)."""
    return tuple(value_key(row.get(field)) for field in fields)


def count_duplicate_rows(dataset: Dataset) -> int:
    """Number of rows that repeat an earlier row's canonical key."""
    distinct = {canonical_row_key(row, dataset.fields) for row in dataset.rows}
    return dataset.row_count - len(distinct)


def _compute_categories(values: Sequence[Scalar]) -> tuple[dict[str, int], str | None]:
    """Frequency table keyed by text form, and its mode.

    The mode is the first key to reach the highest count, so ties go to
    the value seen first.
    """
    categories: dict[str, int] = {}
    for value in values:
        if is_missing(value):
            continue
        key = format_value(value)
        categories[key] = categories.get(key, 0) + 1

    mode: str | None = None
    max_count = 0
    for key, count in categories.items():
        if count > max_count:
            max_count = count
            mode = key
    return categories, mode


def profile_column(
    name: str,
    values: Sequence[Scalar],
    row_count: int,
    column_type: ColumnType | None = None,
) -> ColumnProfile:
    """Profile one column.

    Args:
        name: Field name.
        values: Raw cells, one per dataset row.
        row_count: Rows in the enclosing dataset (denominator for percentages).
        column_type: Pre-inferred type; inferred from ``values`` when omitted.

    Returns:
        ColumnProfile with null/unique counts and type-specific statistics.
    """
    if column_type is None:
        column_type = infer_column_type(values)

    null_count = sum(1 for v in values if is_missing(v))
    unique_count = len({value_key(v) for v in values})

    stats: dict[str, object] = {}
    if column_type == ColumnType.NUMBER:
        numeric = [to_float(v) for v in values if is_number(v)]
        if numeric:
            stats["min"] = min(numeric)
            stats["max"] = max(numeric)
            stats["mean"] = mean(numeric)
            stats["median"] = median(numeric)
    elif column_type.is_categorical:
        categories, mode = _compute_categories(values)
        stats["categories"] = categories
        stats["mode"] = mode

    return ColumnProfile(
        name=name,
        type=column_type,
        unique_count=unique_count,
        null_count=null_count,
        null_percentage=percentage(null_count, row_count),
        **stats,
    )


def profile_dataset(dataset: Dataset) -> DatasetProfile:
    """Profile every column of a dataset and count duplicate rows.

    Args:
        dataset: Parsed dataset.

    Returns:
        DatasetProfile with columns in field order.
    """
    logger.info(
        "Profiling dataset: {} ({} rows x {} cols)",
        dataset.display_name or "<unnamed>",
        dataset.row_count,
        dataset.column_count,
    )

    row_count = dataset.row_count
    columns = [
        profile_column(field, dataset.column(field), row_count) for field in dataset.fields
    ]
    null_values = sum(c.null_count for c in columns)
    duplicate_rows = count_duplicate_rows(dataset)

    profile = DatasetProfile(
        display_name=dataset.display_name,
        row_count=row_count,
        column_count=dataset.column_count,
        columns=tuple(columns),
        null_values=null_values,
        null_percentage=percentage(null_values, row_count * dataset.column_count),
        duplicate_rows=duplicate_rows,
        duplicate_percentage=percentage(duplicate_rows, row_count),
    )

    logger.info(
        "Profiled {}: {} null cells, {} duplicate rows, {} numeric columns",
        dataset.display_name or "<unnamed>",
        null_values,
        duplicate_rows,
        len(profile.numeric_columns),
    )
    return profile
