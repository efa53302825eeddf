"""Dimension/measure split and grouped totals for charting.

Numeric columns are measures; every other column is a dimension. Chart
rendering itself lives outside this package; only the data preparation
is here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datascout.config import CHART_GROUP_LIMIT, UNKNOWN_DIMENSION
from datascout.models.dataset import Dataset, format_value, is_missing, is_number
from datascout.models.profiling import DatasetProfile


class ColumnCategories(BaseModel):
    """Columns partitioned for chart axes, each list in column order."""

    model_config = ConfigDict(frozen=True)

    dimensions: list[str] = Field(default_factory=list, description="Non-numeric columns")
    measures: list[str] = Field(default_factory=list, description="Numeric columns")


def categorize_columns(profile: DatasetProfile) -> ColumnCategories:
    """Split profiled columns into dimensions and measures."""
    dimensions: list[str] = []
    measures: list[str] = []
    for column in profile.columns:
        if column.is_numeric:
            measures.append(column.name)
        else:
            dimensions.append(column.name)
    return ColumnCategories(dimensions=dimensions, measures=measures)


def aggregate_measure(
    dataset: Dataset,
    dimension: str,
    measure: str,
    limit: int = CHART_GROUP_LIMIT,
) -> list[tuple[str, float]]:
    """Sum ``measure`` per distinct ``dimension`` value.

    Falsy dimension cells (missing, zero, false) group under ``Unknown``;
    non-numeric measure cells count as 0. Groups are sorted by total,
    largest first (ties keep first-seen order), and cut to ``limit``.
    """
    totals: dict[str, float] = {}
    for row in dataset.rows:
        raw = row.get(dimension)
        label = format_value(raw) if raw and not is_missing(raw) else UNKNOWN_DIMENSION
        # Booleans are not numbers here, so boolean measure cells add 0.
        value = row.get(measure)
        totals[label] = totals.get(label, 0) + (value if is_number(value) else 0)

    ranked = sorted(totals.items(), key=lambda item: -item[1])
    return ranked[:limit]
