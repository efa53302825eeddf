"""Dataset profiling result models.

These models represent the output of the profiling stage: per-column
statistics (cardinality, nulls, numeric summaries, category frequencies)
and dataset-level totals for missing cells and duplicate rows.

Profiles serialise with camelCase keys (``rowCount``, ``nullPercentage``)
so exported reports keep the field names report consumers already read.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ColumnType(StrEnum):
    """Semantic type inferred for a column."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    STRING = "string"
    MIXED = "mixed"

    @property
    def is_categorical(self) -> bool:
        """Whether the column gets a category frequency table."""
        return self in (ColumnType.STRING, ColumnType.BOOLEAN)


class _ProfileModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ValueDistribution(_ProfileModel):
    """Frequency entry for a single category value."""

    value: str = Field(..., description="The observed value (as text)")
    count: int = Field(..., ge=0, description="Number of occurrences")


class ColumnProfile(_ProfileModel):
    """Statistical profile of a single column.

    Numeric fields are only set for ``number`` columns that hold at least
    one numeric cell. ``categories`` and ``mode`` are only set for string
    and boolean columns.
    """

    name: str = Field(..., description="Field name")
    type: ColumnType = Field(..., description="Inferred column type")
    unique_count: int = Field(..., ge=0, description="Distinct raw values, nulls included")
    null_count: int = Field(..., ge=0, description="Null, absent, or empty cells")
    null_percentage: float = Field(..., ge=0.0, le=100.0, description="null_count / rows x 100")
    min: float | None = Field(default=None, description="Smallest numeric value")
    max: float | None = Field(default=None, description="Largest numeric value")
    mean: float | None = Field(default=None, description="Arithmetic mean of numeric values")
    median: float | None = Field(default=None, description="Median of numeric values")
    categories: dict[str, int] | None = Field(
        default=None, description="Frequency of each non-null value, in first-seen order"
    )
    mode: str | None = Field(default=None, description="Most common category")

    @property
    def is_numeric(self) -> bool:
        return self.type == ColumnType.NUMBER

    def top_categories(self, limit: int) -> list[ValueDistribution]:
        """Most frequent categories, count descending, ties in first-seen order."""
        if not self.categories:
            return []
        ranked = sorted(self.categories.items(), key=lambda item: -item[1])
        return [ValueDistribution(value=value, count=count) for value, count in ranked[:limit]]


class DatasetProfile(_ProfileModel):
    """Complete profile of one dataset snapshot."""

    display_name: str = Field(default="", description="Source filename")
    row_count: int = Field(..., ge=0, description="Number of rows")
    column_count: int = Field(..., ge=0, description="Number of columns")
    columns: tuple[ColumnProfile, ...] = Field(
        default_factory=tuple, description="Column profiles in field order"
    )
    null_values: int = Field(..., ge=0, description="Sum of column null counts")
    null_percentage: float = Field(
        ..., ge=0.0, le=100.0, description="null_values / (rows x columns) x 100"
    )
    duplicate_rows: int = Field(..., ge=0, description="Rows repeating an earlier row")
    duplicate_percentage: float = Field(
        ..., ge=0.0, le=100.0, description="duplicate_rows / rows x 100"
    )

    def get_column(self, name: str) -> ColumnProfile | None:
        """Look up a column profile by exact field name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    @property
    def numeric_columns(self) -> list[ColumnProfile]:
        return [c for c in self.columns if c.is_numeric]
