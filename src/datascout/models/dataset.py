"""Parsed tabular dataset model.

A Dataset is an ordered list of field names plus an ordered sequence of
row records. Rows map field names to scalar cells; a field that is absent
from a row is read as ``None``. Datasets are never modified after
construction; every transform builds a new one.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

Scalar = bool | int | float | str | None


def is_missing(value: Any) -> bool:
    """Return True for null, empty-string, and NaN cells."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def is_number(value: Any) -> bool:
    """Return True for int/float values that are not booleans or NaN."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return not math.isnan(value)
    return isinstance(value, int)


def value_key(value: Any) -> tuple[str, Any]:
    """Hashable value-equality key for a raw cell.

    Booleans are tagged separately so ``True`` never collides with ``1``.
    NaN folds into ``None`` so it compares equal to itself.
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ("null", None)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, int | float):
        return ("number", value)
    return ("text", str(value))


def format_value(value: Any) -> str:
    """Render a cell in its natural text form."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Dataset(BaseModel):
    """Ordered fields and ordered rows parsed from one CSV file."""

    model_config = ConfigDict(frozen=True)

    fields: tuple[str, ...] = Field(..., description="Field names in column order")
    rows: tuple[dict[str, Scalar], ...] = Field(
        default_factory=tuple, description="Row records in file order"
    )
    display_name: str = Field(default="", description="Origin filename, purely descriptive")

    @model_validator(mode="after")
    def _check_shape(self) -> Dataset:
        if len(set(self.fields)) != len(self.fields):
            raise ValueError(f"Field names must be unique: {list(self.fields)}")
        known = set(self.fields)
        for idx, row in enumerate(self.rows):
            unknown = set(row) - known
            if unknown:
                raise ValueError(f"Row {idx} has keys not in fields: {sorted(unknown)}")
        return self

    @classmethod
    def from_records(
        cls,
        fields: Iterable[str],
        rows: Iterable[Mapping[str, Scalar]],
        display_name: str = "",
    ) -> Dataset:
        """Build a dataset from plain field and row iterables."""
        return cls(
            fields=tuple(fields),
            rows=tuple(dict(row) for row in rows),
            display_name=display_name,
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.fields)

    def column(self, name: str) -> list[Scalar]:
        """Values of one field across all rows (absent -> None)."""
        return [row.get(name) for row in self.rows]

    def with_rows(self, rows: Iterable[dict[str, Scalar]]) -> Dataset:
        """Return a new dataset with the same fields and name but different rows."""
        return self.model_copy(update={"rows": tuple(rows)})

    def to_frame(self) -> pd.DataFrame:
        """Convert to an object-dtype DataFrame (cell types preserved)."""
        return pd.DataFrame(
            [[row.get(f) for f in self.fields] for row in self.rows],
            columns=list(self.fields),
            dtype=object,
        )
