"""CSV export of (cleaned) datasets.

Cells are written in their natural text form (``true``/``false`` for
booleans, integral floats without a trailing ``.0``, empty for missing).
Quoting of delimiters and embedded quotes is left to pandas.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd
from loguru import logger

from datascout.models.dataset import Dataset, format_value


def dataset_to_csv(dataset: Dataset) -> str:
    """Render a dataset as CSV text with a header row.

    Single-column datasets quote every cell so that an empty cell is not
    written as a blank line (which readers skip).
    """
    if not dataset.fields:
        return ""
    df = pd.DataFrame(
        [[format_value(row.get(f)) for f in dataset.fields] for row in dataset.rows],
        columns=list(dataset.fields),
        dtype=object,
    )
    quoting = csv.QUOTE_ALL if len(dataset.fields) == 1 else csv.QUOTE_MINIMAL
    return df.to_csv(index=False, quoting=quoting, lineterminator="\n")


def cleaned_filename(dataset: Dataset) -> str:
    """Default export name for a cleaned dataset."""
    return f"cleaned_{dataset.display_name or 'dataset.csv'}"


def write_csv(dataset: Dataset, output_path: str | Path) -> Path:
    """Write a dataset to a CSV file, creating parent directories."""
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dataset_to_csv(dataset), encoding="utf-8")
    logger.info("Wrote {} rows x {} cols to {}", dataset.row_count, dataset.column_count, out)
    return out
