"""CSV reader producing Dataset values.

Reads every cell as text with pandas, then types each cell on its own:
empty cells become ``None``, ``true``/``false`` literals become booleans,
numeric literals become ``int`` or ``float``, and everything else stays
text. Blank lines are skipped, and fields beyond the header are dropped.
"""

from __future__ import annotations

import io
import re
from pathlib import Path

import pandas as pd
from loguru import logger

from datascout.models.dataset import Dataset, Scalar

_FLOAT_RE = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
_INT_RE = re.compile(r"^\s*-?\d+\s*$")
_TRUE_LITERALS = frozenset({"true", "TRUE", "True"})
_FALSE_LITERALS = frozenset({"false", "FALSE", "False"})


class DatasetReadError(ValueError):
    """Raised when a CSV file cannot be parsed into a Dataset."""


def coerce_cell(text: object) -> Scalar:
    """Type a raw CSV cell. Non-text cells (pandas pads short rows with NaN) are None."""
    if not isinstance(text, str) or text == "":
        return None
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    if _INT_RE.match(text):
        return int(text)
    if _FLOAT_RE.match(text):
        return float(text)
    return text


def _frame_to_dataset(df: pd.DataFrame, display_name: str) -> Dataset:
    fields = [str(c) for c in df.columns]
    rows = [
        {field: coerce_cell(cell) for field, cell in zip(fields, record, strict=True)}
        for record in df.itertuples(index=False, name=None)
    ]
    return Dataset.from_records(fields, rows, display_name=display_name)


def parse_csv_text(text: str, display_name: str = "") -> Dataset:
    """Parse CSV text (header row first) into a Dataset.

    Raises:
        DatasetReadError: If pandas cannot parse the text.
    """
    if not text.strip():
        return Dataset(fields=(), rows=(), display_name=display_name)
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetReadError(f"Could not parse CSV {display_name or '<text>'}: {e}") from e
    return _frame_to_dataset(df, display_name)


def read_csv(filepath: str | Path) -> Dataset:
    """Read a .csv file into a Dataset named after the file.

    Args:
        filepath: Path to a .csv file.

    Returns:
        Dataset with fields from the header row and one row per data line.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a .csv file.
        DatasetReadError: If the contents cannot be parsed as CSV.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")
    if filepath.suffix.lower() != ".csv":
        raise ValueError(f"Expected .csv file, got: {filepath.suffix or filepath.name}")

    logger.info("Reading CSV file: {}", filepath.name)
    dataset = parse_csv_text(filepath.read_text(encoding="utf-8-sig"), display_name=filepath.name)
    logger.info(
        "Read {}: {} rows x {} cols",
        filepath.name,
        dataset.row_count,
        dataset.column_count,
    )
    return dataset
