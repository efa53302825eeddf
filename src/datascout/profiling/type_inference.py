"""Column type inference.

Each non-missing cell is classified on its own (number, boolean, date, or
string). A column whose cells all agree takes that type; any disagreement
makes it ``mixed``. A column with no non-missing cells defaults to
``string``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from datascout.models.dataset import Scalar, is_missing, is_number
from datascout.models.profiling import ColumnType

# Date shapes recognised in text cells, matched at the start of the string.
_DATE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("YYYY-MM-DD", re.compile(r"^\d{4}-\d{2}-\d{2}")),
    ("MM/DD/YYYY", re.compile(r"^\d{2}/\d{2}/\d{4}")),
    ("MM-DD-YYYY", re.compile(r"^\d{2}-\d{2}-\d{4}")),
]


def detect_date_format(value: str) -> str | None:
    """Return the name of the date pattern ``value`` starts with, if any."""
    for format_name, pattern in _DATE_PATTERNS:
        if pattern.match(value):
            return format_name
    return None


def classify_value(value: Scalar) -> ColumnType:
    """Classify a single non-missing cell."""
    if isinstance(value, bool):
        return ColumnType.BOOLEAN
    if is_number(value):
        return ColumnType.NUMBER
    if isinstance(value, str) and detect_date_format(value) is not None:
        return ColumnType.DATE
    return ColumnType.STRING


def infer_column_type(values: Iterable[Scalar]) -> ColumnType:
    """Infer the semantic type of a column from its raw values.

    Args:
        values: Raw cells of one column, missing markers included.

    Returns:
        The shared type of all non-missing cells, ``mixed`` when they
        disagree, or ``string`` when there are none.
    """
    seen: set[ColumnType] = set()
    for value in values:
        if is_missing(value):
            continue
        seen.add(classify_value(value))
        if len(seen) > 1:
            return ColumnType.MIXED
    if not seen:
        return ColumnType.STRING
    return seen.pop()
