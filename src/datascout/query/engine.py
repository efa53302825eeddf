"""Rule-based question answering over a dataset.

Questions are matched by lowercase keyword containment against an ordered
rule chain; the first rule that matches answers. Column-specific answers
are computed from the dataset's current cells on every call, never from
cached profile statistics.

Order of evaluation:

1. Row count ("how many rows", "how many records")
2. Column count ("how many columns", "how many fields")
3. Column list ("what columns", "what fields")
4. First field (in column order) whose name appears in the question,
   then its sub-intents: maximum, minimum, average, unique, missing.
   A sub-intent that cannot answer (e.g. max of a text column) falls
   through to the next; if none answers, a generic column summary.
5. Fixed fallback text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loguru import logger

from datascout.models.dataset import Dataset, Scalar, format_value, is_missing, is_number, value_key
from datascout.models.profiling import DatasetProfile
from datascout.profiling.profiler import mean, percentage, to_float

FALLBACK_ANSWER = (
    "I'm not sure how to answer that question about your data. Try asking about "
    "specific columns, row counts, or statistics like maximum, minimum, or average values."
)

QuestionPredicate = Callable[[str], bool]
DatasetHandler = Callable[[Dataset], str]
ColumnHandler = Callable[[Dataset, str], str | None]


def _mentions(*phrases: str) -> QuestionPredicate:
    def predicate(question: str) -> bool:
        return any(phrase in question for phrase in phrases)

    return predicate


# ------------------------------------------------------------------ #
# Dataset-level answers
# ------------------------------------------------------------------ #


def _answer_row_count(dataset: Dataset) -> str:
    return f"There are {dataset.row_count} rows in this dataset."


def _answer_column_count(dataset: Dataset) -> str:
    return (
        f"There are {dataset.column_count} columns in this dataset: "
        f"{', '.join(dataset.fields)}."
    )


def _answer_column_list(dataset: Dataset) -> str:
    return f"The columns in this dataset are: {', '.join(dataset.fields)}."


_DATASET_RULES: list[tuple[QuestionPredicate, DatasetHandler]] = [
    (_mentions("how many rows", "how many records"), _answer_row_count),
    (_mentions("how many columns", "how many fields"), _answer_column_count),
    (_mentions("what columns", "what fields"), _answer_column_list),
]


# ------------------------------------------------------------------ #
# Column-level answers
# ------------------------------------------------------------------ #


def _present_values(dataset: Dataset, column: str) -> list[Scalar]:
    """Cells that are not null (empty strings kept)."""
    return [v for v in dataset.column(column) if v == "" or not is_missing(v)]


def _missing_count(dataset: Dataset, column: str) -> int:
    return sum(1 for v in dataset.column(column) if is_missing(v))


def _answer_max(dataset: Dataset, column: str) -> str | None:
    values = _present_values(dataset, column)
    if not values or not is_number(values[0]):
        return None
    top = max(v for v in values if is_number(v))
    return f'The maximum value in the "{column}" column is {format_value(top)}.'


def _answer_min(dataset: Dataset, column: str) -> str | None:
    values = _present_values(dataset, column)
    if not values or not is_number(values[0]):
        return None
    bottom = min(v for v in values if is_number(v))
    return f'The minimum value in the "{column}" column is {format_value(bottom)}.'


def _answer_average(dataset: Dataset, column: str) -> str | None:
    numbers = [to_float(v) for v in dataset.column(column) if is_number(v)]
    if not numbers:
        return None
    return f'The average value in the "{column}" column is {mean(numbers):.2f}.'


def _answer_unique(dataset: Dataset, column: str) -> str:
    unique = len({value_key(v) for v in dataset.column(column)})
    return f'There are {unique} unique values in the "{column}" column.'


def _answer_missing(dataset: Dataset, column: str) -> str:
    missing = _missing_count(dataset, column)
    pct = percentage(missing, dataset.row_count)
    return f'There are {missing} missing values ({pct:.2f}%) in the "{column}" column.'


_COLUMN_RULES: list[tuple[QuestionPredicate, ColumnHandler]] = [
    (_mentions("maximum", "max", "highest"), _answer_max),
    (_mentions("minimum", "min", "lowest"), _answer_min),
    (_mentions("average", "mean"), _answer_average),
    (_mentions("unique", "distinct"), _answer_unique),
    (_mentions("missing", "null", "empty"), _answer_missing),
]


def _sample_type_name(dataset: Dataset, column: str) -> str:
    """Type of the first row's cell (a one-row sample, not the profiled type)."""
    if not dataset.rows:
        return "undefined"
    value = dataset.rows[0].get(column)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    return "string"


def _answer_column_summary(dataset: Dataset, column: str) -> str:
    unique = len({value_key(v) for v in dataset.column(column)})
    missing = _missing_count(dataset, column)
    pct = percentage(missing, dataset.row_count)
    return (
        f'Information about "{column}": \n'
        f"- {unique} unique values\n"
        f"- {missing} missing values ({pct:.2f}%)\n"
        f"- Type: {_sample_type_name(dataset, column)}"
    )


def find_subject_column(question: str, fields: Sequence[str]) -> str | None:
    """First field whose lowercase name occurs in the lowercase question."""
    question_lower = question.lower()
    for field in fields:
        if field.lower() in question_lower:
            return field
    return None


def answer_question(
    question: str,
    dataset: Dataset,
    profile: DatasetProfile | None = None,
) -> str:
    """Answer a free-text question about a dataset.

    Args:
        question: The user's question.
        dataset: The dataset to answer from (current cell values).
        profile: Optional profile of ``dataset``; its column order is used
            to pick the subject column.

    Returns:
        The answer text. Unrecognised questions get ``FALLBACK_ANSWER``.
    """
    question_lower = question.lower()

    for predicate, handler in _DATASET_RULES:
        if predicate(question_lower):
            return handler(dataset)

    fields = [c.name for c in profile.columns] if profile is not None else dataset.fields
    column = find_subject_column(question_lower, fields)
    if column is None:
        logger.debug("No intent or column matched question: {!r}", question)
        return FALLBACK_ANSWER

    for predicate, column_handler in _COLUMN_RULES:
        if not predicate(question_lower):
            continue
        answer = column_handler(dataset, column)
        if answer is not None:
            return answer

    return _answer_column_summary(dataset, column)


def describe_dataset(dataset: Dataset) -> str:
    """Greeting shown when a question session starts on a dataset."""
    return (
        f'I\'ve loaded your dataset "{dataset.display_name}" with {dataset.row_count} rows '
        f"and {dataset.column_count} columns. What would you like to know about it?"
    )
