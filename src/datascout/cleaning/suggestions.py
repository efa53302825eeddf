"""Cleaning suggestion generation.

Derives suggestions from a DatasetProfile alone, using three rules in a
fixed order so output is reproducible:

1. Missing values: one suggestion per column with nulls, in column order.
2. Duplicate rows: one dataset-wide suggestion.
3. Outliers: one suggestion per numeric column whose max exceeds
   ``mean * outlier_mean_multiplier``, in column order.

No rule currently produces INCONSISTENT suggestions.
"""

from __future__ import annotations

from loguru import logger

from datascout.config import DEFAULT_CONFIG, DUPLICATE_COLUMN, CleaningConfig
from datascout.models.cleaning import CleaningSuggestion, IssueKind
from datascout.models.dataset import format_value
from datascout.models.profiling import ColumnProfile, DatasetProfile


def _missing_recommendation(column: ColumnProfile) -> str:
    if column.is_numeric:
        return "Fill with mean or median value"
    if column.mode is not None:
        return f'Fill with most common value: "{column.mode}"'
    return "Remove rows or fill with placeholder"


def _missing_suggestions(profile: DatasetProfile) -> list[CleaningSuggestion]:
    return [
        CleaningSuggestion(
            column=column.name,
            issue=IssueKind.MISSING,
            description=(
                f"{column.null_count} missing values ({column.null_percentage:.2f}%)"
            ),
            recommendation=_missing_recommendation(column),
            auto_fix=True,
        )
        for column in profile.columns
        if column.null_percentage > 0
    ]


def _duplicate_suggestions(profile: DatasetProfile) -> list[CleaningSuggestion]:
    if profile.duplicate_percentage <= 0:
        return []
    return [
        CleaningSuggestion(
            column=DUPLICATE_COLUMN,
            issue=IssueKind.DUPLICATE,
            description=(
                f"{profile.duplicate_rows} duplicate rows "
                f"({profile.duplicate_percentage:.2f}%)"
            ),
            recommendation="Remove duplicate rows",
            auto_fix=True,
        )
    ]


def _outlier_suggestions(
    profile: DatasetProfile, config: CleaningConfig
) -> list[CleaningSuggestion]:
    suggestions: list[CleaningSuggestion] = []
    for column in profile.numeric_columns:
        if column.min is None or column.max is None or column.mean is None:
            continue
        value_range = column.max - column.min
        if value_range > 0 and column.max > column.mean * config.outlier_mean_multiplier:
            logger.debug(
                "Outlier heuristic fired for {}: max={} mean={}",
                column.name,
                column.max,
                column.mean,
            )
            suggestions.append(
                CleaningSuggestion(
                    column=column.name,
                    issue=IssueKind.OUTLIER,
                    description=(
                        f"Potential outliers detected (max value {format_value(column.max)} "
                        f"is far from mean {column.mean:.2f})"
                    ),
                    recommendation="Consider capping extreme values or removing outliers",
                    auto_fix=True,
                )
            )
    return suggestions


def generate_suggestions(
    profile: DatasetProfile,
    config: CleaningConfig = DEFAULT_CONFIG,
) -> list[CleaningSuggestion]:
    """Generate ordered cleaning suggestions for a profiled dataset.

    Args:
        profile: Profile produced by ``profile_dataset``.
        config: Thresholds for the outlier rule.

    Returns:
        Missing-value suggestions, then the duplicate suggestion, then
        outlier suggestions.
    """
    suggestions = [
        *_missing_suggestions(profile),
        *_duplicate_suggestions(profile),
        *_outlier_suggestions(profile, config),
    ]
    logger.info(
        "Generated {} cleaning suggestion(s) for {}",
        len(suggestions),
        profile.display_name or "<unnamed>",
    )
    return suggestions
