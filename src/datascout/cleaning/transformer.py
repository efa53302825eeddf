"""Applies selected cleaning suggestions to a dataset.

Suggestions are applied one at a time, in the order given, each to the
result of the previous one, so an outlier cap applied after a missing
fill sees the filled values. Fill and cap values come from the profile
passed in, not from the intermediate data.

Suggestions without ``auto_fix``, or naming a column the profile does not
know, are skipped without error. The input dataset is never modified.
"""

from __future__ import annotations

from loguru import logger

from datascout.config import DEFAULT_CONFIG, CleaningConfig
from datascout.models.cleaning import CleaningSuggestion, FixAction, IssueKind
from datascout.models.dataset import Dataset, Scalar, format_value, is_missing, is_number
from datascout.models.profiling import ColumnProfile, DatasetProfile
from datascout.profiling.profiler import canonical_row_key

Row = dict[str, Scalar]


class DatasetCleaner:
    """Applies auto-fixable cleaning suggestions and records what changed.

    Each fix builds new row lists; rows that change are rebuilt with one
    field overridden. The audit trail lists one FixAction per applied
    suggestion.
    """

    def __init__(self, config: CleaningConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    def apply(
        self,
        dataset: Dataset,
        profile: DatasetProfile,
        suggestions: list[CleaningSuggestion],
    ) -> tuple[Dataset, list[FixAction]]:
        """Apply suggestions in order.

        Args:
            dataset: The original dataset (not modified).
            profile: Profile of ``dataset``; supplies medians and modes.
            suggestions: Caller-selected suggestions, in application order.

        Returns:
            Tuple of (cleaned dataset, fix actions).
        """
        rows: list[Row] = list(dataset.rows)
        actions: list[FixAction] = []

        for suggestion in suggestions:
            if not suggestion.auto_fix:
                logger.debug(
                    "Skipping {} suggestion for {}: not auto-fixable",
                    suggestion.issue,
                    suggestion.column,
                )
                continue

            if suggestion.issue == IssueKind.DUPLICATE:
                rows, action = self._remove_duplicates(rows, dataset.fields, suggestion)
                actions.append(action)
                continue

            column = profile.get_column(suggestion.column)
            if column is None:
                logger.debug(
                    "Skipping {} suggestion: column '{}' not in profile",
                    suggestion.issue,
                    suggestion.column,
                )
                continue

            if suggestion.issue == IssueKind.MISSING:
                rows, action = self._fill_missing(rows, column)
                actions.append(action)
            elif suggestion.issue == IssueKind.OUTLIER:
                if not column.is_numeric or column.median is None:
                    logger.debug(
                        "Skipping outlier suggestion for {}: no numeric median",
                        column.name,
                    )
                    continue
                rows, action = self._cap_outliers(rows, column)
                actions.append(action)
            else:
                logger.debug(
                    "Skipping {} suggestion for {}: no fix implemented",
                    suggestion.issue,
                    suggestion.column,
                )

        if actions:
            logger.info(
                "Applied {} cleaning fix(es) to {}: {} -> {} rows",
                len(actions),
                dataset.display_name or "<unnamed>",
                dataset.row_count,
                len(rows),
            )
        else:
            logger.debug("No cleaning fixes applied to {}", dataset.display_name or "<unnamed>")

        return dataset.with_rows(dict(row) for row in rows), actions

    # ------------------------------------------------------------------ #
    # Private fix functions
    # ------------------------------------------------------------------ #

    def _remove_duplicates(
        self,
        rows: list[Row],
        fields: tuple[str, ...],
        suggestion: CleaningSuggestion,
    ) -> tuple[list[Row], FixAction]:
        """Keep the first row for each canonical key, in first-seen order."""
        seen: set[tuple] = set()
        kept: list[Row] = []
        for row in rows:
            key = canonical_row_key(row, fields)
            if key in seen:
                continue
            seen.add(key)
            kept.append(row)

        removed = len(rows) - len(kept)
        action = FixAction(
            issue=IssueKind.DUPLICATE,
            column=suggestion.column,
            fix_type="remove_duplicates",
            detail=f"Removed {removed} duplicate row(s)",
            affected_count=removed,
        )
        return kept, action

    def _fill_value(self, column: ColumnProfile) -> Scalar:
        if column.is_numeric and column.median is not None:
            return column.median
        if column.mode is not None:
            return column.mode
        if column.is_numeric:
            return self._config.numeric_fill_default
        return self._config.text_fill_default

    def _fill_missing(
        self,
        rows: list[Row],
        column: ColumnProfile,
    ) -> tuple[list[Row], FixAction]:
        """Replace null, absent, and empty cells of one column."""
        fill = self._fill_value(column)
        filled = 0
        result: list[Row] = []
        for row in rows:
            if is_missing(row.get(column.name)):
                result.append({**row, column.name: fill})
                filled += 1
            else:
                result.append(row)

        action = FixAction(
            issue=IssueKind.MISSING,
            column=column.name,
            fix_type="fill_missing",
            detail=f"Filled {filled} missing value(s) with '{format_value(fill)}'",
            affected_count=filled,
        )
        return result, action

    def _cap_outliers(
        self,
        rows: list[Row],
        column: ColumnProfile,
    ) -> tuple[list[Row], FixAction]:
        """Cap numeric cells above ``median * outlier_cap_multiplier``."""
        cap = column.median * self._config.outlier_cap_multiplier
        capped = 0
        result: list[Row] = []
        for row in rows:
            value = row.get(column.name)
            if is_number(value) and value > cap:
                result.append({**row, column.name: cap})
                capped += 1
            else:
                result.append(row)

        action = FixAction(
            issue=IssueKind.OUTLIER,
            column=column.name,
            fix_type="cap_outliers",
            detail=f"Capped {capped} value(s) at {format_value(cap)}",
            affected_count=capped,
        )
        return result, action


def clean_dataset(
    dataset: Dataset,
    profile: DatasetProfile,
    suggestions: list[CleaningSuggestion],
    config: CleaningConfig = DEFAULT_CONFIG,
) -> Dataset:
    """Apply selected suggestions and return the cleaned dataset."""
    cleaned, _actions = DatasetCleaner(config).apply(dataset, profile, suggestions)
    return cleaned
