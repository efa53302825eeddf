"""Tests for column and dataset profiling."""

from __future__ import annotations

import math

import pytest

from datascout.models.dataset import Dataset
from datascout.models.profiling import ColumnType
from datascout.profiling.profiler import (
    canonical_row_key,
    count_duplicate_rows,
    median,
    percentage,
    profile_column,
    profile_dataset,
)


def _make_dataset(fields: list[str], rows: list[dict], name: str = "test.csv") -> Dataset:
    return Dataset.from_records(fields, rows, display_name=name)


@pytest.fixture()
def people() -> Dataset:
    """Two identical rows and one row with a missing age."""
    return _make_dataset(
        ["age", "city"],
        [
            {"age": 25, "city": "NY"},
            {"age": None, "city": "NY"},
            {"age": 25, "city": "NY"},
        ],
    )


class TestHelpers:
    def test_percentage_guards_zero(self) -> None:
        assert percentage(0, 0) == 0.0
        assert percentage(3, 0) == 0.0

    def test_percentage(self) -> None:
        assert percentage(1, 4) == 25.0

    def test_median_even(self) -> None:
        assert median([1, 2, 3, 4]) == 2.5

    def test_median_odd(self) -> None:
        assert median([1, 2, 3]) == 2

    def test_median_unsorted_input(self) -> None:
        assert median([1000, 10, 10, 10]) == 10

    def test_canonical_key_absent_equals_none(self) -> None:
        assert canonical_row_key({"a": 1}, ["a", "b"]) == canonical_row_key(
            {"a": 1, "b": None}, ["a", "b"]
        )

    def test_canonical_key_bool_not_int(self) -> None:
        assert canonical_row_key({"a": True}, ["a"]) != canonical_row_key({"a": 1}, ["a"])


class TestProfileColumn:
    def test_numeric_stats(self) -> None:
        col = profile_column("x", [4, 1, None, 3, 2], row_count=5)
        assert col.type == ColumnType.NUMBER
        assert col.min == 1
        assert col.max == 4
        assert col.mean == 2.5
        assert col.median == 2.5
        assert col.categories is None
        assert col.mode is None

    def test_null_percentage_uses_row_count(self) -> None:
        col = profile_column("x", [1, None, "", 2], row_count=4)
        assert col.null_count == 2
        assert col.null_percentage == 50.0

    def test_unique_counts_null_as_value(self) -> None:
        col = profile_column("x", [1, 1, None, None, 2], row_count=5)
        assert col.unique_count == 3

    def test_empty_string_distinct_from_null(self) -> None:
        col = profile_column("x", ["a", "", None], row_count=3)
        assert col.unique_count == 3

    def test_categories_and_mode(self) -> None:
        col = profile_column("c", ["b", "a", "a", None, "b", "c"], row_count=6)
        assert col.type == ColumnType.STRING
        assert col.categories == {"b": 2, "a": 2, "c": 1}
        # Tie between b and a: first seen wins
        assert col.mode == "b"

    def test_boolean_categories_use_text_form(self) -> None:
        col = profile_column("flag", [True, False, True], row_count=3)
        assert col.type == ColumnType.BOOLEAN
        assert col.categories == {"true": 2, "false": 1}
        assert col.mode == "true"

    def test_date_column_has_no_stats(self) -> None:
        col = profile_column("d", ["2024-01-01", "2024-01-02"], row_count=2)
        assert col.type == ColumnType.DATE
        assert col.categories is None
        assert col.min is None

    def test_mixed_column_has_no_stats(self) -> None:
        col = profile_column("m", [1, "a"], row_count=2)
        assert col.type == ColumnType.MIXED
        assert col.categories is None
        assert col.mean is None

    def test_number_type_without_numeric_values(self) -> None:
        col = profile_column("n", ["a", "b"], row_count=2, column_type=ColumnType.NUMBER)
        assert col.min is None
        assert col.max is None
        assert col.mean is None
        assert col.median is None

    def test_all_null_column(self) -> None:
        col = profile_column("n", [None, None], row_count=2)
        assert col.type == ColumnType.STRING
        assert col.categories == {}
        assert col.mode is None
        assert col.null_percentage == 100.0

    def test_zero_rows(self) -> None:
        col = profile_column("n", [], row_count=0)
        assert col.null_percentage == 0.0
        assert col.unique_count == 0

    def test_int_beyond_float_range(self) -> None:
        col = profile_column("v", [10**400, 1], row_count=2)
        assert col.type == ColumnType.NUMBER
        assert col.min == 1
        assert col.max == math.inf
        assert col.mean == math.inf
        assert col.median == math.inf


class TestProfileDataset:
    def test_people_profile(self, people: Dataset) -> None:
        profile = profile_dataset(people)
        age = profile.get_column("age")
        city = profile.get_column("city")
        assert profile.row_count == 3
        assert profile.column_count == 2
        assert age is not None and city is not None
        assert age.null_count == 1
        assert age.null_percentage == pytest.approx(33.33, abs=0.01)
        assert profile.duplicate_rows == 1
        assert profile.duplicate_percentage == pytest.approx(33.33, abs=0.01)
        assert city.mode == "NY"

    def test_columns_in_field_order(self, people: Dataset) -> None:
        profile = profile_dataset(people)
        assert [c.name for c in profile.columns] == ["age", "city"]

    def test_null_values_is_sum_of_columns(self) -> None:
        ds = _make_dataset(
            ["a", "b", "c"],
            [{"a": None, "b": ""}, {"c": 1}, {"a": 1, "b": "x", "c": None}],
        )
        profile = profile_dataset(ds)
        assert profile.null_values == sum(c.null_count for c in profile.columns)
        assert profile.null_values == 6
        assert profile.null_percentage == pytest.approx(6 / 9 * 100)

    def test_duplicate_count_matches_distinct_keys(self) -> None:
        rows = [{"a": 1}, {"a": 1}, {"a": 1}, {"a": 2}, {"a": True}]
        ds = _make_dataset(["a"], rows)
        distinct = {canonical_row_key(r, ds.fields) for r in ds.rows}
        assert count_duplicate_rows(ds) == len(rows) - len(distinct) == 2

    def test_empty_dataset(self) -> None:
        profile = profile_dataset(_make_dataset(["a", "b"], []))
        assert profile.row_count == 0
        assert profile.null_percentage == 0.0
        assert profile.duplicate_percentage == 0.0
        assert all(not math.isnan(c.null_percentage) for c in profile.columns)

    def test_no_fields(self) -> None:
        profile = profile_dataset(_make_dataset([], []))
        assert profile.column_count == 0
        assert profile.columns == ()

    def test_profiling_is_deterministic(self) -> None:
        ds = _make_dataset(
            ["x", "y"],
            [{"x": 0.1, "y": "a"}, {"x": 0.2, "y": "b"}, {"x": 0.3, "y": "a"}],
        )
        first = profile_dataset(ds)
        second = profile_dataset(ds)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_profile_does_not_mutate_dataset(self, people: Dataset) -> None:
        before = people.model_dump()
        profile_dataset(people)
        assert people.model_dump() == before

    def test_huge_ints_of_both_signs(self) -> None:
        ds = _make_dataset(["v"], [{"v": 10**400}, {"v": -(10**400)}, {"v": 3}])
        column = profile_dataset(ds).get_column("v")
        assert column is not None
        assert column.min == -math.inf
        assert column.max == math.inf
        assert math.isnan(column.mean)
