"""Tests for CSV reading and export."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from datascout.cleaning.suggestions import generate_suggestions
from datascout.cleaning.transformer import clean_dataset
from datascout.io.csv_reader import coerce_cell, parse_csv_text, read_csv
from datascout.io.csv_writer import cleaned_filename, dataset_to_csv, write_csv
from datascout.models.dataset import Dataset
from datascout.profiling.profiler import profile_dataset

SAMPLE_CSV = '''name,age,active,joined,note
Alice,30,true,2024-01-15,"Likes, commas"
Bob,,FALSE,01/20/2024,
Carol,41.5,True,2024-02-01,"Say ""hi"""

Dan,30,false,2024-03-01,plain
'''


@pytest.fixture()
def sample_path(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


class TestCoerceCell:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", None),
            ("true", True),
            ("TRUE", True),
            ("False", False),
            ("42", 42),
            ("-7", -7),
            ("3.5", 3.5),
            ("1e3", 1000.0),
            (".5", 0.5),
            ("abc", "abc"),
            ("tRuE", "tRuE"),
            ("12a", "12a"),
        ],
    )
    def test_coercion(self, text: str, expected) -> None:
        result = coerce_cell(text)
        assert result == expected
        assert type(result) is type(expected)

    def test_nan_padding_is_none(self) -> None:
        assert coerce_cell(float("nan")) is None


class TestReadCsv:
    def test_fields_and_rows(self, sample_path: Path) -> None:
        ds = read_csv(sample_path)
        assert ds.fields == ("name", "age", "active", "joined", "note")
        assert ds.row_count == 4
        assert ds.display_name == "people.csv"

    def test_dynamic_typing(self, sample_path: Path) -> None:
        ds = read_csv(sample_path)
        assert ds.column("age") == [30, None, 41.5, 30]
        assert ds.column("active") == [True, False, True, False]
        assert ds.column("note") == ["Likes, commas", None, 'Say "hi"', "plain"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_csv(tmp_path / "nope.csv")

    def test_rejects_non_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected .csv"):
            read_csv(path)

    def test_extra_fields_do_not_shift_columns(self) -> None:
        ds = parse_csv_text("a,b\n1,2,3\n4,5,6\n")
        assert ds.fields == ("a", "b")
        assert ds.column("a") == [1, 4]
        assert ds.column("b") == [2, 5]

    def test_long_digit_string_profiles(self) -> None:
        ds = parse_csv_text("v\n" + "9" * 400 + "\n1\n")
        column = profile_dataset(ds).get_column("v")
        assert column is not None
        assert column.max == math.inf
        assert column.min == 1

    def test_header_only(self) -> None:
        ds = parse_csv_text("a,b\n", display_name="h.csv")
        assert ds.fields == ("a", "b")
        assert ds.row_count == 0

    def test_empty_text(self) -> None:
        ds = parse_csv_text("")
        assert ds.fields == ()
        assert ds.row_count == 0


class TestExport:
    def test_header_and_natural_text(self) -> None:
        ds = Dataset.from_records(
            ["a", "b", "c"],
            [{"a": 25.0, "b": True, "c": "x,y"}, {"a": 2.5, "c": None}],
        )
        assert dataset_to_csv(ds) == 'a,b,c\n25,true,"x,y"\n2.5,,\n'

    def test_single_column_keeps_empty_cells(self) -> None:
        ds = Dataset.from_records(["a"], [{"a": 1}, {"a": None}])
        assert dataset_to_csv(ds) == '"a"\n"1"\n""\n'

    def test_cleaned_filename(self) -> None:
        ds = Dataset.from_records(["a"], [], display_name="sales.csv")
        assert cleaned_filename(ds) == "cleaned_sales.csv"

    def test_round_trip_preserves_fields_and_rows(self, sample_path: Path, tmp_path: Path) -> None:
        original = read_csv(sample_path)
        profile = profile_dataset(original)
        cleaned = clean_dataset(original, profile, generate_suggestions(profile))

        out = write_csv(cleaned, tmp_path / "out" / cleaned_filename(cleaned))
        reread = read_csv(out)

        assert reread.fields == cleaned.fields
        assert reread.row_count == cleaned.row_count
        assert reread.column("note") == cleaned.column("note")
        assert reread.column("age") == cleaned.column("age")
