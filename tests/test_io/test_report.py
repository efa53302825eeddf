"""Tests for profile report export."""

from __future__ import annotations

import json
from pathlib import Path

from datascout.io.report import (
    profile_from_json,
    profile_to_json,
    report_filename,
    write_profile_report,
)
from datascout.models.dataset import Dataset
from datascout.profiling.profiler import profile_dataset


def _profile():
    ds = Dataset.from_records(
        ["price", "city", "flag"],
        [
            {"price": 0.1, "city": "NY", "flag": True},
            {"price": 0.2, "city": "LA", "flag": None},
            {"price": 1 / 3, "city": "NY", "flag": False},
        ],
        display_name="shops.csv",
    )
    return profile_dataset(ds)


class TestProfileReport:
    def test_camel_case_keys(self) -> None:
        data = json.loads(profile_to_json(_profile()))
        assert {"rowCount", "columnCount", "nullValues", "nullPercentage"} <= set(data)
        assert {"duplicateRows", "duplicatePercentage", "columns"} <= set(data)
        assert {"uniqueCount", "nullCount", "categories", "mode"} <= set(data["columns"][1])

    def test_round_trip_is_lossless(self) -> None:
        profile = _profile()
        restored = profile_from_json(profile_to_json(profile))
        assert restored == profile
        assert restored.get_column("price").mean == profile.get_column("price").mean

    def test_report_filename(self) -> None:
        assert report_filename(_profile()) == "shops_profile.json"

    def test_write_report(self, tmp_path: Path) -> None:
        out = write_profile_report(_profile(), tmp_path / "reports" / "p.json")
        assert out.exists()
        assert json.loads(out.read_text(encoding="utf-8"))["rowCount"] == 3
