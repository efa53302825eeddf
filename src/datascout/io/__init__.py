"""CSV reading, CSV export, and profile report export."""

from datascout.io.csv_reader import DatasetReadError, coerce_cell, parse_csv_text, read_csv
from datascout.io.csv_writer import cleaned_filename, dataset_to_csv, write_csv
from datascout.io.report import (
    profile_from_json,
    profile_to_json,
    report_filename,
    write_profile_report,
)

__all__ = [
    "read_csv",
    "parse_csv_text",
    "coerce_cell",
    "DatasetReadError",
    "dataset_to_csv",
    "write_csv",
    "cleaned_filename",
    "profile_to_json",
    "profile_from_json",
    "report_filename",
    "write_profile_report",
]
