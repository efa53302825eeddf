"""Profile report export as JSON."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from datascout.models.profiling import DatasetProfile


def profile_to_json(profile: DatasetProfile) -> str:
    """Serialise a profile to indented JSON with camelCase keys."""
    return profile.model_dump_json(by_alias=True, indent=2)


def profile_from_json(text: str) -> DatasetProfile:
    """Load a profile written by ``profile_to_json``."""
    return DatasetProfile.model_validate_json(text)


def report_filename(profile: DatasetProfile) -> str:
    """Default report name: ``<name without .csv>_profile.json``."""
    stem = (profile.display_name or "dataset").replace(".csv", "")
    return f"{stem}_profile.json"


def write_profile_report(profile: DatasetProfile, output_path: str | Path) -> Path:
    """Write a profile report, creating parent directories."""
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(profile_to_json(profile), encoding="utf-8")
    logger.info("Profile report for {} written to {}", profile.display_name, out)
    return out
