"""Cleaning suggestion and audit models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IssueKind(StrEnum):
    """Kind of data issue a suggestion addresses.

    INCONSISTENT has no producing rule yet; the transformer accepts and
    skips it.
    """

    MISSING = "missing"
    OUTLIER = "outlier"
    INCONSISTENT = "inconsistent"
    DUPLICATE = "duplicate"


class CleaningSuggestion(BaseModel):
    """A proposed cleaning action tied to one detected issue.

    Selection state is not stored here; callers pass the suggestions they
    want applied to the transformer.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    column: str = Field(..., description="Affected field, or 'Multiple' for dataset-wide issues")
    issue: IssueKind = Field(..., description="Issue kind")
    description: str = Field(..., description="What was detected")
    recommendation: str = Field(..., description="What to do about it")
    auto_fix: bool = Field(default=False, description="Whether the transformer can apply it")


class FixAction(BaseModel):
    """Audit record for one applied suggestion."""

    model_config = ConfigDict(frozen=True)

    issue: IssueKind = Field(..., description="Issue kind of the applied suggestion")
    column: str = Field(..., description="Column the fix targeted")
    fix_type: str = Field(
        ..., description="Fix category: remove_duplicates, fill_missing, cap_outliers"
    )
    detail: str = Field(..., description="Human-readable description of the change")
    affected_count: int = Field(..., ge=0, description="Rows removed or cells changed")
