"""Named thresholds and defaults for suggestion generation and cleaning."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Column name used for dataset-wide suggestions (duplicate rows).
DUPLICATE_COLUMN = "Multiple"

# Display limits.
TOP_CATEGORY_LIMIT = 10
CHART_GROUP_LIMIT = 20

# Group label for rows whose dimension value is missing.
UNKNOWN_DIMENSION = "Unknown"


class CleaningConfig(BaseModel):
    """Thresholds shared by the suggestion generator and the transformer.

    The outlier rule flags a column when
    ``max > mean * outlier_mean_multiplier``; the transformer caps values above
    ``median * outlier_cap_multiplier``. There is no lower bound.
    """

    model_config = ConfigDict(frozen=True)

    outlier_mean_multiplier: float = Field(default=3.0, gt=0.0)
    outlier_cap_multiplier: float = Field(default=3.0, gt=0.0)
    numeric_fill_default: int | float = Field(default=0)
    text_fill_default: str = Field(default="Unknown")


DEFAULT_CONFIG = CleaningConfig()
