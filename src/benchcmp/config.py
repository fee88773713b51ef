"""Configuration models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ComparisonConfig(BaseModel):
    """Settings for comparing a control sample against a test sample."""

    bootstrap: bool = Field(
        default=True,
        description="Estimate percentile differences with the bootstrap",
    )
    iterations: int = Field(default=1000, ge=1, description="Bootstrap resampling iterations")
    seed: int | None = Field(
        default=None,
        description="Seed for the bootstrap random generator (None = nondeterministic)",
    )


class ReportConfig(BaseModel):
    """Settings for rendering stats, counters and comparisons."""

    format: Literal["table", "csv", "tsv"] = "table"
    full: bool = Field(default=False, description="Include min, max, mean and std columns")
    sort: bool = Field(default=True, description="Sort rows by total (stats) or count (counters)")
