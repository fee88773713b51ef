"""benchcmp - summarize, aggregate and compare benchmark measurements."""

from benchcmp.config import ComparisonConfig, ReportConfig
from benchcmp.exceptions import BenchcmpError, InvalidArgument, UnsupportedFormat
from benchcmp.reporters import get_reporter
from benchcmp.stats import (
    BootstrapResult,
    Comparison,
    Stats,
    Verdict,
    aggregate,
    aggregate_by_name,
    bootstrap,
    compare,
    compare_samples,
    percentile,
    summarize,
)
from benchcmp.tracking import Timer, Tracker

__version__ = "0.1.0"

__all__ = [
    "BenchcmpError",
    "BootstrapResult",
    "Comparison",
    "ComparisonConfig",
    "InvalidArgument",
    "ReportConfig",
    "Stats",
    "Timer",
    "Tracker",
    "UnsupportedFormat",
    "Verdict",
    "aggregate",
    "aggregate_by_name",
    "bootstrap",
    "compare",
    "compare_samples",
    "get_reporter",
    "percentile",
    "summarize",
]
