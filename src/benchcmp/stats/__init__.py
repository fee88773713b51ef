"""Statistical summaries, aggregation and two-sample comparison."""

from .aggregate import aggregate, aggregate_by_name, median
from .bootstrap import bootstrap
from .comparison import compare_samples
from .mannwhitney import compare, critical_u, u_statistics
from .percentile import percentile, percentiles
from .summary import summarize
from .types import BootstrapResult, Comparison, Stats, Verdict

__all__ = [
    "BootstrapResult",
    "Comparison",
    "Stats",
    "Verdict",
    "aggregate",
    "aggregate_by_name",
    "bootstrap",
    "compare",
    "compare_samples",
    "critical_u",
    "median",
    "percentile",
    "percentiles",
    "summarize",
    "u_statistics",
]
