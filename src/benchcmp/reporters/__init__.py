"""Text rendering of stats, counters and comparisons."""

from .base import StatsReporter
from .factory import get_reporter
from .formatting import format_hhmmss, format_millis, format_percent
from .separated import CSVReporter, SeparatedValuesReporter, TSVReporter
from .table import TableReporter

__all__ = [
    "CSVReporter",
    "SeparatedValuesReporter",
    "StatsReporter",
    "TSVReporter",
    "TableReporter",
    "format_hhmmss",
    "format_millis",
    "format_percent",
    "get_reporter",
]
