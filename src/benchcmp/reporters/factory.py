"""Reporter factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from benchcmp.config import ReportConfig
from benchcmp.exceptions import UnsupportedFormat

from .base import StatsReporter
from .separated import CSVReporter, TSVReporter
from .table import TableReporter

if TYPE_CHECKING:
    from rich.console import Console


def get_reporter(
    config: ReportConfig | None = None,
    console: Console | None = None,
) -> StatsReporter:
    """
    Create a reporter from configuration.

    Args:
        config: Report configuration (defaults to a table)
        console: Rich console for table output

    Returns:
        Reporter for the configured format
    """
    if config is None:
        config = ReportConfig()

    match config.format:
        case "table":
            return TableReporter(full=config.full, sort=config.sort, console=console)
        case "csv":
            return CSVReporter(full=config.full, sort=config.sort)
        case "tsv":
            return TSVReporter(full=config.full, sort=config.sort)
        case _:
            raise UnsupportedFormat(f"Unknown report format: {config.format}")
