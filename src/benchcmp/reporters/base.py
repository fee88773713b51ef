"""Abstract reporter interface and the row building shared by all formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

from benchcmp.stats import Comparison, Stats, Verdict

from .formatting import format_millis, format_percent

if TYPE_CHECKING:
    from benchcmp.tracking import Timer

STATS_COLUMNS = ["name", "sum", "count", "p50", "p90", "p95", "p99"]
FULL_COLUMNS = ["min", "max", "mean", "std"]
COUNTER_COLUMNS = ["name", "count"]
COMPARISON_COLUMNS = ["percentile", "control", "test", "difference", "half_width"]
COMPARISON_PERCENTILES = (50, 90, 95, 99)

VERDICT_LABELS = {
    Verdict.TEST_HIGHER: "test higher",
    Verdict.CONTROL_HIGHER: "control higher",
    Verdict.NO_DIFFERENCE: "no significant difference",
}

Row = list[str | int | float]


def readable(column: str) -> str:
    """Return the display name of a column."""
    if column == "sum":
        return "total"
    return column


def format_count(value: int | float) -> str:
    """Format a count, dropping the fraction when it is whole."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


class StatsReporter(ABC):
    """
    Renders stats, counters and comparisons as text.

    Subclasses decide how rows are laid out; column selection, value
    formatting and sorting live here.
    """

    def __init__(self, full: bool = False, sort: bool = True) -> None:
        """
        Initialize reporter.

        Args:
            full: Include min, max, mean and std columns
            sort: Sort stats by total and counters by count, descending
        """
        self.full = full
        self.sort = sort

    @property
    def stats_columns(self) -> list[str]:
        return STATS_COLUMNS + FULL_COLUMNS if self.full else list(STATS_COLUMNS)

    def stats_rows(
        self,
        stats: Mapping[str, Stats],
        total: float | None = None,
    ) -> list[tuple[Row, Row]]:
        """
        Build ``(formatted, raw)`` row pairs for a stats mapping.

        Durations are formatted with ``format_millis``; when ``total`` is
        given, each also shows its share of the total.
        """
        rows: list[tuple[Row, Row]] = []
        for name, s in stats.items():
            formatted: Row = [name]
            raw: Row = [name]
            for column in self.stats_columns[1:]:
                value = getattr(s, column)
                raw.append(value)
                if column == "count":
                    formatted.append(format_count(value))
                    continue
                text = format_millis(value)
                if total:
                    text += f" ({format_percent(value, total)})"
                formatted.append(text)
            rows.append((formatted, raw))

        if self.sort:
            # Column 1 is the total
            rows.sort(key=lambda pair: pair[1][1], reverse=True)
        return rows

    def counter_groups(self, counters: Mapping[str, int | float]) -> dict[str, list[Row]]:
        """Group counters by the part of their name before ``:``."""
        groups: dict[str, list[Row]] = {}
        for name, count in counters.items():
            prefix = name.split(":", 1)[0]
            groups.setdefault(prefix, []).append([name, count])

        if self.sort:
            for rows in groups.values():
                rows.sort(key=lambda row: row[1], reverse=True)
        return groups

    @staticmethod
    def comparison_rows(comparison: Comparison) -> list[list[str | float | None]]:
        """
        Return one ``[percentile, control, test, difference, half-width]`` row
        per percentile; difference and half-width are None without a bootstrap.
        """
        estimate = comparison.bootstrap
        rows: list[list[str | float | None]] = []
        for p in COMPARISON_PERCENTILES:
            rows.append(
                [
                    f"p{p}",
                    getattr(comparison.control, f"p{p}"),
                    getattr(comparison.test, f"p{p}"),
                    getattr(estimate, f"d{p}") if estimate else None,
                    getattr(estimate, f"ci{p}") if estimate else None,
                ]
            )
        return rows

    def render_timer(self, timer: Timer) -> str:
        """Render a timer's total duration, stats and counters."""
        parts: list[str] = []
        stats = timer.stats()
        total = timer.duration
        counters = timer.counters

        if total:
            parts.extend(self.heading("Time", format_millis(total)))
        if stats:
            parts.append(self.render_stats(stats, total))
        if counters:
            parts.extend(self.heading("Counters"))
            parts.append(self.render_counters(counters))
        return "\n".join(parts)

    def heading(self, title: str, detail: str | None = None) -> list[str]:
        """Return the lines introducing a section; none by default."""
        return []

    @abstractmethod
    def render_stats(self, stats: Mapping[str, Stats], total: float | None = None) -> str:
        """
        Render a mapping of name to Stats.

        Args:
            stats: Stats to render, one row per name
            total: Overall duration used to show each row's share

        Returns:
            Rendered text
        """
        ...

    @abstractmethod
    def render_counters(self, counters: Mapping[str, int | float]) -> str:
        """Render counters, one block per name prefix."""
        ...

    @abstractmethod
    def render_comparison(self, name: str, comparison: Comparison) -> str:
        """Render the verdict and percentile differences of a comparison."""
        ...
