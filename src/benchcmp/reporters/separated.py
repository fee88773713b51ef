"""CSV and TSV reporters emitting raw values."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping

from benchcmp.stats import Comparison, Stats

from .base import (
    COMPARISON_COLUMNS,
    COUNTER_COLUMNS,
    VERDICT_LABELS,
    StatsReporter,
    readable,
)


class SeparatedValuesReporter(StatsReporter):
    """Renders delimiter-separated rows with a header line."""

    def __init__(self, delimiter: str, full: bool = False, sort: bool = True) -> None:
        super().__init__(full=full, sort=sort)
        self.delimiter = delimiter

    def _write(self, header: list[str], rows: Iterable[Iterable[object]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerow(header)
        writer.writerows(rows)
        return buffer.getvalue()

    def render_stats(self, stats: Mapping[str, Stats], total: float | None = None) -> str:
        header = [readable(c) for c in self.stats_columns]
        return self._write(header, (raw for _, raw in self.stats_rows(stats, total)))

    def render_counters(self, counters: Mapping[str, int | float]) -> str:
        header = [readable(c) for c in COUNTER_COLUMNS]
        return "".join(
            self._write(header, rows) for rows in self.counter_groups(counters).values()
        )

    def render_comparison(self, name: str, comparison: Comparison) -> str:
        header = ["name", "verdict", *COMPARISON_COLUMNS]
        verdict = VERDICT_LABELS[comparison.verdict]
        rows = (
            [name, verdict, *("" if v is None else v for v in row)]
            for row in self.comparison_rows(comparison)
        )
        return self._write(header, rows)


class CSVReporter(SeparatedValuesReporter):
    """Comma-separated values."""

    def __init__(self, full: bool = False, sort: bool = True) -> None:
        super().__init__(",", full=full, sort=sort)


class TSVReporter(SeparatedValuesReporter):
    """Tab-separated values."""

    def __init__(self, full: bool = False, sort: bool = True) -> None:
        super().__init__("\t", full=full, sort=sort)
