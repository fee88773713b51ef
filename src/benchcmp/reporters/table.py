"""Console table reporter built on rich."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from benchcmp.stats import Comparison, Stats

from .base import COMPARISON_COLUMNS, COUNTER_COLUMNS, VERDICT_LABELS, StatsReporter, readable
from .formatting import format_millis

NAME_WIDTH = 20
VALUE_WIDTH = 10


class TableReporter(StatsReporter):
    """Renders rich tables, captured as text from a console."""

    def __init__(
        self,
        full: bool = False,
        sort: bool = True,
        console: Console | None = None,
    ) -> None:
        super().__init__(full=full, sort=sort)
        self.console = console if console is not None else Console()

    def _capture(self, *renderables: RenderableType) -> str:
        with self.console.capture() as capture:
            for renderable in renderables:
                self.console.print(renderable)
        return capture.get()

    def heading(self, title: str, detail: str | None = None) -> list[str]:
        text = Text(title, style="bold underline")
        if detail:
            text.append(f" ({detail})")
        return [self._capture(text)]

    def render_stats(self, stats: Mapping[str, Stats], total: float | None = None) -> str:
        table = Table()
        for i, column in enumerate(self.stats_columns):
            if i == 0:
                table.add_column(readable(column), style="cyan", max_width=NAME_WIDTH)
            elif column == "count":
                table.add_column(readable(column), justify="right")
            else:
                table.add_column(readable(column), justify="right", max_width=VALUE_WIDTH)

        for formatted, _ in self.stats_rows(stats, total):
            table.add_row(*(str(v) for v in formatted))

        return self._capture(table)

    def render_counters(self, counters: Mapping[str, int | float]) -> str:
        tables = []
        for rows in self.counter_groups(counters).values():
            table = Table()
            table.add_column(readable(COUNTER_COLUMNS[0]), style="cyan", max_width=NAME_WIDTH)
            table.add_column(readable(COUNTER_COLUMNS[1]), justify="right")
            for name, count in rows:
                table.add_row(str(name), f"{count:,}")
            tables.append(table)

        return self._capture(*tables)

    def render_comparison(self, name: str, comparison: Comparison) -> str:
        table = Table(title=f"{name}: {VERDICT_LABELS[comparison.verdict]}")
        table.add_column(COMPARISON_COLUMNS[0], style="cyan")
        for column in COMPARISON_COLUMNS[1:]:
            table.add_column(column, justify="right")

        for label, control, test, diff, ci in self.comparison_rows(comparison):
            table.add_row(
                label,
                format_millis(control),
                format_millis(test),
                format_millis(diff) if diff is not None else "-",
                f"±{format_millis(ci)}" if ci is not None else "-",
            )

        return self._capture(table)
