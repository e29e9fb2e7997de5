"""Report command: totals, category breakdown and spending chart."""

import sys
import tomllib

from rich.markup import escape

from spendlog.commands.common import console, open_session
from spendlog.commands.expenses import FILTER_TITLES
from spendlog.config import currency_symbol, load_config
from spendlog.domain.models import ChartSeries
from spendlog.domain.report import format_money, histogram_bar_length
from spendlog.errors import StorageUnavailable

BAR_WIDTH = 30


def render_chart(chart: ChartSeries, symbol: str, bar_width: int = BAR_WIDTH) -> None:
    """Render the spending-by-category bar chart.

    Args:
        chart: Parallel category labels and amounts.
        symbol: Currency symbol.
        bar_width: Width of the longest bar in characters.
    """
    console.print("\n[bold]Spending by Category[/bold]\n")

    max_amount = max(chart.values, default=0.0)
    for label, value in zip(chart.labels, chart.values):
        bar = "█" * histogram_bar_length(value, max_amount, bar_width)
        # Pad before escaping so the column width ignores escape characters
        console.print(f"  {escape(f'{label:20}')} {format_money(value, symbol):>12} [yellow]{bar}[/yellow]")


def report_command(filter_mode: str | None = None, chart: bool = True) -> None:
    """Show the total and per-category totals for a filter window."""
    try:
        config = load_config()
        symbol = currency_symbol(config)
        session = open_session(config)
        if filter_mode is not None:
            session.select_filter(filter_mode)
        summary = session.summary()

        console.print(f"[bold cyan]{FILTER_TITLES[summary.mode]}[/bold cyan]\n")
        console.print(f"[bold]Total:[/bold] [yellow]{format_money(summary.total, symbol)}[/yellow]")

        if not summary.by_category:
            console.print("[dim]No expenses in this period[/dim]")
            return

        console.print("\n[bold]By Category:[/bold]")
        for category, amount in summary.by_category.items():
            console.print(f"  {escape(category)}: {format_money(amount, symbol)}")

        if chart:
            render_chart(summary.chart, symbol)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
