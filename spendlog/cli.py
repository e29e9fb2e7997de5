"""CLI entry point for spendlog."""

import typer

from spendlog.commands.admin import init_command
from spendlog.commands.common import configure_logging
from spendlog.commands.expenses import add_command, delete_command, edit_command, list_command
from spendlog.commands.report import report_command

app = typer.Typer(
    name="spendlog",
    help="spendlog - track your everyday spending",
    add_completion=False,
)

FILTER_HELP = "Time window: 'all', 'week' or 'month' (default from config)"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """spendlog - track your everyday spending."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize spendlog database and configuration."""
    init_command(force)


@app.command()
def add(
    amount: str = typer.Argument(..., help="Amount (e.g. 12.50)"),
    category: str = typer.Argument(..., help="Category (Food, Books, Rent...)"),
    note: str = typer.Option("", "--note", "-n", help="Optional note"),
) -> None:
    """Add an expense dated today."""
    add_command(amount, category, note)


@app.command(name="list")
def list_expenses(
    filter_mode: str = typer.Option(None, "--filter", "-f", help=FILTER_HELP),
) -> None:
    """List your expenses, newest first."""
    list_command(filter_mode)


@app.command()
def edit(
    expense_id: int = typer.Argument(..., help="Expense ID (from 'spendlog list')"),
    amount: str = typer.Option(None, "--amount", help="New amount"),
    category: str = typer.Option(None, "--category", help="New category"),
    note: str = typer.Option(None, "--note", help="New note"),
    date: str = typer.Option(None, "--date", help="New date (YYYY-MM-DD, DD/MM/YYYY, ...)"),
) -> None:
    """Edit an expense."""
    edit_command(expense_id, amount, category, note, date)


@app.command()
def delete(
    expense_id: int = typer.Argument(..., help="Expense ID (from 'spendlog list')"),
) -> None:
    """Delete an expense."""
    delete_command(expense_id)


@app.command()
def report(
    filter_mode: str = typer.Option(None, "--filter", "-f", help=FILTER_HELP),
    chart: bool = typer.Option(True, help="Show the spending-by-category chart"),
) -> None:
    """Show your total and spending by category."""
    report_command(filter_mode, chart)


if __name__ == "__main__":
    app()
