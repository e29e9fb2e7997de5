"""Expense management commands (add, list, edit, delete)."""

import sys
import tomllib
from datetime import date

import pandas as pd
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from spendlog.commands.common import console, open_session
from spendlog.config import currency_symbol, load_config
from spendlog.domain.models import Expense, FilterMode
from spendlog.domain.report import format_money
from spendlog.errors import NotFound, StorageUnavailable, ValidationError

FILTER_TITLES = {
    FilterMode.ALL: "All Expenses",
    FilterMode.WEEK: "This Week",
    FilterMode.MONTH: "This Month",
}


def normalize_date_input(value: str) -> str:
    """Normalize a user-entered date to YYYY-MM-DD.

    Args:
        value: Date as YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.

    Returns:
        ISO date string.

    Raises:
        ValidationError: If the date cannot be parsed.
    """
    value = value.strip()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        pass

    try:
        return pd.to_datetime(value, dayfirst=True).strftime("%Y-%m-%d")
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid date format: {value}") from e


def render_expense_table(expenses: list[Expense], title: str, symbol: str) -> None:
    """Render expenses as a rich table, newest first."""
    table = Table(title=title)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Note", style="white")
    table.add_column("Amount", justify="right", style="yellow")

    for expense in expenses:
        table.add_row(
            str(expense.id),
            expense.date,
            Text(expense.category) if expense.category else "[dim]-[/dim]",
            Text(expense.note) if expense.note else "[dim]-[/dim]",
            format_money(expense.amount, symbol),
        )

    console.print(table)


def print_expense(expense: Expense, symbol: str) -> None:
    """Print the fields of one expense."""
    console.print(f"  Date: {expense.date}")
    console.print(f"  Category: {escape(expense.category)}")
    console.print(f"  Amount: {format_money(expense.amount, symbol)}")
    if expense.note:
        console.print(f"  Note: {escape(expense.note)}")


def add_command(amount: str, category: str, note: str | None = None) -> None:
    """Add an expense dated today.

    Args:
        amount: Amount as entered (e.g., "12.50").
        category: Category name (Food, Books, Rent...).
        note: Optional note.
    """
    try:
        config = load_config()
        symbol = currency_symbol(config)
        session = open_session(config)
        before = {e.id for e in session.expenses}
        session.add(amount, category, note)

        added = next((e for e in session.expenses if e.id not in before), None)
        console.print("[green]✓[/green] Expense added:")
        if added:
            console.print(f"  ID: {added.id}")
            print_expense(added, symbol)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid expense: {escape(str(e))}[/red]")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def list_command(filter_mode: str | None = None) -> None:
    """List expenses for a filter window with the window total."""
    try:
        config = load_config()
        symbol = currency_symbol(config)
        session = open_session(config)
        if filter_mode is not None:
            session.select_filter(filter_mode)
        summary = session.summary()

        if not summary.expenses:
            if summary.mode is FilterMode.ALL:
                console.print("[yellow]No expenses yet. Add one with 'spendlog add'.[/yellow]")
            else:
                console.print("[yellow]No expenses in this period[/yellow]")
            return

        title = f"{FILTER_TITLES[summary.mode]} ({len(summary.expenses)})"
        render_expense_table(summary.expenses, title, symbol)
        console.print(f"\n[bold]Total:[/bold] [yellow]{format_money(summary.total, symbol)}[/yellow]")

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def edit_command(
    expense_id: int,
    amount: str | None = None,
    category: str | None = None,
    note: str | None = None,
    date_text: str | None = None,
) -> None:
    """Edit an expense. Omitted fields keep their current values."""
    try:
        config = load_config()
        symbol = currency_symbol(config)
        session = open_session(config)
        current = session.repository.get(expense_id)

        new_date = normalize_date_input(date_text) if date_text is not None else current.date
        session.edit(
            expense_id,
            amount if amount is not None else current.amount,
            category if category is not None else current.category,
            note if note is not None else current.note,
            new_date,
        )

        updated = next((e for e in session.expenses if e.id == expense_id), None)
        if updated is None:
            raise NotFound(expense_id)

        console.print(f"[green]✓[/green] Updated expense {expense_id}:")
        print_expense(updated, symbol)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except NotFound as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid expense: {escape(str(e))}[/red]")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def delete_command(expense_id: int) -> None:
    """Delete an expense by id."""
    try:
        session = open_session()
        count = len(session.expenses)
        session.delete(expense_id)

        if len(session.expenses) == count:
            console.print(f"[yellow]Expense {expense_id} not found; nothing deleted[/yellow]")
            return

        console.print(f"[green]✓[/green] Deleted expense {expense_id}")

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except StorageUnavailable as e:
        console.print(f"[red]Database error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
