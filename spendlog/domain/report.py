"""Pure functions for expense filtering and aggregation.

This module contains the functional core for reporting operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Inputs are never mutated
- "now" is always passed in explicitly

All monetary amounts are in currency units (Amount type).
"""

from collections.abc import Sequence

from spendlog.dates import DateLike, is_same_month, is_same_week
from spendlog.domain.models import (
    OTHER_CATEGORY,
    Amount,
    CategoryName,
    ChartSeries,
    Expense,
    ExpenseSummary,
    FilterMode,
)


def category_label(category: str | None) -> CategoryName:
    """Get the reporting label for a stored category.

    Empty or whitespace-only categories are reported as "Other".
    """
    if category is None or not category.strip():
        return OTHER_CATEGORY
    return CategoryName(category)


def filter_expenses(records: Sequence[Expense], mode: FilterMode | str | None, now: DateLike) -> list[Expense]:
    """Select the expenses that fall in a filter window.

    Args:
        records: Expenses to filter.
        mode: ALL, WEEK or MONTH. Unknown values are treated as ALL.
        now: Reference instant for the week/month window.

    Returns:
        New list of matching expenses in their original order.
    """
    mode = FilterMode.parse(mode)

    if mode is FilterMode.WEEK:
        return [e for e in records if is_same_week(e.date, now)]
    if mode is FilterMode.MONTH:
        return [e for e in records if is_same_month(e.date, now)]
    return list(records)


def total(records: Sequence[Expense]) -> Amount:
    """Sum expense amounts (0.0 for no expenses)."""
    return Amount(sum((e.amount for e in records), 0.0))


def totals_by_category(records: Sequence[Expense]) -> dict[CategoryName, Amount]:
    """Sum expense amounts per category.

    Args:
        records: Expenses to aggregate.

    Returns:
        Dictionary of category totals, ordered by first occurrence in records.
        Categories are matched exactly (case-sensitive).
    """
    totals: dict[CategoryName, Amount] = {}
    for expense in records:
        label = category_label(expense.category)
        totals[label] = Amount(totals.get(label, 0.0) + expense.amount)
    return totals


def chart_series(records: Sequence[Expense]) -> ChartSeries:
    """Build parallel label/value lists for the spending chart.

    Uses the same grouping and ordering as totals_by_category.
    """
    totals = totals_by_category(records)
    return ChartSeries(labels=list(totals.keys()), values=list(totals.values()))


def summarize(records: Sequence[Expense], mode: FilterMode | str | None, now: DateLike) -> ExpenseSummary:
    """Filter expenses and compute every total for one filter mode.

    Args:
        records: Full expense set.
        mode: Filter mode to apply.
        now: Reference instant for the window.

    Returns:
        ExpenseSummary with the filtered expenses and their totals.
    """
    selected = filter_expenses(records, mode, now)

    return ExpenseSummary(
        mode=FilterMode.parse(mode),
        expenses=selected,
        total=total(selected),
        by_category=totals_by_category(selected),
        chart=chart_series(selected),
    )


def format_money(amount: float, symbol: str = "$") -> str:
    """Format an amount for display.

    Args:
        amount: Amount in currency units.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string (e.g., "$1,234.50" or "-$3.00").
    """
    formatted = f"{symbol}{abs(amount):,.2f}"
    return f"-{formatted}" if amount < 0 else formatted


def histogram_bar_length(amount: float, max_amount: float, bar_width: int) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
