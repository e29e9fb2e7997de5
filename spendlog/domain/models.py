"""Domain type definitions for spendlog.

These NewTypes provide semantic clarity and help with type checking:
- Amount: Expense amount in currency units
- CategoryName: Free-form spending category
- IsoDate: Calendar date in YYYY-MM-DD format
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NewType

# Amounts are stored as REAL in the expenses table
Amount = NewType("Amount", float)

# Category text exactly as stored (trimmed on create, never case-normalized)
CategoryName = NewType("CategoryName", str)

# Calendar date with no time component (e.g., "2024-06-03")
IsoDate = NewType("IsoDate", str)

# Label used when an expense has an empty category
OTHER_CATEGORY = CategoryName("Other")


class FilterMode(str, Enum):
    """Time window used to select expenses for totals."""

    ALL = "ALL"
    WEEK = "WEEK"
    MONTH = "MONTH"

    @classmethod
    def parse(cls, value: "FilterMode | str | None") -> "FilterMode":
        """Parse a filter mode, falling back to ALL for unknown values.

        Args:
            value: FilterMode or case-insensitive name ("week", "MONTH", ...).

        Returns:
            Matching FilterMode, or FilterMode.ALL if not recognised.
        """
        if isinstance(value, FilterMode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.ALL


@dataclass(frozen=True)
class Expense:
    """Immutable expense record as loaded from the store."""

    id: int
    amount: Amount
    category: CategoryName
    note: str
    date: IsoDate

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Expense":
        """Build an Expense from a database row dictionary."""
        return cls(
            id=int(row["id"]),
            amount=Amount(float(row["amount"])),
            category=CategoryName(row["category"] or ""),
            note=row.get("note") or "",
            date=IsoDate(row["date"]),
        )


@dataclass(frozen=True)
class ChartSeries:
    """Parallel label/value lists for the spending-by-category chart."""

    labels: list[CategoryName] = field(default_factory=list)
    values: list[Amount] = field(default_factory=list)


@dataclass(frozen=True)
class ExpenseSummary:
    """Immutable view of the expenses selected by one filter mode."""

    mode: FilterMode
    expenses: list[Expense]
    total: Amount
    by_category: dict[CategoryName, Amount]
    chart: ChartSeries
