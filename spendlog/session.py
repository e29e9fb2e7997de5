"""Presentation-side state: the current expense set and selected filter."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from spendlog.domain.models import Expense, ExpenseSummary, FilterMode
from spendlog.domain.report import summarize
from spendlog.store.repository import ExpenseRepository

logger = logging.getLogger(__name__)


@dataclass
class ExpenseSession:
    """Holds the loaded expenses and filter mode for one user session.

    The expense list is only ever replaced with the set returned by the
    repository after a load or mutation, never patched in place.
    """

    repository: ExpenseRepository
    clock: Callable[[], datetime] = datetime.now
    filter_mode: FilterMode = FilterMode.ALL
    expenses: list[Expense] = field(default_factory=list)

    def open(self) -> None:
        """Ensure the schema exists and load all expenses."""
        self.repository.initialize()
        self.refresh()

    def refresh(self) -> None:
        self.expenses = self.repository.load_all()
        logger.debug("Loaded %d expenses", len(self.expenses))

    def add(self, amount: Any, category: str, note: str | None = "") -> None:
        self.expenses = self.repository.create(amount, category, note)

    def edit(self, expense_id: int, amount: Any, category: str, note: str | None, date: str) -> None:
        self.expenses = self.repository.update(expense_id, amount, category, note, date)

    def delete(self, expense_id: int) -> None:
        self.expenses = self.repository.remove(expense_id)

    def select_filter(self, mode: FilterMode | str | None) -> FilterMode:
        """Select the filter mode; unknown values select ALL."""
        self.filter_mode = FilterMode.parse(mode)
        return self.filter_mode

    def summary(self) -> ExpenseSummary:
        """Summarize the current expenses for the selected filter mode."""
        return summarize(self.expenses, self.filter_mode, self.clock())
