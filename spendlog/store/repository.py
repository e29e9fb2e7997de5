"""Expense repository: validated CRUD over the storage gateway.

Every mutation is followed by a full reload, so callers always receive the
record set exactly as it is in the store.
"""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from spendlog.dates import today_iso
from spendlog.domain.expenses import validate_expense_update, validate_new_expense
from spendlog.domain.models import Expense
from spendlog.errors import NotFound
from spendlog.store.gateway import StorageGateway
from spendlog.store.schema import SCHEMA_STATEMENTS

logger = logging.getLogger(__name__)

SELECT_ALL_SQL = "SELECT id, amount, category, note, date FROM expenses ORDER BY id DESC"
SELECT_ONE_SQL = "SELECT id, amount, category, note, date FROM expenses WHERE id = ?"
INSERT_SQL = "INSERT INTO expenses (amount, category, note, date) VALUES (?, ?, ?, ?)"
UPDATE_SQL = "UPDATE expenses SET amount = ?, category = ?, note = ?, date = ? WHERE id = ?"
DELETE_SQL = "DELETE FROM expenses WHERE id = ?"


class ExpenseRepository:
    """Create, read, update and delete expenses.

    Args:
        gateway: Storage gateway holding the expenses table.
        today: Callable returning the local calendar date used for new expenses.
    """

    def __init__(self, gateway: StorageGateway, today: Callable[[], date] = date.today) -> None:
        self.gateway = gateway
        self.today = today

    def initialize(self) -> None:
        """Create the expenses table if it does not exist. Safe to call repeatedly.

        Raises:
            StorageUnavailable: If the store cannot be opened.
        """
        for statement in SCHEMA_STATEMENTS:
            self.gateway.execute(statement)

    def load_all(self) -> list[Expense]:
        """Load every expense, newest (highest id) first."""
        return [Expense.from_row(row) for row in self.gateway.query_all(SELECT_ALL_SQL)]

    def get(self, expense_id: int) -> Expense:
        """Load a single expense.

        Raises:
            NotFound: If no expense has this id.
        """
        rows = self.gateway.query_all(SELECT_ONE_SQL, (expense_id,))
        if not rows:
            raise NotFound(expense_id)
        return Expense.from_row(rows[0])

    def create(self, amount: Any, category: str, note: str | None = "") -> list[Expense]:
        """Validate and insert a new expense dated today.

        Args:
            amount: Amount greater than zero (number or numeric string).
            category: Category name; must be non-empty after trimming.
            note: Optional note.

        Returns:
            Refreshed list of all expenses.

        Raises:
            ValidationError: If amount or category is invalid. Nothing is written.
            StorageUnavailable: If the insert fails.
        """
        amount_value, category_name, note_text = validate_new_expense(amount, category, note)
        expense_date = today_iso(self.today())

        self.gateway.execute(INSERT_SQL, (amount_value, category_name, note_text, expense_date))
        logger.debug("Created expense %.2f %s on %s", amount_value, category_name, expense_date)

        return self.load_all()

    def update(self, expense_id: int, amount: Any, category: str, note: str | None, date: str) -> list[Expense]:
        """Replace the amount, category, note and date of an expense.

        A missing id changes nothing; the returned set is simply unchanged.

        Returns:
            Refreshed list of all expenses.

        Raises:
            ValidationError: If any field is invalid. Nothing is written.
            StorageUnavailable: If the update fails.
        """
        fields = validate_expense_update(amount, category, note, date)

        count = self.gateway.execute(UPDATE_SQL, (*fields, expense_id))
        if count == 0:
            logger.warning("Update skipped: expense %s does not exist", expense_id)
        else:
            logger.debug("Updated expense %s", expense_id)

        return self.load_all()

    def remove(self, expense_id: int) -> list[Expense]:
        """Delete an expense if it exists.

        Returns:
            Refreshed list of all expenses.
        """
        count = self.gateway.execute(DELETE_SQL, (expense_id,))
        if count == 0:
            logger.warning("Delete skipped: expense %s does not exist", expense_id)
        else:
            logger.debug("Deleted expense %s", expense_id)

        return self.load_all()
