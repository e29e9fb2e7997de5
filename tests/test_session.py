"""Tests for spendlog.session.ExpenseSession."""

from datetime import date, datetime
from pathlib import Path

import pytest

from spendlog.domain.models import FilterMode
from spendlog.errors import ValidationError
from spendlog.session import ExpenseSession
from spendlog.store.gateway import SqliteGateway
from spendlog.store.repository import ExpenseRepository


@pytest.fixture
def session(tmp_path: Path) -> ExpenseSession:
    repository = ExpenseRepository(SqliteGateway(tmp_path / "spendlog.db"), today=lambda: date(2024, 6, 5))
    expense_session = ExpenseSession(repository, clock=lambda: datetime(2024, 6, 5, 12, 0))
    expense_session.open()
    return expense_session


class TestExpenseSession:
    """Tests for the session state object."""

    def test_open_loads_existing_expenses(self, tmp_path: Path) -> None:
        """A new session on the same file should see earlier expenses."""
        repository = ExpenseRepository(SqliteGateway(tmp_path / "spendlog.db"))
        repository.initialize()
        repository.create(10, "Food")

        session = ExpenseSession(repository)
        session.open()

        assert [e.category for e in session.expenses] == ["Food"]

    def test_mutations_replace_the_expense_list(self, session: ExpenseSession) -> None:
        """Each mutation should swap in the reloaded list."""
        session.add(10, "Food")
        first_list = session.expenses
        session.add(20, "Books")

        assert session.expenses is not first_list
        assert first_list == session.expenses[1:]

    def test_edit_and_delete(self, session: ExpenseSession) -> None:
        """Should reflect edits and deletes."""
        session.add(10, "Food")
        expense_id = session.expenses[0].id

        session.edit(expense_id, 12, "Groceries", "weekly shop", "2024-06-04")
        assert session.expenses[0].category == "Groceries"

        session.delete(expense_id)
        assert session.expenses == []

    def test_failed_add_keeps_state(self, session: ExpenseSession) -> None:
        """Validation failures should leave the expense list as it was."""
        session.add(10, "Food")
        before = session.expenses

        with pytest.raises(ValidationError):
            session.add(5, "")

        assert session.expenses is before

    def test_summary_uses_selected_filter(self, session: ExpenseSession) -> None:
        """Should summarize only the selected window."""
        session.add(10, "Food")
        session.add(5, "Food")
        session.add(20, "Books")
        session.edit(session.expenses[0].id, 20, "Books", "", "2024-05-01")

        assert session.select_filter("month") is FilterMode.MONTH
        summary = session.summary()

        assert summary.total == 15
        assert summary.by_category == {"Food": 15}

        session.select_filter("ALL")
        assert session.summary().by_category == {"Books": 20, "Food": 15}

    def test_unknown_filter_selects_all(self, session: ExpenseSession) -> None:
        """Should never fail on an unknown filter."""
        assert session.select_filter("fortnight") is FilterMode.ALL
