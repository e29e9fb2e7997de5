"""Tests for spendlog.domain.report pure functions."""

from datetime import datetime

from spendlog.domain.models import Amount, CategoryName, Expense, FilterMode, IsoDate
from spendlog.domain.report import (
    chart_series,
    filter_expenses,
    format_money,
    histogram_bar_length,
    summarize,
    total,
    totals_by_category,
)

NOW = datetime(2024, 6, 5, 9, 30)


def make_expense(expense_id: int, amount: float, category: str, date: str = "2024-06-05") -> Expense:
    return Expense(
        id=expense_id,
        amount=Amount(amount),
        category=CategoryName(category),
        note="",
        date=IsoDate(date),
    )


def sample_expenses() -> list[Expense]:
    return [
        make_expense(5, 12.0, "Rent", "2024-05-20"),
        make_expense(4, 7.5, "Books", "2024-06-10"),
        make_expense(3, 20.0, "Books", "2024-06-09"),
        make_expense(2, 5.0, "Food", "2024-06-03"),
        make_expense(1, 10.0, "Food", "2024-06-01"),
    ]


class TestFilterExpenses:
    """Tests for filter_expenses."""

    def test_all_returns_every_record(self) -> None:
        """ALL should return an equal list."""
        records = sample_expenses()
        assert filter_expenses(records, FilterMode.ALL, NOW) == records

    def test_week_selects_monday_to_sunday(self) -> None:
        """WEEK should keep only the current Monday-Sunday week."""
        result = filter_expenses(sample_expenses(), FilterMode.WEEK, NOW)
        assert [e.id for e in result] == [3, 2]

    def test_month_selects_calendar_month(self) -> None:
        """MONTH should keep only the current calendar month."""
        result = filter_expenses(sample_expenses(), FilterMode.MONTH, NOW)
        assert [e.id for e in result] == [4, 3, 2, 1]

    def test_accepts_string_modes(self) -> None:
        """Should accept case-insensitive string modes."""
        result = filter_expenses(sample_expenses(), "week", NOW)
        assert [e.id for e in result] == [3, 2]

    def test_unknown_mode_falls_back_to_all(self) -> None:
        """Unknown modes should not raise and should act as ALL."""
        records = sample_expenses()
        assert filter_expenses(records, "YEAR", NOW) == records
        assert filter_expenses(records, None, NOW) == records

    def test_does_not_mutate_input(self) -> None:
        """Should return a new list and leave the input untouched."""
        records = sample_expenses()
        snapshot = list(records)

        result = filter_expenses(records, FilterMode.ALL, NOW)
        result.clear()
        filter_expenses(records, FilterMode.WEEK, NOW)

        assert records == snapshot


class TestTotal:
    """Tests for total."""

    def test_sums_amounts(self) -> None:
        """Should sum all amounts."""
        records = [make_expense(1, 10, "Food"), make_expense(2, 5, "Food"), make_expense(3, 20, "Books")]
        assert total(records) == 35

    def test_empty_is_zero(self) -> None:
        """Should return zero for no expenses."""
        assert total([]) == 0

    def test_total_of_filtered_window(self) -> None:
        """Total of a filtered set should match the predicate sum."""
        assert total(filter_expenses(sample_expenses(), FilterMode.WEEK, NOW)) == 25.0
        assert total(filter_expenses(sample_expenses(), FilterMode.MONTH, NOW)) == 42.5


class TestTotalsByCategory:
    """Tests for totals_by_category."""

    def test_groups_by_category(self) -> None:
        """Should sum amounts per category."""
        records = [make_expense(1, 10, "Food"), make_expense(2, 5, "Food"), make_expense(3, 20, "Books")]
        assert totals_by_category(records) == {"Food": 15, "Books": 20}

    def test_preserves_first_occurrence_order(self) -> None:
        """Should order categories by first appearance."""
        result = totals_by_category(sample_expenses())
        assert list(result.keys()) == ["Rent", "Books", "Food"]

    def test_case_sensitive(self) -> None:
        """Should not merge categories that differ only by case."""
        records = [make_expense(1, 1, "food"), make_expense(2, 2, "Food")]
        assert totals_by_category(records) == {"food": 1, "Food": 2}

    def test_empty_category_reported_as_other(self) -> None:
        """Should attribute empty categories to 'Other'."""
        records = [make_expense(1, 4, ""), make_expense(2, 6, "  "), make_expense(3, 1, "Food")]
        assert totals_by_category(records) == {"Other": 10, "Food": 1}

    def test_values_sum_to_total(self) -> None:
        """Category totals should add up to the overall total."""
        records = sample_expenses()
        assert sum(totals_by_category(records).values()) == total(records)

    def test_empty_input(self) -> None:
        """Should return an empty mapping for no expenses."""
        assert totals_by_category([]) == {}


class TestChartSeries:
    """Tests for chart_series."""

    def test_parallel_lists_in_first_occurrence_order(self) -> None:
        """Labels and values should line up with totals_by_category."""
        chart = chart_series(sample_expenses())

        assert chart.labels == ["Rent", "Books", "Food"]
        assert chart.values == [12.0, 27.5, 15.0]

    def test_empty_category_labelled_other(self) -> None:
        """Should use the same 'Other' label as totals_by_category."""
        chart = chart_series([make_expense(1, 3, "")])

        assert chart.labels == ["Other"]
        assert chart.values == [3]


class TestSummarize:
    """Tests for summarize."""

    def test_summary_for_week(self) -> None:
        """Should compute every view from the filtered set."""
        summary = summarize(sample_expenses(), "WEEK", NOW)

        assert summary.mode is FilterMode.WEEK
        assert [e.id for e in summary.expenses] == [3, 2]
        assert summary.total == 25.0
        assert summary.by_category == {"Books": 20.0, "Food": 5.0}
        assert summary.chart.labels == ["Books", "Food"]
        assert summary.chart.values == [20.0, 5.0]

    def test_unknown_mode_summarizes_everything(self) -> None:
        """Should fall back to ALL."""
        summary = summarize(sample_expenses(), "bogus", NOW)

        assert summary.mode is FilterMode.ALL
        assert summary.total == 54.5


class TestDisplayHelpers:
    """Tests for format_money and histogram_bar_length."""

    def test_format_money(self) -> None:
        """Should format with symbol, separators and two decimals."""
        assert format_money(1234.5) == "$1,234.50"
        assert format_money(3, "£") == "£3.00"
        assert format_money(-3) == "-$3.00"

    def test_histogram_bar_length(self) -> None:
        """Should scale bars to the largest value."""
        assert histogram_bar_length(15, 30, 30) == 15
        assert histogram_bar_length(30, 30, 30) == 30
        assert histogram_bar_length(5, 0, 30) == 0
