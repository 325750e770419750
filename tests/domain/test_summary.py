"""Tests for houseledger.domain.summary pure functions."""

from datetime import date

import pytest

from houseledger.domain.errors import RetrievalError
from houseledger.domain.models import Expense, ExpenseId, Money, Period
from houseledger.domain.summary import in_period, resolve_period, summarize, total_amount


def _expense(expense_id: int, amount: int, on: date) -> Expense:
    return Expense(id=ExpenseId(expense_id), name="Item", amount=Money(amount), date=on, category="Home")


class TestResolvePeriod:
    """Tests for resolve_period."""

    def test_explicit_month_and_year(self) -> None:
        """Should use the given values."""
        assert resolve_period(2, 2024, today=date(2030, 7, 4)) == Period(year=2024, month=2)

    def test_defaults_to_today(self) -> None:
        """Should default both fields to today."""
        assert resolve_period(None, None, today=date(2025, 11, 20)) == Period(year=2025, month=11)

    def test_missing_month_only(self) -> None:
        """Should take the missing month from today."""
        assert resolve_period(None, 2020, today=date(2025, 11, 20)) == Period(year=2020, month=11)

    def test_missing_year_only(self) -> None:
        """Should take the missing year from today."""
        assert resolve_period(3, None, today=date(2025, 11, 20)) == Period(year=2025, month=3)


class TestPeriod:
    """Tests for Period window bounds."""

    def test_leap_february(self) -> None:
        """Should include Feb 29 and exclude March 1 in a leap year."""
        period = Period(year=2024, month=2)

        assert period.start == date(2024, 2, 1)
        assert period.end == date(2024, 3, 1)
        assert in_period(_expense(1, 100, date(2024, 2, 29)), period)
        assert not in_period(_expense(2, 100, date(2024, 3, 1)), period)

    def test_december_rollover(self) -> None:
        """Should use January 1st of the next year as upper bound."""
        period = Period(year=2023, month=12)

        assert period.end == date(2024, 1, 1)
        assert in_period(_expense(1, 100, date(2023, 12, 31)), period)
        assert not in_period(_expense(2, 100, date(2024, 1, 1)), period)

    def test_label(self) -> None:
        """Should render a readable label."""
        assert Period(year=2024, month=2).label == "February 2024"


class TestSummarize:
    """Tests for summarize and total_amount."""

    def test_empty_month(self) -> None:
        """Should give an empty list and a zero total."""
        summary = summarize(Period(year=2024, month=5), [])

        assert summary.expenses == []
        assert summary.total == Money(0)
        assert summary.month == 5
        assert summary.year == 2024

    def test_total_matches_listed_records(self) -> None:
        """Should total exactly the returned records, in store order."""
        expenses = [
            _expense(7, 1999, date(2024, 2, 10)),
            _expense(3, -500, date(2024, 2, 1)),
            _expense(9, 1, date(2024, 2, 29)),
        ]

        summary = summarize(Period(year=2024, month=2), expenses)

        assert [expense.id for expense in summary.expenses] == [7, 3, 9]
        assert summary.total == Money(1500)
        assert summary.total == total_amount(summary.expenses)

    def test_rejects_records_outside_window(self) -> None:
        """Should flag a store that returns records outside the window."""
        with pytest.raises(RetrievalError):
            summarize(Period(year=2024, month=2), [_expense(1, 100, date(2024, 3, 1))])
