"""Pure functions for the month summary view.

All monetary amounts are in cents (Money type).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from houseledger.domain.errors import RetrievalError
from houseledger.domain.models import Expense, Money, Period


@dataclass(frozen=True)
class MonthSummary:
    """Immutable summary of one calendar month."""

    period: Period
    expenses: list[Expense]
    total: Money

    @property
    def month(self) -> int:
        return self.period.month

    @property
    def year(self) -> int:
        return self.period.year


def resolve_period(month: int | None, year: int | None, today: date) -> Period:
    """Resolve the month to summarise.

    Args:
        month: Parsed month (1-12), or None for the current month.
        year: Parsed year, or None for the current year.
        today: Reference date for the defaults.

    Returns:
        Period with each missing field taken from today.
    """
    return Period(
        year=today.year if year is None else year,
        month=today.month if month is None else month,
    )


def in_period(expense: Expense, period: Period) -> bool:
    """Check whether an expense falls inside [period.start, period.end)."""
    return period.start <= expense.date < period.end


def total_amount(expenses: Sequence[Expense]) -> Money:
    """Exact sum of expense amounts."""
    return Money(sum(expense.amount for expense in expenses))


def summarize(period: Period, expenses: Sequence[Expense]) -> MonthSummary:
    """Build a month summary from the records already fetched for the period.

    Args:
        period: The resolved month.
        expenses: Records returned by the store for the period window, in
            store order.

    Returns:
        MonthSummary whose total is the sum of exactly the given records.

    Raises:
        RetrievalError: If the store returned a record outside the period window.
    """
    stray = [expense.id for expense in expenses if not in_period(expense, period)]
    if stray:
        raise RetrievalError(f"Store returned expenses {stray} outside {period.label}")

    return MonthSummary(period=period, expenses=list(expenses), total=total_amount(expenses))
