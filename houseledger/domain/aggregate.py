"""Pure functions for monthly aggregation.

This module contains the functional core for the monthly overview:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type), so accumulation is exact.
"""

from collections.abc import Iterable

from houseledger.domain.models import Expense, Money, MonthBucket


def bucket_key(month: int, year: int) -> str:
    """Build the display key for a month bucket (e.g. "3/2024")."""
    return f"{month}/{year}"


def month_buckets(expenses: Iterable[Expense]) -> list[MonthBucket]:
    """Sum expense amounts per calendar month.

    Args:
        expenses: Expenses in any order.

    Returns:
        One MonthBucket per (year, month) that has at least one expense,
        ordered ascending by year then month. Empty input gives an empty list.
    """
    totals: dict[tuple[int, int], int] = {}
    for expense in expenses:
        period = (expense.date.year, expense.date.month)
        totals[period] = totals.get(period, 0) + expense.amount

    return [MonthBucket(month=month, year=year, total=Money(total)) for (year, month), total in sorted(totals.items())]


def group_by_month(expenses: Iterable[Expense]) -> dict[str, Money]:
    """Map "month/year" keys to the total spent in that month.

    Args:
        expenses: Expenses in any order.

    Returns:
        Insertion-ordered dictionary, oldest month first.
    """
    return {bucket_key(bucket.month, bucket.year): bucket.total for bucket in month_buckets(expenses)}


def grand_total(buckets: Iterable[MonthBucket]) -> Money:
    """Total across all buckets."""
    return Money(sum(bucket.total for bucket in buckets))
