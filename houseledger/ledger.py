"""Ledger operations over an injected expense store.

Every function takes the store as its first argument and keeps no state of its
own. Raw inputs are validated before the store is touched; store failures
propagate as RetrievalError without retries.
"""

from datetime import date
from decimal import Decimal

from houseledger import dates
from houseledger.domain.aggregate import group_by_month, month_buckets
from houseledger.domain.errors import NotFoundError
from houseledger.domain.models import Expense, Money, MonthBucket, NewExpense
from houseledger.domain.paging import Page, page_offset, total_pages
from houseledger.domain.params import (
    DEFAULT_PAGE_SIZE,
    RawValue,
    parse_amount,
    parse_category,
    parse_date,
    parse_expense_id,
    parse_limit,
    parse_month,
    parse_name,
    parse_page,
    parse_year,
)
from houseledger.domain.summary import MonthSummary, resolve_period, summarize
from houseledger.log import get_logger
from houseledger.store.interface import ExpenseStore

logger = get_logger(__name__)

AmountInput = str | int | float | Decimal


def monthly_totals(store: ExpenseStore) -> dict[str, Money]:
    """Total spent per month across the whole ledger.

    Args:
        store: Expense store to read from.

    Returns:
        Mapping of "month/year" to total in cents, oldest month first.

    Raises:
        RetrievalError: If the store query fails.
    """
    totals = group_by_month(store.all_expenses())
    logger.debug("monthly_totals.computed", buckets=len(totals))
    return totals


def monthly_buckets(store: ExpenseStore) -> list[MonthBucket]:
    """Same as monthly_totals, as typed rows for display."""
    buckets = month_buckets(store.all_expenses())
    logger.debug("monthly_buckets.computed", buckets=len(buckets))
    return buckets


def month_summary(
    store: ExpenseStore,
    month: RawValue = None,
    year: RawValue = None,
    today: date | None = None,
) -> MonthSummary:
    """Expenses and total for one calendar month.

    Args:
        store: Expense store to read from.
        month: Month of year (1-12) as int or string. Defaults to the current month.
        year: Year as int or string. Defaults to the current year.
        today: Reference date for the defaults. Read from the local clock if None.

    Returns:
        MonthSummary with the records in [first of month, first of next month).

    Raises:
        ValidationError: If month or year is malformed or out of range.
        RetrievalError: If the store query fails.
    """
    parsed_month = parse_month(month)
    parsed_year = parse_year(year)

    period = resolve_period(parsed_month, parsed_year, today or dates.today())
    logger.debug("summary.resolved", month=period.month, year=period.year)

    expenses = store.expenses_between(period.start, period.end)
    return summarize(period, expenses)


def list_page(
    store: ExpenseStore,
    page: RawValue = None,
    limit: RawValue = None,
    default_limit: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """One page of the expense list, newest first.

    Args:
        store: Expense store to read from.
        page: 1-based page number. Defaults to 1.
        limit: Records per page. Defaults to default_limit.
        default_limit: Page size used when limit is not given.

    Returns:
        Page with the slice and page bookkeeping. A page past the end has no
        items but still reports the real page count.

    Raises:
        ValidationError: If page or limit is malformed or not positive.
        RetrievalError: If a store query fails.
    """
    parsed_page = parse_page(page)
    parsed_limit = parse_limit(limit, default=default_limit)

    total_count = store.count_expenses()
    items = store.page_expenses(page_offset(parsed_page, parsed_limit), parsed_limit)
    logger.debug("page.fetched", page=parsed_page, limit=parsed_limit, items=len(items), total=total_count)

    return Page(
        items=items,
        page=parsed_page,
        limit=parsed_limit,
        total_pages=total_pages(total_count, parsed_limit),
        total_count=total_count,
    )


def build_expense(name: str, amount: AmountInput, date_value: str | date, category: str) -> NewExpense:
    """Validate raw fields into a NewExpense.

    Raises:
        ValidationError: If any field is missing or malformed.
    """
    return NewExpense(
        name=parse_name(name),
        amount=parse_amount(amount),
        date=parse_date(date_value),
        category=parse_category(category),
    )


def add_expense(
    store: ExpenseStore, name: str, amount: AmountInput, date_value: str | date, category: str
) -> Expense:
    """Validate and record a new expense."""
    expense = store.add(build_expense(name, amount, date_value, category))
    logger.debug("expense.added", expense_id=expense.id)
    return expense


def get_expense(store: ExpenseStore, expense_id: str | int) -> Expense:
    """Look up an expense.

    Raises:
        ValidationError: If the id is malformed.
        NotFoundError: If no expense has this id.
    """
    parsed_id = parse_expense_id(expense_id)
    expense = store.get(parsed_id)
    if expense is None:
        raise NotFoundError(parsed_id)
    return expense


def edit_expense(
    store: ExpenseStore,
    expense_id: str | int,
    name: str,
    amount: AmountInput,
    date_value: str | date,
    category: str,
) -> Expense:
    """Replace all four editable fields of an expense.

    Raises:
        ValidationError: If the id or any field is malformed.
        NotFoundError: If no expense has this id.
    """
    parsed_id = parse_expense_id(expense_id)
    updated = store.update(parsed_id, build_expense(name, amount, date_value, category))
    if updated is None:
        raise NotFoundError(parsed_id)
    logger.debug("expense.updated", expense_id=parsed_id)
    return updated


def delete_expense(store: ExpenseStore, expense_id: str | int) -> None:
    """Remove an expense.

    Raises:
        ValidationError: If the id is malformed.
        NotFoundError: If no expense has this id.
    """
    parsed_id = parse_expense_id(expense_id)
    if not store.delete(parsed_id):
        raise NotFoundError(parsed_id)
    logger.debug("expense.deleted", expense_id=parsed_id)
