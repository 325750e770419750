"""Domain type definitions for houseledger.

These types provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- ExpenseId: Store-assigned expense identifier
- Expense / NewExpense: A stored expense and its editable fields
- MonthBucket: A derived (month, year) total
- Period: A resolved calendar month
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import NewType

from houseledger.dates import month_label, month_window

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

ExpenseId = NewType("ExpenseId", int)

CENTS_PER_UNIT = 100


def to_decimal(amount: Money) -> Decimal:
    """Convert cents to a two-place Decimal (e.g. 1050 -> Decimal("10.50"))."""
    return Decimal(amount).scaleb(-2)


def format_money(amount: Money, symbol: str = "$") -> str:
    """Format cents for display with sign and thousands separator."""
    value = to_decimal(amount)
    if value < 0:
        return f"-{symbol}{abs(value):,.2f}"
    return f"{symbol}{value:,.2f}"


@dataclass(frozen=True)
class NewExpense:
    """The user-editable fields of an expense, before the store assigns an id."""

    name: str
    amount: Money
    date: date
    category: str


@dataclass(frozen=True)
class Expense:
    """Immutable expense record as held by the store."""

    id: ExpenseId
    name: str
    amount: Money
    date: date
    category: str

    @classmethod
    def from_new(cls, expense_id: ExpenseId, expense: NewExpense) -> "Expense":
        return cls(
            id=expense_id,
            name=expense.name,
            amount=expense.amount,
            date=expense.date,
            category=expense.category,
        )


@dataclass(frozen=True)
class MonthBucket:
    """Accumulated total for one calendar month."""

    month: int
    year: int
    total: Money


@dataclass(frozen=True)
class Period:
    """A resolved calendar month."""

    year: int
    month: int

    @property
    def start(self) -> date:
        return month_window(self.year, self.month)[0]

    @property
    def end(self) -> date:
        """First day of the following month (exclusive bound)."""
        return month_window(self.year, self.month)[1]

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)
