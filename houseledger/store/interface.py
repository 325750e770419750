"""Expense store interface.

The ledger core depends on this protocol rather than on a concrete database,
so it carries no connection lifecycle and can run against the in-memory store
in tests. Implementations raise RetrievalError when the backend fails.
"""

from datetime import date
from typing import Protocol

from houseledger.domain.models import Expense, ExpenseId, NewExpense


class ExpenseStore(Protocol):
    """Create, read, update, delete and query operations over expenses."""

    def add(self, expense: NewExpense) -> Expense:
        """Insert an expense and return it with its assigned id."""
        ...

    def get(self, expense_id: ExpenseId) -> Expense | None:
        """Look up an expense by id, or None if it does not exist."""
        ...

    def update(self, expense_id: ExpenseId, expense: NewExpense) -> Expense | None:
        """Replace all editable fields. Returns None if the id does not exist."""
        ...

    def delete(self, expense_id: ExpenseId) -> bool:
        """Delete an expense. Returns False if the id does not exist."""
        ...

    def expenses_between(self, since: date, until: date) -> list[Expense]:
        """Expenses with since <= date < until, ordered by (date, id)."""
        ...

    def all_expenses(self) -> list[Expense]:
        """Every expense, ordered by (date, id)."""
        ...

    def count_expenses(self) -> int:
        """Total number of expenses."""
        ...

    def page_expenses(self, offset: int, limit: int) -> list[Expense]:
        """Up to limit expenses after skipping offset, newest first (date DESC, id DESC)."""
        ...
