"""In-memory expense store.

Implements the same contract as SqliteExpenseStore without any I/O. Useful for
tests and for callers that want to run the ledger over data they already hold.
"""

from collections.abc import Iterable
from datetime import date

from houseledger.domain.models import Expense, ExpenseId, NewExpense


def _oldest_first(expense: Expense) -> tuple[date, int]:
    return (expense.date, expense.id)


class InMemoryExpenseStore:
    """Expense store backed by a dictionary keyed by id."""

    def __init__(self, expenses: Iterable[NewExpense] = ()) -> None:
        self._expenses: dict[ExpenseId, Expense] = {}
        self._next_id = 1
        for expense in expenses:
            self.add(expense)

    def add(self, expense: NewExpense) -> Expense:
        stored = Expense.from_new(ExpenseId(self._next_id), expense)
        self._expenses[stored.id] = stored
        self._next_id += 1
        return stored

    def get(self, expense_id: ExpenseId) -> Expense | None:
        return self._expenses.get(expense_id)

    def update(self, expense_id: ExpenseId, expense: NewExpense) -> Expense | None:
        if expense_id not in self._expenses:
            return None
        stored = Expense.from_new(expense_id, expense)
        self._expenses[expense_id] = stored
        return stored

    def delete(self, expense_id: ExpenseId) -> bool:
        return self._expenses.pop(expense_id, None) is not None

    def expenses_between(self, since: date, until: date) -> list[Expense]:
        return [expense for expense in self.all_expenses() if since <= expense.date < until]

    def all_expenses(self) -> list[Expense]:
        return sorted(self._expenses.values(), key=_oldest_first)

    def count_expenses(self) -> int:
        return len(self._expenses)

    def page_expenses(self, offset: int, limit: int) -> list[Expense]:
        newest_first = sorted(self._expenses.values(), key=_oldest_first, reverse=True)
        return newest_first[offset : offset + limit]
