"""Domain models and types for houseledger.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from houseledger.domain.errors import LedgerError, NotFoundError, RetrievalError, ValidationError
from houseledger.domain.models import Expense, ExpenseId, Money, MonthBucket, NewExpense, Period

__all__ = [
    "Expense",
    "ExpenseId",
    "LedgerError",
    "Money",
    "MonthBucket",
    "NewExpense",
    "NotFoundError",
    "Period",
    "RetrievalError",
    "ValidationError",
]
