"""Error types raised by the ledger core.

The core never swallows these; the command layer decides how to show them.
"""


class LedgerError(Exception):
    """Base class for all houseledger errors."""


class ValidationError(LedgerError, ValueError):
    """Malformed or out-of-range input, reported before any store access."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid {field}: {message}")
        self.field = field
        self.message = message


class RetrievalError(LedgerError):
    """The expense store failed to answer a query."""


class NotFoundError(LedgerError, LookupError):
    """No expense exists with the requested id."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"Expense {expense_id} not found")
        self.expense_id = expense_id
