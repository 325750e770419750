"""SQLite-backed expense store."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path

from houseledger.domain.errors import RetrievalError
from houseledger.domain.models import Expense, ExpenseId, Money, NewExpense
from houseledger.log import get_logger
from houseledger.store.schema import get_db_path

logger = get_logger(__name__)

_COLUMNS = "id, name, amount, date, category"


def _row_to_expense(row: sqlite3.Row) -> Expense:
    """Convert a database row to an Expense.

    Raises:
        RetrievalError: If the row holds values that are not a valid expense.
    """
    try:
        return Expense(
            id=ExpenseId(row["id"]),
            name=row["name"],
            amount=Money(int(row["amount"])),
            date=date.fromisoformat(row["date"]),
            category=row["category"],
        )
    except (TypeError, ValueError) as e:
        raise RetrievalError(f"Malformed expense row {row['id']}: {e}") from e


class SqliteExpenseStore:
    """Expense store over a single SQLite file.

    Each operation opens and closes its own connection, so one instance can be
    shared by concurrent callers.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path if db_path is not None else get_db_path()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection with row factory, committing on success.

        Raises:
            RetrievalError: If the database cannot be opened or a statement fails.
        """
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            logger.error("store.connect_failed", db_path=str(self.db_path), error=str(e))
            raise RetrievalError(f"Cannot open database {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            logger.error("store.query_failed", db_path=str(self.db_path), error=str(e))
            raise RetrievalError(f"Database error: {e}") from e
        finally:
            conn.close()

    def add(self, expense: NewExpense) -> Expense:
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO expenses (name, amount, date, category) VALUES (?, ?, ?, ?)",
                (expense.name, expense.amount, expense.date.isoformat(), expense.category),
            )
            expense_id = ExpenseId(cursor.lastrowid)
        return Expense.from_new(expense_id, expense)

    def get(self, expense_id: ExpenseId) -> Expense | None:
        with self._connect() as conn:
            row = conn.execute(f"SELECT {_COLUMNS} FROM expenses WHERE id = ?", (expense_id,)).fetchone()
        return _row_to_expense(row) if row else None

    def update(self, expense_id: ExpenseId, expense: NewExpense) -> Expense | None:
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE expenses SET name = ?, amount = ?, date = ?, category = ? WHERE id = ?",
                (expense.name, expense.amount, expense.date.isoformat(), expense.category, expense_id),
            )
            updated = cursor.rowcount > 0
        return Expense.from_new(expense_id, expense) if updated else None

    def delete(self, expense_id: ExpenseId) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            return cursor.rowcount > 0

    def expenses_between(self, since: date, until: date) -> list[Expense]:
        with self._connect() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM expenses WHERE date >= ? AND date < ? ORDER BY date, id",
                (since.isoformat(), until.isoformat()),
            ).fetchall()
        return [_row_to_expense(row) for row in rows]

    def all_expenses(self) -> list[Expense]:
        with self._connect() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM expenses ORDER BY date, id").fetchall()
        return [_row_to_expense(row) for row in rows]

    def count_expenses(self) -> int:
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM expenses").fetchone()[0]

    def page_expenses(self, offset: int, limit: int) -> list[Expense]:
        with self._connect() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM expenses ORDER BY date DESC, id DESC LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
        return [_row_to_expense(row) for row in rows]
