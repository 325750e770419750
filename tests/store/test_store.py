"""Contract tests run against every expense store implementation."""

import sqlite3
from datetime import date, timedelta
from pathlib import Path

import pytest

from houseledger import ledger
from houseledger.domain.errors import RetrievalError, ValidationError
from houseledger.domain.models import ExpenseId, Money, NewExpense
from houseledger.domain.params import MAX_CENTS, MIN_CENTS
from houseledger.store.interface import ExpenseStore
from houseledger.store.schema import database_exists, init_database
from houseledger.store.sqlite import SqliteExpenseStore


def _new(amount: int = 1000, on: date = date(2024, 1, 15), name: str = "Groceries") -> NewExpense:
    return NewExpense(name=name, amount=Money(amount), date=on, category="Food")


class TestCrud:
    """Tests for add, get, update and delete."""

    def test_add_assigns_unique_ids(self, store: ExpenseStore) -> None:
        """Should assign a distinct id to every insert."""
        first = store.add(_new())
        second = store.add(_new())

        assert first.id != second.id
        assert store.get(first.id) == first
        assert store.get(second.id) == second

    def test_get_missing(self, store: ExpenseStore) -> None:
        """Should return None for an unknown id."""
        assert store.get(ExpenseId(999)) is None

    def test_update_replaces_all_fields(self, store: ExpenseStore) -> None:
        """Should replace every editable field and keep the id."""
        original = store.add(_new())
        replacement = NewExpense(name="Rent", amount=Money(-1), date=date(2023, 12, 31), category="Housing")

        updated = store.update(original.id, replacement)

        assert updated is not None
        assert updated.id == original.id
        assert store.get(original.id) == updated
        assert updated.name == "Rent"
        assert updated.amount == Money(-1)
        assert updated.date == date(2023, 12, 31)
        assert updated.category == "Housing"

    def test_update_missing(self, store: ExpenseStore) -> None:
        """Should return None when updating an unknown id."""
        assert store.update(ExpenseId(999), _new()) is None

    def test_delete(self, store: ExpenseStore) -> None:
        """Should remove the expense and report whether it existed."""
        expense = store.add(_new())

        assert store.delete(expense.id) is True
        assert store.get(expense.id) is None
        assert store.delete(expense.id) is False
        assert store.count_expenses() == 0


    def test_extreme_amounts_round_trip(self, store: ExpenseStore) -> None:
        """Should hold the largest and smallest 64-bit cent amounts exactly."""
        largest = store.add(_new(amount=MAX_CENTS))
        smallest = store.add(_new(amount=MIN_CENTS))

        assert store.get(largest.id).amount == MAX_CENTS  # type: ignore[union-attr]
        assert store.get(smallest.id).amount == MIN_CENTS  # type: ignore[union-attr]

    def test_oversized_amount_is_rejected_before_storing(self, store: ExpenseStore) -> None:
        """Should raise ValidationError and leave the store untouched."""
        with pytest.raises(ValidationError):
            ledger.add_expense(store, "Big", "1e20", "2024-01-01", "Home")

        assert store.count_expenses() == 0

class TestQueries:
    """Tests for range, scan and paging queries."""

    def test_expenses_between_is_half_open(self, store: ExpenseStore) -> None:
        """Should include the lower bound and exclude the upper bound."""
        store.add(_new(on=date(2024, 1, 31), name="before"))
        store.add(_new(on=date(2024, 2, 1), name="first"))
        store.add(_new(on=date(2024, 2, 29), name="leap"))
        store.add(_new(on=date(2024, 3, 1), name="after"))

        result = store.expenses_between(date(2024, 2, 1), date(2024, 3, 1))

        assert [expense.name for expense in result] == ["first", "leap"]

    def test_expenses_between_orders_by_date_then_id(self, store: ExpenseStore) -> None:
        """Should return a stable (date, id) order."""
        late = store.add(_new(on=date(2024, 2, 20)))
        early_a = store.add(_new(on=date(2024, 2, 3)))
        early_b = store.add(_new(on=date(2024, 2, 3)))

        result = store.expenses_between(date(2024, 2, 1), date(2024, 3, 1))

        assert [expense.id for expense in result] == [early_a.id, early_b.id, late.id]

    def test_all_expenses_and_count(self, store: ExpenseStore) -> None:
        """Should scan every record."""
        for day in range(1, 6):
            store.add(_new(amount=day, on=date(2024, 5, day)))

        assert store.count_expenses() == 5
        assert [expense.amount for expense in store.all_expenses()] == [1, 2, 3, 4, 5]

    def test_empty_store(self, store: ExpenseStore) -> None:
        """Should answer every query on an empty store."""
        assert store.all_expenses() == []
        assert store.count_expenses() == 0
        assert store.page_expenses(0, 10) == []
        assert store.expenses_between(date(2024, 1, 1), date(2024, 2, 1)) == []

    def test_page_expenses_newest_first(self, store: ExpenseStore) -> None:
        """Should slice the newest-first listing."""
        start = date(2024, 1, 1)
        for offset in range(25):
            store.add(_new(amount=offset, on=start + timedelta(days=offset)))

        first = store.page_expenses(0, 10)
        third = store.page_expenses(20, 10)
        beyond = store.page_expenses(30, 10)

        assert [expense.amount for expense in first] == list(range(24, 14, -1))
        assert [expense.amount for expense in third] == [4, 3, 2, 1, 0]
        assert beyond == []


class TestSqliteStore:
    """Tests specific to SqliteExpenseStore."""

    def test_amounts_are_stored_as_integer_cents(self, db_path: Path) -> None:
        """Should store exact integer cents."""
        store = SqliteExpenseStore(db_path)
        store.add(_new(amount=12345))

        conn = sqlite3.connect(db_path)
        try:
            value, kind = conn.execute("SELECT amount, typeof(amount) FROM expenses").fetchone()
        finally:
            conn.close()

        assert value == 12345
        assert kind == "integer"

    def test_missing_schema_raises_retrieval_error(self, tmp_path: Path) -> None:
        """Should surface query failures as RetrievalError."""
        store = SqliteExpenseStore(tmp_path / "empty.db")

        with pytest.raises(RetrievalError) as exc_info:
            store.all_expenses()

        assert isinstance(exc_info.value.__cause__, sqlite3.Error)

    def test_out_of_range_integer_raises_retrieval_error(self, db_path: Path) -> None:
        """Should wrap integer overflow on bind as RetrievalError."""
        store = SqliteExpenseStore(db_path)

        with pytest.raises(RetrievalError) as exc_info:
            store.add(_new(amount=MAX_CENTS + 1))

        assert isinstance(exc_info.value.__cause__, OverflowError)
        assert store.count_expenses() == 0

    def test_malformed_row_raises_retrieval_error(self, db_path: Path) -> None:
        """Should reject rows that are not valid expenses."""
        conn = sqlite3.connect(db_path)
        try:
            conn.execute("INSERT INTO expenses (name, amount, date, category) VALUES ('x', 1, 'garbage', 'y')")
            conn.commit()
        finally:
            conn.close()

        with pytest.raises(RetrievalError):
            SqliteExpenseStore(db_path).all_expenses()


class TestSchema:
    """Tests for schema initialisation."""

    def test_init_is_repeatable(self, tmp_path: Path) -> None:
        """Should be safe to run twice and keep data."""
        path = tmp_path / "nested" / "ledger.db"
        assert not database_exists(path)

        init_database(path)
        SqliteExpenseStore(path).add(_new())
        init_database(path)

        assert database_exists(path)
        assert SqliteExpenseStore(path).count_expenses() == 1
