"""Shared fixtures for houseledger tests."""

from pathlib import Path

import pytest

from houseledger.store.interface import ExpenseStore
from houseledger.store.memory import InMemoryExpenseStore
from houseledger.store.schema import init_database
from houseledger.store.sqlite import SqliteExpenseStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "houseledger.db"
    init_database(path)
    return path


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest, db_path: Path) -> ExpenseStore:
    """An empty store of each implementation."""
    if request.param == "memory":
        return InMemoryExpenseStore()
    return SqliteExpenseStore(db_path)
