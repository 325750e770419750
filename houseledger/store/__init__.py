"""Database store layer - provides persistence for the application.

This module re-exports the store implementations and schema helpers.
"""

from houseledger.store.interface import ExpenseStore
from houseledger.store.memory import InMemoryExpenseStore
from houseledger.store.schema import database_exists, get_db_path, init_database
from houseledger.store.sqlite import SqliteExpenseStore

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Stores
    "ExpenseStore",
    "InMemoryExpenseStore",
    "SqliteExpenseStore",
]
