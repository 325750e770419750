"""Helpers shared by the command modules."""

import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from houseledger.config import Settings, get_settings
from houseledger.domain.errors import LedgerError
from houseledger.domain.models import Money, format_money
from houseledger.store.schema import database_exists
from houseledger.store.sqlite import SqliteExpenseStore

console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{escape(message)}[/red]", style="bold")
    sys.exit(1)


def load_settings() -> Settings:
    try:
        return get_settings()
    except LedgerError as e:
        fail(f"Configuration error: {e}")


def open_store(settings: Settings) -> SqliteExpenseStore:
    """Open the configured database, exiting if it has not been initialised."""
    if not database_exists(settings.db_path):
        console.print("[red]Database not found. Run 'houseledger init' first.[/red]", style="bold")
        console.print(f"[dim]Expected location: {settings.db_path}[/dim]")
        sys.exit(1)
    return SqliteExpenseStore(settings.db_path)


def amount_markup(amount: Money, symbol: str) -> str:
    """Colour an amount: spending red, refunds and credits green."""
    if amount < 0:
        return f"[green]{format_money(amount, symbol)}[/green]"
    return f"[red]{format_money(amount, symbol)}[/red]"
