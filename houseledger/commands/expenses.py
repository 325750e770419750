"""Expense management commands (add, edit, delete, show, list)."""

import typer
from rich.markup import escape
from rich.table import Table

from houseledger import ledger
from houseledger.commands.shared import amount_markup, console, fail, load_settings, open_store
from houseledger.domain.errors import LedgerError
from houseledger.domain.models import Expense, format_money, to_decimal


def render_expense(expense: Expense, symbol: str) -> None:
    console.print(f"  ID: {expense.id}")
    console.print(f"  Name: {escape(expense.name)}")
    console.print(f"  Amount: {format_money(expense.amount, symbol)}")
    console.print(f"  Date: {expense.date.isoformat()}")
    console.print(f"  Category: {escape(expense.category)}")


def add_command(name: str, amount: str, date: str, category: str) -> None:
    """Record a new expense.

    Args:
        name: Expense label.
        amount: Amount in currency units (e.g. 12.50). Negative for refunds.
        date: Expense date (YYYY-MM-DD, DD/MM/YYYY, or other formats).
        category: Free-form category label.
    """
    settings = load_settings()
    store = open_store(settings)

    try:
        expense = ledger.add_expense(store, name, amount, date, category)
    except LedgerError as e:
        fail(str(e))

    console.print("[green]✓[/green] Expense added:")
    render_expense(expense, settings.currency_symbol)


def edit_command(
    expense_id: str,
    name: str | None = None,
    amount: str | None = None,
    date: str | None = None,
    category: str | None = None,
) -> None:
    """Edit an expense. Fields not given keep their current value."""
    settings = load_settings()
    store = open_store(settings)

    try:
        current = ledger.get_expense(store, expense_id)
        expense = ledger.edit_expense(
            store,
            expense_id,
            name if name is not None else current.name,
            amount if amount is not None else to_decimal(current.amount),
            date if date is not None else current.date,
            category if category is not None else current.category,
        )
    except LedgerError as e:
        fail(str(e))

    console.print("[green]✓[/green] Expense updated:")
    render_expense(expense, settings.currency_symbol)


def delete_command(expense_id: str, yes: bool = False) -> None:
    """Delete an expense after confirmation."""
    settings = load_settings()
    store = open_store(settings)

    try:
        expense = ledger.get_expense(store, expense_id)

        if not yes:
            render_expense(expense, settings.currency_symbol)
            if not typer.confirm("\nDelete this expense?", default=False):
                console.print("[dim]Cancelled[/dim]")
                return

        ledger.delete_expense(store, expense.id)
    except LedgerError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Expense {expense.id} deleted")


def show_command(expense_id: str) -> None:
    """Show a single expense."""
    settings = load_settings()
    store = open_store(settings)

    try:
        expense = ledger.get_expense(store, expense_id)
    except LedgerError as e:
        fail(str(e))

    render_expense(expense, settings.currency_symbol)


def list_command(page: str | None = None, limit: str | None = None) -> None:
    """List expenses, newest first, one page at a time."""
    settings = load_settings()
    store = open_store(settings)

    try:
        result = ledger.list_page(store, page, limit, default_limit=settings.page_size)
    except LedgerError as e:
        fail(str(e))

    if result.total_count == 0:
        console.print("[yellow]No expenses found[/yellow]")
        return

    table = Table(title=f"Expenses (page {result.page} of {result.total_pages}, {result.total_count} total)")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for expense in result.items:
        table.add_row(
            str(expense.id),
            expense.date.isoformat(),
            escape(expense.name),
            escape(expense.category),
            amount_markup(expense.amount, settings.currency_symbol),
        )

    console.print(table)

    if not result.items:
        console.print(f"[yellow]Page {result.page} is past the last page ({result.total_pages})[/yellow]")
        return

    if result.has_previous:
        console.print(f"[dim]Previous: houseledger list --page {result.page - 1} --limit {result.limit}[/dim]")
    if result.has_next:
        console.print(f"[dim]Next: houseledger list --page {result.page + 1} --limit {result.limit}[/dim]")
