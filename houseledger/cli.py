"""CLI entry point for houseledger."""

import typer

from houseledger.commands.admin import backup_command, init_command
from houseledger.commands.expenses import add_command, delete_command, edit_command, list_command, show_command
from houseledger.commands.report import months_command, summary_command
from houseledger.log import configure_logging

app = typer.Typer(
    name="houseledger",
    help="Household expense ledger with monthly totals",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
) -> None:
    """Household expense ledger with monthly totals."""
    configure_logging(verbose)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.houseledger/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
    migrate: bool = typer.Option(False, "--migrate", help="Update the database schema only"),
) -> None:
    """Initialize houseledger database and configuration."""
    init_command(force, migrate)


@app.command()
def add(
    name: str,
    amount: str = typer.Argument(..., help="Amount, e.g. 12.50 (negative for refunds)"),
    date: str = typer.Argument(..., help="Date (YYYY-MM-DD or DD/MM/YYYY)"),
    category: str = typer.Argument(...),
) -> None:
    """Record a new expense."""
    add_command(name, amount, date, category)


@app.command()
def edit(
    expense_id: str = typer.Argument(..., metavar="ID"),
    name: str = typer.Option(None, "--name", help="New name"),
    amount: str = typer.Option(None, "--amount", help="New amount"),
    date: str = typer.Option(None, "--date", help="New date"),
    category: str = typer.Option(None, "--category", help="New category"),
) -> None:
    """Edit an expense."""
    edit_command(expense_id, name, amount, date, category)


@app.command()
def delete(
    expense_id: str = typer.Argument(..., metavar="ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete an expense."""
    delete_command(expense_id, yes)


@app.command()
def show(
    expense_id: str = typer.Argument(..., metavar="ID"),
) -> None:
    """Show a single expense."""
    show_command(expense_id)


@app.command(name="list")
def list_expenses(
    page: str = typer.Option(None, "--page", "-p", help="Page number (default: 1)"),
    limit: str = typer.Option(None, "--limit", "-l", help="Expenses per page (default: from config)"),
) -> None:
    """List your expenses, newest first."""
    list_command(page, limit)


@app.command()
def months(
    histogram: bool = typer.Option(True, help="Show histogram of monthly totals"),
) -> None:
    """Show your total spending per month."""
    months_command(histogram)


@app.command()
def summary(
    month: str = typer.Option(None, "--month", "-m", help="Month 1-12 (default: current month)"),
    year: str = typer.Option(None, "--year", "-y", help="Year (default: current year)"),
) -> None:
    """Show the expenses and total for a month."""
    summary_command(month, year)


if __name__ == "__main__":
    app()
