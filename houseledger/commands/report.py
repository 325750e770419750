"""Report commands for monthly totals and the month summary."""

from rich.markup import escape
from rich.table import Table

from houseledger import ledger
from houseledger.commands.shared import amount_markup, console, fail, load_settings, open_store
from houseledger.domain.aggregate import bucket_key, grand_total
from houseledger.domain.errors import LedgerError
from houseledger.domain.models import Money, format_money


def calculate_histogram_bar_length(amount: Money, max_amount: Money, bar_width: int) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Largest absolute amount in the dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)


def months_command(histogram: bool = True) -> None:
    """Show total spending for every month, oldest first."""
    settings = load_settings()
    store = open_store(settings)

    try:
        buckets = ledger.monthly_buckets(store)
    except LedgerError as e:
        fail(str(e))

    if not buckets:
        console.print("[dim]No expenses recorded yet[/dim]")
        return

    max_amount = Money(max(abs(bucket.total) for bucket in buckets))
    bar_width = 30

    table = Table(title="Monthly expenses")
    table.add_column("Month", style="cyan")
    table.add_column("Total", justify="right")
    if histogram:
        table.add_column("", style="red")

    for bucket in buckets:
        row = [bucket_key(bucket.month, bucket.year), format_money(bucket.total, settings.currency_symbol)]
        if histogram:
            row.append("█" * calculate_histogram_bar_length(bucket.total, max_amount, bar_width))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {format_money(grand_total(buckets), settings.currency_symbol)}")


def summary_command(month: str | None = None, year: str | None = None) -> None:
    """Show the expenses and total for one month (default: the current month)."""
    settings = load_settings()
    store = open_store(settings)

    try:
        summary = ledger.month_summary(store, month, year)
    except LedgerError as e:
        fail(str(e))

    console.print(f"[bold cyan]{summary.period.label}[/bold cyan]\n")

    if not summary.expenses:
        console.print("[yellow]No expenses for this month[/yellow]")
    else:
        table = Table(title=f"{len(summary.expenses)} expenses")
        table.add_column("ID", style="dim", justify="right")
        table.add_column("Date", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Category", style="magenta")
        table.add_column("Amount", justify="right")

        for expense in summary.expenses:
            table.add_row(
                str(expense.id),
                expense.date.isoformat(),
                escape(expense.name),
                escape(expense.category),
                amount_markup(expense.amount, settings.currency_symbol),
            )

        console.print(table)

    console.print(f"\n[bold]Total:[/bold] {format_money(summary.total, settings.currency_symbol)}")
