"""Date utilities for houseledger.

Pure functions for month window calculations and formatting.
"""

from datetime import date, timedelta


def month_window(year: int, month: int) -> tuple[date, date]:
    """Calculate the half-open date window covering a month.

    Args:
        year: Calendar year.
        month: Month of year (1-12).

    Returns:
        Tuple of (since, until) where:
        - since: First day of the month
        - until: First day of the next month (December rolls into January)

    Raises:
        ValueError: If month is not between 1 and 12.
    """
    since = date(year, month, 1)
    until = (since.replace(day=28) + timedelta(days=4)).replace(day=1)
    return since, until


def month_label(year: int, month: int) -> str:
    """Human-readable month (e.g., "January 2025")."""
    return date(year, month, 1).strftime("%B %Y")


def today() -> date:
    """Current date on the local clock, read at call time."""
    return date.today()
