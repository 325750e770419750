"""Pure functions for paginating the expense list."""

from dataclasses import dataclass

from houseledger.domain.models import Expense


@dataclass(frozen=True)
class Page:
    """Immutable page of expenses."""

    items: list[Expense]
    page: int
    limit: int
    total_pages: int
    total_count: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def page_offset(page: int, limit: int) -> int:
    """Zero-based number of records to skip for a 1-based page."""
    return (page - 1) * limit


def total_pages(total_count: int, limit: int) -> int:
    """Number of pages needed for total_count records.

    An empty ledger has zero pages.
    """
    return -(-total_count // limit)
