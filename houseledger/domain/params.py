"""Boundary parsing for loosely typed inputs.

Command-line options and query parameters arrive as strings (or, from other
callers, plain numbers). Everything is converted to the core's strict types
here, before any store access. Absent values (None) take the documented
default; present but malformed values raise ValidationError and are never
coerced or clamped.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, localcontext

import pandas as pd

from houseledger.domain.errors import ValidationError
from houseledger.domain.models import CENTS_PER_UNIT, ExpenseId, Money

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

MIN_YEAR = 1
# December of MAX_YEAR still needs January 1st of the next year as its upper bound
MAX_YEAR = 9998

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# Commas are only accepted as thousands separators ("1,234.56"), never as a decimal mark
_THOUSANDS_RE = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")

# Amounts are stored as signed 64-bit integers of cents
MIN_CENTS = -(2**63)
MAX_CENTS = 2**63 - 1

RawValue = str | int | None


def parse_int(value: str | int, field: str) -> int:
    """Parse an integer given as an int or a base-10 string.

    Args:
        value: Raw value.
        field: Field name used in error messages.

    Returns:
        Parsed integer.

    Raises:
        ValidationError: If the value is not an integer (floats, booleans and
            strings such as "1.5" or "abc" are all rejected).
    """
    if isinstance(value, bool):
        raise ValidationError(field, f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip())
    raise ValidationError(field, f"expected an integer, got {value!r}")


def parse_page(value: RawValue) -> int:
    """Parse a 1-based page number, defaulting to the first page."""
    if value is None:
        return DEFAULT_PAGE
    page = parse_int(value, "page")
    if page < 1:
        raise ValidationError("page", f"must be a positive integer, got {page}")
    return page


def parse_limit(value: RawValue, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Parse the number of records per page.

    Args:
        value: Raw value, or None to use the default.
        default: Page size used when value is None.

    Returns:
        Page size between 1 and MAX_PAGE_SIZE.

    Raises:
        ValidationError: If the value is not an integer or out of range.
    """
    if value is None:
        return default
    limit = parse_int(value, "limit")
    if limit < 1:
        raise ValidationError("limit", f"must be a positive integer, got {limit}")
    if limit > MAX_PAGE_SIZE:
        raise ValidationError("limit", f"must be at most {MAX_PAGE_SIZE}, got {limit}")
    return limit


def parse_month(value: RawValue) -> int | None:
    """Parse a month-of-year (1-12). None means "not given"."""
    if value is None:
        return None
    month = parse_int(value, "month")
    if not 1 <= month <= 12:
        raise ValidationError("month", f"must be between 1 and 12, got {month}")
    return month


def parse_year(value: RawValue) -> int | None:
    """Parse a calendar year. None means "not given"."""
    if value is None:
        return None
    year = parse_int(value, "year")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError("year", f"must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
    return year


def parse_expense_id(value: str | int) -> ExpenseId:
    """Parse an expense identifier."""
    expense_id = parse_int(value, "id")
    if expense_id < 1:
        raise ValidationError("id", f"must be a positive integer, got {expense_id}")
    return ExpenseId(expense_id)


def parse_amount(value: str | int | float | Decimal) -> Money:
    """Parse a monetary amount into cents.

    Zero and negative amounts are valid entries. Amounts that cannot be
    represented exactly in cents are rejected instead of rounded.

    Args:
        value: Amount in currency units (e.g. "12.50", -3, Decimal("0.99")).

    Returns:
        Amount in cents.

    Raises:
        ValidationError: If the amount is malformed, not finite, has more
            than two significant decimal places, or does not fit in 64 bits
            of cents.
    """
    if isinstance(value, bool):
        raise ValidationError("amount", f"expected a number, got {value!r}")

    text = str(value).strip()
    if "," in text:
        if not _THOUSANDS_RE.match(text):
            raise ValidationError("amount", f"use '.' as the decimal mark, got {value!r}")
        text = text.replace(",", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError("amount", f"expected a number, got {value!r}") from None

    if not amount.is_finite():
        raise ValidationError("amount", f"must be finite, got {value!r}")

    # Anything above 10**17 units is already past MAX_CENTS
    if amount and amount.adjusted() > 17:
        raise ValidationError("amount", f"is too large, got {value!r}")

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 3)
        cents = amount * CENTS_PER_UNIT

    if cents != cents.to_integral_value():
        raise ValidationError("amount", f"must have at most two decimal places, got {value!r}")

    if not MIN_CENTS <= cents <= MAX_CENTS:
        raise ValidationError("amount", f"is too large, got {value!r}")

    return Money(int(cents))


def parse_date(value: str | date) -> date:
    """Parse an expense date.

    ISO dates (YYYY-MM-DD) are read directly; anything else is handed to
    pandas with day-first parsing (DD/MM/YYYY, DD-MM-YYYY, "15 Feb 2024"...).

    Raises:
        ValidationError: If the value is not a recognisable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        raise ValidationError("date", "must not be empty")

    if _ISO_DATE_RE.match(text):
        try:
            return date.fromisoformat(text)
        except ValueError as e:
            raise ValidationError("date", f"unrecognised date {text!r}") from e

    try:
        parsed = pd.to_datetime(text, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise ValidationError("date", f"unrecognised date {text!r}") from e

    if pd.isna(parsed):
        raise ValidationError("date", f"unrecognised date {text!r}")
    return parsed.date()


def parse_label(value: str, field: str) -> str:
    """Parse a required free-text label (name or category)."""
    if value is None or not str(value).strip():
        raise ValidationError(field, "must not be empty")
    return str(value).strip()


def parse_name(value: str) -> str:
    return parse_label(value, "name")


def parse_category(value: str) -> str:
    return parse_label(value, "category")
