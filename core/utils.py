"""
Utility functions for common operations.

Provides helper functions for:
- Lenient calendar-day parsing
- Currency and date formatting
- Transaction display text
"""
from __future__ import annotations
import datetime as dt
import re
from typing import Any, Optional, Union

import pandas as pd


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "NGN": "₦",
    "GHS": "₵",
    "KES": "KSh",
    "ZAR": "R",
    "INR": "₹",
    "CAD": "C$",
    "AUD": "A$",
}

# Fixed English abbreviations; strftime("%b") follows the process locale
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# A full calendar date, optionally followed by an ISO time part
_ISO_DAY_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]|$)")


def parse_day(value: Any) -> Optional[dt.date]:
    """
    Parse a value into a calendar day, ignoring any time-of-day component.

    Accepts ``date``/``datetime`` objects and ISO 8601 strings that carry a
    full calendar date (``"2024-01-15"``, ``"2024-01-15T10:30:00Z"``).
    Clock words, time-only text and partial dates such as ``"now"``,
    ``"12:30"`` or ``"2024"`` are rejected, so the result never depends on
    the current time. Never raises.

    Args:
        value: Value to parse

    Returns:
        date | None: The calendar day, or None when the value does not parse

    Examples:
        >>> parse_day("2024-01-15T23:59:00Z")
        datetime.date(2024, 1, 15)
        >>> parse_day("now") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not _ISO_DAY_PREFIX.match(text):
        return None

    try:
        ts = pd.to_datetime(text, format="ISO8601", errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts.date()


def currency_symbol(currency: str | None = None) -> str:
    """Display symbol for a currency code; unknown codes are returned as-is."""
    currency_code = (currency or "USD").upper().strip()
    return CURRENCY_SYMBOLS.get(currency_code, currency_code)


def format_currency(amount: Union[int, float], currency: str | None = None) -> str:
    """
    Format an amount with the currency symbol, two decimals and separators.

    Negative amounts keep their sign in front of the symbol. Unknown codes
    are used verbatim as the prefix.

    Examples:
        >>> format_currency(1234.56)
        "$1,234.56"
        >>> format_currency(-999.99, "EUR")
        "-€999.99"
    """
    symbol = currency_symbol(currency)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_short_date(value: Union[str, dt.date, None]) -> str:
    """Format as ``"Oct 1, 2024"``. Returns an empty string for unparseable input."""
    day = parse_day(value)
    if day is None:
        return ""
    return f"{MONTH_ABBR[day.month - 1]} {day.day}, {day.year}"


def format_date(value: Union[str, dt.date, None]) -> str:
    """Format as ``"Oct 01, 2024"`` for ledger rows."""
    day = parse_day(value)
    if day is None:
        return "Unknown date"
    return f"{MONTH_ABBR[day.month - 1]} {day.day:02d}, {day.year}"


def get_initials(first_name: str | None, last_name: str | None) -> str:
    first = (first_name or "")[:1].upper()
    last = (last_name or "")[:1].upper()
    return (first + last) or "U"


def get_transaction_title(transaction: Any) -> str:
    """
    Headline for a ledger row.

    Withdrawals are always "Cash withdrawal"; otherwise the product name wins,
    then the coffee tip label, then a generic fallback.
    """
    if transaction.type == "withdrawal":
        return "Cash withdrawal"

    metadata = transaction.metadata
    if metadata is not None and metadata.product_name:
        return metadata.product_name
    if metadata is not None and metadata.type == "coffee":
        return "Buy me a coffee"
    return "Payment received"


def get_transaction_subtitle(transaction: Any) -> str:
    """Second line of a ledger row: withdrawal status or counterparty name."""
    if transaction.type == "withdrawal":
        return "Successful" if transaction.status == "successful" else "Pending"

    metadata = transaction.metadata
    if metadata is not None and metadata.name:
        return metadata.name
    return "Unknown"
