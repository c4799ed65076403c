"""
Date-range helpers for the ledger header.

``describe_date_range`` turns filter bounds into the phrase shown after
"Your transactions for ..."; ``resolve_date_preset`` expands the named
shortcuts from the filter sheet into concrete bounds. Both take ``today``
explicitly and never read the clock.
"""
from __future__ import annotations
import datetime as dt
from typing import Optional, Tuple, Union

import pandas as pd

from core.logger import get_logger
from core.utils import format_short_date, parse_day

log = get_logger("analytics/date_ranges")

DateLike = Union[str, dt.date, dt.datetime, None]


def start_of_month(day: dt.date) -> dt.date:
    return day.replace(day=1)


def start_of_year(day: dt.date) -> dt.date:
    return day.replace(month=1, day=1)


def subtract_months(day: dt.date, months: int) -> dt.date:
    """Calendar month arithmetic; clamps to the last day of shorter months."""
    return (pd.Timestamp(day) - pd.DateOffset(months=months)).date()


def resolve_date_preset(preset: str, today: DateLike) -> Tuple[dt.date, dt.date]:
    """
    Expand a named preset into inclusive ``(date_from, date_to)`` bounds.

    Raises:
        ValueError: If the preset is unknown or ``today`` does not parse
    """
    anchor = parse_day(today)
    if anchor is None:
        raise ValueError(f"Invalid reference date: {today!r}")

    if preset == "today":
        start = anchor
    elif preset == "last7days":
        start = anchor - dt.timedelta(days=7)
    elif preset == "thisMonth":
        start = start_of_month(anchor)
    elif preset == "last3months":
        start = subtract_months(anchor, 3)
    elif preset == "thisYear":
        start = start_of_year(anchor)
    else:
        raise ValueError(f"Unknown date preset: {preset!r}")

    log.debug(f"Resolved date preset: preset={preset} from={start} to={anchor}")
    return start, anchor


def describe_date_range(date_from: DateLike, date_to: DateLike, today: DateLike) -> str:
    """
    Describe a date range in words.

    Rules are evaluated in order and the first match wins: named ranges that
    end today, then yesterday, a single day, open-ended ranges, and finally an
    explicit "from ... to ...". Bounds that fail to parse count as unset.

    Args:
        date_from: Inclusive lower bound, or None
        date_to: Inclusive upper bound, or None
        today: Reference day

    Returns:
        str: e.g. "All Time", "the last 7 days", "since Sep 15, 2024"

    Examples:
        >>> describe_date_range("2024-10-25", "2024-11-01", today="2024-11-01")
        'the last 7 days'
        >>> describe_date_range("2024-09-15", None, today="2024-11-01")
        'since Sep 15, 2024'
    """
    start = parse_day(date_from)
    end = parse_day(date_to)
    anchor = parse_day(today)

    if start is None and end is None:
        return "All Time"

    if anchor is not None and start is not None and end == anchor:
        if start == anchor:
            return "Today"
        if start == anchor - dt.timedelta(days=7):
            return "the last 7 days"
        if start == start_of_month(anchor):
            return "This Month"
        if start == subtract_months(anchor, 3):
            return "the last 3 months"
        if start == start_of_year(anchor):
            return "This Year"

    if start is not None and end is not None and start == end:
        if anchor is not None and start == anchor - dt.timedelta(days=1):
            return "Yesterday"
        return f"on {format_short_date(start)}"

    if end is None:
        return f"since {format_short_date(start)}"
    if start is None:
        return f"up to {format_short_date(end)}"

    return f"from {format_short_date(start)} to {format_short_date(end)}"
