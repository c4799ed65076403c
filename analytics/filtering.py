"""Transaction filtering by date range, category and status."""
from __future__ import annotations
import datetime as dt
from typing import FrozenSet, Iterable, List, Optional

from core.logger import get_logger
from models.filters import CATEGORY_TYPE_MAP, FilterCriteria
from models.schema import Transaction

log = get_logger("analytics/filtering")


def categories_to_types(categories: Iterable[str]) -> FrozenSet[str]:
    """
    Translate UI category tags into the transaction types they select.

    Tags that map to the same type collapse; unknown tags select nothing.

    Examples:
        >>> sorted(categories_to_types(["store", "tipped", "refer"]))
        ['deposit', 'referral']
    """
    return frozenset(CATEGORY_TYPE_MAP[tag] for tag in categories if tag in CATEGORY_TYPE_MAP)


def count_unparseable_dates(transactions: Iterable[Transaction]) -> int:
    """Number of transactions whose date does not resolve to a calendar day."""
    return sum(1 for t in transactions if t.day is None)


def _matches_date(transaction: Transaction, date_from: Optional[dt.date], date_to: Optional[dt.date]) -> bool:
    if date_from is None and date_to is None:
        return True
    day = transaction.day
    if day is None:
        return False
    if date_from is not None and day < date_from:
        return False
    # Upper bound is exclusive of the following day so the whole end day is kept
    if date_to is not None and not day < date_to + dt.timedelta(days=1):
        return False
    return True


def filter_transactions(transactions: Iterable[Transaction], criteria: FilterCriteria) -> List[Transaction]:
    """
    Apply filter criteria to a list of transactions.

    Dimensions are combined with AND, values inside a dimension with OR.
    Unset or empty selections do not restrict. The result keeps the input
    order and is the same list of objects, never copies.

    Args:
        transactions: Raw ledger events
        criteria: Active filter criteria

    Returns:
        List[Transaction]: Matching transactions in input order
    """
    items = list(transactions)

    allowed_types: Optional[FrozenSet[str]] = None
    if criteria.categories:
        allowed_types = categories_to_types(criteria.categories)
        unknown = sorted(tag for tag in criteria.categories if tag not in CATEGORY_TYPE_MAP)
        if unknown:
            log.debug(f"Ignoring unknown category tags: {unknown}")

    allowed_statuses: Optional[FrozenSet[str]] = criteria.statuses or None

    result = [
        t for t in items
        if _matches_date(t, criteria.date_from, criteria.date_to)
        and (allowed_types is None or t.type in allowed_types)
        and (allowed_statuses is None or t.status in allowed_statuses)
    ]

    if criteria.has_date_bound:
        skipped = count_unparseable_dates(items)
        if skipped:
            log.warning(f"Excluded {skipped} transactions with unparseable dates from date filter")

    log.debug(f"Filtered transactions: kept={len(result)} total={len(items)}")
    return result
