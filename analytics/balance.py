"""Running-balance series for the balance trend chart."""
from __future__ import annotations
from typing import Iterable, List

import pandas as pd

from core.logger import get_logger
from models.schema import BalancePoint, Transaction

log = get_logger("analytics/balance")

# Only these types move the balance; chargebacks, cashbacks and referrals
# are listed in the ledger but contribute nothing to the trend.
BALANCE_SIGN = {
    "deposit": 1.0,
    "withdrawal": -1.0,
}


def signed_amount(transaction: Transaction) -> float:
    return BALANCE_SIGN.get(transaction.type, 0.0) * transaction.amount


def build_balance_series(transactions: Iterable[Transaction]) -> List[BalancePoint]:
    """
    Build the end-of-day running balance from raw ledger events.

    Only successful transactions with a parseable date are used. Events are
    stably sorted by day, accumulated in order, and collapsed to one point
    per day holding the balance after that day's last event. Days without
    events get no point.

    Args:
        transactions: Raw ledger events, in any order

    Returns:
        List[BalancePoint]: Points ascending by date; empty when nothing qualifies
    """
    successful = [t for t in transactions if t.status == "successful"]
    rows = [{"day": t.day, "signed": signed_amount(t)} for t in successful if t.day is not None]

    skipped = len(successful) - len(rows)
    if skipped:
        log.warning(f"Excluded {skipped} successful transactions with unparseable dates from balance series")

    if not rows:
        return []

    df = pd.DataFrame(rows)
    df = df.sort_values("day", kind="stable")
    df["balance"] = df["signed"].cumsum()
    end_of_day = df.groupby("day", sort=True)["balance"].last()

    points = [
        BalancePoint(date=day, cumulative_balance=float(balance))
        for day, balance in end_of_day.items()
    ]
    log.debug(f"Built balance series: points={len(points)} from transactions={len(rows)}")
    return points
