#!/usr/bin/env python3
"""
Tests for the running balance series.

Usage:
    python scripts/test_balance_series.py
    pytest scripts/test_balance_series.py
"""
from __future__ import annotations
import datetime as dt
import sys
from pathlib import Path

# Add project root to path
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from analytics.balance import build_balance_series
from models.schema import Transaction


def _tx(amount, type_="deposit", status="successful", date="2024-01-01") -> Transaction:
    return Transaction(amount=amount, type=type_, status=status, date=date)


def _pairs(points):
    return [(p.date.isoformat(), p.cumulative_balance) for p in points]


def test_empty_input_gives_empty_series():
    assert build_balance_series([]) == []


def test_no_successful_transactions_gives_empty_series():
    ledger = [_tx(1000, status="pending"), _tx(500, status="failed", date="2024-01-02")]
    assert build_balance_series(ledger) == []


def test_same_day_transactions_collapse_to_end_of_day_value():
    ledger = [_tx(1000, "deposit"), _tx(300, "withdrawal")]
    points = build_balance_series(ledger)
    assert _pairs(points) == [("2024-01-01", 700.0)]


def test_running_balance_across_days():
    ledger = [
        _tx(1000, "deposit", date="2024-01-01"),
        _tx(500, "deposit", date="2024-01-15"),
        _tx(200, "withdrawal", date="2024-01-20"),
    ]
    assert _pairs(build_balance_series(ledger)) == [
        ("2024-01-01", 1000.0),
        ("2024-01-15", 1500.0),
        ("2024-01-20", 1300.0),
    ]


def test_unsorted_input_is_sorted_by_date():
    ledger = [
        _tx(500, date="2024-01-15"),
        _tx(1000, date="2024-01-01"),
        _tx(200, date="2024-01-10"),
    ]
    points = build_balance_series(ledger)
    assert [p.date for p in points] == [dt.date(2024, 1, 1), dt.date(2024, 1, 10), dt.date(2024, 1, 15)]
    assert [p.cumulative_balance for p in points] == [1000.0, 1200.0, 1700.0]


def test_pending_and_failed_do_not_change_any_point():
    base = [_tx(1000, date="2024-01-01"), _tx(300, "withdrawal", date="2024-01-03")]
    noisy = base + [
        _tx(999, status="pending", date="2024-01-02"),
        _tx(50, "withdrawal", status="failed", date="2024-01-03"),
    ]
    assert build_balance_series(noisy) == build_balance_series(base)


def test_only_deposits_and_withdrawals_move_the_balance():
    # Chargebacks, cashbacks and referrals are listed in the ledger but do not
    # change the trend; their days still get a point at the carried balance.
    ledger = [
        _tx(100, "deposit", date="2024-01-01"),
        _tx(50, "chargeback", date="2024-01-02"),
        _tx(20, "cashback", date="2024-01-03"),
        _tx(5, "referral", date="2024-01-03"),
    ]
    assert _pairs(build_balance_series(ledger)) == [
        ("2024-01-01", 100.0),
        ("2024-01-02", 100.0),
        ("2024-01-03", 100.0),
    ]


def test_time_of_day_is_ignored():
    ledger = [_tx(100, date="2024-01-01T08:00:00Z"), _tx(40, "withdrawal", date="2024-01-01")]
    assert _pairs(build_balance_series(ledger)) == [("2024-01-01", 60.0)]


def test_unparseable_dates_are_excluded():
    ledger = [_tx(100, date="2024-01-01"), _tx(1000, date="garbage"), _tx(7, date=None)]
    assert _pairs(build_balance_series(ledger)) == [("2024-01-01", 100.0)]


def test_clock_words_and_partial_dates_are_excluded():
    # None of these name a calendar day, so none may land on today's date
    ledger = [
        _tx(10, date="now"),
        _tx(20, date="today"),
        _tx(30, date="12:30"),
        _tx(40, date="Jan"),
        _tx(50, date="2024"),
        _tx(60, date="15"),
        _tx(5, date="2024-03-01"),
    ]
    assert _pairs(build_balance_series(ledger)) == [("2024-03-01", 5.0)]


def test_balance_can_go_negative():
    ledger = [_tx(300, "withdrawal", date="2024-01-01"), _tx(100, date="2024-01-02")]
    assert _pairs(build_balance_series(ledger)) == [("2024-01-01", -300.0), ("2024-01-02", -200.0)]


def test_zero_amount_still_produces_a_point():
    assert _pairs(build_balance_series([_tx(0)])) == [("2024-01-01", 0.0)]


def test_build_is_idempotent():
    ledger = [_tx(10 * i, date=f"2024-02-{(i % 28) + 1:02d}") for i in range(50)]
    first = build_balance_series(ledger)
    second = build_balance_series(ledger)
    assert first == second
    assert len(first) == 28


def run_all_tests() -> int:
    tests = [obj for name, obj in sorted(globals().items()) if name.startswith("test_") and callable(obj)]
    passed = failed = 0
    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            failed += 1
            print(f"❌ FAIL: {test.__name__} - {e}")
        except Exception as e:
            failed += 1
            print(f"❌ ERROR: {test.__name__} - {type(e).__name__}: {e}")

    print(f"TEST RESULTS: {passed} passed, {failed} failed")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
