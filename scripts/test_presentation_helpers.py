#!/usr/bin/env python3
"""
Tests for ledger display helpers and CSV export rows.

Usage:
    python scripts/test_presentation_helpers.py
    pytest scripts/test_presentation_helpers.py
"""
from __future__ import annotations
import datetime as dt
import sys
from pathlib import Path

# Add project root to path
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from core.utils import (
    currency_symbol,
    format_currency,
    format_short_date,
    format_date,
    get_initials,
    get_transaction_subtitle,
    get_transaction_title,
    parse_day,
)
from models.schema import Transaction
from ui.components.balance_chart import balance_hovertemplate
from ui.components.transaction_list import transactions_to_frame


def _tx(**fields) -> Transaction:
    base = {"amount": 100, "type": "deposit", "status": "successful", "date": "2024-01-15"}
    base.update(fields)
    return Transaction.model_validate(base)


def test_withdrawal_title():
    assert get_transaction_title(_tx(type="withdrawal", metadata={"product_name": "Course"})) == "Cash withdrawal"


def test_product_name_wins_over_coffee():
    assert get_transaction_title(_tx(metadata={"product_name": "Course", "type": "coffee"})) == "Course"


def test_coffee_title():
    assert get_transaction_title(_tx(metadata={"type": "coffee"})) == "Buy me a coffee"


def test_default_title():
    assert get_transaction_title(_tx()) == "Payment received"


def test_withdrawal_subtitles():
    assert get_transaction_subtitle(_tx(type="withdrawal", status="successful")) == "Successful"
    assert get_transaction_subtitle(_tx(type="withdrawal", status="pending")) == "Pending"


def test_deposit_subtitle_uses_name_or_unknown():
    assert get_transaction_subtitle(_tx(metadata={"name": "John Doe"})) == "John Doe"
    assert get_transaction_subtitle(_tx(metadata={})) == "Unknown"
    assert get_transaction_subtitle(_tx()) == "Unknown"


def test_format_currency():
    assert format_currency(1234.56) == "$1,234.56"
    assert format_currency(0) == "$0.00"
    assert format_currency(100.5) == "$100.50"
    assert format_currency(1234567.89) == "$1,234,567.89"
    assert format_currency(-999.99) == "-$999.99"
    assert format_currency(10, "XYZ") == "XYZ10.00"


def test_format_date():
    assert format_date("2024-01-15T00:00:00.000Z") == "Jan 15, 2024"
    assert format_date("2024-05-05") == "May 05, 2024"
    assert format_date("garbage") == "Unknown date"


def test_parse_day_accepts_only_full_iso_dates():
    assert parse_day("2024-01-15") == dt.date(2024, 1, 15)
    assert parse_day(" 2024-01-15T23:59:00Z ") == dt.date(2024, 1, 15)
    assert parse_day("2024-01-15 08:30:00") == dt.date(2024, 1, 15)
    for text in ["now", "today", "12:30", "Jan", "2024", "2024-01", "15", "01/15/2024", ""]:
        assert parse_day(text) is None, text


def test_month_names_do_not_follow_locale():
    labels = [format_short_date(dt.date(2024, month, 1)) for month in range(1, 13)]
    assert [label.split()[0] for label in labels] == [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ]
    assert format_date(dt.date(2024, 12, 3)) == "Dec 03, 2024"


def test_chart_hover_uses_configured_currency():
    assert currency_symbol("eur") == "€"
    assert balance_hovertemplate("EUR") == "%{x|%b %d, %Y}<br>€%{y:,.2f}<extra></extra>"
    assert "NGN" not in balance_hovertemplate("ngn")
    assert balance_hovertemplate("XYZ").startswith("%{x|%b %d, %Y}<br>XYZ")


def test_initials():
    assert get_initials("olivier", "jones") == "OJ"
    assert get_initials("", None) == "U"


def test_export_frame_columns_and_order():
    frame = transactions_to_frame([
        _tx(amount=5, date="2024-01-15T10:00:00Z", payment_reference="abc"),
        _tx(amount=7, type="withdrawal", date="bad"),
    ])
    assert list(frame.columns) == ["date", "type", "status", "amount", "title", "counterparty", "payment_reference"]
    assert frame["date"].tolist() == ["2024-01-15", "bad"]
    assert frame["title"].tolist() == ["Payment received", "Cash withdrawal"]


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
