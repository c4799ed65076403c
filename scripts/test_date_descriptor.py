#!/usr/bin/env python3
"""
Tests for date-range descriptions and preset expansion.

Usage:
    python scripts/test_date_descriptor.py
    pytest scripts/test_date_descriptor.py
"""
from __future__ import annotations
import datetime as dt
import sys
from pathlib import Path

import pytest

# Add project root to path
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from analytics.date_ranges import describe_date_range, resolve_date_preset, subtract_months
from core.utils import format_short_date

TODAY = "2024-11-01"


def test_all_time_when_both_unset():
    assert describe_date_range(None, None, TODAY) == "All Time"


def test_today():
    assert describe_date_range("2024-11-01", "2024-11-01", TODAY) == "Today"


def test_last_seven_days():
    assert describe_date_range("2024-10-25", "2024-11-01", TODAY) == "the last 7 days"


def test_yesterday():
    assert describe_date_range("2024-10-31", "2024-10-31", TODAY) == "Yesterday"


def test_since():
    assert describe_date_range("2024-09-15", None, TODAY) == "since Sep 15, 2024"


def test_up_to():
    assert describe_date_range(None, "2024-10-20", TODAY) == "up to Oct 20, 2024"


def test_single_other_day():
    assert describe_date_range("2024-10-20", "2024-10-20", TODAY) == "on Oct 20, 2024"


def test_custom_range():
    assert describe_date_range("2024-10-01", "2024-10-15", TODAY) == "from Oct 1, 2024 to Oct 15, 2024"


def test_this_month_last_three_months_and_this_year():
    today = dt.date(2024, 11, 15)
    assert describe_date_range(dt.date(2024, 11, 1), today, today) == "This Month"
    assert describe_date_range(dt.date(2024, 8, 15), today, today) == "the last 3 months"
    assert describe_date_range(dt.date(2024, 1, 1), today, today) == "This Year"


def test_first_match_wins_on_first_of_month():
    # Start of month equals today, so "Today" is chosen over "This Month"
    assert describe_date_range("2024-11-01", "2024-11-01", TODAY) == "Today"


def test_named_ranges_require_end_today():
    assert describe_date_range("2024-10-24", "2024-10-31", TODAY) == "from Oct 24, 2024 to Oct 31, 2024"


def test_accepts_datetimes_and_ignores_time_of_day():
    start = dt.datetime(2024, 10, 25, 18, 45)
    end = "2024-11-01T09:00:00Z"
    assert describe_date_range(start, end, dt.datetime(2024, 11, 1, 23, 0)) == "the last 7 days"


def test_unparseable_bounds_count_as_unset():
    assert describe_date_range("nope", None, TODAY) == "All Time"
    assert describe_date_range("2024-09-15", "garbage", TODAY) == "since Sep 15, 2024"


def test_short_date_format_has_no_zero_padding():
    assert format_short_date("2024-10-01") == "Oct 1, 2024"
    assert format_short_date(dt.date(2024, 5, 5)) == "May 5, 2024"


def test_presets_round_trip_to_their_labels():
    today = dt.date(2024, 11, 15)
    expected = {
        "today": "Today",
        "last7days": "the last 7 days",
        "thisMonth": "This Month",
        "last3months": "the last 3 months",
        "thisYear": "This Year",
    }
    for preset, label in expected.items():
        start, end = resolve_date_preset(preset, today)
        assert end == today
        assert describe_date_range(start, end, today) == label, preset


def test_month_subtraction_clamps_to_month_end():
    assert subtract_months(dt.date(2024, 5, 31), 3) == dt.date(2024, 2, 29)
    assert subtract_months(dt.date(2023, 5, 31), 3) == dt.date(2023, 2, 28)


def test_unknown_preset_raises():
    with pytest.raises(ValueError):
        resolve_date_preset("lastDecade", TODAY)


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
