from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from src.mess_attendance.mess_attendance.common.datetime_utils import attach_zone, now_in_zone, to_zone_naive


def test_late_utc_evening_is_next_day_in_kolkata():
    utc_now = datetime(2024, 1, 1, 23, 30, 42, 500_000, tzinfo=timezone.utc)

    local = now_in_zone("Asia/Kolkata", utc_now=utc_now)

    assert local.date() == date(2024, 1, 2)
    assert local == datetime(2024, 1, 2, 5, 0, 42)
    assert local.tzinfo is None


def test_same_instant_stays_on_the_utc_day():
    utc_now = datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)

    assert now_in_zone("UTC", utc_now=utc_now).date() == date(2024, 1, 1)


def test_naive_values_are_only_truncated():
    assert to_zone_naive(datetime(2024, 1, 1, 9, 0, 0, 1), "Asia/Kolkata") == datetime(2024, 1, 1, 9, 0, 0)


def test_attach_zone():
    aware = attach_zone(datetime(2024, 1, 2, 5, 0), "Asia/Kolkata")

    assert aware.tzinfo == ZoneInfo("Asia/Kolkata")
    assert aware.isoformat() == "2024-01-02T05:00:00+05:30"
    assert attach_zone(None, "UTC") is None
