from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_in_zone(tz_name: str, *, utc_now: Optional[datetime] = None) -> datetime:
    """Current wall-clock time in `tz_name`, naive and truncated to whole seconds.

    Records are stored in MySQL DATETIME(0) columns, which carry neither a zone
    nor a fraction, so every timestamp the service writes is expressed in the one
    configured zone at second precision.
    `utc_now` pins the instant so tests can check day boundaries.
    """
    instant = utc_now or datetime.now(timezone.utc)
    return to_zone_naive(instant, tz_name)


def to_zone_naive(value: datetime, tz_name: str) -> datetime:
    """Express `value` as a naive wall-clock time in `tz_name` (naive input is taken as-is)."""
    if value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(tz_name)).replace(tzinfo=None)
    return value.replace(microsecond=0)


def attach_zone(value: Optional[datetime], tz_name: str) -> Optional[datetime]:
    """Stored naive wall-clock time -> aware datetime, so isoformat() carries the offset."""
    if value is None:
        return None
    return value.replace(tzinfo=ZoneInfo(tz_name))


def format_minutes(total_minutes: float) -> str:
    """Format a duration as "<H>h <M>m"."""
    minutes = int(round(total_minutes))
    return f"{minutes // 60}h {minutes % 60}m"
