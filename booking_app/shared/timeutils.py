"""Business-timezone helpers for appointment dates and report ranges"""

import calendar
from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

from ..config import APP_TIMEZONE, SLOT_END_HOUR, SLOT_MINUTES, SLOT_START_HOUR

BUSINESS_TZ = ZoneInfo(APP_TIMEZONE)


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """
    Convert an aware datetime to naive business-local time.

    Naive datetimes are assumed to be local already and are returned as-is.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(BUSINESS_TZ).replace(tzinfo=None)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Start (00:00:00) and end (23:59:59.999999) of a local calendar day"""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """First day 00:00:00 through last day 23:59:59 of a calendar month"""
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime(year, month, last_day, 23, 59, 59)


def slot_label(value: datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def working_slots() -> list[str]:
    """Half-hour labels from SLOT_START_HOUR up to (not including) SLOT_END_HOUR"""
    slots = []
    for hour in range(SLOT_START_HOUR, SLOT_END_HOUR):
        for minute in range(0, 60, SLOT_MINUTES):
            slots.append(f"{hour:02d}:{minute:02d}")
    return slots


def local_now() -> datetime:
    """Current wall-clock time in the business timezone, naive"""
    return datetime.now(BUSINESS_TZ).replace(tzinfo=None)
