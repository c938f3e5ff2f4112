"""Calendar helpers shared by the aggregators and the dashboard.

Months are zero-based everywhere (January == 0), days are 1-based and date
keys are ``YYYY-MM-DD`` strings. Keys of that shape sort lexicographically in
chronological order, so past/today checks are plain string comparisons.
"""

import calendar
from datetime import date, datetime
from typing import Optional, Tuple

import pytz

DEFAULT_TIMEZONE = "Asia/Kolkata"
WEEK_BUCKETS = 4
DATE_KEY_FORMAT = "%Y-%m-%d"

# Fixed English names; strftime %a/%b follow LC_TIME
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month + 1)[1]


def format_date_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def is_today(date_key: str, today_key: str) -> bool:
    return date_key == today_key


def is_past_date(date_key: str, today_key: str) -> bool:
    return date_key < today_key


def week_bucket_index(day_index: int) -> int:
    """Fold a day index into one of four week buckets.

    Days 29-31 share the last bucket with days 22-28.
    """
    return min(WEEK_BUCKETS - 1, day_index // 7)


def month_date_range(year: int, month: int) -> Tuple[str, str]:
    """First and last date keys of a month."""
    return (
        format_date_key(year, month, 1),
        format_date_key(year, month, days_in_month(year, month)),
    )


def get_timezone(tz_name: str = DEFAULT_TIMEZONE):
    return pytz.timezone(tz_name)


def today_parts(tz_name: str = DEFAULT_TIMEZONE, now: Optional[datetime] = None) -> Tuple[int, int, int]:
    """Return ``(year, zero-based month, day)`` for "today" in ``tz_name``.

    ``now`` may be naive (taken as UTC) or aware; omitted, the wall clock is
    read. This is the only place the engine's callers touch the clock.
    """
    tz = get_timezone(tz_name)
    if now is None:
        local = datetime.now(tz)
    elif now.tzinfo is None:
        local = pytz.utc.localize(now).astimezone(tz)
    else:
        local = now.astimezone(tz)
    return local.year, local.month - 1, local.day


def today_key(tz_name: str = DEFAULT_TIMEZONE, now: Optional[datetime] = None) -> str:
    return format_date_key(*today_parts(tz_name, now))


def parse_date_key(date_key: str) -> date:
    return datetime.strptime(date_key, DATE_KEY_FORMAT).date()


def format_date_display(date_key: str) -> str:
    """``2025-01-10`` -> ``Fri, Jan 10``"""
    parsed = parse_date_key(date_key)
    return f"{WEEKDAY_NAMES[parsed.weekday()]}, {MONTH_NAMES[parsed.month - 1]} {parsed.day}"

