"""Date/time helpers shared by the timer, bloom engine and reminders"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from mindsync.config import TIMEZONE
from mindsync.utils.numbers import round_half_up

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEKDAY_SHORT = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def get_local_now(tz_name: Optional[str] = None) -> datetime:
    """
    Current time in the configured timezone.

    Args:
        tz_name: IANA timezone name; defaults to MINDSYNC_TIMEZONE

    Returns:
        Timezone-aware datetime
    """
    tz = ZoneInfo(tz_name or TIMEZONE)
    return datetime.now(timezone.utc).astimezone(tz)


def weekday_name(dt: datetime) -> str:
    """'Monday' .. 'Sunday'"""
    return WEEKDAY_NAMES[dt.weekday()]


def minute_of(dt: datetime) -> str:
    """Wall-clock time at minute resolution, e.g. '09:05'"""
    return f"{dt.hour:02d}:{dt.minute:02d}"


def is_yesterday(day: date, today: date) -> bool:
    return day == today - timedelta(days=1)


def whole_seconds_between(earlier: datetime, later: datetime) -> int:
    """
    Whole seconds elapsed between two instants, floored, never negative.
    Naive datetimes are treated as UTC.
    """
    if earlier.tzinfo is None:
        earlier = earlier.replace(tzinfo=timezone.utc)
    if later.tzinfo is None:
        later = later.replace(tzinfo=timezone.utc)
    seconds = (later - earlier).total_seconds()
    if seconds <= 0:
        return 0
    return int(seconds // 1)


def format_elapsed(seconds: int) -> str:
    """Format seconds as HH:MM:SS"""
    hrs = seconds // 3600
    mins = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"


def format_duration(seconds: int) -> str:
    """
    Compact study duration label.

    Returns:
        str: "2.5h" style when at least an hour, otherwise "45m"
    """
    if seconds >= 3600:
        return f"{round_half_up(seconds / 3600, 1):g}h"
    return f"{seconds // 60}m"
