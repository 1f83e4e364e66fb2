"""
Time utility functions for comparing hours and scheduling hourly runs.
Uses pytz for named timezones; None means the host's local timezone.
"""

from datetime import datetime, timedelta
from typing import Optional

import pytz
from pytz.tzinfo import BaseTzInfo


def get_timezone(name: str) -> BaseTzInfo:
    """
    Look up a named timezone.

    Raises:
        pytz.UnknownTimeZoneError: If the name is not a known timezone
    """
    return pytz.timezone(name)


def current_time(tz: Optional[BaseTzInfo] = None) -> datetime:
    """Current wall-clock time, aware, in tz or in the host's local timezone."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def to_local(value: datetime, tz: Optional[BaseTzInfo] = None) -> datetime:
    """
    Convert a datetime to tz (host local timezone if None).

    Timezone-naive values are assumed to already be in that timezone.
    """
    if tz is None:
        return value.astimezone()
    if value.tzinfo is None:
        return tz.localize(value)
    return value.astimezone(tz)


def is_current_hour(candidate: datetime, now: Optional[datetime] = None, tz: Optional[BaseTzInfo] = None) -> bool:
    """
    Check whether candidate falls in the same calendar hour as now.

    Both times are converted to tz (host local timezone if None) and compared
    on year, month, day and hour; minutes and seconds are ignored.

    Examples (Europe/Amsterdam):
        - now 2024-01-15 14:37, candidate 2024-01-15 14:00 -> True
        - now 2024-01-15 14:37, candidate 2024-01-15 15:00 -> False
    """
    local_now = to_local(now, tz) if now is not None else current_time(tz)
    local_candidate = to_local(candidate, tz)

    return (
        local_now.year == local_candidate.year
        and local_now.month == local_candidate.month
        and local_now.day == local_candidate.day
        and local_now.hour == local_candidate.hour
    )


def get_next_hour_start(reference_time: datetime, tz: BaseTzInfo) -> datetime:
    """
    Get the start of the next complete hour after reference_time in tz.

    Returns:
        Aware datetime in tz with minutes, seconds and microseconds set to 0

    Examples:
        - 12:00 -> 13:00 (if it's exactly 12:00, the next run is 13:00)
        - 12:05 -> 13:00
        - 12:59 -> 13:00
    """
    local = to_local(reference_time, tz)
    hour_start = local.replace(minute=0, second=0, microsecond=0)
    # normalize keeps the UTC offset right when the step crosses a DST change
    return tz.normalize(hour_start + timedelta(hours=1))
