"""
Timezone Utilities - Centralized timezone and calendar-day handling
"""
from datetime import date, datetime, timedelta
import pytz

from momentum.core.config import settings


# Application timezone, configurable through APP_TIMEZONE
APP_TZ = pytz.timezone(settings.APP_TIMEZONE)


def get_app_tz():
    """
    Get the application timezone object

    Returns:
        pytz timezone for APP_TIMEZONE
    """
    return APP_TZ


def get_local_now() -> datetime:
    """
    Get current datetime in the application timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(APP_TZ)


def get_local_today_date() -> date:
    """
    Get today's calendar date in the application timezone

    Returns:
        date object for today
    """
    return get_local_now().date()


def get_points_date(now: datetime = None) -> date:
    """
    Get the date points are credited to

    The points day rolls over at DAY_CUTOFF_HOUR, so activity logged
    before the cutoff still counts towards the previous day.

    Args:
        now: Optional datetime to evaluate (defaults to the current local time)

    Returns:
        date object for the current points day
    """
    now = now or get_local_now()
    if now.hour < settings.DAY_CUTOFF_HOUR:
        return (now - timedelta(days=1)).date()
    return now.date()


def day_of_week(day: date) -> int:
    """Weekday index with Sunday=0 through Saturday=6"""
    return (day.weekday() + 1) % 7
