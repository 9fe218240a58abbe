"""
Period arithmetic for rankings, summaries and the hall of fame.

All periods are truncated in the project's local timezone
(``settings.TIME_ZONE``): a day starts at local midnight, a week on
Monday, a month on the 1st. ``all`` has no lower bound.
"""

from datetime import date, datetime, time, timedelta

from django.utils import timezone

from .exceptions import InvalidPeriodError

DAY = 'day'
WEEK = 'week'
MONTH = 'month'
ALL = 'all'

RANKING_PERIODS = (DAY, WEEK, MONTH, ALL)
HALL_OF_FAME_PERIODS = (WEEK, MONTH)

# The item list and summary say "today" where rankings say "day"
PERIOD_ALIASES = {'today': DAY}


def normalize_period(period):
    period = PERIOD_ALIASES.get(period, period)
    if period not in RANKING_PERIODS:
        raise InvalidPeriodError(
            f"Invalid period: '{period}'. Valid options: {', '.join(RANKING_PERIODS)}"
        )
    return period


def start_of_day(day: date) -> datetime:
    """Aware datetime for local midnight at the start of ``day``."""
    return timezone.make_aware(datetime.combine(day, time.min))


def period_start_date(period, today: date):
    """First local date of the period containing ``today`` (None for ``all``)."""
    period = normalize_period(period)
    if period == DAY:
        return today
    if period == WEEK:
        return today - timedelta(days=today.weekday())
    if period == MONTH:
        return today.replace(day=1)
    return None


def period_start(period, now=None):
    """
    Aware datetime at which the current period began.

    Args:
        period: 'day', 'week', 'month', 'all' (or the alias 'today')
        now: Reference instant, defaults to timezone.now()

    Returns:
        datetime or None for 'all'

    Raises:
        InvalidPeriodError: If period is unknown
    """
    today = timezone.localdate(now)
    start = period_start_date(period, today)
    if start is None:
        return None
    return start_of_day(start)


def previous_period_bounds(period_type, today: date):
    """
    Inclusive (start_date, end_date) of the last completed week or month.

    >>> previous_period_bounds('week', date(2025, 3, 12))
    (datetime.date(2025, 3, 3), datetime.date(2025, 3, 9))
    >>> previous_period_bounds('month', date(2025, 3, 12))
    (datetime.date(2025, 2, 1), datetime.date(2025, 2, 28))
    """
    if period_type not in HALL_OF_FAME_PERIODS:
        raise InvalidPeriodError(
            f"Invalid period type: '{period_type}'. Valid options: week, month"
        )

    current_start = period_start_date(period_type, today)
    end = current_start - timedelta(days=1)
    if period_type == WEEK:
        start = current_start - timedelta(days=7)
    else:
        start = end.replace(day=1)
    return start, end


def window(start_date: date, end_date: date):
    """Half-open aware datetime range covering the inclusive date range."""
    return start_of_day(start_date), start_of_day(end_date + timedelta(days=1))
