"""
Hall of fame service.

Writes the winner of each completed week and month exactly once and
lists the recorded winners.
"""

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from .exceptions import InvalidPeriodError
from .models import HallOfFameEntry
from .periods import HALL_OF_FAME_PERIODS, previous_period_bounds
from .rankings import RankingQueries

logger = logging.getLogger(__name__)


def record_period_winner(*, period_type, start_date, end_date):
    """
    Save the winner of a period unless one is already recorded.

    Args:
        period_type: 'week' or 'month'
        start_date: First local date of the period
        end_date: Last local date of the period (inclusive)

    Returns:
        (entry, created): entry is None when the period had no winner
    """
    if period_type not in HALL_OF_FAME_PERIODS:
        raise InvalidPeriodError(
            f"Invalid period type: '{period_type}'. Valid options: week, month"
        )

    existing = HallOfFameEntry.objects.filter(
        period_type=period_type,
        period_start=start_date
    ).first()
    if existing:
        return existing, False

    winner = RankingQueries.period_winner(start_date, end_date)
    if winner is None:
        return None, False

    user = winner['user']
    try:
        # Savepoint, so a lost race doesn't break an outer transaction
        with transaction.atomic():
            entry = HallOfFameEntry.objects.create(
                period_type=period_type,
                period_start=start_date,
                period_end=end_date,
                user=user,
                user_name=user.get_display_name(),
                total_amount=winner['total'],
            )
    except IntegrityError:
        # Another request recorded the same period first
        entry = HallOfFameEntry.objects.get(
            period_type=period_type,
            period_start=start_date
        )
        return entry, False

    logger.info(
        "Hall of fame %s %s: %s with %s KRW",
        period_type, start_date, entry.user_name, entry.total_amount
    )
    return entry, True


def record_completed_periods(now=None):
    """
    Record winners for the last completed week and month.

    Returns:
        list of entries created by this call
    """
    today = timezone.localdate(now)
    created_entries = []

    for period_type in HALL_OF_FAME_PERIODS:
        start_date, end_date = previous_period_bounds(period_type, today)
        entry, created = record_period_winner(
            period_type=period_type,
            start_date=start_date,
            end_date=end_date
        )
        if created:
            created_entries.append(entry)

    return created_entries


def list_hall_of_fame(period_type=None):
    """Recorded winners, newest period first."""
    entries = HallOfFameEntry.objects.select_related('user')

    if period_type:
        if period_type not in HALL_OF_FAME_PERIODS:
            raise InvalidPeriodError(
                f"Invalid period type: '{period_type}'. Valid options: week, month"
            )
        entries = entries.filter(period_type=period_type)

    return entries.order_by('-period_start', 'period_type')
