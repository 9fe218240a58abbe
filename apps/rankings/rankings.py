"""
Rankings Module
===============

Leaderboard queries over logged items.

Classes:
    RankingQueries: Static methods for global, group and period-winner queries.

Example:
    Showing this week's board::

        from apps.rankings.rankings import RankingQueries

        for entry in RankingQueries.global_rankings('week'):
            print(entry['rank'], entry['name'], entry['total'])

Note:
    Read-only. Periods are truncated in local time, see ``periods``.
"""

from django.db.models import Sum, Count, Q, Value, IntegerField
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.groups.models import GroupMembership
from .periods import WEEK, normalize_period, period_start, window


def _items_filter(start=None, end=None):
    q = Q()
    if start is not None:
        q &= Q(items__created_at__gte=start)
    if end is not None:
        q &= Q(items__created_at__lt=end)
    return q or None


def _with_totals(users, items_filter):
    return users.annotate(
        total=Coalesce(
            Sum('items__price', filter=items_filter),
            Value(0),
            output_field=IntegerField(),
        ),
        item_count=Count('items', filter=items_filter),
    )


class RankingQueries:
    """
    Aggregate queries for the leaderboards.

    Methods:
        global_rankings: Every active user ranked by total for a period.
        group_weekly_rankings: A group's members ranked by this week's total.
        period_winner: Top saver between two dates.

    Note:
        Methods return plain dictionaries (or None), ready for serializers.
    """

    @staticmethod
    def global_rankings(period=WEEK, limit=100, now=None):
        """
        Rank active users by the sum of their item prices in the period.

        Users with no items in the period are listed with a total of 0.
        Ties are broken by sign-up date, earliest first.

        Args:
            period (str): 'day', 'week', 'month' or 'all' ('today' is accepted).
            limit (int): Maximum number of entries.
            now (datetime, optional): Reference instant, defaults to now.

        Returns:
            list[dict]: rank, id, username, name, total, item_count

        Raises:
            InvalidPeriodError: If period is unknown.
        """
        period = normalize_period(period)
        users = _with_totals(
            User.objects.filter(is_active=True),
            _items_filter(start=period_start(period, now)),
        ).order_by('-total', 'created_at')[:limit]

        return [
            {
                'rank': position,
                'id': user.id,
                'username': user.username,
                'name': user.get_display_name(),
                'total': user.total,
                'item_count': user.item_count,
            }
            for position, user in enumerate(users, start=1)
        ]

    @staticmethod
    def group_weekly_rankings(group_id, now=None):
        """
        Rank a group's members by this week's total.

        Returns:
            list[dict]: rank, id, username, name, weekly_total, joined_at
        """
        this_week = Q(user__items__created_at__gte=period_start(WEEK, now))
        memberships = (
            GroupMembership.objects
            .filter(group_id=group_id)
            .select_related('user')
            .annotate(
                weekly_total=Coalesce(
                    Sum('user__items__price', filter=this_week),
                    Value(0),
                    output_field=IntegerField(),
                )
            )
            .order_by('-weekly_total', 'joined_at')
        )

        return [
            {
                'rank': position,
                'id': membership.user.id,
                'username': membership.user.username,
                'name': membership.user.get_display_name(),
                'weekly_total': membership.weekly_total,
                'joined_at': membership.joined_at,
            }
            for position, membership in enumerate(memberships, start=1)
        ]

    @staticmethod
    def period_winner(start_date, end_date):
        """
        Top saver between two local dates (both inclusive).

        Only active users with a strictly positive total can win; on a
        tie the earlier sign-up wins.

        Returns:
            dict | None: user, total; None when nobody saved anything.
        """
        start, end = window(start_date, end_date)
        winner = (
            _with_totals(
                User.objects.filter(is_active=True),
                _items_filter(start=start, end=end),
            )
            .filter(total__gt=0)
            .order_by('-total', 'created_at')
            .first()
        )
        if winner is None:
            return None
        return {'user': winner, 'total': winner.total}
