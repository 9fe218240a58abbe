"""
Item management service.

Handles creating, deleting and listing saved/lapsed items.
"""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet, Sum, Count
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.items.models import Item
from apps.rankings.periods import ALL, normalize_period, period_start

from .exceptions import ItemNotFoundError


def add_item(*, user: User, name: str, price: int) -> Item:
    """
    Log an item for a user.

    Args:
        user: Owner of the item
        name: What was (not) bought
        price: Amount in KRW; negative for a lapse

    Returns:
        Created Item instance
    """
    return Item.objects.create(user=user, name=name, price=price)


@transaction.atomic
def delete_item(*, item_id: int, user: User) -> None:
    """
    Delete one of the user's own items.

    Raises:
        ItemNotFoundError: If the item doesn't exist or isn't the user's
    """
    try:
        item = (
            Item.objects
            .select_for_update()
            .get(id=item_id, user=user)
        )
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item with ID {item_id} not found")

    item.delete()


def get_user_items(*, user_id: UUID, period: Optional[str] = None, now=None) -> QuerySet[Item]:
    """
    A user's items, newest first, optionally limited to the current period.

    Raises:
        InvalidPeriodError: If period is unknown
    """
    items = Item.objects.filter(user_id=user_id)

    if period:
        start = period_start(period, now)
        if start is not None:
            items = items.filter(created_at__gte=start)

    return items.order_by('-created_at', '-id')


def summarize_items(*, user_id: UUID, period: str = ALL, now=None) -> dict:
    """
    Total and count of a user's items in the current period.

    Returns:
        dict with period, total, count
    """
    period = normalize_period(period)
    totals = get_user_items(user_id=user_id, period=period, now=now).aggregate(
        total=Coalesce(Sum('price'), 0),
        count=Count('id'),
    )
    return {
        'period': period,
        'total': totals['total'],
        'count': totals['count'],
    }
