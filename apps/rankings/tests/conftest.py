import pytest
from datetime import datetime
from zoneinfo import ZoneInfo
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.items.models import Item

SEOUL = ZoneInfo('Asia/Seoul')


def seoul(*args):
    """Aware Asia/Seoul datetime."""
    return datetime(*args, tzinfo=SEOUL)


def make_user(username, nickname):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='TestPass123!',
        nickname=nickname,
        email_verified=True,
    )


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def lion(db):
    return make_user('lion', '참는사자')


@pytest.fixture
def tiger(db):
    return make_user('tiger', 'Tiger')


@pytest.fixture
def bear(db):
    """A user who never logs anything."""
    return make_user('bear', 'Bear')


@pytest.fixture
def march_items(lion, tiger):
    """
    Items around Wednesday 2025-03-12 (Seoul).

    Week of 3/3: lion 30000, tiger 50000 - 10000
    Week of 3/10: lion 5000, tiger 2000
    February: lion 70000
    """
    rows = [
        (lion, 'Taxi', 30000, seoul(2025, 3, 4, 8, 0)),
        (tiger, 'Headphones', 50000, seoul(2025, 3, 5, 19, 0)),
        (tiger, 'Lapse', -10000, seoul(2025, 3, 9, 23, 30)),
        (lion, 'Coffee', 5000, seoul(2025, 3, 10, 0, 5)),
        (tiger, 'Snack', 2000, seoul(2025, 3, 12, 7, 0)),
        (lion, 'Jacket', 70000, seoul(2025, 2, 14, 12, 0)),
    ]
    return [
        Item.objects.create(user=user, name=name, price=price, created_at=created_at)
        for user, name, price, created_at in rows
    ]
