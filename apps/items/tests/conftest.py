import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.items.models import Item


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def saver(db):
    """Create and return a user who logs items."""
    return User.objects.create_user(
        username='saver',
        email='saver@example.com',
        password='TestPass123!',
        nickname='Saver',
        email_verified=True,
    )


@pytest.fixture
def other_saver(db):
    """Create and return another user."""
    return User.objects.create_user(
        username='spender',
        email='spender@example.com',
        password='TestPass123!',
        nickname='Spender',
        email_verified=True,
    )


@pytest.fixture
def authenticated_client(api_client, saver):
    """Return API client authenticated as the saver."""
    refresh = RefreshToken.for_user(saver)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def recent_item(saver):
    """Item logged just now."""
    return Item.objects.create(user=saver, name='Coffee', price=4500)


@pytest.fixture
def old_item(saver):
    """Item logged well outside the current month."""
    return Item.objects.create(
        user=saver,
        name='Sneakers',
        price=120000,
        created_at=timezone.now() - timedelta(days=45),
    )


@pytest.fixture
def lapse_item(saver):
    """A lapse: money the saver did spend."""
    return Item.objects.create(user=saver, name='Late-night snack', price=-8000)


@pytest.fixture
def other_item(other_saver):
    """Item owned by someone else."""
    return Item.objects.create(user=other_saver, name='Taxi', price=15000)
