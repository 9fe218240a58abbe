import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, VerificationCode, VerificationPurpose


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
        nickname='Test User',
        email_verified=True,
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        nickname='Inactive User',
        is_active=False,
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        username='otheruser',
        email='otheruser@example.com',
        password='OtherPass123!',
        nickname='Other User',
        email_verified=True,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def register_code(db):
    """A valid sign-up code for newuser@example.com."""
    return VerificationCode.objects.create(
        email='newuser@example.com',
        code='123456',
        purpose=VerificationPurpose.REGISTER,
        expires_at=timezone.now() + timedelta(minutes=10),
    )


@pytest.fixture
def expired_register_code(db):
    """An expired sign-up code for late@example.com."""
    return VerificationCode.objects.create(
        email='late@example.com',
        code='654321',
        purpose=VerificationPurpose.REGISTER,
        expires_at=timezone.now() - timedelta(minutes=1),
    )


@pytest.fixture
def reset_code(user):
    """A valid password reset code for the test user."""
    return VerificationCode.objects.create(
        email=user.email,
        code='246810',
        purpose=VerificationPurpose.RESET,
        expires_at=timezone.now() + timedelta(minutes=10),
    )
