import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership


def make_user(username, nickname):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='TestPass123!',
        nickname=nickname,
        email_verified=True,
    )


def client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def group_owner(db):
    """Create and return a test user (group owner)."""
    return make_user('owner', 'Group Owner')


@pytest.fixture
def member_user(db):
    """Create and return a member user."""
    return make_user('member', 'Group Member')


@pytest.fixture
def group_other_user(db):
    """Create and return a user not in any group."""
    return make_user('outsider', 'Other User')


@pytest.fixture
def authenticated_client(group_owner):
    """Return API client authenticated as group owner."""
    return client_for(group_owner)


@pytest.fixture
def member_client(member_user):
    """Return API client authenticated as group member."""
    return client_for(member_user)


@pytest.fixture
def other_client(group_other_user):
    """Return API client authenticated as non-member user."""
    return client_for(group_other_user)


@pytest.fixture
def group(db, group_owner):
    """Create and return a test group with owner membership."""
    group = Group.objects.create(
        name='Patient Lions',
        owner=group_owner,
        invite_code='LION42',
    )
    GroupMembership.objects.create(user=group_owner, group=group)
    return group


@pytest.fixture
def group_with_members(group, member_user):
    """Group with owner and one member."""
    GroupMembership.objects.create(user=member_user, group=group)
    return group
