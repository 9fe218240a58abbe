"""
Service layer unit tests for groups app.

Tests cover:
- Transaction safety
- Business logic validation
- Error handling
"""

import pytest
from uuid import uuid4
from unittest.mock import patch

from apps.groups.models import Group, GroupMembership
from apps.groups.services import (
    create_group,
    delete_group,
    get_group_for_member,
    get_user_groups,
    join_group,
    leave_group,
)
from apps.groups.services.exceptions import (
    GroupNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    InsufficientPermissionsError,
)


# =============================================================================
# Group Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupManagement:
    """Tests for group_management.py service functions."""

    def test_create_group_success(self, group_owner):
        """Creating a group also creates owner membership."""
        group = create_group(name="Test Group", owner=group_owner)

        assert group.name == "Test Group"
        assert group.owner == group_owner
        assert len(group.invite_code) == 6
        assert GroupMembership.objects.filter(group=group, user=group_owner).exists()

    def test_create_group_retries_on_collision(self, group_owner, group):
        """A colliding code is replaced by a fresh one."""
        with patch('apps.groups.services.group_management.generate_invite_code') as mock_code:
            mock_code.side_effect = [group.invite_code, 'FRESH1']

            created = create_group(name="Group 2", owner=group_owner)

        assert created.invite_code == 'FRESH1'
        assert mock_code.call_count == 2

    def test_create_group_gives_up_after_retries(self, group_owner, group):
        with patch('apps.groups.services.group_management.generate_invite_code') as mock_code:
            mock_code.return_value = group.invite_code

            with pytest.raises(RuntimeError, match="Failed to generate unique invite code"):
                create_group(name="Group 2", owner=group_owner, max_retries=3)

        assert Group.objects.count() == 1

    def test_get_user_groups_counts_all_members(self, group_with_members, member_user):
        groups = list(get_user_groups(user=member_user))

        assert groups == [group_with_members]
        assert groups[0].member_count == 2

    def test_get_group_for_member_hides_from_outsiders(self, group, group_other_user):
        with pytest.raises(GroupNotFoundError):
            get_group_for_member(group_id=group.id, user=group_other_user)

    def test_get_group_for_member_not_found(self, group_owner):
        with pytest.raises(GroupNotFoundError):
            get_group_for_member(group_id=uuid4(), user=group_owner)

    def test_delete_group_success(self, group, group_owner):
        delete_group(group_id=group.id, user=group_owner)

        assert not Group.objects.filter(id=group.id).exists()
        assert not GroupMembership.objects.filter(group_id=group.id).exists()

    def test_delete_group_not_owner(self, group_with_members, member_user):
        with pytest.raises(InsufficientPermissionsError):
            delete_group(group_id=group_with_members.id, user=member_user)

    def test_delete_group_not_found(self, group_owner):
        with pytest.raises(GroupNotFoundError):
            delete_group(group_id=uuid4(), user=group_owner)


# =============================================================================
# Membership Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMembershipManagement:
    """Tests for membership_management.py service functions."""

    def test_join_group_success(self, group, member_user):
        joined = join_group(user=member_user, invite_code=' lion42 ')

        assert joined == group
        assert group.has_member(member_user)

    def test_join_group_unknown_code(self, group, member_user):
        with pytest.raises(GroupNotFoundError):
            join_group(user=member_user, invite_code='NOPE00')

    def test_join_group_already_member(self, group_with_members, member_user):
        with pytest.raises(AlreadyMemberError):
            join_group(user=member_user, invite_code='LION42')

    def test_leave_group_success(self, group_with_members, member_user):
        remaining = leave_group(group_id=group_with_members.id, user=member_user)

        assert remaining == group_with_members
        assert not group_with_members.has_member(member_user)

    def test_owner_leaving_hands_over_group(self, group_with_members, group_owner, member_user):
        remaining = leave_group(group_id=group_with_members.id, user=group_owner)

        remaining.refresh_from_db()
        assert remaining.owner == member_user

    def test_last_member_leaving_deletes_group(self, group, group_owner):
        assert leave_group(group_id=group.id, user=group_owner) is None
        assert not Group.objects.filter(id=group.id).exists()

    def test_leave_group_not_member(self, group, group_other_user):
        with pytest.raises(NotMemberError):
            leave_group(group_id=group.id, user=group_other_user)

    def test_leave_group_not_found(self, member_user):
        with pytest.raises(GroupNotFoundError):
            leave_group(group_id=uuid4(), user=member_user)
