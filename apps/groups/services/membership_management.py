"""
Membership management service.

Handles joining by invite code and leaving groups with concurrency
protection.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership

from .exceptions import (
    GroupNotFoundError,
    AlreadyMemberError,
    NotMemberError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def join_group(*, user: User, invite_code: str) -> Group:
    """
    Join a group using its invite code.

    Codes are matched case-insensitively.

    Args:
        user: User joining the group
        invite_code: The group's six-character code

    Returns:
        The joined Group

    Raises:
        GroupNotFoundError: If no group has this code
        AlreadyMemberError: If user is already a member
    """
    code = invite_code.strip().upper()

    try:
        group = (
            Group.objects
            .select_for_update()
            .get(invite_code=code)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError("Group not found")

    if group.has_member(user):
        raise AlreadyMemberError(f"Already a member of {group.name}")

    try:
        # Savepoint keeps the outer transaction usable
        with transaction.atomic():
            GroupMembership.objects.create(user=user, group=group)
    except IntegrityError:
        raise AlreadyMemberError(f"Already a member of {group.name}")

    return group


@transaction.atomic
def leave_group(*, group_id: UUID, user: User) -> Optional[Group]:
    """
    Leave a group.

    When the owner leaves, ownership passes to the longest-standing
    remaining member. The group is deleted once its last member leaves.

    Returns:
        The group, or None if it was deleted

    Raises:
        GroupNotFoundError: If group doesn't exist
        NotMemberError: If user is not a member
    """
    try:
        group = (
            Group.objects
            .select_for_update()
            .get(id=group_id)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    deleted, _ = GroupMembership.objects.filter(user=user, group=group).delete()
    if not deleted:
        raise NotMemberError(f"Not a member of {group.name}")

    successor = (
        GroupMembership.objects
        .filter(group=group)
        .order_by('joined_at')
        .first()
    )
    if successor is None:
        group.delete()
        logger.info("Group %s deleted after its last member left", group_id)
        return None

    if group.owner_id == user.id:
        group.owner_id = successor.user_id
        group.save(update_fields=['owner'])

    return group
