"""
Group management service.

Handles creating, looking up and deleting groups with proper
transaction safety.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Count, QuerySet

from apps.accounts.models import User
from apps.groups.models import Group, GroupMembership, generate_invite_code

from .exceptions import (
    GroupNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def create_group(
    *,
    name: str,
    owner: User,
    max_retries: int = 5
) -> Group:
    """
    Create a new group and add the creator as its first member.

    This is a multi-step operation wrapped in a transaction:
    1. Generate an invite code
    2. Create the group
    3. Create the owner's membership

    Args:
        name: Group name
        owner: User who will own the group
        max_retries: Maximum attempts to generate unique invite code

    Returns:
        Created Group instance

    Raises:
        RuntimeError: If cannot generate unique invite code after retries
    """
    # Six characters collide far more often than long tokens, so retry
    for attempt in range(max_retries):
        invite_code = generate_invite_code()

        try:
            with transaction.atomic():
                group = Group.objects.create(
                    name=name,
                    owner=owner,
                    invite_code=invite_code
                )

                GroupMembership.objects.create(user=owner, group=group)

                logger.info("Group %s created by %s", group.id, owner.username)
                return group

        except IntegrityError:
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique invite code after {max_retries} attempts"
                )
            continue

    raise RuntimeError("Unexpected error in group creation")


def get_user_groups(*, user: User) -> QuerySet[Group]:
    """Groups the user belongs to, annotated with member_count."""
    return (
        Group.objects
        .filter(id__in=GroupMembership.objects.filter(user=user).values('group_id'))
        .annotate(member_count=Count('memberships', distinct=True))
        .select_related('owner')
        .order_by('-created_at')
    )


def get_group_for_member(*, group_id: UUID, user: User) -> Group:
    """
    Get a group the user belongs to.

    Non-members get the same error as a missing group so that group IDs
    cannot be probed.

    Raises:
        GroupNotFoundError: If group doesn't exist or user isn't a member
    """
    try:
        group = (
            Group.objects
            .select_related('owner')
            .annotate(member_count=Count('memberships', distinct=True))
            .get(id=group_id)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    if not group.has_member(user):
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    return group


@transaction.atomic
def delete_group(*, group_id: UUID, user: User) -> None:
    """
    Delete a group (owner only).

    Cascading deletes remove all memberships.

    Raises:
        GroupNotFoundError: If group doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    try:
        group = (
            Group.objects
            .select_for_update()
            .get(id=group_id)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    if group.owner_id != user.id:
        raise InsufficientPermissionsError("Only the group owner can delete the group")

    group.delete()
    logger.info("Group %s deleted by %s", group_id, user.username)
