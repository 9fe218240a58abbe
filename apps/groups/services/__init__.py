"""
Groups app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    GroupsServiceError,
    GroupNotFoundError,
    AlreadyMemberError,
    NotMemberError,
    InsufficientPermissionsError,
)

from .group_management import (
    create_group,
    delete_group,
    get_group_for_member,
    get_user_groups,
)

from .membership_management import (
    join_group,
    leave_group,
)


__all__ = [
    # Exceptions
    'GroupsServiceError',
    'GroupNotFoundError',
    'AlreadyMemberError',
    'NotMemberError',
    'InsufficientPermissionsError',

    # Group Management
    'create_group',
    'delete_group',
    'get_group_for_member',
    'get_user_groups',

    # Membership Management
    'join_group',
    'leave_group',
]
