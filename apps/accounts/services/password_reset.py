"""Password reset service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import VerificationPurpose

from .exceptions import InvalidVerificationCodeError, CodeRequestTooSoonError
from .verification_codes import issue_verification_code, consume_verification_code

logger = logging.getLogger(__name__)

User = get_user_model()


def request_password_reset(*, email: str) -> bool:
    """
    Email a reset code if an active account uses this address.

    Unknown addresses and repeat requests inside the resend interval
    both return False without raising.

    Args:
        email: User's email address

    Returns:
        True if a code was issued, False otherwise
    """
    user = User.objects.filter(email__iexact=email, is_active=True).first()
    if user is None:
        logger.info("Password reset requested for unknown email %s", email)
        return False

    try:
        issue_verification_code(email=user.email, purpose=VerificationPurpose.RESET)
    except CodeRequestTooSoonError:
        logger.info("Password reset for %s requested again too soon", user.username)
        return False
    return True


@transaction.atomic
def confirm_password_reset(*, email: str, code: str, new_password: str) -> User:
    """
    Reset user password with an emailed code.

    Args:
        email: User's email address
        code: Reset code
        new_password: New password

    Returns:
        User instance

    Raises:
        InvalidVerificationCodeError: If the code is invalid or expired
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email, is_active=True)
        )
    except User.DoesNotExist:
        raise InvalidVerificationCodeError("Invalid or expired verification code")

    consume_verification_code(
        email=user.email,
        code=code,
        purpose=VerificationPurpose.RESET,
    )

    user.set_password(new_password)
    user.save(update_fields=['password'])

    logger.info("Password reset for user %s", user.username)
    return user
