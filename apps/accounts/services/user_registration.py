"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import VerificationPurpose

from .exceptions import UserRegistrationError, EmailAlreadyRegisteredError
from .verification_codes import issue_verification_code, consume_verification_code

logger = logging.getLogger(__name__)

User = get_user_model()


def request_registration_code(*, email: str):
    """
    Email a sign-up code to an address not yet in use.

    Raises:
        EmailAlreadyRegisteredError: If an account already uses the email
        CodeRequestTooSoonError: If a code was issued too recently
    """
    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError("Email is already registered")

    return issue_verification_code(email=email, purpose=VerificationPurpose.REGISTER)


@transaction.atomic
def register_user(
    *,
    username: str,
    password: str,
    nickname: str,
    email: str,
    code: str,
) -> User:
    """
    Register a new user whose email was proven by a sign-up code.

    Args:
        username: Login name (unique)
        password: User's password (will be hashed)
        nickname: Name shown on rankings
        email: Verified email address
        code: Sign-up verification code sent to the email

    Returns:
        Created User instance

    Raises:
        InvalidVerificationCodeError: If the code is wrong, used or expired
        UserRegistrationError: If the username or email is already taken
    """
    if User.objects.filter(username=username).exists():
        raise UserRegistrationError("Username is already taken")
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("Email is already registered")

    consume_verification_code(
        email=email,
        code=code,
        purpose=VerificationPurpose.REGISTER,
    )

    try:
        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            nickname=nickname,
            email_verified=True,
        )
    except IntegrityError:
        raise UserRegistrationError("Username or email is already registered")

    logger.info("Registered user %s", user.username)
    return user
