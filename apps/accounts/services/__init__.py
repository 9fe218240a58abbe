"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidVerificationCodeError,
    CodeRequestTooSoonError,
    EmailAlreadyRegisteredError,
)
from .verification_codes import (
    issue_verification_code,
    check_verification_code,
    consume_verification_code,
)
from .user_registration import register_user, request_registration_code
from .user_authentication import authenticate_user
from .password_reset import request_password_reset, confirm_password_reset

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidVerificationCodeError',
    'CodeRequestTooSoonError',
    'EmailAlreadyRegisteredError',
    # Services
    'issue_verification_code',
    'check_verification_code',
    'consume_verification_code',
    'register_user',
    'request_registration_code',
    'authenticate_user',
    'request_password_reset',
    'confirm_password_reset',
]
