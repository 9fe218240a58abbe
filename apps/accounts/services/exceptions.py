"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class EmailAlreadyRegisteredError(UserRegistrationError):
    """Raised when a sign-up code is requested for an email already in use."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class InvalidVerificationCodeError(AccountsServiceError):
    """Raised when a verification code is wrong, used or expired."""
    pass


class CodeRequestTooSoonError(AccountsServiceError):
    """Raised when a new code is requested before the resend interval passed."""

    def __init__(self, message, retry_after=None):
        super().__init__(message)
        self.retry_after = retry_after
