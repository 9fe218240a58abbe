"""
Verification code service.

Issues, checks and consumes the short-lived numeric codes that authorize
sign-up and password reset. Codes are delivered by email once the
issuing transaction commits.
"""

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import VerificationCode, VerificationPurpose

from .exceptions import InvalidVerificationCodeError, CodeRequestTooSoonError

logger = logging.getLogger(__name__)

CODE_LENGTH = 6

EMAIL_SUBJECTS = {
    VerificationPurpose.REGISTER: '[참고 사자] 회원가입 인증 코드',
    VerificationPurpose.RESET: '[참고 사자] 비밀번호 재설정 인증 코드',
}


def generate_code() -> str:
    """Return a zero-padded random numeric code."""
    return f"{secrets.randbelow(10 ** CODE_LENGTH):0{CODE_LENGTH}d}"


def send_verification_email(*, email: str, code: str, purpose: str) -> None:
    ttl = settings.VERIFICATION_CODE_TTL_MINUTES
    send_mail(
        subject=EMAIL_SUBJECTS[purpose],
        message=f"인증 코드: {code}\n\n{ttl}분 안에 입력해주세요.",
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )
    logger.info("Sent %s verification code to %s", purpose, email)


@transaction.atomic
def issue_verification_code(*, email: str, purpose: str) -> VerificationCode:
    """
    Create a new verification code and email it.

    Any earlier unused codes for the same email and purpose stop working.

    Args:
        email: Recipient address
        purpose: VerificationPurpose value

    Returns:
        Created VerificationCode instance

    Raises:
        CodeRequestTooSoonError: If the previous code was issued too recently
    """
    now = timezone.now()
    pending = (
        VerificationCode.objects
        .select_for_update()
        .filter(email=email, purpose=purpose, used=False)
    )

    latest = pending.order_by('-created_at').first()
    resend_after = timedelta(seconds=settings.VERIFICATION_CODE_RESEND_SECONDS)
    if latest is not None and now - latest.created_at < resend_after:
        wait = resend_after - (now - latest.created_at)
        raise CodeRequestTooSoonError(
            "Please wait before requesting another code",
            retry_after=int(wait.total_seconds()) + 1,
        )

    pending.update(used=True)

    verification = VerificationCode.objects.create(
        email=email,
        code=generate_code(),
        purpose=purpose,
        expires_at=now + timedelta(minutes=settings.VERIFICATION_CODE_TTL_MINUTES),
    )

    transaction.on_commit(
        lambda: send_verification_email(
            email=email,
            code=verification.code,
            purpose=purpose,
        )
    )

    return verification


def _usable_codes(*, email: str, code: str, purpose: str):
    return VerificationCode.objects.filter(
        email=email,
        code=code,
        purpose=purpose,
        used=False,
        expires_at__gt=timezone.now(),
    )


def check_verification_code(*, email: str, code: str, purpose: str) -> bool:
    """Return True if the code is currently valid. Does not consume it."""
    return _usable_codes(email=email, code=code, purpose=purpose).exists()


@transaction.atomic
def consume_verification_code(*, email: str, code: str, purpose: str) -> VerificationCode:
    """
    Mark a valid code as used.

    Raises:
        InvalidVerificationCodeError: If no unused, unexpired code matches
    """
    verification = (
        _usable_codes(email=email, code=code, purpose=purpose)
        .select_for_update()
        .order_by('-created_at')
        .first()
    )
    if verification is None:
        raise InvalidVerificationCodeError("Invalid or expired verification code")

    verification.used = True
    verification.save(update_fields=['used'])
    return verification
