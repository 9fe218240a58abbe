from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone
import uuid


class UserManager(BaseUserManager):
    """Custom user manager for username-based authentication."""

    def create_user(self, username, email, password=None, **extra_fields):
        if not username:
            raise ValueError('Username is required')
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        extra_fields.setdefault('nickname', username)
        user = self.model(username=username, email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('email_verified', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(username, email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Saver account. Rankings show the nickname, login uses the username."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(unique=True, max_length=50)
    email = models.EmailField(unique=True, max_length=255)
    nickname = models.CharField(max_length=50)

    email_verified = models.BooleanField(default=False)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['email']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_6541e9_idx'),
        ]

    def __str__(self):
        return self.username

    def get_display_name(self):
        """Return nickname or username."""
        return self.nickname or self.username


class VerificationPurpose(models.TextChoices):
    REGISTER = 'register', 'Register'
    RESET = 'reset', 'Password reset'


class VerificationCode(models.Model):
    """One-time numeric code emailed to authorize sign-up or password reset."""

    email = models.EmailField(max_length=255)
    code = models.CharField(max_length=6)
    purpose = models.CharField(max_length=20, choices=VerificationPurpose.choices)
    expires_at = models.DateTimeField()
    used = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'verification_codes'
        indexes = [
            models.Index(fields=['email', 'purpose', 'used'], name='verificatio_email_3f0c2a_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.email} ({self.purpose})"

    @property
    def is_expired(self):
        return timezone.now() >= self.expires_at

    def is_usable(self):
        return not self.used and not self.is_expired
