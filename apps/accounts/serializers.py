from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from .models import User, VerificationPurpose


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'nickname',
            'email_verified',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'username', 'email', 'email_verified', 'created_at', 'last_login']


class SendCodeSerializer(serializers.Serializer):
    """Serializer for requesting a verification code."""

    email = serializers.EmailField(required=True)
    purpose = serializers.ChoiceField(
        choices=VerificationPurpose.choices,
        default=VerificationPurpose.REGISTER
    )

    def validate_email(self, value):
        return value.lower()


class VerifyCodeSerializer(SendCodeSerializer):
    """Serializer for checking a verification code without using it."""

    code = serializers.RegexField(regex=r'^\d{6}$', required=True)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration with an emailed code."""

    username = serializers.CharField(min_length=4, max_length=50)
    password = serializers.CharField(
        write_only=True,
        required=True,
        min_length=4,
        style={'input_type': 'password'}
    )
    nickname = serializers.CharField(max_length=50)
    email = serializers.EmailField(required=True)
    code = serializers.RegexField(regex=r'^\d{6}$', required=True)

    def validate_email(self, value):
        return value.lower()

    def validate(self, attrs):
        """Run Django's password validators against the would-be user."""
        candidate = User(
            username=attrs['username'],
            email=attrs['email'],
            nickname=attrs['nickname'],
        )
        try:
            validate_password(attrs['password'], user=candidate)
        except DjangoValidationError as e:
            raise serializers.ValidationError({'password': list(e.messages)})
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class PasswordResetRequestSerializer(serializers.Serializer):
    """Serializer for password reset request."""

    email = serializers.EmailField(required=True)

    def validate_email(self, value):
        return value.lower()


class PasswordResetConfirmSerializer(serializers.Serializer):
    """Serializer for password reset confirmation."""

    email = serializers.EmailField(required=True)
    code = serializers.RegexField(regex=r'^\d{6}$', required=True)
    new_password = serializers.CharField(
        required=True,
        min_length=4,
        validators=[validate_password],
        style={'input_type': 'password'}
    )

    def validate_email(self, value):
        return value.lower()


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying in rankings, groups, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'nickname', 'created_at']
        read_only_fields = fields
