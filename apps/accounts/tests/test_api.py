import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, VerificationCode, VerificationPurpose


# =============================================================================
# Verification Code Tests
# =============================================================================

@pytest.mark.django_db
class TestSendCode:
    """Tests for POST /api/auth/send-code/"""

    def test_send_register_code(self, api_client, mailoutbox, django_capture_on_commit_callbacks):
        """Requesting a sign-up code stores it and emails it."""
        url = reverse('users:send-code')
        with django_capture_on_commit_callbacks(execute=True):
            response = api_client.post(url, {'email': 'New@Example.com', 'purpose': 'register'})

        assert response.status_code == status.HTTP_200_OK
        code = VerificationCode.objects.get(email='new@example.com')
        assert code.purpose == VerificationPurpose.REGISTER
        assert len(code.code) == 6
        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == ['new@example.com']
        assert code.code in mailoutbox[0].body

    def test_send_register_code_for_taken_email(self, api_client, user):
        """Cannot request a sign-up code for an email already in use."""
        url = reverse('users:send-code')
        response = api_client.post(url, {'email': user.email, 'purpose': 'register'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_send_code_twice_too_soon(self, api_client):
        """A second request inside the resend interval is throttled."""
        url = reverse('users:send-code')
        api_client.post(url, {'email': 'new@example.com', 'purpose': 'register'})
        response = api_client.post(url, {'email': 'new@example.com', 'purpose': 'register'})

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert 'Retry-After' in response

    def test_send_reset_code_unknown_email(self, api_client):
        """Reset codes for unknown emails succeed silently."""
        url = reverse('users:send-code')
        response = api_client.post(url, {'email': 'nobody@example.com', 'purpose': 'reset'})

        assert response.status_code == status.HTTP_200_OK
        assert not VerificationCode.objects.exists()

    def test_send_code_invalid_email(self, api_client):
        url = reverse('users:send-code')
        response = api_client.post(url, {'email': 'not-an-email'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestVerifyCode:
    """Tests for POST /api/auth/verify-code/"""

    def test_verify_valid_code(self, api_client, register_code):
        url = reverse('users:verify-code')
        data = {'email': register_code.email, 'code': '123456', 'purpose': 'register'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['valid'] is True
        register_code.refresh_from_db()
        assert register_code.used is False

    def test_verify_wrong_code(self, api_client, register_code):
        url = reverse('users:verify-code')
        data = {'email': register_code.email, 'code': '000000', 'purpose': 'register'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['valid'] is False

    def test_verify_expired_code(self, api_client, expired_register_code):
        url = reverse('users:verify-code')
        data = {'email': expired_register_code.email, 'code': '654321', 'purpose': 'register'}
        response = api_client.post(url, data)

        assert response.data['valid'] is False


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client, register_code):
        """Successfully register a new user with an emailed code."""
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'password': 'SecurePass123!',
            'nickname': '참는사자',
            'email': 'newuser@example.com',
            'code': '123456',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['nickname'] == '참는사자'

        user = User.objects.get(username='newuser')
        assert user.email_verified is True
        register_code.refresh_from_db()
        assert register_code.used is True

    def test_register_wrong_code(self, api_client, register_code):
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'password': 'SecurePass123!',
            'nickname': 'New',
            'email': 'newuser@example.com',
            'code': '999999',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.filter(username='newuser').exists()

    def test_register_expired_code(self, api_client, expired_register_code):
        url = reverse('users:register')
        data = {
            'username': 'lateuser',
            'password': 'SecurePass123!',
            'nickname': 'Late',
            'email': 'late@example.com',
            'code': '654321',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_duplicate_username(self, api_client, user, register_code):
        url = reverse('users:register')
        data = {
            'username': user.username,
            'password': 'SecurePass123!',
            'nickname': 'Copycat',
            'email': 'newuser@example.com',
            'code': '123456',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        register_code.refresh_from_db()
        assert register_code.used is False

    def test_register_short_username(self, api_client, register_code):
        """Usernames need at least 4 characters."""
        url = reverse('users:register')
        data = {
            'username': 'abc',
            'password': 'SecurePass123!',
            'nickname': 'Short',
            'email': 'newuser@example.com',
            'code': '123456',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data

    def test_register_short_password(self, api_client, register_code):
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'password': 'abc',
            'nickname': 'Short',
            'email': 'newuser@example.com',
            'code': '123456',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data

    def test_register_four_digit_password(self, api_client, register_code):
        """Four characters are enough, even all digits."""
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'password': '1234',
            'nickname': 'Digits',
            'email': 'newuser@example.com',
            'code': '123456',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(username='newuser').check_password('1234')

    def test_register_missing_fields(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'username': 'newuser'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data
        assert 'nickname' in response.data


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        data = {'username': user.username, 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['username'] == user.username

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        data = {'username': user.username, 'password': 'WrongPassword123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_nonexistent_user(self, api_client):
        url = reverse('users:login')
        data = {'username': 'ghost', 'password': 'SomePass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('users:login')
        data = {'username': user_inactive.username, 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_updates_last_login(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'username': user.username, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.last_login is not None


# =============================================================================
# Logout / Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_logout_success(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Logout successful'

    def test_logout_invalid_refresh(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {'refresh': 'garbage'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_logout_unauthenticated(self, api_client):
        url = reverse('users:logout')
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestProfile:
    """Tests for /api/auth/user/ and /api/auth/users/{id}/"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['username'] == user.username
        assert response.data['nickname'] == user.nickname

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_nickname(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(url, {'nickname': '새닉네임'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.nickname == '새닉네임'

    def test_update_cannot_change_username(self, authenticated_client, user):
        url = reverse('users:update-profile')
        authenticated_client.patch(url, {'username': 'hijack'})

        user.refresh_from_db()
        assert user.username == 'testuser'

    def test_public_profile_hides_email(self, api_client, user):
        url = reverse('users:user-detail', args=[user.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['nickname'] == user.nickname
        assert 'email' not in response.data

    def test_public_profile_inactive_user(self, api_client, user_inactive):
        url = reverse('users:user-detail', args=[user_inactive.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Password Reset Tests
# =============================================================================

@pytest.mark.django_db
class TestPasswordReset:
    """Tests for the password reset flow."""

    def test_request_reset_existing_user(self, api_client, user, mailoutbox, django_capture_on_commit_callbacks):
        url = reverse('users:password-reset')
        with django_capture_on_commit_callbacks(execute=True):
            response = api_client.post(url, {'email': user.email})

        assert response.status_code == status.HTTP_200_OK
        assert VerificationCode.objects.filter(
            email=user.email, purpose=VerificationPurpose.RESET
        ).exists()
        assert len(mailoutbox) == 1

    def test_request_reset_unknown_email(self, api_client, mailoutbox):
        """Same response whether or not the account exists."""
        url = reverse('users:password-reset')
        response = api_client.post(url, {'email': 'nobody@example.com'})

        assert response.status_code == status.HTTP_200_OK
        assert len(mailoutbox) == 0

    def test_confirm_reset(self, api_client, user, reset_code):
        url = reverse('users:password-reset-confirm')
        data = {'email': user.email, 'code': '246810', 'new_password': 'BrandNew456!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('BrandNew456!')

    def test_confirm_reset_code_single_use(self, api_client, user, reset_code):
        url = reverse('users:password-reset-confirm')
        data = {'email': user.email, 'code': '246810', 'new_password': 'BrandNew456!'}
        api_client.post(url, data)
        data['new_password'] = 'Another789!'
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        user.refresh_from_db()
        assert user.check_password('BrandNew456!')

    def test_confirm_reset_wrong_code(self, api_client, user, reset_code):
        url = reverse('users:password-reset-confirm')
        data = {'email': user.email, 'code': '111111', 'new_password': 'BrandNew456!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        user.refresh_from_db()
        assert user.check_password('TestPass123!')

    def test_repeat_requests_look_the_same_for_any_email(self, api_client, user):
        """Known and unknown emails get identical status codes, throttled or not."""
        url = reverse('users:password-reset')

        known = [api_client.post(url, {'email': user.email}).status_code for _ in range(2)]
        unknown = [api_client.post(url, {'email': 'nobody@example.com'}).status_code for _ in range(2)]

        assert known == unknown == [status.HTTP_200_OK, status.HTTP_200_OK]
        assert VerificationCode.objects.filter(email=user.email).count() == 1

    def test_send_reset_code_twice_not_throttled_visibly(self, api_client, user):
        url = reverse('users:send-code')
        api_client.post(url, {'email': user.email, 'purpose': 'reset'})
        response = api_client.post(url, {'email': user.email, 'purpose': 'reset'})

        assert response.status_code == status.HTTP_200_OK
        assert 'Retry-After' not in response

    def test_confirm_reset_short_numeric_password(self, api_client, user, reset_code):
        url = reverse('users:password-reset-confirm')
        data = {'email': user.email, 'code': '246810', 'new_password': '1234'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('1234')
