import pytest

from apps.accounts.models import User
from apps.accounts.services import authenticate_user
from apps.accounts.services.exceptions import InvalidCredentialsError


@pytest.mark.django_db
class TestAuthenticateUser:
    """Tests for user_authentication.authenticate_user"""

    def test_username_wins_over_other_users_email(self, user):
        other = User.objects.create_user(
            username=user.email,
            email='other@example.com',
            password='OtherPass123!',
        )

        assert authenticate_user(login=user.email, password='OtherPass123!') == other

    def test_email_login_when_no_username_matches(self, user):
        assert authenticate_user(login='TESTUSER@example.com', password='TestPass123!') == user

    def test_email_owner_password_rejected_when_username_matches(self, user):
        User.objects.create_user(
            username=user.email,
            email='other@example.com',
            password='OtherPass123!',
        )

        with pytest.raises(InvalidCredentialsError):
            authenticate_user(login=user.email, password='TestPass123!')
