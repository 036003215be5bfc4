"""User authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, login: str, password: str) -> User:
    """
    Authenticate user with username or email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        login: Username or email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    users = User.objects.select_for_update()
    # An exact username wins over another account's email
    user = (
        users.filter(username=login).first()
        or users.filter(email__iexact=login).first()
    )
    if user is None:
        raise InvalidCredentialsError("Invalid credentials")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid credentials")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
