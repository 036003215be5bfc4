"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    FlatUnavailableError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import toggle_user_active

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'FlatUnavailableError',
    # Services
    'register_user',
    'authenticate_user',
    'toggle_user_active',
]
