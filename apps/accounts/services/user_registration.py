"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from django.db.models import Q

from apps.accounts.models import UserRole
from apps.flats.models import Flat

from .exceptions import UserRegistrationError, FlatUnavailableError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    email: str,
    password: str,
    flat_number: str,
    contact: str = ""
) -> User:
    """
    Register a new resident and assign them to a flat.

    The flat row is locked so two people cannot claim the same flat at once.

    Args:
        username: Login name
        email: User's email address
        password: User's password (will be hashed)
        flat_number: Flat the resident lives in
        contact: Optional phone number

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If username or email is taken
        FlatUnavailableError: If flat doesn't exist or is already assigned
    """
    if User.objects.filter(Q(email__iexact=email) | Q(username=username)).exists():
        raise UserRegistrationError("User already exists with this email or username")

    try:
        flat = Flat.objects.select_for_update().get(flat_number=flat_number)
    except Flat.DoesNotExist:
        raise FlatUnavailableError("Flat does not exist. Please contact the admin.")

    if flat.residents.filter(is_active=True).exists():
        raise FlatUnavailableError("Flat is already assigned to another user")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                email=email,
                password=password,
                role=UserRole.USER,
                flat=flat,
                contact=contact,
            )
    except IntegrityError:
        raise UserRegistrationError("User already exists with this email or username")

    logger.info("Registered resident %s for flat %s", username, flat_number)
    return user
