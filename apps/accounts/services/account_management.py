"""Administrator account management service."""

import logging
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserNotFoundError, FlatUnavailableError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def toggle_user_active(*, user_id: UUID) -> User:
    """
    Flip a user's active flag.

    Deactivating a resident frees their flat for a new registration.

    Raises:
        UserNotFoundError: If user doesn't exist
        FlatUnavailableError: If reactivating would give the flat two residents
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    if not user.is_active and user.flat_id:
        taken = (
            User.objects
            .filter(flat_id=user.flat_id, is_active=True)
            .exclude(id=user.id)
            .exists()
        )
        if taken:
            raise FlatUnavailableError(
                f"Flat {user.flat_id} is already assigned to another user"
            )

    user.is_active = not user.is_active
    user.save(update_fields=['is_active'])

    logger.info("User %s is now %s", user.username, 'active' if user.is_active else 'inactive')
    return user
