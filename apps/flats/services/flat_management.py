"""
Flat management service.

Handles flat lookup and creation. Creation runs the placement heuristic and
persists the new flat together with its links in one transaction.
"""

import logging
from typing import List

from django.conf import settings
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.flats.models import Flat, FlatLink

from .adjacency import (
    AdjacencyModel,
    MAX_CONNECTIONS,
    TARGET_GROUP_SIZE,
    place_flat,
)
from .exceptions import (
    FlatNotFoundError,
    DuplicateFlatError,
    InvalidFlatNumberError,
    NoActiveOwnerError,
)

logger = logging.getLogger(__name__)


def load_adjacency(*, for_update: bool = False) -> AdjacencyModel:
    """
    Snapshot every flat and its links.

    Args:
        for_update: Lock the flat rows until the surrounding transaction ends.
            Must be called inside ``transaction.atomic`` when True.

    Returns:
        AdjacencyModel keyed by flat number, links in the order they were made
    """
    flats = Flat.objects.order_by('flat_number')
    if for_update:
        flats = flats.select_for_update()

    model = AdjacencyModel()
    for flat in flats:
        model.add_flat(flat.flat_number)

    links = (
        FlatLink.objects
        .order_by('id')
        .values_list('from_flat__flat_number', 'to_flat__flat_number')
    )
    for from_number, to_number in links:
        model.add_link(from_number, to_number)

    return model


def get_flat(*, flat_number: str) -> Flat:
    """
    Get a flat by its number.

    Raises:
        FlatNotFoundError: If flat doesn't exist
    """
    try:
        return Flat.objects.get(flat_number=flat_number)
    except Flat.DoesNotExist:
        raise FlatNotFoundError(f"Flat {flat_number} not found", [flat_number])


def list_flats() -> QuerySet[Flat]:
    return Flat.objects.order_by('flat_number')


def list_available_flats() -> QuerySet[Flat]:
    """Flats without an active resident, for the registration form."""
    return (
        Flat.objects
        .exclude(residents__is_active=True)
        .order_by('flat_number')
        .distinct()
    )


@transaction.atomic
def create_flat(*, flat_number: str, auto_place: bool = True) -> Flat:
    """
    Create a flat and join it to the first group with room.

    The whole flat table is locked while the placement heuristic reads it,
    so two concurrent creations cannot both fill the same group.

    Args:
        flat_number: Number of the new flat
        auto_place: Run the placement heuristic (default True)

    Returns:
        Created Flat instance

    Raises:
        InvalidFlatNumberError: If flat number is blank
        DuplicateFlatError: If a flat with this number exists
    """
    flat_number = (flat_number or '').strip()
    if not flat_number:
        raise InvalidFlatNumberError("Flat number is required")

    model = load_adjacency(for_update=True)
    if flat_number in model:
        raise DuplicateFlatError(f"Flat {flat_number} already exists")

    members: List[str] = []
    if auto_place:
        members = place_flat(
            model,
            flat_number,
            target_size=getattr(settings, 'FLAT_GROUP_TARGET_SIZE', TARGET_GROUP_SIZE),
            max_connections=getattr(settings, 'FLAT_GROUP_MAX_CONNECTIONS', MAX_CONNECTIONS),
        )

    try:
        with transaction.atomic():
            flat = Flat.objects.create(flat_number=flat_number)
    except IntegrityError:
        # Lost a race with a concurrent creation of the same number
        raise DuplicateFlatError(f"Flat {flat_number} already exists")

    member_flats = {
        f.flat_number: f for f in Flat.objects.filter(flat_number__in=members)
    }
    # One at a time to keep link order equal to group order
    for member_number in members:
        flat.connected_flats.add(member_flats[member_number])

    if members:
        logger.info("Created flat %s in group with %s", flat_number, ', '.join(members))
    else:
        logger.info("Created flat %s in a new group", flat_number)

    return flat


@transaction.atomic
def clear_flat_owner(*, flat_number: str) -> None:
    """
    Remove the active resident of a flat.

    Raises:
        FlatNotFoundError: If flat doesn't exist
        NoActiveOwnerError: If no active resident is assigned
    """
    flat = get_flat(flat_number=flat_number)

    resident = (
        flat.residents
        .select_for_update()
        .filter(is_active=True)
        .first()
    )
    if resident is None:
        raise NoActiveOwnerError(f"No active user assigned to flat {flat_number}")

    logger.info("Clearing resident %s from flat %s", resident.username, flat_number)
    resident.delete()
