"""
Flat connection service.

Administrator-driven linking of flats and group discovery over the
persisted links.
"""

import logging
from typing import Iterable, List

from django.db import transaction

from apps.flats.models import Flat

from .adjacency import find_group
from .exceptions import FlatNotFoundError, SelfConnectionError
from .flat_management import get_flat, load_adjacency

logger = logging.getLogger(__name__)


@transaction.atomic
def connect_flats(*, flat_number: str, target_numbers: Iterable[str]) -> Flat:
    """
    Link a flat to one or more other flats, in both directions.

    All flats involved are locked and validated before anything is written,
    so a missing target leaves every flat untouched. Links that already
    exist are kept as they are.

    Args:
        flat_number: Source flat
        target_numbers: Flats to link the source to

    Returns:
        The source Flat instance

    Raises:
        FlatNotFoundError: If the source or any target doesn't exist
        SelfConnectionError: If the source appears among the targets
    """
    flat_number = (flat_number or '').strip()
    targets = list(dict.fromkeys(
        number.strip() for number in target_numbers if number and number.strip()
    ))

    if flat_number in targets:
        raise SelfConnectionError(f"Flat {flat_number} cannot be connected to itself")

    wanted = [flat_number] + targets
    found = {
        flat.flat_number: flat
        for flat in Flat.objects.select_for_update().filter(flat_number__in=wanted)
    }

    missing = [number for number in wanted if number not in found]
    if missing:
        raise FlatNotFoundError(
            f"Flat(s) not found: {', '.join(missing)}",
            missing,
        )

    source = found[flat_number]
    for target_number in targets:
        source.connected_flats.add(found[target_number])

    logger.info("Connected flat %s to %s", flat_number, ', '.join(targets))
    return source


def find_flat_group(*, flat_number: str) -> List[str]:
    """
    Get the group of an existing flat, in discovery order.

    Raises:
        FlatNotFoundError: If flat doesn't exist
    """
    get_flat(flat_number=flat_number)
    return find_group(load_adjacency(), flat_number)
