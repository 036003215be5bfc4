"""
Flats app services layer.

Services contain business logic and orchestrate operations across models.
Group algorithms live in ``adjacency`` and never touch the database; the
other modules load snapshots and persist changes inside transactions.
"""

from .exceptions import (
    FlatsServiceError,
    FlatNotFoundError,
    DuplicateFlatError,
    InvalidFlatNumberError,
    SelfConnectionError,
    NoActiveOwnerError,
)

from .adjacency import (
    AdjacencyModel,
    find_group,
    find_all_groups,
    find_placement_group,
    place_flat,
    group_stats,
)

from .flat_management import (
    load_adjacency,
    get_flat,
    list_flats,
    list_available_flats,
    create_flat,
    clear_flat_owner,
)

from .flat_connections import (
    connect_flats,
    find_flat_group,
)

from .group_statistics import (
    flat_group_summary,
    all_groups_summary,
    collection_summary,
)


__all__ = [
    # Exceptions
    'FlatsServiceError',
    'FlatNotFoundError',
    'DuplicateFlatError',
    'InvalidFlatNumberError',
    'SelfConnectionError',
    'NoActiveOwnerError',

    # Group algorithms
    'AdjacencyModel',
    'find_group',
    'find_all_groups',
    'find_placement_group',
    'place_flat',
    'group_stats',

    # Flat management
    'load_adjacency',
    'get_flat',
    'list_flats',
    'list_available_flats',
    'create_flat',
    'clear_flat_owner',

    # Connections
    'connect_flats',
    'find_flat_group',

    # Statistics
    'flat_group_summary',
    'all_groups_summary',
    'collection_summary',
]
