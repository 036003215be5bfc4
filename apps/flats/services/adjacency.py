"""
Flat adjacency model and group algorithms.

This module is pure Python and never touches the database. Services load a
snapshot of the flat table into an ``AdjacencyModel`` and run the algorithms
below on it:

    find_group:           depth-first discovery of a flat's group
    find_all_groups:      partition of every known flat into groups
    find_placement_group: first under-sized group a new flat can join
    place_flat:           link a new flat into that group
    group_stats:          paid/due counts of a group for one billing period

Example:
    Building a snapshot by hand::

        model = AdjacencyModel.from_flats([
            ('101', ['102']),
            ('102', ['101']),
            ('103', []),
        ])
        find_group(model, '101')   # ['101', '102']
        find_group(model, '103')   # ['103']
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

TARGET_GROUP_SIZE = 3
MAX_CONNECTIONS = 2


class AdjacencyModel:
    """
    Mapping from flat number to the ordered list of flats it links to.

    Links are stored per flat, so ``add_link`` writes one direction only.
    Use ``connect`` to write both.
    """

    def __init__(self, adjacency: Optional[Dict[str, List[str]]] = None):
        self._adjacency: Dict[str, List[str]] = {}
        for flat_id, targets in (adjacency or {}).items():
            self.add_flat(flat_id)
            for target_id in targets:
                self.add_link(flat_id, target_id)

    @classmethod
    def from_flats(cls, flats: Iterable[Tuple[str, Iterable[str]]]) -> 'AdjacencyModel':
        """Build a snapshot from ``(flat_number, connected_numbers)`` pairs."""
        model = cls()
        for flat_id, targets in flats:
            model.add_flat(flat_id)
            for target_id in targets:
                model.add_link(flat_id, target_id)
        return model

    def __contains__(self, flat_id) -> bool:
        return flat_id in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self):
        return f"AdjacencyModel({self._adjacency!r})"

    def add_flat(self, flat_id: str) -> None:
        self._adjacency.setdefault(flat_id, [])

    def flat_ids(self) -> List[str]:
        """Known flats in ascending identifier order."""
        return sorted(self._adjacency)

    def neighbors(self, flat_id: str) -> List[str]:
        """Stored links of ``flat_id``; empty for an unknown flat."""
        return list(self._adjacency.get(flat_id, ()))

    def add_link(self, flat_id: str, target_id: str) -> bool:
        """
        Append ``target_id`` to the links of ``flat_id``.

        Idempotent. Returns True when the link was not present before.
        """
        targets = self._adjacency.setdefault(flat_id, [])
        if target_id in targets:
            return False
        targets.append(target_id)
        return True

    def connect(self, flat_id: str, target_id: str) -> None:
        """Link two flats in both directions."""
        self.add_link(flat_id, target_id)
        self.add_link(target_id, flat_id)

    def as_dict(self) -> Dict[str, List[str]]:
        return {flat_id: list(targets) for flat_id, targets in self._adjacency.items()}


def find_group(model: AdjacencyModel, start_id: str) -> List[str]:
    """
    Return every flat reachable from ``start_id``, in visitation order.

    The traversal is seeded with ``start_id`` whether or not it is a known
    flat, so the result always contains it. Links are followed in the
    direction they are stored.
    """
    visited = set()
    group = []
    stack = [start_id]

    while stack:
        flat_id = stack.pop()
        if flat_id in visited:
            continue
        visited.add(flat_id)
        group.append(flat_id)
        # Reversed so the first stored neighbour is visited first
        for neighbor_id in reversed(model.neighbors(flat_id)):
            if neighbor_id not in visited:
                stack.append(neighbor_id)

    return group


def find_all_groups(model: AdjacencyModel) -> List[List[str]]:
    """Partition all known flats into groups, scanning in identifier order."""
    seen = set()
    groups = []

    for flat_id in model.flat_ids():
        if flat_id in seen:
            continue
        group = find_group(model, flat_id)
        seen.update(group)
        groups.append(group)

    return groups


def extended_group(model: AdjacencyModel, flat_id: str) -> List[str]:
    """
    Flat, its direct links, and their direct links.

    A two-hop expansion, not a full traversal.
    """
    members = [flat_id]
    for neighbor_id in model.neighbors(flat_id):
        if neighbor_id not in members:
            members.append(neighbor_id)
        for second_id in model.neighbors(neighbor_id):
            if second_id not in members:
                members.append(second_id)
    return members


def find_placement_group(
    model: AdjacencyModel,
    target_size: int = TARGET_GROUP_SIZE,
    max_connections: int = MAX_CONNECTIONS,
) -> List[str]:
    """
    Find the first group with room for a new flat.

    Flats are scanned in ascending identifier order. A flat with fewer than
    ``max_connections`` links is a candidate; the first candidate whose
    extended group is smaller than ``target_size`` wins.

    Returns:
        Members of the target group, or an empty list when every group is full.
    """
    for flat_id in model.flat_ids():
        if len(model.neighbors(flat_id)) >= max_connections:
            continue
        members = extended_group(model, flat_id)
        if len(members) < target_size:
            return members
    return []


def place_flat(
    model: AdjacencyModel,
    new_id: str,
    target_size: int = TARGET_GROUP_SIZE,
    max_connections: int = MAX_CONNECTIONS,
) -> List[str]:
    """
    Add ``new_id`` to the model and link it into an under-sized group.

    The target group is chosen from the model as it was before ``new_id``
    was added. Every member gets a link to the new flat and the new flat
    gets a link to every member.

    Returns:
        The members the new flat was linked to (empty if it starts alone).
    """
    members = find_placement_group(model, target_size, max_connections)
    model.add_flat(new_id)

    if not members or len(members) >= target_size:
        return []

    for member_id in members:
        model.add_link(member_id, new_id)
        model.add_link(new_id, member_id)

    return members


def group_stats(members: Iterable[str], has_paid: Callable[[str], bool]) -> Dict[str, int]:
    """
    Count paid and due flats of a group.

    Args:
        members: Flat numbers of the group
        has_paid: Predicate telling whether a flat paid for the period of interest

    Returns:
        dict with ``total``, ``paid`` and ``due``
    """
    members = list(members)
    paid = sum(1 for flat_id in members if has_paid(flat_id))
    return {
        'total': len(members),
        'paid': paid,
        'due': len(members) - paid,
    }
