"""
Group statistics service.

Combines group discovery with the payments "has paid" predicate to report
how much of a group, or of the whole building, has paid for a month.
All functions are read-only and return plain dicts.
"""

from typing import Optional

from apps.payments.services import collected_amount, has_paid_predicate, resolve_period

from .adjacency import find_all_groups, find_group, group_stats
from .flat_management import get_flat, load_adjacency


def flat_group_summary(
    *,
    flat_number: str,
    month: Optional[int] = None,
    year: Optional[int] = None
) -> dict:
    """
    Group of a flat with its payment completion for one month.

    Args:
        flat_number: Flat whose group is reported
        month: Billing month, current month if None
        year: Billing year, current year if None

    Returns:
        dict with ``flat_number``, ``month``, ``year``, ``group`` (discovery
        order), ``connected_flats`` (group without the flat itself) and
        ``stats`` (total/paid/due)

    Raises:
        FlatNotFoundError: If flat doesn't exist
        InvalidPeriodError: If month/year are out of range
    """
    get_flat(flat_number=flat_number)
    month, year = resolve_period(month, year)

    members = find_group(load_adjacency(), flat_number)
    has_paid = has_paid_predicate(month=month, year=year)

    return {
        'flat_number': flat_number,
        'month': month,
        'year': year,
        'group': members,
        'connected_flats': [member for member in members if member != flat_number],
        'stats': group_stats(members, has_paid),
    }


def all_groups_summary(*, month: Optional[int] = None, year: Optional[int] = None) -> dict:
    """Every group of the building with its payment completion."""
    month, year = resolve_period(month, year)
    has_paid = has_paid_predicate(month=month, year=year)

    groups = []
    for index, members in enumerate(find_all_groups(load_adjacency()), start=1):
        groups.append({
            'index': index,
            'flats': members,
            'paid_flats': [member for member in members if has_paid(member)],
            'stats': group_stats(members, has_paid),
        })

    return {
        'month': month,
        'year': year,
        'group_count': len(groups),
        'groups': groups,
    }


def collection_summary(*, month: Optional[int] = None, year: Optional[int] = None) -> dict:
    """Building-wide paid/due counts and the amount collected for a month."""
    month, year = resolve_period(month, year)
    has_paid = has_paid_predicate(month=month, year=year)
    flats = load_adjacency().flat_ids()

    return {
        'month': month,
        'year': year,
        **group_stats(flats, has_paid),
        'collected_amount': collected_amount(month=month, year=year),
    }
