"""
Read-only payment queries.

Provides the "has this flat paid for the period" predicate that flat group
statistics are computed from. A period is a ``(month, year)`` pair with
``month`` in 1..12; when omitted, the current local month is used.
"""

from decimal import Decimal
from typing import Callable, Optional, Set, Tuple

from django.db.models import Sum
from django.utils import timezone

from apps.payments.models import Payment

from .exceptions import InvalidPeriodError


def current_period() -> Tuple[int, int]:
    """Return ``(month, year)`` of today's local date."""
    today = timezone.localdate()
    return today.month, today.year


def resolve_period(month: Optional[int] = None, year: Optional[int] = None) -> Tuple[int, int]:
    """
    Fill in a missing month or year from the current period and validate.

    Raises:
        InvalidPeriodError: If month is not 1-12 or year is not positive
    """
    current_month, current_year = current_period()
    month = current_month if month is None else int(month)
    year = current_year if year is None else int(year)

    if not 1 <= month <= 12:
        raise InvalidPeriodError(f"Invalid month: {month}. Must be between 1 and 12")
    if year < 1:
        raise InvalidPeriodError(f"Invalid year: {year}")

    return month, year


def paid_flat_numbers(*, month: Optional[int] = None, year: Optional[int] = None) -> Set[str]:
    month, year = resolve_period(month, year)
    return set(
        Payment.objects
        .filter(month=month, year=year)
        .values_list('flat_id', flat=True)
    )


def has_paid_predicate(
    *,
    month: Optional[int] = None,
    year: Optional[int] = None
) -> Callable[[str], bool]:
    """
    Build a predicate answering whether a flat paid for the period.

    The paid set is fetched once; the predicate itself does no queries.
    """
    paid = paid_flat_numbers(month=month, year=year)
    return paid.__contains__


def collected_amount(*, month: Optional[int] = None, year: Optional[int] = None) -> Decimal:
    month, year = resolve_period(month, year)
    total = (
        Payment.objects
        .filter(month=month, year=year)
        .aggregate(total=Sum('amount'))['total']
    )
    return total or Decimal('0.00')
