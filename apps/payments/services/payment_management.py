"""
Payment management service.

Handles recording, listing and deleting maintenance payments.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.flats.models import Flat
from apps.payments.models import Payment, PaymentMode

from .exceptions import (
    FlatNotFoundError,
    DuplicatePaymentError,
    PaymentNotFoundError,
    InsufficientPermissionsError,
)
from .payment_queries import resolve_period

logger = logging.getLogger(__name__)

DUPLICATE_PAYMENT_MESSAGE = "Payment already exists for this flat, month, and year"


@transaction.atomic
def create_payment(
    *,
    user: User,
    flat_number: str,
    month: int,
    year: int,
    amount: Decimal,
    paid_on: date,
    payment_mode: str = PaymentMode.UPI,
    note: str = ''
) -> Payment:
    """
    Record a maintenance payment.

    Residents may only pay for their own flat; admins for any flat.

    Args:
        user: User recording the payment
        flat_number: Flat being paid for
        month: Billing month (1-12)
        year: Billing year
        amount: Amount paid
        paid_on: Date the money was received
        payment_mode: How it was paid
        note: Optional free text

    Returns:
        Created Payment instance

    Raises:
        InsufficientPermissionsError: If a resident pays for another flat
        InvalidPeriodError: If month/year are out of range
        FlatNotFoundError: If flat doesn't exist
        DuplicatePaymentError: If the flat already paid for the month
    """
    if not user.is_admin and user.flat_id != flat_number:
        raise InsufficientPermissionsError("You can only add payments for your own flat")

    month, year = resolve_period(month, year)

    try:
        flat = Flat.objects.get(flat_number=flat_number)
    except Flat.DoesNotExist:
        raise FlatNotFoundError("Flat does not exist")

    if Payment.objects.filter(flat=flat, month=month, year=year).exists():
        raise DuplicatePaymentError(DUPLICATE_PAYMENT_MESSAGE)

    try:
        with transaction.atomic():
            payment = Payment.objects.create(
                flat=flat,
                month=month,
                year=year,
                amount=amount,
                paid_on=paid_on,
                payment_mode=payment_mode,
                note=note,
                recorded_by=user,
            )
    except IntegrityError:
        raise DuplicatePaymentError(DUPLICATE_PAYMENT_MESSAGE)

    logger.info(
        "Recorded payment of %s for flat %s (%s/%s) by %s",
        amount, flat_number, month, year, user.username
    )
    return payment


def list_payments(
    *,
    user: User,
    flat_number: Optional[str] = None,
    month: Optional[int] = None,
    year: Optional[int] = None
) -> QuerySet[Payment]:
    """
    List payments visible to the user, newest first.

    Residents always get only their own flat's payments; the
    ``flat_number`` filter applies to admins.
    """
    payments = Payment.objects.select_related('flat', 'recorded_by')

    if not user.is_admin:
        if not user.flat_id:
            return payments.none()
        payments = payments.filter(flat_id=user.flat_id)
    elif flat_number:
        payments = payments.filter(flat_id=flat_number)

    if month is not None:
        payments = payments.filter(month=month)
    if year is not None:
        payments = payments.filter(year=year)

    return payments.order_by('-paid_on', '-created_at')


def get_flat_payments(*, flat_number: str) -> QuerySet[Payment]:
    """
    Payments of one flat, latest billing period first.

    Raises:
        FlatNotFoundError: If flat doesn't exist
    """
    if not Flat.objects.filter(flat_number=flat_number).exists():
        raise FlatNotFoundError(f"Flat {flat_number} not found")

    return (
        Payment.objects
        .filter(flat_id=flat_number)
        .order_by('-year', '-month')
    )


@transaction.atomic
def delete_payment(*, payment_id: int) -> None:
    """
    Delete a payment (admin only, enforced by the view).

    Raises:
        PaymentNotFoundError: If payment doesn't exist
    """
    try:
        payment = Payment.objects.select_for_update().get(id=payment_id)
    except Payment.DoesNotExist:
        raise PaymentNotFoundError("Payment not found")

    logger.info("Deleting payment %s of flat %s", payment.id, payment.flat_id)
    payment.delete()
