"""
Payments app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    PaymentsServiceError,
    FlatNotFoundError,
    DuplicatePaymentError,
    PaymentNotFoundError,
    InsufficientPermissionsError,
    InvalidPeriodError,
)

from .payment_queries import (
    current_period,
    resolve_period,
    paid_flat_numbers,
    has_paid_predicate,
    collected_amount,
)

from .payment_management import (
    create_payment,
    list_payments,
    get_flat_payments,
    delete_payment,
)


__all__ = [
    # Exceptions
    'PaymentsServiceError',
    'FlatNotFoundError',
    'DuplicatePaymentError',
    'PaymentNotFoundError',
    'InsufficientPermissionsError',
    'InvalidPeriodError',

    # Queries
    'current_period',
    'resolve_period',
    'paid_flat_numbers',
    'has_paid_predicate',
    'collected_amount',

    # Management
    'create_payment',
    'list_payments',
    'get_flat_payments',
    'delete_payment',
]
