"""Domain-specific exceptions for payments services."""


class PaymentsServiceError(Exception):
    """Base exception for payments services."""
    pass


class FlatNotFoundError(PaymentsServiceError):
    """Raised when a payment refers to a flat that does not exist."""
    pass


class DuplicatePaymentError(PaymentsServiceError):
    """Raised when the flat already paid for the billing month."""
    pass


class PaymentNotFoundError(PaymentsServiceError):
    """Raised when a payment does not exist."""
    pass


class InsufficientPermissionsError(PaymentsServiceError):
    """Raised when a resident acts on a flat that is not theirs."""
    pass


class InvalidPeriodError(PaymentsServiceError):
    """Raised when month or year is out of range."""
    pass
