"""
Domain-specific exceptions for flats app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class FlatsServiceError(Exception):
    """Base exception for all flats service errors."""
    pass


class FlatNotFoundError(FlatsServiceError):
    """Raised when one or more flat numbers do not exist."""

    def __init__(self, message, flat_numbers=None):
        super().__init__(message)
        self.flat_numbers = list(flat_numbers or [])


class DuplicateFlatError(FlatsServiceError):
    """Raised when creating a flat whose number is already taken."""
    pass


class InvalidFlatNumberError(FlatsServiceError):
    """Raised when a flat number is blank."""
    pass


class SelfConnectionError(FlatsServiceError):
    """Raised when a flat is asked to connect to itself."""
    pass


class NoActiveOwnerError(FlatsServiceError):
    """Raised when a flat has no active resident to clear."""
    pass
