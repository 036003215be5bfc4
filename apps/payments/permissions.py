"""
Custom permission classes for payments app.

Residents only ever see their own flat's payments; administrators see and
manage every payment.
"""
from rest_framework.permissions import BasePermission


class CanAccessFlatPayments(BasePermission):
    """
    Permission to view the payments of the flat named in the URL.

    Usage:
        @permission_classes([IsAuthenticated, CanAccessFlatPayments])
        def flat_payments(request, flat_number):
            ...
    """

    message = 'You can only view payments of your own flat.'

    def has_permission(self, request, view):
        flat_number = view.kwargs.get('flat_number')
        if flat_number is None:
            return True
        return request.user.can_access_flat(flat_number)
