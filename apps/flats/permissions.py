from rest_framework import permissions


class CanAccessFlat(permissions.BasePermission):
    """
    Permission: User must be an admin or the resident of the flat in the URL.
    """

    message = 'You can only access your own flat.'

    def has_permission(self, request, view):
        flat_number = view.kwargs.get('flat_number')
        if flat_number is None:
            return True
        return request.user.can_access_flat(flat_number)
