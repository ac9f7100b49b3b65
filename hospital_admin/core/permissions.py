"""API permissions.

Authorization beyond "has a data service session" is enforced by the data
service itself (row level security); the API only rejects anonymous callers.
"""

from rest_framework.permissions import BasePermission


class HasDataServiceSession(BasePermission):
    message = 'A data service access token is required.'

    def has_permission(self, request, view):
        return bool(getattr(request, 'auth', None))
