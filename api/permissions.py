from rest_framework import permissions

from api.authentication import Principal


def get_principal(request):
    """Principal for this request, computed once and cached on the request"""
    principal = getattr(request, '_principal', None)
    if principal is None:
        principal = Principal.from_request(request)
        request._principal = principal
    return principal


class IsSuperUser(permissions.BasePermission):
    """
    SuperUsers policy.
    Allows only authenticated callers holding the SuperUser=true claim.
    """
    message = 'The SuperUser claim is required for this action.'

    def has_permission(self, request, view):
        principal = get_principal(request)
        return principal.is_authenticated and principal.is_super_user


class IsLeaveOwnerOrSuperUser(permissions.BasePermission):
    """
    Permission check for a single leave:
    - Super users: any leave
    - Other authenticated users: only leaves they requested
    """
    message = 'You can only access your own leave requests.'

    def has_permission(self, request, view):
        return get_principal(request).is_authenticated

    def has_object_permission(self, request, view, obj):
        principal = get_principal(request)
        return principal.is_super_user or principal.owns(obj)
