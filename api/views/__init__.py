from .auth import LoginView
from .users import UserViewSet
from .leave import LeaveViewSet

__all__ = [
    'LoginView',
    'UserViewSet',
    'LeaveViewSet',
]
