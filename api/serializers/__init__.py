from .user import UserSerializer
from .auth import LeaveNotifierTokenObtainPairSerializer
from .leave import LeaveSerializer, LeaveCreateSerializer, LeaveStatusSerializer

__all__ = [
    'UserSerializer',
    'LeaveNotifierTokenObtainPairSerializer',
    'LeaveSerializer',
    'LeaveCreateSerializer',
    'LeaveStatusSerializer',
]
