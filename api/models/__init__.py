from .user import User, UserManager
from .leave import Leave, LeaveMeans, LeaveStatus

__all__ = [
    'User',
    'UserManager',
    'Leave',
    'LeaveMeans',
    'LeaveStatus',
]
