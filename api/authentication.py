from dataclasses import dataclass

SUPER_USER_CLAIM = 'SuperUser'


def claim_is_true(value):
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return value is True


@dataclass(frozen=True)
class Principal:
    """
    Authenticated caller as seen by permissions and views.

    For JWT requests the claims come from the validated token; for session
    (cookie) requests they are read from the user record.
    """
    username: str
    is_super_user: bool = False
    is_authenticated: bool = True

    @classmethod
    def anonymous(cls):
        return cls(username='', is_super_user=False, is_authenticated=False)

    @classmethod
    def from_request(cls, request):
        user = getattr(request, 'user', None)
        if not user or not user.is_authenticated:
            return cls.anonymous()

        payload = getattr(getattr(request, 'auth', None), 'payload', None)
        if payload is not None:
            is_super_user = claim_is_true(payload.get(SUPER_USER_CLAIM))
        else:
            is_super_user = bool(getattr(user, 'is_super_user', False))

        return cls(username=user.get_username(), is_super_user=is_super_user)

    def owns(self, leave):
        return self.is_authenticated and leave.user == self.username
