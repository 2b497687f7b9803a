from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from api.authentication import SUPER_USER_CLAIM


class LeaveNotifierTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Adds the SuperUser claim to issued tokens"""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['username'] = user.get_username()
        token[SUPER_USER_CLAIM] = bool(user.is_super_user)
        return token
