from rest_framework import serializers
from api.models import User


class UserSerializer(serializers.ModelSerializer):
    """
    API shape of a user account.
    Credential material and internal account flags are never exposed.
    """
    super_user = serializers.BooleanField(source='is_super_user', read_only=True)

    class Meta:
        model = User
        fields = ['username', 'email', 'first_name', 'last_name', 'super_user']
        read_only_fields = ['username', 'super_user']
