"""
Read-only user administration endpoints, restricted to the SuperUsers policy
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.response import Response

from api.exceptions import NotFoundError
from api.permissions import IsSuperUser
from api.repository import LeaveNotifierRepository
from api.serializers import UserSerializer

logger = logging.getLogger(__name__)


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user accounts.
    - list: every user
    - retrieve: one user by username
    """
    permission_classes = [IsSuperUser]
    lookup_field = 'username'
    lookup_value_regex = r'[^/]+'
    repository_class = LeaveNotifierRepository

    def get_repository(self):
        return self.repository_class()

    @extend_schema(responses=UserSerializer(many=True), summary='List all users')
    def list(self, request):
        users = self.get_repository().get_all_users()
        return Response(UserSerializer(users, many=True).data)

    @extend_schema(responses=UserSerializer, summary='Get a user by username')
    def retrieve(self, request, username=None):
        try:
            user = self.get_repository().get_user_by_username(username)
        except NotFoundError as e:
            logger.error(f"Exception occurred when getting user: {e}")
            raise NotFoundError(f"Cannot get user ({username}) information.")
        return Response(UserSerializer(user).data)
