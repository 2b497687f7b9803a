"""
Leave request endpoints.
- Users: see and create their own requests
- Super users: see all, create on behalf of others, approve/deny
"""
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from api.models import LeaveStatus
from api.permissions import IsLeaveOwnerOrSuperUser, IsSuperUser, get_principal
from api.repository import LeaveNotifierRepository
from api.serializers import LeaveCreateSerializer, LeaveSerializer, LeaveStatusSerializer


class LeaveViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = LeaveSerializer
    permission_classes = [IsLeaveOwnerOrSuperUser]
    filterset_fields = ['status', 'means', 'user']
    repository_class = LeaveNotifierRepository

    def get_repository(self):
        return self.repository_class()

    def get_queryset(self):
        principal = get_principal(self.request)
        repository = self.get_repository()
        if principal.is_super_user:
            return repository.get_all_leaves()
        return repository.get_leaves_by_user(principal.username)

    def get_object(self):
        leave = self.get_repository().get_leave_by_id(self.kwargs['pk'])
        self.check_object_permissions(self.request, leave)
        return leave

    def get_serializer_class(self):
        if self.action == 'create':
            return LeaveCreateSerializer
        if self.action in ('approve', 'deny'):
            return LeaveStatusSerializer
        return LeaveSerializer

    def retrieve(self, request, pk=None):
        return Response(LeaveSerializer(self.get_object()).data)

    @extend_schema(request=LeaveCreateSerializer, responses={201: LeaveSerializer})
    def create(self, request):
        serializer = LeaveCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        principal = get_principal(request)
        if not (principal.is_super_user and data.get('user')):
            data['user'] = principal.username

        leave = self.get_repository().create_leave(data)
        return Response(LeaveSerializer(leave).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=LeaveStatusSerializer, responses=LeaveSerializer)
    @action(detail=True, methods=['post'], permission_classes=[IsSuperUser])
    def approve(self, request, pk=None):
        return self._set_status(request, pk, LeaveStatus.APPROVED)

    @extend_schema(request=LeaveStatusSerializer, responses=LeaveSerializer)
    @action(detail=True, methods=['post'], permission_classes=[IsSuperUser])
    def deny(self, request, pk=None):
        return self._set_status(request, pk, LeaveStatus.DENIED)

    def _set_status(self, request, pk, new_status):
        serializer = LeaveStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        leave = self.get_repository().set_leave_status(
            pk,
            new_status,
            responded_by=get_principal(request).username,
            note=serializer.validated_data.get('note', ''),
        )
        return Response(LeaveSerializer(leave).data)
