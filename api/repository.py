"""
Data access layer for users and leaves.

Views talk to `LeaveNotifierRepository` instead of building ORM queries
themselves. The repository keeps no state between calls; every mutation
runs in its own transaction.
"""
from django.db import transaction
from django.utils import timezone

from api.exceptions import NotFoundError, ValidationError
from api.models import Leave, LeaveMeans, LeaveStatus, User


class LeaveNotifierRepository:
    """Typed retrieval and mutation over users and leaves."""

    LEAVE_REQUIRED_FIELDS = ('user', 'from_date', 'to_date')

    # Users

    def get_all_users(self):
        return list(User.objects.all())

    def get_user_by_username(self, username):
        """
        Exact-match lookup.

        Raises:
            NotFoundError: no user has this username.
        """
        try:
            return User.objects.get(username=username)
        except User.DoesNotExist:
            raise NotFoundError(f"User ({username}) was not found.")

    def user_exists(self, username):
        return User.objects.filter(username=username).exists()

    # Leaves

    def get_all_leaves(self):
        return Leave.objects.all()

    def get_leaves_by_user(self, username):
        return Leave.objects.filter(user=username)

    def get_leave_by_id(self, leave_id):
        try:
            return Leave.objects.get(pk=leave_id)
        except (Leave.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Leave ({leave_id}) was not found.")

    def create_leave(self, data):
        """
        Persist a new leave request.

        Args:
            data: mapping with `user`, `from_date`, `to_date` and optionally
                `justification` and `means`.

        Returns:
            The saved Leave, with its id and creation time assigned.

        Raises:
            ValidationError: a required field is missing, the date range is
                inverted, the means is unknown or the user does not exist.
        """
        errors = {}
        for field in self.LEAVE_REQUIRED_FIELDS:
            if data.get(field) in (None, ''):
                errors[field] = ['This field is required.']

        means = data.get('means', LeaveMeans.EMAIL)
        if means not in LeaveMeans.values:
            errors['means'] = [f'"{means}" is not a valid choice.']

        if errors:
            raise ValidationError(errors)

        from_date = data['from_date']
        to_date = data['to_date']
        if from_date > to_date:
            raise ValidationError({'to_date': ['The end date cannot be before the start date.']})

        username = data['user']
        if not self.user_exists(username):
            raise ValidationError({'user': [f'User ({username}) does not exist.']})

        with transaction.atomic():
            leave = Leave.objects.create(
                user=username,
                from_date=from_date,
                to_date=to_date,
                justification=data.get('justification') or '',
                means=means,
                status=LeaveStatus.PENDING,
            )

        return leave

    def set_leave_status(self, leave_id, status, responded_by='', note=''):
        """
        Record a decision on a leave request.

        Raises:
            NotFoundError: no leave has this id.
            ValidationError: `status` is not a LeaveStatus value.
        """
        if status not in LeaveStatus.values:
            raise ValidationError({'status': [f'"{status}" is not a valid choice.']})

        with transaction.atomic():
            leave = self.get_leave_by_id(leave_id)
            leave.status = status
            leave.responded_by = responded_by or ''
            leave.response_note = note or ''
            leave.responded_at = timezone.now()
            leave.save(update_fields=['status', 'responded_by', 'response_note', 'responded_at'])

        return leave
