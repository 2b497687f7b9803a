from django.core.exceptions import ValidationError
from django.db import models


class LeaveMeans(models.IntegerChoices):
    """How the leave was requested"""
    EMAIL = 0, 'Email'
    IN_PERSON = 1, 'In person'
    PHONE = 2, 'Phone'
    OTHER = 3, 'Other'


class LeaveStatus(models.IntegerChoices):
    PENDING = 0, 'Pending'
    APPROVED = 1, 'Approved'
    DENIED = 2, 'Denied'


class Leave(models.Model):
    """
    Leave (vacation/absence) request.
    `user` holds the requester's username; it is a reference, not a foreign key.
    Column names follow the existing `Leaves` table.
    """
    id = models.AutoField(primary_key=True)
    user = models.CharField(max_length=150, db_column='user', db_index=True)

    from_date = models.DateField(db_column='from')
    to_date = models.DateField(db_column='to')
    justification = models.TextField(blank=True, default='')

    means = models.IntegerField(choices=LeaveMeans.choices, default=LeaveMeans.EMAIL)
    status = models.IntegerField(choices=LeaveStatus.choices, default=LeaveStatus.PENDING)

    # Decision
    response_note = models.TextField(blank=True, default='')
    responded_by = models.CharField(max_length=150, blank=True, default='')
    responded_at = models.DateTimeField(null=True, blank=True)

    date_created = models.DateTimeField(auto_now_add=True, db_column='dateCreated')

    class Meta:
        db_table = 'Leaves'
        ordering = ['-date_created', '-id']

    def __str__(self):
        return f"{self.user} - {self.from_date} to {self.to_date} ({self.get_status_display()})"

    def clean(self):
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValidationError({'to_date': 'The end date cannot be before the start date.'})

    @property
    def duration_days(self):
        """Inclusive number of calendar days covered"""
        return (self.to_date - self.from_date).days + 1
