from datetime import date, timedelta

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from api.models import Leave, LeaveMeans, LeaveStatus, User


class Command(BaseCommand):
    help = 'Ensure the database holds the seed users and leave requests'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-leaves',
            action='store_true',
            help='Only create the seed users',
        )

    def _ensure_user(self, username, password, **defaults):
        user, created = User.objects.get_or_create(username=username, defaults=defaults)
        if created:
            user.set_password(password)
            user.save()
            self.stdout.write(self.style.SUCCESS(f'  ✓ Created user {username}'))
        else:
            self.stdout.write(f'  - User {username} already exists')
        return user

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('Ensuring seed data...'))

        self.stdout.write('Creating users...')
        self._ensure_user(
            'alice',
            settings.SEED_SUPERUSER_PASSWORD,
            email='alice@leavenotifier.local',
            first_name='Alice',
            is_super_user=True,
            is_staff=True,
        )
        bob = self._ensure_user(
            'bob',
            settings.SEED_USER_PASSWORD,
            email='bob@leavenotifier.local',
            first_name='Bob',
        )

        if options['no_leaves']:
            self.stdout.write(self.style.SUCCESS('Done (users only).'))
            return

        if Leave.objects.filter(user=bob.username).exists():
            self.stdout.write('  - Leave requests already seeded')
            self.stdout.write(self.style.SUCCESS('Done.'))
            return

        self.stdout.write('Creating leave requests...')
        today = date.today()
        leaves_data = [
            {
                'from_date': today + timedelta(days=7),
                'to_date': today + timedelta(days=11),
                'justification': 'Family vacation',
                'means': LeaveMeans.EMAIL,
                'status': LeaveStatus.PENDING,
            },
            {
                'from_date': today - timedelta(days=30),
                'to_date': today - timedelta(days=29),
                'justification': 'Medical appointment',
                'means': LeaveMeans.IN_PERSON,
                'status': LeaveStatus.APPROVED,
            },
            {
                'from_date': today - timedelta(days=60),
                'to_date': today - timedelta(days=45),
                'justification': 'Extended travel',
                'means': LeaveMeans.PHONE,
                'status': LeaveStatus.DENIED,
            },
        ]
        for leave_data in leaves_data:
            leave = Leave.objects.create(user=bob.username, **leave_data)
            self.stdout.write(self.style.SUCCESS(f'  ✓ {leave}'))

        self.stdout.write(self.style.SUCCESS('Done.'))
