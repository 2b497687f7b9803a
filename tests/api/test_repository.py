import datetime

import pytest

from api.exceptions import NotFoundError, ValidationError
from api.models import LeaveMeans, LeaveStatus
from api.repository import LeaveNotifierRepository


@pytest.fixture
def repository():
    return LeaveNotifierRepository()


def leave_data(**overrides):
    data = {
        'user': 'bob',
        'from_date': datetime.date(2024, 1, 5),
        'to_date': datetime.date(2024, 1, 10),
        'justification': 'Holiday',
        'means': LeaveMeans.EMAIL,
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
@pytest.mark.repository
class TestUserQueries:

    def test_get_all_users(self, repository, test_user, super_user):
        users = repository.get_all_users()

        assert {user.username for user in users} == {'alice', 'bob'}

    def test_get_user_by_username(self, repository, test_user):
        assert repository.get_user_by_username('bob') == test_user

    @pytest.mark.parametrize('username', ['nobody', 'BOB', 'bob '])
    def test_get_user_by_username_not_found(self, repository, test_user, username):
        with pytest.raises(NotFoundError) as excinfo:
            repository.get_user_by_username(username)

        assert username in str(excinfo.value)


@pytest.mark.django_db
@pytest.mark.repository
class TestLeaveQueries:

    def test_create_leave_assigns_id_and_timestamp(self, repository, test_user):
        leave = repository.create_leave(leave_data())

        assert leave.id is not None
        assert leave.date_created is not None
        assert leave.status == LeaveStatus.PENDING
        assert repository.get_leave_by_id(leave.id) == leave

    def test_created_ids_are_unique(self, repository, test_user):
        first = repository.create_leave(leave_data())
        second = repository.create_leave(leave_data())

        assert first.id != second.id

    def test_single_day_leave(self, repository, test_user):
        day = datetime.date(2024, 1, 5)

        leave = repository.create_leave(leave_data(from_date=day, to_date=day))

        assert leave.from_date == leave.to_date

    def test_end_before_start(self, repository, test_user):
        with pytest.raises(ValidationError) as excinfo:
            repository.create_leave(leave_data(
                from_date=datetime.date(2024, 1, 10),
                to_date=datetime.date(2024, 1, 5),
            ))

        assert 'to_date' in excinfo.value.detail

    def test_missing_required_fields(self, repository, test_user):
        with pytest.raises(ValidationError) as excinfo:
            repository.create_leave({'user': 'bob'})

        assert set(excinfo.value.detail) == {'from_date', 'to_date'}

    def test_unknown_user(self, repository):
        with pytest.raises(ValidationError) as excinfo:
            repository.create_leave(leave_data(user='ghost'))

        assert 'user' in excinfo.value.detail

    def test_invalid_means(self, repository, test_user):
        with pytest.raises(ValidationError):
            repository.create_leave(leave_data(means=99))

    def test_get_leave_by_id_not_found(self, repository):
        with pytest.raises(NotFoundError):
            repository.get_leave_by_id(12345)

    def test_get_leaves_by_user(self, repository, test_user, create_leave):
        own = create_leave(user='bob')
        create_leave(user='alice')

        assert list(repository.get_leaves_by_user('bob')) == [own]
        assert repository.get_all_leaves().count() == 2

    def test_set_leave_status(self, repository, create_leave):
        leave = create_leave()

        updated = repository.set_leave_status(leave.id, LeaveStatus.DENIED)

        assert updated.status == LeaveStatus.DENIED
        assert updated.responded_by == ''
        assert updated.responded_at is not None

    def test_set_leave_status_records_decision(self, repository, create_leave):
        leave = create_leave()

        repository.set_leave_status(leave.id, LeaveStatus.APPROVED, responded_by='alice', note='Enjoy')

        leave.refresh_from_db()
        assert leave.status == LeaveStatus.APPROVED
        assert leave.responded_by == 'alice'
        assert leave.response_note == 'Enjoy'
        assert leave.responded_at is not None

    def test_set_leave_status_missing_leave(self, repository):
        with pytest.raises(NotFoundError):
            repository.set_leave_status(9999, LeaveStatus.APPROVED, responded_by='alice')

    def test_set_leave_status_invalid(self, repository, create_leave):
        leave = create_leave()

        with pytest.raises(ValidationError):
            repository.set_leave_status(leave.id, 7)
