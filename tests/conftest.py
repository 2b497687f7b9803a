import datetime

import pytest
from django.contrib.auth import get_user_model

from api.models import Leave, LeaveMeans

User = get_user_model()


@pytest.fixture
def api_client():
    """API client for making requests"""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def create_user():
    """Factory fixture for creating users"""
    def _create_user(username="bob", password="testpass123", is_super_user=False, **kwargs):
        return User.objects.create_user(
            username=username,
            password=password,
            is_super_user=is_super_user,
            **kwargs
        )
    return _create_user


@pytest.fixture
def test_user(create_user):
    """Create a default test user"""
    return create_user()


@pytest.fixture
def super_user(create_user):
    """Create a user holding the SuperUser claim"""
    return create_user(
        username="alice",
        password="alicepass123",
        is_super_user=True,
    )


@pytest.fixture
def authenticated_client(api_client, test_user):
    """API client with authenticated test user"""
    api_client.force_authenticate(user=test_user)
    return api_client


@pytest.fixture
def super_client(api_client, super_user):
    """API client with authenticated super user"""
    api_client.force_authenticate(user=super_user)
    return api_client


@pytest.fixture
def create_leave():
    """Factory fixture for creating leave requests directly in the database"""
    def _create_leave(user="bob", from_date=None, to_date=None, **kwargs):
        from_date = from_date or datetime.date(2024, 1, 5)
        to_date = to_date or from_date + datetime.timedelta(days=2)
        kwargs.setdefault('means', LeaveMeans.EMAIL)
        return Leave.objects.create(user=user, from_date=from_date, to_date=to_date, **kwargs)
    return _create_leave


@pytest.fixture
def login():
    """Log in through the API and return the response"""
    def _login(client, username, password):
        from django.urls import reverse
        return client.post(
            reverse('api:login'),
            {'username': username, 'password': password},
            format='json'
        )
    return _login
