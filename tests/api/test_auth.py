import pytest
from django.urls import reverse
from django.contrib.auth import get_user_model
from dj_rest_auth.app_settings import api_settings
from dj_rest_auth.serializers import LoginSerializer
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

User = get_user_model()


@pytest.mark.django_db
@pytest.mark.auth
class TestLogin:
    """Test login endpoint"""

    def test_login_success(self, api_client, test_user, login):
        """Test successful login with valid credentials"""
        response = login(api_client, 'bob', 'testpass123')

        assert response.status_code == 200
        assert response.data['detail'] == 'Login successful'
        assert response.data['access']
        assert response.data['user']['username'] == 'bob'
        assert response.data['user']['super_user'] is False

    def test_login_sets_jwt_cookie(self, api_client, test_user, login):
        response = login(api_client, 'bob', 'testpass123')

        assert response.status_code == 200
        assert 'leave-notifier-auth' in response.cookies
        assert response.cookies['leave-notifier-auth']['httponly']

    def test_login_invalid_username(self, api_client, login):
        """Test login with unknown username"""
        response = login(api_client, 'nobody', 'testpass123')

        assert response.status_code == 400

    def test_login_invalid_password(self, api_client, test_user, login):
        """Test login with wrong password"""
        response = login(api_client, 'bob', 'wrongpassword')

        assert response.status_code == 400

    def test_login_missing_fields(self, api_client):
        """Test login with missing required fields"""
        url = reverse('api:login')

        # Missing password
        response = api_client.post(url, {'username': 'bob'})
        assert response.status_code == 400

        # Missing username
        response = api_client.post(url, {'password': 'testpass123'})
        assert response.status_code == 400

    def test_login_inactive_user(self, api_client, create_user, login):
        """Test login with inactive user"""
        create_user(username='inactive', password='testpass123', is_active=False)

        response = login(api_client, 'inactive', 'testpass123')

        assert response.status_code == 400

    def test_login_uses_default_serializer(self):
        assert api_settings.LOGIN_SERIALIZER is LoginSerializer


@pytest.mark.django_db
@pytest.mark.auth
class TestTokenClaims:
    """Test the claims carried by issued access tokens"""

    def test_super_user_claim_true(self, api_client, super_user, login):
        response = login(api_client, 'alice', 'alicepass123')

        token = AccessToken(response.data['access'])
        assert token['SuperUser'] is True
        assert token['username'] == 'alice'

    def test_super_user_claim_false(self, api_client, test_user, login):
        response = login(api_client, 'bob', 'testpass123')

        token = AccessToken(response.data['access'])
        assert token['SuperUser'] is False

    def test_token_carries_issuer_and_audience(self, api_client, test_user, login, settings):
        response = login(api_client, 'bob', 'testpass123')

        token = AccessToken(response.data['access'])
        assert token['iss'] == settings.SIMPLE_JWT['ISSUER']
        assert token['aud'] == settings.SIMPLE_JWT['AUDIENCE']


@pytest.mark.django_db
@pytest.mark.auth
class TestLogout:
    """Test logout endpoint"""

    def test_logout_authenticated_user(self, api_client, test_user, login):
        """Test logout clears the JWT cookie"""
        login(api_client, 'bob', 'testpass123')

        response = api_client.post(reverse('api:rest_logout'))

        assert response.status_code == 200
        assert 'detail' in response.data
        assert response.cookies['leave-notifier-auth'].value == ''

    def test_logout_with_bearer_token(self, api_client, test_user, login):
        """No DRF token model is involved; JWT logout still succeeds"""
        access = login(api_client, 'bob', 'testpass123').data['access']
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')

        response = client.post(reverse('api:rest_logout'))

        assert response.status_code == 200

    def test_no_token_model(self, settings):
        assert 'rest_framework.authtoken' not in settings.INSTALLED_APPS
        assert api_settings.TOKEN_MODEL is None


@pytest.mark.django_db
@pytest.mark.auth
class TestUserDetails:
    """Test user details endpoint"""

    def test_get_user_details_authenticated(self, authenticated_client, test_user):
        """Test getting current user details when authenticated"""
        response = authenticated_client.get(reverse('api:rest_user_details'))

        assert response.status_code == 200
        assert response.data['username'] == test_user.username
        assert 'password' not in response.data

    def test_get_user_details_unauthenticated(self, api_client):
        """Test getting user details without authentication"""
        response = api_client.get(reverse('api:rest_user_details'))

        assert response.status_code == 401

    def test_get_user_details_with_bearer_token(self, api_client, test_user, login):
        from rest_framework.test import APIClient

        access = login(api_client, 'bob', 'testpass123').data['access']
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')

        response = client.get(reverse('api:rest_user_details'))

        assert response.status_code == 200
        assert response.data['username'] == 'bob'
