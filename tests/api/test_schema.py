import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestApiDocumentation:

    def test_openapi_document(self, api_client):
        response = api_client.get(reverse('schema'), HTTP_ACCEPT='application/vnd.oai.openapi+json')

        assert response.status_code == 200
        assert b'LeaveNotifier API' in response.content
        assert b'/api/users' in response.content
        assert b'/api/leaves' in response.content

    def test_swagger_ui(self, api_client):
        response = api_client.get(reverse('swagger-ui'))

        assert response.status_code == 200
