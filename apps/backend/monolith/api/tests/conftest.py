"""
Fixtures for the Conduit API tests.

Every test starts with a fresh InMemoryStore (see the root conftest), so no
database access is needed.
"""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Create API client."""
    return APIClient()


@pytest.fixture
def register(api_client):
    """
    Register a user through the API and return the rendered user.

    Usage:
        alice = register("alice")
        alice["token"]
    """
    def _register(username, email=None, password="secret-pass"):
        response = api_client.post('/api/users', {
            'user': {
                'email': email or f'{username}@example.com',
                'username': username,
                'password': password,
            }
        }, format='json')
        assert response.status_code == 201, response.data
        return response.data['user']

    return _register


@pytest.fixture
def authed_client():
    """APIClient sending `Authorization: Token <token>`."""
    def _client(token, scheme='Token'):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'{scheme} {token}')
        return client

    return _client
