"""
Tests for the user endpoints.

Covers POST /api/users, POST /api/users/login and GET/PUT /api/user.
"""

import pytest


class TestRegister:
    def test_register_returns_user_with_token(self, api_client):
        response = api_client.post('/api/users', {
            'user': {'email': 'alice@example.com', 'username': 'alice', 'password': 'secret-pass'}
        }, format='json')

        assert response.status_code == 201
        user = response.data['user']
        assert user['email'] == 'alice@example.com'
        assert user['username'] == 'alice'
        assert user['bio'] == ''
        assert user['image'] is None
        assert user['token']
        assert 'password' not in user
        assert 'password_hash' not in user

    def test_missing_fields_are_all_reported(self, api_client):
        response = api_client.post('/api/users', {'user': {}}, format='json')

        assert response.status_code == 422
        assert set(response.data['errors']) == {'email', 'username', 'password'}

    def test_body_without_user_envelope(self, api_client):
        response = api_client.post('/api/users', {'email': 'alice@example.com'}, format='json')

        assert response.status_code == 422

    def test_duplicate_username(self, api_client, register):
        register('alice')

        response = api_client.post('/api/users', {
            'user': {'email': 'other@example.com', 'username': 'alice', 'password': 'pw'}
        }, format='json')

        assert response.status_code == 422
        assert response.data == {'errors': {'username': ['has already been taken']}}


class TestLogin:
    def test_login(self, api_client, register):
        register('alice', password='secret-pass')

        response = api_client.post('/api/users/login', {
            'user': {'email': 'alice@example.com', 'password': 'secret-pass'}
        }, format='json')

        assert response.status_code == 200
        assert response.data['user']['username'] == 'alice'
        assert response.data['user']['token']

    def test_wrong_password_and_unknown_email_look_the_same(self, api_client, register):
        register('alice', password='secret-pass')

        wrong_password = api_client.post('/api/users/login', {
            'user': {'email': 'alice@example.com', 'password': 'nope'}
        }, format='json')
        unknown_email = api_client.post('/api/users/login', {
            'user': {'email': 'ghost@example.com', 'password': 'nope'}
        }, format='json')

        assert wrong_password.status_code == unknown_email.status_code == 422
        assert wrong_password.data == unknown_email.data


class TestCurrentUser:
    def test_get_echoes_token(self, register, authed_client):
        alice = register('alice')

        response = authed_client(alice['token']).get('/api/user')

        assert response.status_code == 200
        assert response.data['user']['username'] == 'alice'
        assert response.data['user']['token'] == alice['token']

    def test_bearer_scheme_is_accepted(self, register, authed_client):
        alice = register('alice')

        response = authed_client(alice['token'], scheme='Bearer').get('/api/user')

        assert response.status_code == 200

    def test_without_token(self, api_client):
        response = api_client.get('/api/user')

        assert response.status_code == 401
        assert 'token' in response.data['errors']

    @pytest.mark.parametrize('header', ['Token not-a-jwt', 'Basic abc', 'Token'])
    def test_bad_credentials(self, api_client, header):
        api_client.credentials(HTTP_AUTHORIZATION=header)

        response = api_client.get('/api/user')

        assert response.status_code == 401

    def test_update_only_bio(self, register, authed_client):
        alice = register('alice')
        client = authed_client(alice['token'])

        response = client.put('/api/user', {'user': {'bio': 'I write things'}}, format='json')

        assert response.status_code == 200
        user = response.data['user']
        assert user['bio'] == 'I write things'
        assert user['email'] == 'alice@example.com'
        assert user['username'] == 'alice'
        assert user['image'] is None

    def test_update_can_clear_image(self, register, authed_client):
        alice = register('alice')
        client = authed_client(alice['token'])
        client.put('/api/user', {'user': {'image': 'https://img.example/a.png'}}, format='json')

        response = client.put('/api/user', {'user': {'image': None}}, format='json')

        assert response.data['user']['image'] is None

    def test_update_password_then_login(self, api_client, register, authed_client):
        alice = register('alice', password='old-pass')
        authed_client(alice['token']).put('/api/user', {'user': {'password': 'new-pass'}}, format='json')

        response = api_client.post('/api/users/login', {
            'user': {'email': 'alice@example.com', 'password': 'new-pass'}
        }, format='json')

        assert response.status_code == 200

    def test_update_password_disabled_by_setting(self, settings, register, authed_client):
        settings.CONDUIT_ALLOW_PASSWORD_CHANGE = False
        alice = register('alice')

        response = authed_client(alice['token']).put('/api/user', {'user': {'password': 'x'}}, format='json')

        assert response.status_code == 422
        assert response.data == {'errors': {'password': ['cannot be changed']}}

    def test_update_to_taken_email(self, register, authed_client):
        register('alice')
        bob = register('bob')

        response = authed_client(bob['token']).put(
            '/api/user', {'user': {'email': 'ALICE@example.com'}}, format='json',
        )

        assert response.status_code == 422
        assert 'email' in response.data['errors']

    def test_empty_update_returns_current_user(self, register, authed_client):
        alice = register('alice')

        response = authed_client(alice['token']).put('/api/user', {'user': {}}, format='json')

        assert response.status_code == 200
        assert response.data['user']['username'] == 'alice'
        assert response.data['user']['bio'] == ''

    def test_update_without_token(self, api_client):
        response = api_client.put('/api/user', {'user': {'bio': 'x'}}, format='json')

        assert response.status_code == 401
