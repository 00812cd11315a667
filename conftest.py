"""Shared pytest fixtures (Django settings are configured by pytest-django)."""

import pytest


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    """Swap PBKDF2 for MD5 in tests."""
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def fresh_container():
    """Every test starts with an empty store and fresh singletons."""
    from apps.backend.core.wiring import container

    container.reset()
    yield
    container.reset()
