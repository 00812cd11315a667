"""
Test doubles and fixtures for the core use case tests.

The real InMemoryStore is used for persistence; identity, hashing and time
are replaced by deterministic fakes.
"""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from apps.backend.core.adapters.driven.persistence.in_memory import InMemoryStore
from apps.backend.core.application.ports import Identity
from apps.backend.core.application.result import Result, Success, invalid_token
from apps.backend.core.application.user_use_cases import (
    RegisterUserCommand,
    RegisterUserUseCase,
)


# ============================================================================
# Test Doubles (Fakes)
# ============================================================================

class FakeIdentityProvider:
    """Issues readable, unique tokens: 'token:<user_id>:<serial>'."""

    def __init__(self):
        self._serial = itertools.count(1)
        self.issued = []

    def issue(self, user_id: str) -> str:
        token = f"token:{user_id}:{next(self._serial)}"
        self.issued.append(token)
        return token

    def verify(self, token: str) -> Result[str]:
        parts = token.split(":")
        if len(parts) != 3 or parts[0] != "token" or token not in self.issued:
            return invalid_token()
        return Success(parts[1])


class FakePasswordHasher:
    """Reversible 'hash' that still never equals the raw password."""

    def __init__(self):
        self.hash_calls = 0

    def hash(self, raw_password: str) -> str:
        self.hash_calls += 1
        return f"hashed${raw_password}"

    def verify(self, raw_password: str, encoded: str) -> bool:
        return encoded == f"hashed${raw_password}"


class FakeClock:
    """Clock frozen at a fixed instant; advance() moves it forward."""

    def __init__(self, fixed_time: Optional[datetime] = None):
        self.fixed_time = fixed_time or datetime(2025, 12, 23, 12, 0, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.fixed_time

    def advance(self, seconds: int) -> None:
        self.fixed_time = self.fixed_time + timedelta(seconds=seconds)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def hasher():
    return FakePasswordHasher()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def register_user(store, identity_provider, hasher):
    """
    Register a user and return its Identity.

    Usage:
        alice = register_user("alice")
    """
    use_case = RegisterUserUseCase(store.users, identity_provider, hasher)

    def _register(username: str, email: Optional[str] = None, password: str = "secret-pass") -> Identity:
        result = use_case.execute(RegisterUserCommand(
            email=email or f"{username}@example.com",
            username=username,
            password=password,
        ))
        assert result.is_success, result
        user = store.users.find_by_username(username).unwrap()
        return Identity(user_id=user.id, token=result.value.token)

    return _register
