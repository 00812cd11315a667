"""
Password hashing backed by django.contrib.auth.hashers.

The algorithm is whatever settings.PASSWORD_HASHERS lists first (PBKDF2 by
default). Requires configured Django settings.
"""

from __future__ import annotations

from django.contrib.auth.hashers import check_password, make_password


class DjangoPasswordHasher:
    """Implements PasswordHasherPort."""

    def hash(self, raw_password: str) -> str:
        return make_password(raw_password)

    def verify(self, raw_password: str, encoded: str) -> bool:
        return check_password(raw_password, encoded)
