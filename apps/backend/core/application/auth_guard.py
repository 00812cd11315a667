"""
Authorization Guard

Turns the raw credential supplied by the boundary (an Authorization header
value) into an Identity, or into an Unauthorized failure that the boundary
renders before any use case runs.

Accepted forms:
    Token <jwt>
    Bearer <jwt>
"""

import logging
from typing import Optional

from apps.backend.core.application.ports import Identity, IdentityPort
from apps.backend.core.application.result import Result, Success, unauthorized


logger = logging.getLogger(__name__)

AUTH_SCHEMES = ("token", "bearer")


class AuthorizationGuard:
    """Resolves credentials through the IdentityPort."""

    def __init__(self, identity: IdentityPort):
        self._identity = identity

    def authenticate(self, header: Optional[str]) -> Result[Identity]:
        """
        Resolve a required credential.

        Returns:
            Success(Identity), or Failure(UNAUTHORIZED) when the header is
            missing, uses an unknown scheme, or carries a token that does not
            verify.
        """
        if not header or not header.strip():
            return unauthorized()

        parts = header.split()
        if len(parts) != 2 or parts[0].lower() not in AUTH_SCHEMES:
            logger.info("Rejected credential with unsupported format")
            return unauthorized("Authorization header must be 'Token <jwt>'")

        token = parts[1]
        verified = self._identity.verify(token)
        if not verified.is_success:
            logger.info(f"Rejected credential: {verified.messages}")
            return unauthorized("Token is invalid or expired")

        return Success(Identity(user_id=verified.value, token=token))

    def authenticate_optional(self, header: Optional[str]) -> Result[Optional[Identity]]:
        """
        Resolve an optional credential.

        A missing header is an anonymous viewer (Success(None)); a present but
        unusable one is still Unauthorized.
        """
        if header is None or not header.strip():
            return Success(None)
        return self.authenticate(header)
