"""
JWT identity provider backed by djangorestframework-simplejwt.

Tokens are simplejwt AccessTokens: signed with SIMPLE_JWT["SIGNING_KEY"]
(defaults to SECRET_KEY), expiring after SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
carrying the user id in the SIMPLE_JWT["USER_ID_CLAIM"] claim.

Requires configured Django settings.
"""

from __future__ import annotations

import logging

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.backend.core.application.result import Result, Success, invalid_token


logger = logging.getLogger(__name__)


class SimpleJWTIdentityProvider:
    """Implements IdentityPort."""

    def issue(self, user_id: str) -> str:
        token = AccessToken()
        token[api_settings.USER_ID_CLAIM] = str(user_id)
        return str(token)

    def verify(self, token: str) -> Result[str]:
        try:
            access = AccessToken(token)
        except TokenError as e:
            logger.debug(f"Token verification failed: {e}")
            return invalid_token()

        user_id = access.get(api_settings.USER_ID_CLAIM)
        if not user_id:
            return invalid_token("has no user id claim")
        return Success(str(user_id))
