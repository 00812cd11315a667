# api/views/profiles.py
"""
Profile endpoints.

GET    /api/profiles/<username>         - profile (token optional)
POST   /api/profiles/<username>/follow  - follow (token required)
DELETE /api/profiles/<username>/follow  - unfollow (token required)
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from apps.backend.core.wiring import container
from api.serializers import ProfileSerializer
from .base import get_credential, render, render_failure


@api_view(['GET'])
@permission_classes([AllowAny])
def get_profile(request, username):
    """
    Returns:
        200 OK: {"profile": {...}} with `following` relative to the caller
        401 Unauthorized: a token was sent but is invalid
        404 Not Found: no such user
    """
    viewer = container.get_guard().authenticate_optional(get_credential(request))
    if not viewer.is_success:
        return render_failure(viewer)

    result = container.get_profile_uc().execute(viewer.value, username)
    return render(result, 'profile', ProfileSerializer)


@api_view(['POST', 'DELETE'])
@permission_classes([AllowAny])
def follow(request, username):
    """
    Returns:
        200 OK: {"profile": {...}} with `following` updated
        401 Unauthorized: missing or invalid token
        404 Not Found: no such user, or unfollowing someone not followed
        422 Unprocessable Entity: self-follow or already following
    """
    identity = container.get_guard().authenticate(get_credential(request))
    if not identity.is_success:
        return render_failure(identity)

    if request.method == 'POST':
        result = container.get_follow_uc().execute(identity.value, username)
    else:
        result = container.get_unfollow_uc().execute(identity.value, username)
    return render(result, 'profile', ProfileSerializer)
