# api/views/users.py
"""
User endpoints: registration, login, current user.

POST /api/users        - register
POST /api/users/login  - login
GET  /api/user         - current user (token required)
PUT  /api/user         - update current user (token required)
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework import status

from apps.backend.core.domain import UNSET
from apps.backend.core.application.user_use_cases import (
    LoginCommand,
    RegisterUserCommand,
    UpdateUserCommand,
)
from apps.backend.core.wiring import container
from api.serializers import UserSerializer
from .base import get_credential, get_payload, render, render_failure


UPDATABLE_FIELDS = ('email', 'username', 'password', 'bio', 'image')


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """
    Register a new user.

    Body: {"user": {"email": ..., "username": ..., "password": ...}}

    Returns:
        201 Created: {"user": {...}} with a fresh token
        422 Unprocessable Entity: validation error or taken username/email
    """
    payload = get_payload(request, 'user')
    command = RegisterUserCommand(
        email=payload.get('email'),
        username=payload.get('username'),
        password=payload.get('password'),
    )
    result = container.get_register_user_uc().execute(command)
    return render(result, 'user', UserSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Log in with email and password.

    Returns:
        200 OK: {"user": {...}} with a fresh token
        422 Unprocessable Entity: invalid credentials (never says which part)
    """
    payload = get_payload(request, 'user')
    command = LoginCommand(
        email=payload.get('email'),
        password=payload.get('password'),
    )
    result = container.get_login_uc().execute(command)
    return render(result, 'user', UserSerializer)


@api_view(['GET', 'PUT'])
@permission_classes([AllowAny])
def current_user(request):
    """
    GET: the authenticated user, echoing the caller's token.
    PUT: partial update; only fields present in {"user": {...}} change.

    Returns:
        200 OK: {"user": {...}}
        401 Unauthorized: missing or invalid token
        422 Unprocessable Entity: validation error or taken username/email
    """
    identity = container.get_guard().authenticate(get_credential(request))
    if not identity.is_success:
        return render_failure(identity)

    if request.method == 'GET':
        result = container.get_current_user_uc().execute(identity.value)
        return render(result, 'user', UserSerializer)

    payload = get_payload(request, 'user')
    command = UpdateUserCommand(**{
        name: payload.get(name, UNSET) for name in UPDATABLE_FIELDS
    })
    result = container.get_update_user_uc().execute(identity.value, command)
    return render(result, 'user', UserSerializer)
