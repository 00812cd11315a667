# api/views/base.py
"""
Shared helpers for the Conduit views.

Maps core Result values onto DRF responses. This is the only place that
knows which HTTP status a FailureKind becomes.
"""

from rest_framework import status
from rest_framework.response import Response
import logging

from apps.backend.core.application.result import Failure, FailureKind, Result

logger = logging.getLogger(__name__)


FAILURE_STATUS = {
    FailureKind.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.CONFLICT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.INVALID_CREDENTIALS: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
}


def render_failure(failure: Failure) -> Response:
    """Render a Failure as {"errors": {"<field>": ["<message>", ...]}}."""
    logger.info(f"Request failed with {failure.kind.value}: {failure.messages}")
    return Response(
        {"errors": {name: list(messages) for name, messages in failure.errors.items()}},
        status=FAILURE_STATUS[failure.kind],
    )


def render(result: Result, key: str, serializer_class, success_status=status.HTTP_200_OK) -> Response:
    """Render a Result as {key: serialized value} or as an error body."""
    if not result.is_success:
        return render_failure(result)
    return Response({key: serializer_class(result.value).data}, status=success_status)


def get_credential(request):
    """Raw Authorization header value, or None."""
    return request.META.get('HTTP_AUTHORIZATION')


def get_payload(request, key: str) -> dict:
    """
    The object nested under `key` in the JSON body, e.g. {"user": {...}}.

    Anything else (missing key, wrong type) is treated as an empty object so
    the use case reports the missing fields.
    """
    data = request.data
    if not isinstance(data, dict):
        return {}
    payload = data.get(key)
    return payload if isinstance(payload, dict) else {}
