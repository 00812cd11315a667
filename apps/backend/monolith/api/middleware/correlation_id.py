"""
Correlation ID middleware for request tracing.

Reads X-Request-ID from the incoming request (or generates a UUID4), exposes
it to log records through CorrelationIDFilter and echoes it back in the
X-Request-ID response header.
"""
import re
import uuid

from .logging_filter import set_correlation_id, clear_correlation_id

# Client supplied ids are only trusted when short and free of odd characters.
_VALID_REQUEST_ID = re.compile(r'^[A-Za-z0-9._-]{1,64}$')


def resolve_request_id(header_value):
    """Incoming X-Request-ID when usable, else a fresh UUID4 string."""
    if header_value and _VALID_REQUEST_ID.match(header_value):
        return header_value
    return str(uuid.uuid4())


class CorrelationIDMiddleware:
    """
    - Attaches request.correlation_id
    - Sets it in thread-local storage for logging for the duration of the request
    - Returns it in the X-Request-ID response header
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = resolve_request_id(request.META.get('HTTP_X_REQUEST_ID'))
        request.correlation_id = request_id
        set_correlation_id(request_id)
        try:
            response = self.get_response(request)
        finally:
            # Always clear thread-local to prevent leakage between requests
            clear_correlation_id()
        response['X-Request-ID'] = request_id
        return response
