"""
Logging filter to inject the request correlation ID into log records.
"""
import logging
from threading import local

_thread_locals = local()

NO_REQUEST_ID = 'no-request-id'


def set_correlation_id(correlation_id):
    """Store correlation ID in thread-local storage."""
    _thread_locals.correlation_id = correlation_id


def get_correlation_id():
    """Retrieve correlation ID from thread-local storage."""
    return getattr(_thread_locals, 'correlation_id', None)


def clear_correlation_id():
    _thread_locals.correlation_id = None


class CorrelationIDFilter(logging.Filter):
    """
    Adds `correlation_id` to every record so formatters can reference it.

    Records logged outside a request (startup, management commands) get
    'no-request-id'.
    """

    def filter(self, record):
        record.correlation_id = get_correlation_id() or NO_REQUEST_ID
        return True
