"""
Tests for correlation id handling and the health endpoint.
"""

import logging
import uuid

from api.middleware.correlation_id import resolve_request_id
from api.middleware.logging_filter import (
    NO_REQUEST_ID,
    CorrelationIDFilter,
    clear_correlation_id,
    set_correlation_id,
)


class TestCorrelationID:
    def test_incoming_request_id_is_echoed(self, api_client):
        response = api_client.get('/health', HTTP_X_REQUEST_ID='req-123')

        assert response['X-Request-ID'] == 'req-123'

    def test_request_id_is_generated(self, api_client):
        response = api_client.get('/api/profiles/ghost')

        assert uuid.UUID(response['X-Request-ID'])

    def test_untrusted_request_id_is_replaced(self):
        assert resolve_request_id('bad id with spaces') != 'bad id with spaces'
        assert resolve_request_id('x' * 65) != 'x' * 65
        assert resolve_request_id('ok.id-1_2') == 'ok.id-1_2'

    def test_filter_adds_correlation_id_to_records(self):
        record = logging.LogRecord('api', logging.INFO, __file__, 1, 'msg', None, None)
        log_filter = CorrelationIDFilter()

        set_correlation_id('req-9')
        try:
            assert log_filter.filter(record)
            assert record.correlation_id == 'req-9'
        finally:
            clear_correlation_id()

        log_filter.filter(record)
        assert record.correlation_id == NO_REQUEST_ID


class TestHealth:
    def test_health(self, api_client):
        response = api_client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'alive'
        assert response.json()['service'] == 'conduit-backend'
